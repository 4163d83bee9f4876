"""
nonparam.stats.common.ranks
===========================

Tie-aware rank assignment over two merged samples.

Two sorted samples are merged into one ascending sequence in which every value
remembers which sample it came from. Runs of equal values ("tie groups") are
given the average of the ranks they span, where the first merged value has
rank 1. From this the rank sum of the first sample, `r1`, and the tie vector
`ties` (the length of each tie group, in merge order) follow directly.

Examples
--------
>>> from nonparam.stats.common.ranks import rank_merge
>>> rm = rank_merge([1.0, 2.0], [2.0, 3.0])
>>> rm.labels
(1, 2, 1, 2)
>>> rm.r1, rm.ties, rm.has_ties
(3.5, (1, 2, 1), True)
"""

from __future__ import annotations
import itertools
from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class RankMerge:
    """
    Result of merging two sorted samples.

    Attributes:
        values: Merged values in ascending order
        labels: Origin of each merged value, 1 or 2
        r1: Sum of the (average) ranks of the values from sample 1
        ties: Size of each tie group, in merge order; sums to len(values)
    """

    values: Tuple[float, ...]
    labels: Tuple[int, ...]
    r1: float
    ties: Tuple[int, ...]

    @property
    def has_ties(self) -> bool:
        return any(t > 1 for t in self.ties)


def labeled_merge(
    x1: Sequence[float], x2: Sequence[float]
) -> Tuple[List[float], List[int]]:
    """Merge ascending sequences x1 and x2.

    Returns the merged values and, for each, the label 1 or 2 of the sequence
    it came from. On equal values the element of x2 is taken first.
    """
    merged: List[float] = []
    labels: List[int] = []
    i, j = 0, 0
    while i < len(x1) and j < len(x2):
        if x1[i] < x2[j]:
            merged.append(x1[i])
            labels.append(1)
            i += 1
        else:
            merged.append(x2[j])
            labels.append(2)
            j += 1
    for x in x1[i:]:
        merged.append(x)
        labels.append(1)
    for x in x2[j:]:
        merged.append(x)
        labels.append(2)
    return merged, labels


def rank_merge(x1: Sequence[float], x2: Sequence[float]) -> RankMerge:
    """Merge two ascending samples and compute the rank sum of x1 and the tie vector."""
    merged, labels = labeled_merge(x1, x2)

    r1 = 0.0
    ties: List[int] = []
    start = 0
    for _, group in itertools.groupby(zip(merged, labels), key=lambda p: p[0]):
        group_labels = [label for _, label in group]
        run = len(group_labels)
        nx1 = group_labels.count(1)
        if nx1:
            # Ranks start+1 .. start+run share their average.
            r1 += (2 * start + run + 1) / 2 * nx1
        ties.append(run)
        start += run

    return RankMerge(values=tuple(merged), labels=tuple(labels), r1=r1, ties=tuple(ties))


def tie_correction(ties: Sequence[int]) -> float:
    """Return the tie correction factor sum(t**3 - t) over tie group sizes t."""
    return float(sum(t * t * t - t for t in ties))
