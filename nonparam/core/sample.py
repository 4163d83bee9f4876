"""
nonparam.core.sample
====================

The `Sample` value type consumed by the statistical procedures.

A sample is an ordered sequence of real values with optional parallel
weights. Procedures never reorder the caller's data in place; when sorted
values are needed they work on `sorted_copy()`.

Examples
--------
>>> from nonparam.core.sample import Sample
>>> s = Sample.of([3, 1, 2])
>>> s.xs, s.sorted
((3.0, 1.0, 2.0), False)
>>> s.sorted_copy().xs
(1.0, 2.0, 3.0)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from nonparam.core.errors import ContractViolationError


@dataclass(frozen=True)
class Sample:
    """
    An immutable sample of real values.

    Attributes:
        xs: Sample values
        weights: Optional weight per value; None means unweighted
        sorted: Whether `xs` is known to be in ascending order
    """

    xs: Tuple[float, ...]
    weights: Optional[Tuple[float, ...]] = None
    sorted: bool = False

    def __post_init__(self) -> None:
        if self.weights is not None and len(self.weights) != len(self.xs):
            raise ContractViolationError(
                f"sample has {len(self.xs)} values but {len(self.weights)} weights"
            )

    @classmethod
    def of(
        cls,
        xs: Iterable[float],
        weights: Optional[Iterable[float]] = None,
        sorted: bool = False,
    ) -> "Sample":
        """Build a sample from any iterables of numbers."""
        return cls(
            xs=tuple(float(x) for x in xs),
            weights=None if weights is None else tuple(float(w) for w in weights),
            sorted=sorted,
        )

    def __len__(self) -> int:
        return len(self.xs)

    @property
    def is_weighted(self) -> bool:
        return self.weights is not None

    def sorted_copy(self) -> "Sample":
        """Return this sample in ascending order of value.

        Weights travel with their values. Returns `self` if already sorted.
        """
        if self.sorted:
            return self
        if self.weights is None:
            return Sample(xs=tuple(sorted(self.xs)), sorted=True)
        pairs = sorted(zip(self.xs, self.weights), key=lambda p: p[0])
        return Sample(
            xs=tuple(x for x, _ in pairs),
            weights=tuple(w for _, w in pairs),
            sorted=True,
        )


SampleLike = Union[Sample, Iterable[float]]


def as_sample(data: SampleLike) -> Sample:
    """Coerce a plain iterable of numbers into a `Sample`."""
    if isinstance(data, Sample):
        return data
    return Sample.of(data)
