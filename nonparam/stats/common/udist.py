"""
nonparam.stats.common.udist
===========================

Exact distribution of the Mann-Whitney U statistic.

`UDist(n1, n2, t)` is the null distribution of U for samples of sizes `n1` and
`n2`, where U counts the pairs (x from sample 1, y from sample 2) with x > y,
plus one half for every pair with x == y. The optional tie vector `t` gives
the size of every group of equal values in the merged samples, in ascending
order of value, so that `sum(t) == n1 + n2`.

Without ties
------------
Mann and Whitney (1947) give the recurrence

    p_{n,m}(U) = (n p_{n-1,m}(U-m) + m p_{n,m-1}(U)) / (n+m)
    p_{n,m}(U) = 0                              if U < 0
    p_{0,m}(0) = p_{n,0}(0) = 1 / C(n+m, n)

(the original paper misprints the first shift as U-M). It is evaluated bottom
up rather than recursively. Because p_{n,m} depends only on p_{n-1,m} and
p_{n,m-1}, and p_{n,m} = p_{m,n}, only one row of the (n, m) table needs to be
held at a time, indexed by min(n1, n2):

          n →   N
        m *
        ↓ * *
          * * *
          * * * *
          * * * *
        M * * * *

Each * is a vector indexed by U. Rows are computed top to bottom and each row
left to right, overwriting p_{n,m-1} with p_{n,m} in place. The mirrored
entries needed above the diagonal are always available in the current row.

The distribution is symmetric about n1*n2/2, so the CDF sums whichever tail
needs fewer terms.

With ties
---------
Ties break the recurrence. Instead, every "split vector" u with
0 <= u_i <= t_i and sum(u) == n1 is enumerated: u_i is how many members of
tie group i come from sample 1. A split contributes

    2U = sum_i u_i * (2 * (sample-2 values in groups before i) + t_i - u_i)

with multiplicity prod_i C(t_i, u_i), out of C(n1+n2, n1) equally likely
assignments. The number of split vectors is prod_i (t_i + 1), exponential in
the number of tie groups, so this path is only usable for small samples (see
`InferenceConfig.mann_whitney_ties_exact_limit`). With ties U lives on a grid
of spacing 0.5 and need not be symmetric.

References:
    Mann, H. B. and Whitney, D. R. (1947). On a test of whether one of two
    random variables is stochastically larger than the other. Annals of
    Mathematical Statistics 18(1), 50-60.

Examples
--------
>>> from nonparam.stats.common.udist import UDist
>>> round(UDist(n1=3, n2=3).cdf(2), 6)
0.2
>>> d = UDist(n1=1, n2=2, t=(1, 2))
>>> d.step(), d.pmf(1.5)
(0.5, 0.6666666666666666)
"""

from __future__ import annotations
import bisect
import math
from collections import Counter
from dataclasses import dataclass
from functools import cached_property
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from nonparam.stats.common.dist import DiscreteDistribution


@dataclass(frozen=True)
class UDist(DiscreteDistribution):
    """
    Null distribution of the Mann-Whitney U statistic.

    Attributes:
        n1: Size of the first sample (>= 0)
        n2: Size of the second sample (>= 0)
        t: Tie group sizes in merge order, or None for samples without ties
    """

    n1: int
    n2: int
    t: Optional[Tuple[int, ...]] = None

    def __post_init__(self) -> None:
        if self.n1 < 0 or self.n2 < 0:
            raise ValueError(f"sample sizes must be non-negative, got {self.n1}, {self.n2}")
        if self.t is not None:
            t = tuple(int(x) for x in self.t)
            if any(x <= 0 for x in t):
                raise ValueError(f"tie group sizes must be positive, got {t}")
            if sum(t) != self.n1 + self.n2:
                raise ValueError(
                    f"tie vector sums to {sum(t)}, expected n1 + n2 = {self.n1 + self.n2}"
                )
            object.__setattr__(self, "t", t)

    def has_ties(self) -> bool:
        return self.t is not None and any(x > 1 for x in self.t)

    def step(self) -> float:
        return 0.5 if self.has_ties() else 1.0

    def bounds(self) -> Tuple[float, float]:
        return 0.0, float(self.n1 * self.n2)

    def mean(self) -> float:
        return self.n1 * self.n2 / 2

    def pmf(self, u: float) -> float:
        if self.has_ties():
            twice = math.floor(2 * u)
            return self._tied_counts.get(twice, 0) / self._total
        ui = math.floor(u)
        mn = self.n1 * self.n2
        if ui < 0 or ui > mn:
            return 0.0
        # Symmetric about mn/2; evaluate the smaller U.
        ui = min(ui, mn - ui)
        return float(self._p(ui)[ui])

    def cdf(self, u: float) -> float:
        if self.has_ties():
            return self._tied_cdf(math.floor(2 * u))
        ui = math.floor(u)
        mn = self.n1 * self.n2
        if ui < 0:
            return 0.0
        if ui >= mn:
            return 1.0
        # Sum whichever tail is shorter: Pr[U > u] = Pr[U <= mn - u - 1].
        flip = ui >= (mn + 1) // 2
        if flip:
            ui = mn - ui - 1
        p = float(self._p(ui)[: ui + 1].sum())
        return 1.0 - p if flip else p

    # --- No ties: dynamic programming over the Mann-Whitney recurrence ---

    def _p(self, U: int) -> np.ndarray:
        """Return p_{n1,n2}(u) for u = 0 .. U."""
        n_small, n_large = sorted((self.n1, self.n2))
        memo = np.zeros((n_small + 1, U + 1))

        for m in range(n_large + 1):
            # p_{0,m} is zero except at U=0.
            memo[0, 0] = 1.0
            for n in range(1, min(n_small, m) + 1):
                lp = memo[n - 1]  # p_{n-1,m}
                # p_{n,m-1}, or p_{m-1,n} when n == m.
                rp = memo[n] if n <= m - 1 else memo[m - 1]

                # TODO: U is at most ceil(n*m/2) by symmetry, but exploiting
                # that needs the mirrored values in the update below.
                ulim = min(U, n * m)

                left = np.zeros(ulim + 1)
                if ulim >= m:
                    left[m:] = n * lp[: ulim + 1 - m]
                memo[n, : ulim + 1] = (left + m * rp[: ulim + 1]) / (n + m)

        return memo[n_small]

    # --- Ties: enumeration of split vectors ---

    @cached_property
    def _total(self) -> int:
        return math.comb(self.n1 + self.n2, self.n1)

    @cached_property
    def _tied_counts(self) -> Dict[int, int]:
        """Map 2U to the number of sample assignments producing it."""
        return dict(enumerate_splits(self.n1, self.t or ()))

    @cached_property
    def _tied_cumulative(self) -> Tuple[List[int], List[int]]:
        keys = sorted(self._tied_counts)
        running, cumulative = 0, []
        for key in keys:
            running += self._tied_counts[key]
            cumulative.append(running)
        return keys, cumulative

    def _tied_cdf(self, twice_u: int) -> float:
        keys, cumulative = self._tied_cumulative
        idx = bisect.bisect_right(keys, twice_u)
        if idx == 0:
            return 0.0
        return cumulative[idx - 1] / self._total


def enumerate_splits(n1: int, t: Sequence[int]) -> Counter:
    """
    Count the ways of drawing `n1` sample-1 values from tie groups of sizes `t`.

    Every vector u with 0 <= u_i <= t_i is visited by an odometer whose last
    digit turns fastest. Running prefix sums are kept per digit, so when digit
    `pos` advances only the positions from `pos` onward are recomputed.

    Returns:
        Counter mapping 2U to the total multiplicity of the split vectors with
        sum(u) == n1 that produce it.
    """
    k = len(t)
    u = [0] * k
    # Prefix state for groups [0, i): sample-2 values seen, sample-1 values
    # taken, accumulated 2U, and the number of assignments.
    others = [0] * (k + 1)
    taken = [0] * (k + 1)
    twice_u = [0] * (k + 1)
    ways = [1] * (k + 1)

    counts: Counter = Counter()
    pos = 0
    while True:
        for i in range(pos, k):
            ui, ti = u[i], t[i]
            others[i + 1] = others[i] + ti - ui
            taken[i + 1] = taken[i] + ui
            twice_u[i + 1] = twice_u[i] + ui * (2 * others[i] + ti - ui)
            ways[i + 1] = ways[i] * math.comb(ti, ui)
        if taken[k] == n1:
            counts[twice_u[k]] += ways[k]

        # Advance, carrying into more significant digits.
        pos = k - 1
        while pos >= 0 and u[pos] == t[pos]:
            u[pos] = 0
            pos -= 1
        if pos < 0:
            return counts
        u[pos] += 1
