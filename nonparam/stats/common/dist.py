"""
nonparam.stats.common.dist
==========================

Distribution contracts and the normal distribution.

Every distribution answers `cdf(x) = Pr[X <= x]` and reports `bounds()`, a
finite interval holding (approximately) all of its probability mass.

- `ContinuousDistribution` adds a density (`pdf`) and an inverse CDF.
- `DiscreteDistribution` adds a mass function (`pmf`) defined on a grid of
  spacing `step()` starting at the lower bound. Inputs between grid points are
  floored to the grid point below them, so `pmf(2.7) == pmf(2)` for a unit
  grid and `pmf(-0.5) == pmf(-1) == 0` for a grid starting at 0.

`NormalDist` is the continuous collaborator used by the normal
approximations throughout the package.

Examples
--------
>>> from nonparam.stats.common.dist import NormalDist, STD_NORMAL
>>> round(STD_NORMAL.cdf(0.0), 6)
0.5
>>> NormalDist(mu=2.0, sigma=0.0).inv_cdf(0.3)
2.0
"""

from __future__ import annotations
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from scipy.stats import norm


class DistributionModel(ABC):
    """Interface common to all distributions."""

    @abstractmethod
    def cdf(self, x: float) -> float:
        """Return Pr[X <= x]."""

    @abstractmethod
    def inv_cdf(self, y: float) -> float:
        """Return the inverse of the CDF at probability `y` in [0, 1]."""

    @abstractmethod
    def bounds(self) -> Tuple[float, float]:
        """Return bounds outside of which the probability mass is ~0."""

    def cdf_each(self, xs: Iterable[float]) -> List[float]:
        return [self.cdf(x) for x in xs]

    def inv_cdf_each(self, ys: Iterable[float]) -> List[float]:
        return [self.inv_cdf(y) for y in ys]


class ContinuousDistribution(DistributionModel):
    """A distribution with a density."""

    @abstractmethod
    def pdf(self, x: float) -> float:
        """Return the probability density at x."""

    def pdf_each(self, xs: Iterable[float]) -> List[float]:
        return [self.pdf(x) for x in xs]


class DiscreteDistribution(DistributionModel):
    """A distribution whose mass sits on a grid of spacing `step()`."""

    @abstractmethod
    def pmf(self, x: float) -> float:
        """Return the probability mass at the grid point at or below x."""

    @abstractmethod
    def step(self) -> float:
        """Return the spacing of the grid the mass lives on."""

    def pmf_each(self, xs: Iterable[float]) -> List[float]:
        return [self.pmf(x) for x in xs]

    def inv_cdf(self, y: float) -> float:
        """Return the smallest grid point x with cdf(x) >= y.

        The grid is bisected, so this costs O(log(width / step)) CDF
        evaluations.
        """
        if not (0.0 <= y <= 1.0):
            raise ValueError(f"y must be in [0, 1], got {y}")
        lo, hi = self.bounds()
        step = self.step()
        # Search over grid indices [0, last].
        first, last = 0, int(round((hi - lo) / step))
        while first < last:
            mid = (first + last) // 2
            if self.cdf(lo + mid * step) >= y:
                last = mid
            else:
                first = mid + 1
        return lo + first * step


@dataclass(frozen=True)
class NormalDist(ContinuousDistribution):
    """
    Normal distribution with mean `mu` and standard deviation `sigma`.

    A `sigma` of 0 is accepted and describes a point mass at `mu`. This arises
    naturally from the normal approximation of a binomial distribution with
    success probability 0 or 1.

    Attributes:
        mu: Mean
        sigma: Standard deviation (>= 0)
    """

    mu: float
    sigma: float

    def __post_init__(self) -> None:
        if not self.sigma >= 0:
            raise ValueError(f"sigma must be non-negative, got {self.sigma}")

    def pdf(self, x: float) -> float:
        if self.sigma == 0:
            return math.inf if x == self.mu else 0.0
        return float(norm.pdf(x, loc=self.mu, scale=self.sigma))

    def cdf(self, x: float) -> float:
        if self.sigma == 0:
            return 1.0 if x >= self.mu else 0.0
        return float(norm.cdf(x, loc=self.mu, scale=self.sigma))

    def inv_cdf(self, y: float) -> float:
        if not (0.0 <= y <= 1.0):
            raise ValueError(f"y must be in [0, 1], got {y}")
        if self.sigma == 0:
            return float(self.mu)
        return float(norm.ppf(y, loc=self.mu, scale=self.sigma))

    def bounds(self) -> Tuple[float, float]:
        stddevs = 3.0
        return self.mu - stddevs * self.sigma, self.mu + stddevs * self.sigma


STD_NORMAL = NormalDist(mu=0.0, sigma=1.0)
