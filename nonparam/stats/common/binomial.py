"""
nonparam.stats.common.binomial
==============================

The binomial distribution.

`BinomialDist(n, p)` counts successes in `n` independent Bernoulli trials with
success probability `p`. Besides being a distribution in its own right, it is
the sampling distribution of order statistics: the number of sample values
falling below a population quantile `q` is `BinomialDist(n, q)`.

Mathematical formulation:
    PMF(k) = C(n, k) p^k (1 - p)^(n - k)
    CDF(k) = I_{1-p}(n - k, k + 1)

where I is the regularized incomplete beta function. Evaluating the CDF this
way avoids summing many PMF terms, which loses precision and overflows for
large n.

Examples
--------
>>> from nonparam.stats.common.binomial import BinomialDist
>>> d = BinomialDist(n=4, p=0.5)
>>> d.pmf(2)
0.375
>>> d.cdf(4)
1.0
>>> d.normal_approx()
NormalDist(mu=2.0, sigma=1.0)
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple

from scipy.special import betainc, gammaln, xlog1py, xlogy

from nonparam.stats.common.dist import DiscreteDistribution, NormalDist


@dataclass(frozen=True)
class BinomialDist(DiscreteDistribution):
    """
    Binomial distribution.

    Attributes:
        n: Number of independent Bernoulli trials (>= 0). With n=1 this is
            the Bernoulli distribution.
        p: Probability of success in each trial, in [0, 1]
    """

    n: int
    p: float

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"n must be non-negative, got {self.n}")
        if not (0.0 <= self.p <= 1.0):
            raise ValueError(f"p must be in [0, 1], got {self.p}")

    def pmf(self, k: float) -> float:
        """Probability of exactly floor(k) successes."""
        ki = math.floor(k)
        if ki < 0 or ki > self.n:
            return 0.0
        try:
            return float(math.comb(self.n, ki)) * self.p**ki * (1 - self.p) ** (self.n - ki)
        except OverflowError:
            # The coefficient does not fit in a float; work in log space.
            log_pmf = (
                gammaln(self.n + 1)
                - gammaln(ki + 1)
                - gammaln(self.n - ki + 1)
                + xlogy(ki, self.p)
                + xlog1py(self.n - ki, -self.p)
            )
            return float(math.exp(log_pmf))

    def cdf(self, k: float) -> float:
        """Probability of floor(k) or fewer successes."""
        ki = math.floor(k)
        if ki < 0:
            return 0.0
        if ki >= self.n:
            return 1.0
        return float(betainc(self.n - ki, ki + 1, 1 - self.p))

    def bounds(self) -> Tuple[float, float]:
        return 0.0, float(self.n)

    def step(self) -> float:
        return 1.0

    def mean(self) -> float:
        return self.n * self.p

    def variance(self) -> float:
        return self.n * self.p * (1 - self.p)

    def normal_approx(self) -> NormalDist:
        """
        Return the normal approximation of this distribution.

        Because the binomial distribution is discrete and the normal
        distribution is continuous, the caller must apply a continuity
        correction. With `b` this distribution and `z` the approximation:

            b.pmf(k) => z.cdf(k + 0.5) - z.cdf(k - 0.5)
            b.cdf(k) => z.cdf(k + 0.5)
        """
        return NormalDist(mu=self.mean(), sigma=math.sqrt(self.variance()))
