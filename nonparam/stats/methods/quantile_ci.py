"""
nonparam.stats.methods.quantile_ci
==================================

Confidence intervals for population quantiles from order statistics.

The number of sample values falling below the population q-quantile follows
`BinomialDist(n, q)`. Reading k as an index into the gaps between sorted
sample values (gap 0 runs from -inf to the first value), PMF(k) is the
probability that the quantile lies between the k-th and (k+1)-th order
statistics. A confidence interval is a run of consecutive gaps whose
probabilities add up to at least the requested confidence.

Among intervals with equal confidence the one further left is preferred
("left-biased"), both when summing exact binomial probabilities for small
samples and when rounding a normal approximation for large ones.

Useful background:
    https://online.stat.psu.edu/stat415/book/export/html/835 - the concept
    of the intervals, with worked examples.
    http://www.milefoot.com/math/stat/ci-medians.htm - summing binomial
    probabilities; the continuity correction for the normal approximation.

Examples
--------
>>> from nonparam.stats.methods.quantile_ci import quantile_ci
>>> r = quantile_ci(4, 0.5, 0.375)
>>> (r.lo_order, r.hi_order, r.confidence, r.ambiguous)
(2, 3, 0.375, False)
>>> r.from_sample([10.0, 20.0, 30.0, 40.0])
(20.0, 30.0)
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from nonparam.core.config import InferenceConfig, resolve_config
from nonparam.core.errors import ContractViolationError
from nonparam.core.sample import SampleLike, as_sample
from nonparam.stats.common.binomial import BinomialDist

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuantileCIResult:
    """
    Confidence interval for a quantile.

    Attributes:
        quantile: The quantile the interval is for, as passed to `quantile_ci`
        n: Sample size
        confidence: Actual confidence level of this interval; at least the
            requested confidence
        lo_order: 1-based order statistic bounding the interval below. Given
            sorted values xs, the lower bound is xs[lo_order - 1]. Values
            below 1 mean the bound is -inf, which happens when the sample is
            too small for the confidence level or q is close to 0.
        hi_order: 1-based order statistic bounding the interval above. Values
            above n mean the bound is +inf.
        ambiguous: The interval one order statistic to the right
            (lo_order+1 to hi_order+1) has equivalent confidence.
    """

    quantile: float
    n: int
    confidence: float
    lo_order: int
    hi_order: int
    ambiguous: bool = False

    def from_sample(self, sample: SampleLike) -> Tuple[float, float]:
        """
        Return the interval's bounds as values of `sample`.

        The sample is sorted (as a copy) if it is not known to be sorted.

        Returns:
            (lo, hi), either of which may be -inf / +inf

        Raises:
            ContractViolationError: If the sample is weighted or its size is
                not `n`
        """
        s = as_sample(sample)
        if s.is_weighted:
            raise ContractViolationError("cannot compute a quantile CI on a weighted sample")
        if len(s) != self.n:
            raise ContractViolationError(
                f"sample size {len(s)} differs from the quantile CI's n={self.n}"
            )
        xs = s.sorted_copy().xs

        lo = -math.inf if self.lo_order < 1 else xs[self.lo_order - 1]
        hi = math.inf if self.hi_order > len(xs) else xs[self.hi_order - 1]
        return lo, hi


def quantile_ci(
    n: int,
    q: float,
    confidence: float,
    *,
    config: Optional[InferenceConfig] = None,
) -> QuantileCIResult:
    """
    Compute the confidence interval of the q'th quantile in a sample of size n.

    Samples of size up to `config.quantile_ci_approx_threshold` sum exact
    binomial probabilities; larger ones use the normal approximation.

    Args:
        n: Sample size (>= 0)
        q: Quantile in [0, 1]
        confidence: Requested confidence level (>= 0); 1 or more yields the whole
            real line
        config: Thresholds; defaults to `DEFAULT_CONFIG`

    Returns:
        QuantileCIResult with 0 <= lo_order <= hi_order <= n + 1
    """
    cfg = resolve_config(config)
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if not (0.0 <= q <= 1.0):
        raise ValueError(f"q must be in [0, 1], got {q}")
    if confidence < 0:
        raise ValueError(f"confidence must be non-negative, got {confidence}")

    if confidence >= 1:
        return QuantileCIResult(
            quantile=q, n=n, confidence=1.0, lo_order=0, hi_order=n + 1
        )

    logger.debug("quantile_ci(n=%d, q=%s, confidence=%s)", n, q, confidence)
    dist = BinomialDist(n=n, p=q)
    if n <= cfg.quantile_ci_approx_threshold:
        lo, hi, actual, ambiguous = _exact_interval(dist, confidence)
    else:
        lo, hi, actual, ambiguous = _normal_interval(dist, confidence)

    lo = max(lo, 0)
    hi = min(hi, n + 1)
    return QuantileCIResult(
        quantile=q,
        n=n,
        confidence=actual,
        lo_order=lo,
        hi_order=hi,
        ambiguous=ambiguous,
    )


def _exact_interval(dist: BinomialDist, confidence: float) -> Tuple[int, int, float, bool]:
    """Grow an interval outward from the mode, one gap at a time.

    Probabilities decrease monotonically away from the mode, so always taking
    the larger neighbor adds gaps in decreasing order of probability.
    """
    # When the distribution has two modes, start at the lower one.
    x = math.ceil((dist.n + 1) * dist.p) - 1
    if dist.p == 0:
        x = 0
    accum = dist.pmf(x)
    logger.debug("  start %d => %s", x, accum)

    # [l, r) is the summed range of gaps; lp and rp are its open neighbors.
    l, r = x, x + 1
    lp, rp = dist.pmf(l - 1), dist.pmf(r)
    ambiguous = rp == accum

    # Stop when nothing is left to add, in case rounding keeps accum short.
    while accum < confidence and (lp > 0 or rp > 0):
        ambiguous = lp == rp
        if lp >= rp:
            accum += lp
            l -= 1
            lp = dist.pmf(l - 1)
            logger.debug("  +left  %d => %s", l, accum)
        else:
            accum += rp
            logger.debug("  +right %d => %s", r, accum)
            r += 1
            rp = dist.pmf(r)

    logger.debug("  final [%d,%d) => %s (ambiguous %s)", l, r, accum, ambiguous)
    return l, r, accum, ambiguous


def _normal_interval(dist: BinomialDist, confidence: float) -> Tuple[int, int, float, bool]:
    normal = dist.normal_approx()
    alpha = (1 - confidence) / 2

    # The central `confidence` mass of the normal distribution.
    l1 = normal.inv_cdf(alpha)
    r1 = 2 * normal.mu - l1

    # With the continuity correction, binomial point k corresponds to the
    # band [k-0.5, k+0.5]. Round [l1, r1] out to such band edges and recover
    # k. For mu=2, [1.9, 2.1] rounds out to [1.5, 2.5], which is the band
    # range [2, 3); [1.4, 2.6] rounds out to [0.5, 3.5], or [1, 4).
    l = math.floor(math.floor(l1 - 0.5) + 0.5) + 1
    r = math.floor(math.ceil(r1 - 0.5) + 0.5) + 1
    logger.debug("  [%s,%s] rounds to [%d,%d)", l1, r1, l, r)

    def coverage(lo: int, hi: int) -> float:
        # Pr[lo <= X < hi], continuity corrected.
        return normal.cdf(hi - 0.5) - normal.cdf(lo - 0.5)

    actual, ambiguous = coverage(l, r), False
    # The interval is symmetric. Try shifting it left by dropping the
    # upper band.
    biased = coverage(l, r - 1)
    logger.debug("  unbiased %s, biased %s", actual, biased)
    if confidence <= biased < actual:
        logger.debug("  taking biased")
        actual, ambiguous = biased, True
        r -= 1

    if l <= 0 and r >= dist.n + 1:
        # The interval covers everything, but the normal distribution's
        # unbounded support keeps its CDF short of exactly 1.
        logger.debug("  adjusting for full range")
        actual, ambiguous = 1.0, False
    return l, r, actual, ambiguous
