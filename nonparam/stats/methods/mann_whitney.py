"""
nonparam.stats.methods.mann_whitney
===================================

The Mann-Whitney U-test.

Tests the null hypothesis that two samples come from the same population
against the alternative that one tends to take larger or smaller values than
the other. It is similar to a t-test, but non-parametric: it makes no
normality assumption and has only slightly lower efficiency than the t-test on
normal data. It is also known as the Mann-Whitney-Wilcoxon test and is
equivalent to the Wilcoxon rank-sum test.

Mathematical Background
-----------------------
With R1 the rank sum of sample 1 in the merged samples (tied values sharing
their average rank):

    U1 = R1 - n1(n1+1)/2,    U2 = n1*n2 - U1

U1 counts the pairs in which the sample-1 value is larger, plus one half per
tied pair. The p-value comes from the exact distribution (`UDist`) when the
samples are small enough, and otherwise from the normal approximation with
tie and continuity corrections:

    mu_U    = n1*n2 / 2
    sigma_U = sqrt(n1*n2 * ((N+1) - T / (N(N-1))) / 12),   T = sum(t^3 - t)

Other statistics in use are equivalent: the Wilcoxon (1945) W statistic,
generalized for ties, is U + n1(n1+1)/2; 2U removes the half steps, and
Smid (1956) uses n1*n2 - 2U to also center the distribution.

Examples
--------
>>> from nonparam.stats.methods.mann_whitney import mann_whitney_u_test
>>> r = mann_whitney_u_test([2, 1, 3, 5], [12, 11, 13, 15])
>>> r.u, round(r.p, 6)
(0.0, 0.028571)
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional

from nonparam.core.config import InferenceConfig, resolve_config
from nonparam.core.errors import SampleSizeError, SamplesEqualError
from nonparam.core.names import AltHypothesis, AltHypothesisLike
from nonparam.core.sample import SampleLike, as_sample
from nonparam.stats.common.dist import STD_NORMAL
from nonparam.stats.common.ranks import rank_merge, tie_correction
from nonparam.stats.common.udist import UDist

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MannWhitneyUTestResult:
    """
    Result of a Mann-Whitney U-test.

    Attributes:
        n1: Size of the first sample
        n2: Size of the second sample
        u: The U statistic, generalized by counting ties as 0.5. This is always
            the smaller of the two possible values (which depends on which
            sample is "first"); the other is n1*n2 - u. It is a multiple of
            0.5, and a whole number if there are no ties.
        alt_hypothesis: Alternative hypothesis the p-value refers to
        p: p-value of the test, in [0, 1]
    """

    n1: int
    n2: int
    u: float
    alt_hypothesis: AltHypothesis
    p: float


def mann_whitney_u_test(
    x1: SampleLike,
    x2: SampleLike,
    alt_hypothesis: AltHypothesisLike = AltHypothesis.TWO_SIDED,
    *,
    config: Optional[InferenceConfig] = None,
) -> MannWhitneyUTestResult:
    """
    Perform a Mann-Whitney U-test of samples x1 and x2.

    The exact U distribution is used when neither sample exceeds
    `config.mann_whitney_exact_limit` (or the much smaller
    `config.mann_whitney_ties_exact_limit` when the samples have ties).
    Otherwise the normal approximation is used.

    Args:
        x1: First sample (weights, if any, are ignored)
        x2: Second sample
        alt_hypothesis: "two-sided", "less" (x1 tends to be smaller) or
            "greater" (x1 tends to be larger)
        config: Thresholds; defaults to `DEFAULT_CONFIG`

    Returns:
        MannWhitneyUTestResult

    Raises:
        SampleSizeError: If either sample is empty
        SamplesEqualError: If all values across both samples are equal
    """
    cfg = resolve_config(config)
    alt = AltHypothesis(alt_hypothesis)
    s1, s2 = as_sample(x1), as_sample(x2)
    n1, n2 = len(s1), len(s2)
    if n1 == 0 or n2 == 0:
        raise SampleSizeError(f"both samples must be non-empty, got sizes {n1} and {n2}")

    # Private sorted copies; the caller's data is left untouched.
    rm = rank_merge(s1.sorted_copy().xs, s2.sorted_copy().xs)
    u1 = rm.r1 - n1 * (n1 + 1) / 2
    u2 = n1 * n2 - u1
    u_small = min(u1, u2)

    limit = cfg.mann_whitney_ties_exact_limit if rm.has_ties else cfg.mann_whitney_exact_limit
    if n1 <= limit and n2 <= limit:
        logger.debug(
            "exact U distribution: n1=%d n2=%d U1=%s ties=%s", n1, n2, u1, rm.ties
        )
        p = _exact_p(UDist(n1=n1, n2=n2, t=rm.ties), u1, u2, alt)
    else:
        logger.debug(
            "normal approximation: n1=%d n2=%d U1=%s has_ties=%s", n1, n2, u1, rm.has_ties
        )
        p = _normal_p(n1, n2, u1, tie_correction(rm.ties), alt)

    return MannWhitneyUTestResult(n1=n1, n2=n2, u=u_small, alt_hypothesis=alt, p=p)


def _exact_p(dist: UDist, u1: float, u2: float, alt: AltHypothesis) -> float:
    if dist.t is not None and len(dist.t) == 1:
        # A single tie group: every value is equal.
        raise SamplesEqualError()

    if alt is AltHypothesis.LESS:
        return dist.cdf(u1)
    if alt is AltHypothesis.GREATER:
        return 1.0 - dist.cdf(u1 - dist.step())

    if u1 == u2:
        # U1 sits at the middle of the distribution. The CDF is discontinuous
        # there, so doubling a tail would count the mass at U1 twice; the two
        # tails together cover everything.
        return 1.0
    if not dist.has_ties():
        # Symmetric about n1*n2/2.
        # Summing the CDF can overshoot 0.5 by an ulp at the center.
        return min(1.0, 2.0 * dist.cdf(min(u1, u2)))
    # With ties the distribution need not be symmetric, so double the
    # smaller of the two observed tails.
    at_most = dist.cdf(u1)
    at_least = 1.0 - dist.cdf(u1 - dist.step())
    return min(1.0, 2.0 * min(at_most, at_least))


def _normal_p(n1: int, n2: int, u1: float, ties: float, alt: AltHypothesis) -> float:
    n = float(n1 + n2)
    mu_u = n1 * n2 / 2
    sigma_u = math.sqrt(n1 * n2 * ((n + 1) - ties / (n * (n - 1))) / 12)
    if sigma_u == 0:
        raise SamplesEqualError()

    numer = u1 - mu_u
    # Continuity correction.
    if alt is AltHypothesis.TWO_SIDED:
        numer -= math.copysign(0.5, numer) if numer != 0 else 0.0
    elif alt is AltHypothesis.LESS:
        numer += 0.5
    else:
        numer -= 0.5
    z = numer / sigma_u

    if alt is AltHypothesis.LESS:
        return STD_NORMAL.cdf(z)
    if alt is AltHypothesis.GREATER:
        return 1.0 - STD_NORMAL.cdf(z)
    return 2.0 * min(STD_NORMAL.cdf(z), 1.0 - STD_NORMAL.cdf(z))
