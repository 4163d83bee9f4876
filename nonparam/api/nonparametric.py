"""
nonparam.api.nonparametric
==========================

Sample-oriented entry points for the nonparametric procedures.

These functions take the data itself, rather than sizes and orders, and return
answers in the units of the data.

Examples
--------
>>> from nonparam.api.nonparametric import compare_samples, median_interval
>>> compare_samples([2, 1, 3, 5], [12, 11, 13, 15], alternative="less").u
0.0
>>> iv = median_interval([4, 1, 3, 2], confidence=0.375)
>>> (iv.lo, iv.hi)
(2.0, 3.0)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from nonparam.core.config import InferenceConfig
from nonparam.core.names import AltHypothesis, AltHypothesisLike
from nonparam.core.sample import SampleLike, as_sample
from nonparam.stats.methods.mann_whitney import (
    MannWhitneyUTestResult,
    mann_whitney_u_test,
)
from nonparam.stats.methods.quantile_ci import QuantileCIResult, quantile_ci


@dataclass(frozen=True)
class QuantileInterval:
    """
    A quantile confidence interval expressed in sample values.

    Attributes:
        lo: Lower bound (may be -inf)
        hi: Upper bound (may be +inf)
        result: The underlying order-statistic interval
    """

    lo: float
    hi: float
    result: QuantileCIResult

    @property
    def confidence(self) -> float:
        return self.result.confidence


def compare_samples(
    a: SampleLike,
    b: SampleLike,
    alternative: AltHypothesisLike = AltHypothesis.TWO_SIDED,
    config: Optional[InferenceConfig] = None,
) -> MannWhitneyUTestResult:
    """
    Test whether samples `a` and `b` differ in location (Mann-Whitney U-test).

    Parameters
    ----------
    a, b : Sample or sequence of float
        The two samples to compare
    alternative : {"two-sided", "less", "greater"}, default="two-sided"
        "less" means `a` tends to take smaller values than `b`
    config : InferenceConfig, optional
        Exact-vs-approximate thresholds

    Returns
    -------
    MannWhitneyUTestResult
    """
    return mann_whitney_u_test(a, b, alternative, config=config)


def quantile_interval(
    sample: SampleLike,
    q: float,
    confidence: float = 0.95,
    config: Optional[InferenceConfig] = None,
) -> QuantileInterval:
    """
    Confidence interval for the population q-quantile from an unweighted sample.

    Parameters
    ----------
    sample : Sample or sequence of float
        Observed values, in any order
    q : float
        Quantile in [0, 1]
    confidence : float, default=0.95
        Requested confidence level; the achieved level may be higher
    config : InferenceConfig, optional
        Exact-vs-approximate thresholds

    Returns
    -------
    QuantileInterval
    """
    s = as_sample(sample)
    result = quantile_ci(len(s), q, confidence, config=config)
    lo, hi = result.from_sample(s)
    return QuantileInterval(lo=lo, hi=hi, result=result)


def median_interval(
    sample: SampleLike,
    confidence: float = 0.95,
    config: Optional[InferenceConfig] = None,
) -> QuantileInterval:
    """Confidence interval for the population median."""
    return quantile_interval(sample, 0.5, confidence, config=config)
