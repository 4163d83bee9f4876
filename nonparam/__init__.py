"""
nonparam: nonparametric inference built on exact and approximate distributions.

Two procedures live here: the Mann-Whitney U-test, which compares two samples
through their ranks alone, and confidence intervals for population quantiles
expressed as order statistics of a sample. Both face the same trade-off. The
exact discrete distribution of the statistic is always correct but
combinatorially expensive to build, while a normal approximation is cheap but
only valid asymptotically. The package therefore centers on a small contract
for discrete and continuous distributions and lets each procedure choose
between an exact distribution and a corrected normal approximation, governed
by an explicit `InferenceConfig`.

Example
-------
>>> import nonparam
>>> assert hasattr(nonparam, "core")
>>> assert hasattr(nonparam, "stats")
>>> nonparam.mann_whitney_u_test([2, 1, 3, 5], [12, 11, 13, 15]).u
0.0
"""

from nonparam import core, stats
from nonparam.core.config import DEFAULT_CONFIG, InferenceConfig
from nonparam.core.errors import (
    ContractViolationError,
    NonparamError,
    SampleSizeError,
    SamplesEqualError,
)
from nonparam.core.names import AltHypothesis
from nonparam.core.sample import Sample
from nonparam.stats.common.binomial import BinomialDist
from nonparam.stats.common.dist import STD_NORMAL, NormalDist
from nonparam.stats.common.udist import UDist
from nonparam.stats.methods.mann_whitney import (
    MannWhitneyUTestResult,
    mann_whitney_u_test,
)
from nonparam.stats.methods.quantile_ci import QuantileCIResult, quantile_ci

__all__ = [
    "core",
    "stats",
    "DEFAULT_CONFIG",
    "InferenceConfig",
    "ContractViolationError",
    "NonparamError",
    "SampleSizeError",
    "SamplesEqualError",
    "AltHypothesis",
    "Sample",
    "BinomialDist",
    "NormalDist",
    "STD_NORMAL",
    "UDist",
    "MannWhitneyUTestResult",
    "mann_whitney_u_test",
    "QuantileCIResult",
    "quantile_ci",
]
