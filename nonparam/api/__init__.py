"""
nonparam.api - Sample-Oriented Facade
=====================================

Entry points that accept raw samples and answer in the units of the data:

- `compare_samples()`: Mann-Whitney U-test of two samples
- `quantile_interval()`: confidence interval for a population quantile
- `median_interval()`: confidence interval for the population median

Examples
--------
>>> from nonparam.api import median_interval
>>> median_interval([1.0, 2.0, 3.0, 4.0], confidence=1).lo
-inf
"""

from nonparam.api.nonparametric import (
    QuantileInterval,
    compare_samples,
    median_interval,
    quantile_interval,
)

__all__ = [
    "QuantileInterval",
    "compare_samples",
    "median_interval",
    "quantile_interval",
]
