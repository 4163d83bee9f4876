"""
Tests for the sample-oriented facade.
"""

import math

import pytest

from nonparam.api import compare_samples, median_interval, quantile_interval
from nonparam.core.config import InferenceConfig
from nonparam.core.errors import SampleSizeError
from nonparam.core.names import AltHypothesis
from nonparam.core.sample import Sample


def test_compare_samples_two_sided():
    r = compare_samples([2, 1, 3, 5], [12, 11, 13, 15])
    assert r.u == 0
    assert r.p == pytest.approx(0.028571428571428577)
    assert r.alt_hypothesis is AltHypothesis.TWO_SIDED


def test_compare_samples_one_sided():
    r = compare_samples([2, 1, 3, 5], [12, 11, 13, 15], alternative="less")
    assert r.p == pytest.approx(1 / 70)


def test_compare_samples_propagates_errors():
    with pytest.raises(SampleSizeError):
        compare_samples([], [1.0])


def test_median_interval_maps_orders_to_values():
    iv = median_interval([4, 1, 3, 2], confidence=0.375)
    assert (iv.lo, iv.hi) == (2.0, 3.0)
    assert iv.confidence == 0.375
    assert (iv.result.lo_order, iv.result.hi_order) == (2, 3)


def test_quantile_interval_can_be_unbounded():
    iv = quantile_interval([5.0, 1.0, 3.0], 0.9, confidence=0.9)
    assert iv.hi == math.inf
    assert iv.confidence >= 0.9


def test_quantile_interval_with_config():
    data = Sample.of(range(40))
    exact = quantile_interval(data, 0.5, 0.95, config=InferenceConfig(quantile_ci_approx_threshold=100))
    approx = quantile_interval(data, 0.5, 0.95)
    assert exact.lo <= 20 <= exact.hi
    assert approx.lo <= 20 <= approx.hi
