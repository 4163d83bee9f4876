"""
Tests for the distribution contracts and NormalDist.
"""

import pytest
from scipy.stats import norm

from nonparam.stats.common.binomial import BinomialDist
from nonparam.stats.common.dist import (
    STD_NORMAL,
    DiscreteDistribution,
    NormalDist,
)


def test_std_normal_matches_scipy():
    for x in (-3.0, -1.0, 0.0, 0.5, 2.5):
        assert STD_NORMAL.cdf(x) == pytest.approx(norm.cdf(x))
        assert STD_NORMAL.pdf(x) == pytest.approx(norm.pdf(x))


def test_normal_inv_cdf_round_trips_cdf():
    d = NormalDist(mu=3.0, sigma=2.0)
    for x in (-1.0, 2.0, 3.0, 7.5):
        assert d.inv_cdf(d.cdf(x)) == pytest.approx(x)


def test_normal_bounds_are_three_sigma():
    assert NormalDist(mu=1.0, sigma=2.0).bounds() == (-5.0, 7.0)


def test_zero_sigma_is_point_mass():
    d = NormalDist(mu=2.0, sigma=0.0)
    assert d.cdf(1.999) == 0.0
    assert d.cdf(2.0) == 1.0
    assert d.cdf(10.0) == 1.0
    assert d.inv_cdf(0.0) == 2.0
    assert d.inv_cdf(0.975) == 2.0
    assert d.pdf(1.0) == 0.0


def test_normal_rejects_negative_sigma():
    with pytest.raises(ValueError):
        NormalDist(mu=0.0, sigma=-1.0)


def test_inv_cdf_rejects_out_of_range_probability():
    with pytest.raises(ValueError):
        STD_NORMAL.inv_cdf(1.5)
    with pytest.raises(ValueError):
        BinomialDist(n=3, p=0.5).inv_cdf(-0.1)


def test_each_helpers():
    assert STD_NORMAL.cdf_each([0.0, 0.0]) == pytest.approx([0.5, 0.5])
    d = BinomialDist(n=2, p=0.5)
    assert d.pmf_each([0, 1, 2]) == [0.25, 0.5, 0.25]
    assert STD_NORMAL.inv_cdf_each([0.5]) == pytest.approx([0.0])


def test_discrete_inv_cdf_is_smallest_grid_point_reaching_y():
    d = BinomialDist(n=4, p=0.5)
    # CDF: 1/16, 5/16, 11/16, 15/16, 1
    assert d.inv_cdf(0.0) == 0.0
    assert d.inv_cdf(0.06) == 0.0
    assert d.inv_cdf(0.1) == 1.0
    assert d.inv_cdf(0.5) == 2.0
    assert d.inv_cdf(0.95) == 4.0
    assert d.inv_cdf(1.0) == 4.0


def test_discrete_distributions_share_contract():
    assert isinstance(BinomialDist(n=1, p=0.5), DiscreteDistribution)
