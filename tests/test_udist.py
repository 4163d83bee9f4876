"""
Tests for the exact distribution of the Mann-Whitney U statistic.
"""

import itertools
import math
from collections import Counter

import pytest

from nonparam.stats.common.udist import UDist, enumerate_splits

# U distribution for n2=3 up to U=5, from Mann and Whitney (1947).
UDIST3 = [
    #  n1=1      2         3
    [0.250000, 0.100000, 0.050000],  # U=0
    [0.500000, 0.200000, 0.100000],  # U=1
    [0.750000, 0.400000, 0.200000],  # U=2
    [1.000000, 0.600000, 0.350000],  # U=3
    [1.000000, 0.800000, 0.500000],  # U=4
    [1.000000, 0.900000, 0.650000],  # U=5
]

# U distribution for n2=5 up to U=5.
UDIST5 = [
    #  n1=1      2         3         4         5
    [0.166667, 0.047619, 0.017857, 0.007937, 0.003968],  # U=0
    [0.333333, 0.095238, 0.035714, 0.015873, 0.007937],  # U=1
    [0.500000, 0.190476, 0.071429, 0.031746, 0.015873],  # U=2
    [0.666667, 0.285714, 0.125000, 0.055556, 0.027778],  # U=3
    [0.833333, 0.428571, 0.196429, 0.095238, 0.047619],  # U=4
    [1.000000, 0.571429, 0.285714, 0.142857, 0.075397],  # U=5
]


def brute_force_counts(n1, t):
    """Count 2U over every choice of sample-1 positions in the merged order."""
    groups = [g for g, size in enumerate(t) for _ in range(size)]
    counts = Counter()
    for chosen in itertools.combinations(range(len(groups)), n1):
        chosen = set(chosen)
        twice_u = 0
        for i in chosen:
            for j in range(len(groups)):
                if j in chosen:
                    continue
                if groups[j] < groups[i]:
                    twice_u += 2
                elif groups[j] == groups[i]:
                    twice_u += 1
        counts[twice_u] += 1
    return counts


@pytest.mark.parametrize("n2,table", [(3, UDIST3), (5, UDIST5)])
def test_cdf_matches_mann_whitney_tables(n2, table):
    for U, row in enumerate(table):
        for n1 in range(1, n2 + 1):
            got = UDist(n1=n1, n2=n2).cdf(U)
            assert abs(got - row[n1 - 1]) < 1e-6, (n1, n2, U)


@pytest.mark.parametrize("n1,n2", [(1, 1), (1, 7), (3, 7), (8, 8), (12, 5), (15, 20)])
def test_pmf_sums_to_one(n1, n2):
    d = UDist(n1=n1, n2=n2)
    assert sum(d.pmf(u) for u in range(n1 * n2 + 1)) == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize("n1,n2", [(40, 50), (49, 50), (50, 50)])
def test_total_mass_at_exact_limit(n1, n2):
    # Both tails mirror each other around the center point mn/2.
    d = UDist(n1=n1, n2=n2)
    half = n1 * n2 // 2
    assert 2 * d.cdf(half - 1) + d.pmf(half) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("n1,n2", [(4, 6), (7, 7), (10, 3)])
def test_cdf_is_monotone_with_correct_limits(n1, n2):
    d = UDist(n1=n1, n2=n2)
    mn = n1 * n2
    values = [d.cdf(u) for u in range(mn + 1)]
    assert all(a <= b + 1e-12 for a, b in zip(values, values[1:]))
    assert d.cdf(-1e-9) == 0.0
    assert d.cdf(mn + 1e-9) == 1.0


def test_cdf_agrees_with_pmf_on_both_tails():
    d = UDist(n1=6, n2=9)
    running = 0.0
    for u in range(6 * 9 + 1):
        running += d.pmf(u)
        assert d.cdf(u) == pytest.approx(running, abs=1e-12)


def test_untied_pmf_is_symmetric():
    d = UDist(n1=5, n2=8)
    for u in range(41):
        assert d.pmf(u) == pytest.approx(d.pmf(40 - u))


def test_pmf_floors_to_grid():
    d = UDist(n1=3, n2=4)
    assert d.pmf(2.9) == d.pmf(2)
    assert d.pmf(-0.5) == 0.0
    assert d.pmf(12.5) == d.pmf(12)
    assert d.pmf(13) == 0.0


def test_largest_exact_size_midpoint():
    d = UDist(n1=50, n2=50)
    assert d.cdf(1249) + d.pmf(1250) == pytest.approx(d.cdf(1250))
    assert 0.5 < d.cdf(1250) < 0.52


def test_shape():
    d = UDist(n1=3, n2=4)
    assert d.bounds() == (0.0, 12.0)
    assert d.step() == 1.0
    assert d.mean() == 6.0
    assert not d.has_ties()


def test_empty_sample_is_point_mass():
    d = UDist(n1=0, n2=3)
    assert d.pmf(0) == 1.0
    assert d.cdf(0) == 1.0
    assert d.cdf(-1) == 0.0


def test_inv_cdf():
    d = UDist(n1=3, n2=3)
    # CDF: 0.05, 0.10, 0.20, 0.35, 0.50, ...
    assert d.inv_cdf(0.04) == 0.0
    assert d.inv_cdf(0.3) == 3.0
    assert d.inv_cdf(1.0) == 9.0


# --- Ties ---


def test_all_ones_tie_vector_matches_untied():
    tied = UDist(n1=4, n2=5, t=(1,) * 9)
    untied = UDist(n1=4, n2=5)
    assert not tied.has_ties()
    assert tied.step() == 1.0
    for u in range(21):
        assert tied.cdf(u) == pytest.approx(untied.cdf(u))


@pytest.mark.parametrize(
    "n1,t",
    [
        (4, (1, 5, 1, 1)),
        (4, (6, 1, 1, 1)),
        (2, (2, 2)),
        (3, (1, 2, 3, 1)),
        (5, (2, 1, 1, 3, 2, 1)),
    ],
)
def test_enumerate_splits_matches_brute_force(n1, t):
    assert enumerate_splits(n1, t) == brute_force_counts(n1, t)


@pytest.mark.parametrize("n1,t", [(4, (1, 5, 1, 1)), (3, (2, 2, 1, 3))])
def test_tied_pmf_and_cdf(n1, t):
    n = sum(t)
    d = UDist(n1=n1, n2=n - n1, t=t)
    assert d.has_ties()
    assert d.step() == 0.5
    counts = brute_force_counts(n1, t)
    total = math.comb(n, n1)

    running = 0
    for twice_u in range(2 * n1 * (n - n1) + 1):
        running += counts.get(twice_u, 0)
        assert d.pmf(twice_u / 2) == pytest.approx(counts.get(twice_u, 0) / total)
        assert d.cdf(twice_u / 2) == pytest.approx(running / total)
    assert sum(d.pmf(k / 2) for k in range(2 * n1 * (n - n1) + 1)) == pytest.approx(1.0)


def test_tied_distribution_by_hand():
    # Samples like {1,2,3,5} and {2,2,2,2}: U takes the values
    # 3, 6, 7, 9, 10, 13 with weights 10, 15, 10, 10, 15, 10 out of 70.
    d = UDist(n1=4, n2=4, t=(1, 5, 1, 1))
    assert d.pmf(6) == pytest.approx(15 / 70)
    assert d.pmf(6.4) == pytest.approx(15 / 70)
    assert d.pmf(6.5) == 0.0
    assert d.cdf(9.5) == pytest.approx(45 / 70)
    assert d.cdf(2.5) == 0.0
    assert d.cdf(13) == pytest.approx(1.0)


def test_tied_pmf_at_half_step():
    d = UDist(n1=1, n2=2, t=(1, 2))
    assert d.pmf(0) == pytest.approx(1 / 3)
    assert d.pmf(1.5) == pytest.approx(2 / 3)
    assert d.pmf(1.0) == 0.0


@pytest.mark.parametrize(
    "n1,n2,t",
    [
        (-1, 3, None),
        (2, 2, (2, 1)),
        (2, 2, (2, 0, 2)),
    ],
)
def test_rejects_invalid_parameters(n1, n2, t):
    with pytest.raises(ValueError):
        UDist(n1=n1, n2=n2, t=t)


def test_tie_vector_is_normalized_to_tuple():
    d = UDist(n1=1, n2=2, t=[1, 2])
    assert d.t == (1, 2)
