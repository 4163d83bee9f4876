"""
nonparam.stats.methods
======================

Statistical procedures built from `nonparam.stats.common`:

- `mann_whitney`: the Mann-Whitney U-test
- `quantile_ci`: order-statistic confidence intervals for quantiles
"""
