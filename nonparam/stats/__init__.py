"""
Statistical building blocks and procedures.

1. **Common** (nonparam.stats.common):
   Distributions and rank computations that are independent of any one
   procedure: the distribution contracts, `NormalDist`, `BinomialDist`,
   `UDist` and tie-aware rank merging.

2. **Methods** (nonparam.stats.methods):
   Procedures that compose the common pieces and choose between exact and
   approximate computation: the Mann-Whitney U-test and quantile
   confidence intervals.

Example:
--------
>>> from nonparam.stats.common.udist import UDist
>>> round(UDist(n1=5, n2=5).cdf(5), 6)
0.075397

>>> from nonparam.stats.methods.quantile_ci import quantile_ci
>>> quantile_ci(4, 0.5, 1).hi_order
5
"""
