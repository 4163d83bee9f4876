"""
nonparam.stats.common
=====================

Distributions and rank computations shared by the statistical procedures.

Everything here is procedure-agnostic: the distribution contracts and
`NormalDist` (`dist`), the binomial distribution (`binomial`), tie-aware rank
merging (`ranks`) and the exact Mann-Whitney U distribution (`udist`).
"""
