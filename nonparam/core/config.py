"""
nonparam.core.config
====================

Numeric knobs that decide between exact and approximate distributions.

Exact distributions are necessary for small samples, where the sampling
distribution is highly irregular, but they quickly become expensive while the
normal approximation becomes accurate. The crossover points are collected in
an immutable `InferenceConfig` that is passed explicitly to each procedure.

Examples
--------
>>> from dataclasses import replace
>>> from nonparam.core.config import DEFAULT_CONFIG
>>> DEFAULT_CONFIG.mann_whitney_exact_limit
50
>>> cfg = replace(DEFAULT_CONFIG, quantile_ci_approx_threshold=0)
>>> cfg.quantile_ci_approx_threshold
0
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InferenceConfig:
    """
    Thresholds selecting exact or approximate computation.

    Attributes:
        mann_whitney_exact_limit: Largest per-sample size for which the exact
            U distribution is used when the samples have no ties. Computing
            the distribution for two 50-value samples takes a few
            milliseconds.
        mann_whitney_ties_exact_limit: Largest per-sample size for which the
            exact U distribution is used when the samples have ties. The tied
            distribution is enumerated over every way of splitting the tie
            groups between the samples, which grows exponentially with the
            number of groups, so this must stay small.
        quantile_ci_approx_threshold: Sample sizes above this use the normal
            approximation to the binomial distribution for quantile
            confidence intervals.
    """

    mann_whitney_exact_limit: int = 50
    mann_whitney_ties_exact_limit: int = 9
    quantile_ci_approx_threshold: int = 30

    def __post_init__(self) -> None:
        for name in (
            "mann_whitney_exact_limit",
            "mann_whitney_ties_exact_limit",
            "quantile_ci_approx_threshold",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")


DEFAULT_CONFIG = InferenceConfig()


def resolve_config(config: Optional[InferenceConfig]) -> InferenceConfig:
    """Return `config`, or the process default when it is None."""
    return DEFAULT_CONFIG if config is None else config
