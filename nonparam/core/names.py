"""
nonparam.core.names
===================

Typed names shared across the package.

- `AltHypothesis`: an Enum for the alternative hypothesis of a two-sample test.

Examples
--------
>>> from nonparam.core.names import AltHypothesis
>>> AltHypothesis.TWO_SIDED.value
'two-sided'
>>> AltHypothesis("less") is AltHypothesis.LESS
True
"""

from __future__ import annotations
from enum import Enum
from typing import Union


class AltHypothesis(str, Enum):
    """Alternative hypothesis for comparing the locations of two samples.

    - TWO_SIDED: the locations differ
    - LESS: the first sample tends to take smaller values than the second
    - GREATER: the first sample tends to take larger values than the second
    """

    TWO_SIDED = "two-sided"
    LESS = "less"
    GREATER = "greater"


AltHypothesisLike = Union[AltHypothesis, str]
