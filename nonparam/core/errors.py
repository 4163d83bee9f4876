"""
nonparam.core.errors
====================

Exception taxonomy.

There are two families:

- `NonparamError` and its subclasses report *statistical* failures. The input
  is well-formed but the procedure is undefined for it (e.g. an empty sample,
  or every observation being identical). Callers may catch and handle these.
- `ContractViolationError` reports a *caller bug*, such as a sample whose
  weights do not line up with its values. It is not a `NonparamError`, so an
  ``except NonparamError`` clause never hides it.

Examples
--------
>>> from nonparam.core.errors import SampleSizeError, NonparamError
>>> issubclass(SampleSizeError, NonparamError) and issubclass(SampleSizeError, ValueError)
True
>>> from nonparam.core.errors import ContractViolationError
>>> issubclass(ContractViolationError, NonparamError)
False
"""

from __future__ import annotations


class NonparamError(Exception):
    """Base class for recoverable statistical failures."""


class SampleSizeError(NonparamError, ValueError):
    """A sample is too small (empty) for the requested procedure."""

    def __init__(self, message: str = "sample is too small") -> None:
        super().__init__(message)


class SamplesEqualError(NonparamError, ValueError):
    """All observations are equal, so the test statistic carries no information."""

    def __init__(self, message: str = "all samples are equal") -> None:
        super().__init__(message)


class ContractViolationError(RuntimeError):
    """An argument broke a documented precondition of the API.

    This signals a bug in the calling code rather than a property of the data.
    """
