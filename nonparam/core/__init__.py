"""
nonparam.core
=============

Shared infrastructure used by every statistical procedure:

- `errors`: the exception taxonomy (statistical failures vs. caller bugs)
- `config`: `InferenceConfig`, the exact-vs-approximate thresholds
- `names`: typed names such as `AltHypothesis`
- `sample`: the `Sample` value type consumed by the procedures
"""
