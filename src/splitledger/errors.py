from __future__ import annotations


class SplitError(ValueError):
    pass


class InvalidInput(SplitError):
    """The request cannot be split at all, e.g. there is nobody to split between."""


class ValidationError(SplitError):
    """The request is well formed but its numbers do not add up."""
