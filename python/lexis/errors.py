"""
Exception types raised by lexis.

Search misses and lossy transcoding are not errors: those helpers signal
them through their return value (None / dropped characters).
"""


class LexisError(Exception):
    """Base class for lexis errors."""

    pass


class InvalidArgumentError(LexisError, ValueError):
    """Raised when rule data or a rule type is not acceptable."""

    pass


class RuleFileError(LexisError):
    """Raised when a YAML rule file cannot be read or parsed."""

    pass
