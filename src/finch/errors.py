"""Finch exception hierarchy.

Operations on ``FormData`` never raise for missing names. These types
cover configuration and body parsing only.
"""


class FinchError(Exception):
    """Base for all finch-specific errors."""


class ConfigurationError(FinchError):
    """Raised when configuration is invalid or an optional dependency is missing."""


class FormParseError(FinchError, ValueError):
    """Raised when a submitted form body cannot be parsed.

    Subclasses ``ValueError`` so callers catching malformed input
    generically keep working.
    """
