from __future__ import annotations

"""
Error Taxonomy.

The registry raises only on invalid logger names. Every other fault
(missing output methods, unresolved template tokens, malformed partial
configurations) degrades gracefully instead of failing.
"""

INVALID_NAME_MESSAGE = "logger name must be a non-empty string"


class PrefixLogError(Exception):
    """Base exception for the package."""


class InvalidArgumentError(PrefixLogError, ValueError):
    """A logger name was empty, whitespace-only or not a string."""

    def __init__(self, message: str = INVALID_NAME_MESSAGE) -> None:
        super().__init__(message)
