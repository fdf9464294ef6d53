from __future__ import annotations

"""
Severity Levels.

Defines the ordered severity enumeration and the numeric ranks used by
the emission gate. 'silent' sits above every real level and disables
all output.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple


class LogLevel(str, Enum):
    """Ordered severity levels. Values are the lower-case level names."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    SILENT = "silent"

    def __str__(self) -> str:
        return self.value


# Rank used for comparison: a logger at level L emits severity S iff rank(L) <= rank(S)
LEVEL_ORDER: Dict[LogLevel, int] = {
    LogLevel.TRACE: 10,
    LogLevel.DEBUG: 20,
    LogLevel.INFO: 30,
    LogLevel.WARN: 40,
    LogLevel.ERROR: 50,
    LogLevel.SILENT: 100,
}

# The five levels that own an entry point on a logger handle
EMITTING_LEVELS: Tuple[LogLevel, ...] = (
    LogLevel.TRACE,
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARN,
    LogLevel.ERROR,
)


def parse_level(value: Any) -> Optional[LogLevel]:
    """
    Convert a level member or its case-insensitive name to a LogLevel.

    Args:
        value: Candidate level (LogLevel or str).

    Returns:
        Optional[LogLevel]: The matching level, or None if unrecognized.
    """
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        try:
            return LogLevel(value.strip().lower())
        except ValueError:
            return None
    return None


def is_enabled(configured: LogLevel, severity: LogLevel) -> bool:
    """Return True when a logger configured at 'configured' emits 'severity'."""
    return LEVEL_ORDER[configured] <= LEVEL_ORDER[severity]
