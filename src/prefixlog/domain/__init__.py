from __future__ import annotations

from .config import LIBRARY_DEFAULTS, LoggerConfig, create_library_defaults
from .levels import EMITTING_LEVELS, LEVEL_ORDER, LogLevel, is_enabled, parse_level

__all__ = [
    "LogLevel",
    "LEVEL_ORDER",
    "EMITTING_LEVELS",
    "is_enabled",
    "parse_level",
    "LoggerConfig",
    "LIBRARY_DEFAULTS",
    "create_library_defaults",
]
