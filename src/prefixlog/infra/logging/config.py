from __future__ import annotations

"""
Diagnostics Configuration Models.

Defines the settings used to surface the package's own diagnostic
messages (registry lifecycle, dropped config values, settings loading)
and the severity mapping for level strings.
"""

import logging
from dataclasses import dataclass
from typing import Dict

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class DiagnosticsConfig:
    """
    Immutable settings for the diagnostics channel.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable stderr stream output.
        console_fmt: Structural format for terminal output.
    """
    level: str = "WARNING"
    console: bool = True
    console_fmt: str = "prefixlog | %(levelname)s | %(name)s | %(message)s"
