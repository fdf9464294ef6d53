from __future__ import annotations

from .config import DiagnosticsConfig
from .core import PACKAGE_LOGGER_NAME, configure_diagnostics, get_diagnostics_logger

__all__ = [
    "DiagnosticsConfig",
    "PACKAGE_LOGGER_NAME",
    "configure_diagnostics",
    "get_diagnostics_logger",
]
