from __future__ import annotations

"""
Diagnostics Logging Orchestrator.

Maintains the idempotent lifecycle of the package's diagnostic handler.
Only handlers created here are ever detached, so handlers installed by
the host application on the same logger are left alone.
"""

import logging
import sys

from prefixlog.infra.logging.config import _LEVEL_MAP, DiagnosticsConfig
from prefixlog.infra.logging.handlers import _is_our_handler, _tag_handler

PACKAGE_LOGGER_NAME = "prefixlog"

# Internal state flag for idempotency
_CONFIGURED_FLAG_ATTR: str = "_prefixlog_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_diagnostics(cfg: DiagnosticsConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach the diagnostic console handler to the package logger.

    Checks an internal flag to avoid redundant handler attachments unless
    explicit re-configuration is requested.

    Args:
        cfg: Diagnostics configuration.
        force: If True, drop our existing handlers and re-initialize.

    Returns:
        logging.Logger: The package logger.
    """
    pkg_logger = get_diagnostics_logger()

    already_configured = bool(getattr(pkg_logger, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return pkg_logger

    level_int = _parse_level(cfg.level)
    pkg_logger.setLevel(level_int)

    _remove_our_handlers(pkg_logger)

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(cfg.console_fmt))
        _tag_handler(sh)
        pkg_logger.addHandler(sh)

    setattr(pkg_logger, _CONFIGURED_FLAG_ATTR, True)
    return pkg_logger


def get_diagnostics_logger() -> logging.Logger:
    """Return the root logger of the package's diagnostic hierarchy."""
    return logging.getLogger(PACKAGE_LOGGER_NAME)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(target: logging.Logger) -> None:
    """Identify and detach all internally-managed handlers."""
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()
