from __future__ import annotations

"""
Emission Gate.

Turns an effective configuration into the five bound entry points of a
logger handle. Each entry point is either a no-op (level disabled), a
bare passthrough to the output primitive (prefix disabled) or the output
function with the rendered prefix pre-applied.
"""

from functools import partial
from typing import Any, Callable, Dict, Optional

from prefixlog.core.template import render_prefix
from prefixlog.domain.config import LoggerConfig
from prefixlog.domain.levels import EMITTING_LEVELS, LogLevel, is_enabled

EmitFn = Callable[..., Any]

# Generic write function consulted when a severity-specific one is missing
FALLBACK_METHOD = "log"


def noop(*args: Any, **kwargs: Any) -> None:
    """Entry point used for suppressed levels."""


def get_output_method(output: Any, level: LogLevel) -> EmitFn:
    """
    Look up the write function for 'level' on the output primitive.

    Falls back to the generic 'log' function, then to a no-op.

    Args:
        output: The output primitive (may be None).
        level: Severity to look up.

    Returns:
        EmitFn: A callable that never needs a None check.
    """
    if output is None:
        return noop

    fn = getattr(output, level.value, None)
    if callable(fn):
        return fn

    fallback = getattr(output, FALLBACK_METHOD, None)
    if callable(fallback):
        return fallback

    return noop


def build_entry_point(
        config: LoggerConfig,
        logger_name: str,
        level: LogLevel,
        output: Any,
) -> EmitFn:
    """Build a single entry point for 'level' according to 'config'."""
    if not is_enabled(config.level, level):
        return noop

    fn = get_output_method(output, level)
    if fn is noop:
        return noop

    if not config.prefix_enabled:
        return fn

    prefix = render_prefix(config.prefix_format, config.placeholders, logger_name, level)
    return partial(fn, prefix)


def build_entry_points(config: LoggerConfig, logger_name: str, output: Any) -> Dict[LogLevel, EmitFn]:
    """Build all five entry points for a logger."""
    return {
        level: build_entry_point(config, logger_name, level, output)
        for level in EMITTING_LEVELS
    }


def bind(handle: Any, config: LoggerConfig, output: Optional[Any]) -> None:
    """
    Rebind the five entry points of 'handle' in place.

    All entry points are computed before any of them is assigned, so a
    failure while building leaves the previous bindings untouched.

    Args:
        handle: Logger handle exposing a 'name' and the five level attributes.
        config: Effective configuration for the handle's name.
        output: Output primitive to forward to.
    """
    entry_points = build_entry_points(config, handle.name, output)
    for level, fn in entry_points.items():
        setattr(handle, level.value, fn)
