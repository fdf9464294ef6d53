from __future__ import annotations

"""
Effective Configuration Resolver.

Combines the runtime defaults with a per-logger override. Scalar fields
follow override-wins selection; placeholders are merged with the
override taking precedence on key collisions.
"""

from typing import Any, Dict, Mapping, Optional

from prefixlog.domain.config import LoggerConfig


def resolve(defaults: LoggerConfig, override: Optional[Mapping[str, Any]] = None) -> LoggerConfig:
    """
    Compute the effective configuration for a single logger.

    Args:
        defaults: Current runtime defaults.
        override: Stored per-logger override (may be None or partial).

    Returns:
        LoggerConfig: The effective configuration. Inputs are not modified.
    """
    p = override or {}

    placeholders: Dict[str, str] = dict(defaults.placeholders)
    placeholders.update(p.get("placeholders") or {})

    return LoggerConfig(
        level=p.get("level", defaults.level),
        prefix_enabled=p.get("prefix_enabled", defaults.prefix_enabled),
        prefix_format=p.get("prefix_format", defaults.prefix_format),
        placeholders=placeholders,
    )
