from __future__ import annotations

"""
Logger Configuration Models.

Defines the immutable configuration record shared by the three
configuration layers (library defaults, runtime defaults, per-logger
overrides) and the factory for the library defaults.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping

from prefixlog.domain.levels import LogLevel

# Keys accepted in a partial configuration; anything else is ignored
CONFIG_FIELDS = ("level", "prefix_enabled", "prefix_format", "placeholders")

DEFAULT_PREFIX_FORMAT = "(%loggerName) %logLevel:"


@dataclass(frozen=True)
class LoggerConfig:
    """
    Complete logger configuration.

    Attributes:
        level: Minimum severity that is forwarded to the output primitive.
        prefix_enabled: Whether a rendered prefix is prepended to each call.
        prefix_format: Prefix template (see prefixlog.core.template).
        placeholders: Token text (e.g. '%app') to substitution value.
    """
    level: LogLevel = LogLevel.INFO
    prefix_enabled: bool = True
    prefix_format: str = DEFAULT_PREFIX_FORMAT
    placeholders: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Always hold a private read-only copy so snapshots cannot be mutated
        object.__setattr__(self, "placeholders", MappingProxyType(dict(self.placeholders)))

    def with_overrides(self, partial: Mapping[str, Any]) -> LoggerConfig:
        """
        Return a new config with the fields present in 'partial' replaced.

        The placeholders map, if present, replaces the current one wholesale.

        Args:
            partial: Validated partial configuration.

        Returns:
            LoggerConfig: Updated copy.
        """
        changes = {k: partial[k] for k in CONFIG_FIELDS if k in partial}
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict copy of the configuration."""
        return {
            "level": self.level.value,
            "prefix_enabled": self.prefix_enabled,
            "prefix_format": self.prefix_format,
            "placeholders": dict(self.placeholders),
        }


def create_library_defaults() -> LoggerConfig:
    """Build the fixed fallback configuration."""
    return LoggerConfig(
        level=LogLevel.INFO,
        prefix_enabled=True,
        prefix_format=DEFAULT_PREFIX_FORMAT,
        placeholders={},
    )


LIBRARY_DEFAULTS: LoggerConfig = create_library_defaults()
