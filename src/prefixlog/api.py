from __future__ import annotations

"""
Module-level API.

Thin wrappers that route every call to the process-wide registry.
"""

from typing import Any, Mapping, Optional

from prefixlog.core.handle import Logger
from prefixlog.core.registry import get_registry
from prefixlog.domain.config import LoggerConfig


def set_default_config(partial: Optional[Mapping[str, Any]] = None, **fields: Any) -> None:
    """Update the runtime defaults; see LoggerRegistry.set_default_config."""
    get_registry().set_default_config(partial, **fields)


def set_logger_config(name: str, partial: Optional[Mapping[str, Any]] = None, **fields: Any) -> None:
    """Update one logger's override; see LoggerRegistry.set_logger_config."""
    get_registry().set_logger_config(name, partial, **fields)


def set_log_level(level: Any) -> None:
    get_registry().set_log_level(level)


def set_logger_level(name: str, level: Any) -> None:
    get_registry().set_logger_level(name, level)


def set_output(output: Any) -> None:
    get_registry().set_output(output)


def get_output() -> Any:
    return get_registry().get_output()


def get_logger(name: str) -> Logger:
    """Return the identity-stable logger for 'name'."""
    return get_registry().get_logger(name)


def get_default_config() -> LoggerConfig:
    return get_registry().get_default_config()


def get_per_logger_config() -> Mapping[str, Mapping[str, Any]]:
    return get_registry().get_per_logger_config()


def get_library_defaults() -> LoggerConfig:
    return get_registry().get_library_defaults()
