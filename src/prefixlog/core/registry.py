from __future__ import annotations

"""
Logger Registry.

Owns the process-wide logging state: fixed library defaults, mutable
runtime defaults, per-logger overrides, the handle cache and the output
primitive. Every mutation rebinds the affected handles in place.
"""

import logging
import threading
from dataclasses import replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from prefixlog.core.gate import bind
from prefixlog.core.handle import Logger
from prefixlog.core.resolver import resolve
from prefixlog.domain.config import LoggerConfig, create_library_defaults
from prefixlog.domain.levels import LogLevel
from prefixlog.exceptions import InvalidArgumentError
from prefixlog.infra.console import ConsoleOutput
from prefixlog.validate_config import validate_partial

logger = logging.getLogger(__name__)


class LoggerRegistry:
    """
    Process-wide state manager for named loggers.

    A single lock guards defaults, overrides and the handle cache so that a
    mutation and the rebind it triggers form one critical section.
    """

    def __init__(
            self,
            output: Optional[Any] = None,
            library_defaults: Optional[LoggerConfig] = None,
    ) -> None:
        """
        Initialize the registry.

        Args:
            output: Output primitive. Defaults to a ConsoleOutput.
            library_defaults: Fallback configuration. Defaults to the
                package's built-in library defaults.
        """
        self._lock = threading.Lock()
        self._library_defaults = library_defaults or create_library_defaults()
        self._defaults = replace(self._library_defaults)
        self._overrides: Dict[str, Dict[str, Any]] = {}
        self._loggers: Dict[str, Logger] = {}
        self._output = output if output is not None else ConsoleOutput()

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------
    def set_default_config(self, partial: Optional[Mapping[str, Any]] = None, **fields: Any) -> None:
        """
        Update the runtime defaults and rebind every cached logger.

        A 'placeholders' entry replaces the default placeholder map wholesale.

        Args:
            partial: Mapping with any of level, prefix_enabled, prefix_format,
                placeholders. Unknown keys are ignored.
            **fields: Same keys as keyword arguments; they win over 'partial'.
        """
        clean = _clean_partial(partial, fields)
        with self._lock:
            self._defaults = self._defaults.with_overrides(clean)
            for handle in self._loggers.values():
                self._bind(handle)
            rebound = len(self._loggers)
        logger.debug(f"Registry: Defaults updated ({sorted(clean)}); rebound {rebound} logger(s).")

    def set_logger_config(self, name: str, partial: Optional[Mapping[str, Any]] = None, **fields: Any) -> None:
        """
        Merge a partial configuration into the override stored for 'name'.

        Fields absent from the partial keep their stored value. A cached
        logger is rebound immediately; otherwise the override waits for the
        first lookup.

        Args:
            name: Logger name (trimmed).
            partial: Partial configuration mapping.
            **fields: Same keys as keyword arguments.

        Raises:
            InvalidArgumentError: If the trimmed name is empty.
        """
        key = _normalize_name(name)
        clean = _clean_partial(partial, fields)
        with self._lock:
            current = self._overrides.get(key, {})
            self._overrides[key] = {**current, **clean}

            handle = self._loggers.get(key)
            if handle is not None:
                self._bind(handle)
        logger.debug(f"Registry: Override for '{key}' updated ({sorted(clean)}).")

    def set_log_level(self, level: Any) -> None:
        """Set the default level for every logger without an override."""
        self.set_default_config(level=level)

    def set_logger_level(self, name: str, level: Any) -> None:
        """Set the level of a single logger."""
        self.set_logger_config(name, level=level)

    def set_output(self, output: Any) -> None:
        """
        Replace the output primitive and rebind every cached logger.

        Args:
            output: Object exposing trace/debug/info/warn/error and/or log.
        """
        with self._lock:
            self._output = output
            for handle in self._loggers.values():
                self._bind(handle)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------
    def get_logger(self, name: str) -> Logger:
        """
        Return the logger for 'name', creating and binding it on first use.

        Args:
            name: Logger name (trimmed).

        Returns:
            Logger: The identity-stable handle for the trimmed name.

        Raises:
            InvalidArgumentError: If the trimmed name is empty.
        """
        key = _normalize_name(name)
        with self._lock:
            cached = self._loggers.get(key)
            if cached is not None:
                return cached

            handle = Logger(key)
            self._loggers[key] = handle
            self._bind(handle)
        logger.debug(f"Registry: Created logger '{key}'.")
        return handle

    def resolve_config(self, name: str) -> LoggerConfig:
        """Compute the effective configuration for 'name' from current state."""
        key = _normalize_name(name)
        with self._lock:
            return resolve(self._defaults, self._overrides.get(key))

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------
    def get_default_config(self) -> LoggerConfig:
        return self._defaults

    def get_library_defaults(self) -> LoggerConfig:
        return self._library_defaults

    def get_per_logger_config(self) -> Mapping[str, Mapping[str, Any]]:
        """
        Snapshot of all per-logger overrides.

        Returns:
            Mapping[str, Mapping[str, Any]]: Read-only copies; later registry
            changes are not reflected.
        """
        with self._lock:
            return MappingProxyType({
                key: _freeze_override(override)
                for key, override in self._overrides.items()
            })

    def get_output(self) -> Any:
        return self._output

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------
    def _bind(self, handle: Logger) -> None:
        """Resolve and rebind 'handle'. Caller must hold the lock."""
        config = resolve(self._defaults, self._overrides.get(handle.name))
        bind(handle, config, self._output)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def _normalize_name(name: Any) -> str:
    if not isinstance(name, str):
        raise InvalidArgumentError()
    key = name.strip()
    if not key:
        raise InvalidArgumentError()
    return key


def _clean_partial(partial: Optional[Mapping[str, Any]], fields: Mapping[str, Any]) -> Dict[str, Any]:
    clean: Dict[str, Any] = {}
    if partial is not None:
        clean, _ = validate_partial(partial)
    if fields:
        extra, _ = validate_partial(fields)
        clean.update(extra)
    return clean


def _freeze_override(override: Mapping[str, Any]) -> Mapping[str, Any]:
    frozen = dict(override)
    if "placeholders" in frozen:
        frozen["placeholders"] = MappingProxyType(dict(frozen["placeholders"]))
    return MappingProxyType(frozen)


# -----------------------------------------------------------------------------
# Process-wide instance
# -----------------------------------------------------------------------------
_registry: Optional[LoggerRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> LoggerRegistry:
    """Return the process-wide registry, creating it on first access."""
    global _registry
    current = _registry
    if current is not None:
        return current

    created = False
    with _registry_lock:
        if _registry is None:
            _registry = LoggerRegistry()
            created = True
        current = _registry
    if created:
        logger.debug("Registry: Initialized with library defaults.")
    return current


def reset_registry(output: Optional[Any] = None) -> LoggerRegistry:
    """
    Discard the process-wide state and install a fresh registry.

    Intended for test harnesses. Handles issued by the previous registry keep
    their last bindings but no longer receive updates.

    Args:
        output: Optional output primitive for the new registry.

    Returns:
        LoggerRegistry: The new process-wide registry.
    """
    global _registry
    fresh = LoggerRegistry(output=output)
    with _registry_lock:
        _registry = fresh
    logger.debug("Registry: Reset to library defaults.")
    return fresh
