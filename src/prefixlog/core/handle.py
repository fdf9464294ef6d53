from __future__ import annotations

"""
Logger Handle.

A stable object per logger name. Its five level attributes are plain
callables that the registry reassigns whenever the effective
configuration changes, so references held by callers stay current.
"""

from typing import Any

from prefixlog.core.gate import EmitFn, noop


class Logger:
    """Named log channel with one entry point per emitting severity."""

    __slots__ = ("_name", "trace", "debug", "info", "warn", "error")

    def __init__(self, name: str) -> None:
        self._name = name
        self.trace: EmitFn = noop
        self.debug: EmitFn = noop
        self.info: EmitFn = noop
        self.warn: EmitFn = noop
        self.error: EmitFn = noop

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<Logger name={self._name!r}>"

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name":
            raise AttributeError("logger name is read-only")
        super().__setattr__(key, value)
