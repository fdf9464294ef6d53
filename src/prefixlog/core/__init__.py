from __future__ import annotations

from .gate import bind, get_output_method, noop
from .handle import Logger
from .registry import LoggerRegistry, get_registry, reset_registry
from .resolver import resolve
from .template import render_prefix, render_template

__all__ = [
    "Logger",
    "LoggerRegistry",
    "get_registry",
    "reset_registry",
    "resolve",
    "bind",
    "get_output_method",
    "noop",
    "render_template",
    "render_prefix",
]
