from __future__ import annotations

"""
prefixlog: named loggers with level filtering and templated prefixes.
"""

import logging

from .api import (
    get_default_config,
    get_library_defaults,
    get_logger,
    get_output,
    get_per_logger_config,
    set_default_config,
    set_log_level,
    set_logger_config,
    set_logger_level,
    set_output,
)
from .core.handle import Logger
from .core.registry import LoggerRegistry, get_registry, reset_registry
from .core.template import render_prefix, render_template
from .domain.config import LoggerConfig
from .domain.levels import LogLevel
from .exceptions import InvalidArgumentError, PrefixLogError
from .infra.console import ConsoleOutput, LoggingOutput
from .settings import apply_settings, configure_from_file, load_settings, settings_from_env

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "LogLevel",
    "LoggerConfig",
    "Logger",
    "LoggerRegistry",
    "ConsoleOutput",
    "LoggingOutput",
    "PrefixLogError",
    "InvalidArgumentError",
    "get_logger",
    "set_default_config",
    "set_logger_config",
    "set_log_level",
    "set_logger_level",
    "set_output",
    "get_output",
    "get_default_config",
    "get_per_logger_config",
    "get_library_defaults",
    "get_registry",
    "reset_registry",
    "render_template",
    "render_prefix",
    "load_settings",
    "settings_from_env",
    "apply_settings",
    "configure_from_file",
]
