from __future__ import annotations

"""
Settings Loading.

Reads logger settings from a JSON document and from environment
variables and applies them to a registry. Load failures fall back to
empty settings so a broken file never prevents logging from working.

Document layout:
    {
        "defaults": {"level": "debug", "prefix_format": "[%app] %logLevel:"},
        "loggers": {"db": {"level": "error"}}
    }
"""

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

from prefixlog.core.registry import LoggerRegistry, get_registry
from prefixlog.validate_config import validate_partial

logger = logging.getLogger(__name__)

ENV_LEVEL = "PREFIXLOG_LEVEL"
ENV_PREFIX_FORMAT = "PREFIXLOG_PREFIX_FORMAT"
ENV_PREFIX_ENABLED = "PREFIXLOG_PREFIX_ENABLED"

_ENV_FIELDS: Dict[str, str] = {
    ENV_LEVEL: "level",
    ENV_PREFIX_FORMAT: "prefix_format",
    ENV_PREFIX_ENABLED: "prefix_enabled",
}


# -----------------------------------------------------------------------------
# Loading
# -----------------------------------------------------------------------------
def load_settings(path: str) -> Dict[str, Any]:
    """
    Load a settings document from disk.

    Args:
        path: Path to a JSON file.

    Returns:
        Dict[str, Any]: The parsed document, or an empty dict if the file is
        missing, unreadable or not a JSON object.
    """
    if not os.path.exists(path):
        logger.debug(f"Settings file not found at '{path}'. Using defaults.")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load settings from '{path}': {e}. Using defaults.")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Corrupted settings file '{path}': expected a JSON object. Using defaults.")
        return {}

    logger.debug(f"Loaded settings from '{path}'.")
    return data


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Build a settings document from PREFIXLOG_* environment variables.

    Args:
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        Dict[str, Any]: {"defaults": {...}} or an empty dict.
    """
    env = os.environ if environ is None else environ
    defaults: Dict[str, Any] = {}

    for var, field_name in _ENV_FIELDS.items():
        raw = env.get(var)
        if raw is None or not raw.strip():
            continue
        defaults[field_name] = raw if field_name == "prefix_format" else raw.strip()

    return {"defaults": defaults} if defaults else {}


# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
def apply_settings(
        settings: Mapping[str, Any],
        registry: Optional[LoggerRegistry] = None,
        *,
        strict: bool = False,
) -> None:
    """
    Apply a settings document to a registry.

    Defaults are applied first, then each per-logger entry.

    Args:
        settings: Settings document.
        registry: Target registry. Defaults to the process-wide one.
        strict: Raise on malformed sections/values instead of skipping them.

    Raises:
        InvalidArgumentError: If a per-logger entry has an empty name.
    """
    reg = registry or get_registry()

    defaults, _ = validate_partial(settings.get("defaults"), strict=strict)
    if defaults:
        reg.set_default_config(defaults)

    loggers = settings.get("loggers") or {}
    if not isinstance(loggers, Mapping):
        msg = f"Settings section 'loggers' invalid: expected mapping, got {type(loggers).__name__}."
        if strict:
            raise TypeError(msg)
        logger.warning(msg + " Section ignored.")
        return

    for name, partial in loggers.items():
        clean, _ = validate_partial(partial, strict=strict)
        reg.set_logger_config(name, clean)


def configure_from_file(
        path: str,
        registry: Optional[LoggerRegistry] = None,
        environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """
    Load settings from 'path', overlay environment defaults and apply them.

    Environment values win over file values for each default field.

    Args:
        path: Path to the JSON settings file.
        registry: Target registry. Defaults to the process-wide one.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        Dict[str, Any]: The merged settings document that was applied.
    """
    settings = load_settings(path)

    file_defaults = settings.get("defaults")
    merged_defaults: Dict[str, Any] = dict(file_defaults) if isinstance(file_defaults, Mapping) else {}
    merged_defaults.update(settings_from_env(environ).get("defaults", {}))

    merged = dict(settings)
    if merged_defaults:
        merged["defaults"] = merged_defaults

    apply_settings(merged, registry)
    return merged
