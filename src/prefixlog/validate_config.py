from __future__ import annotations

"""
Partial Configuration Validation.

Normalizes the partial configurations accepted by the registry so that
the resolver and the gate can operate without repetitive defensive
checks. Unknown keys are ignored; known keys with unusable values are
dropped with a warning (or rejected in strict mode).
"""

import logging
from typing import Any, Dict, List, Mapping, Tuple

from prefixlog.domain.config import CONFIG_FIELDS
from prefixlog.domain.levels import LogLevel, parse_level

logger = logging.getLogger(__name__)

_TRUE_STRINGS = ("true", "1", "yes", "y", "on")
_FALSE_STRINGS = ("false", "0", "no", "n", "off")


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def validate_partial(
        partial: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a partial logger configuration.

    - Never raises in non-strict mode.
    - Returns only the known fields whose values could be normalized.
    - Returns: (normalized_partial, warnings)

    strict=False:
      - converts what it can and records warnings.
      - drops what it cannot.

    strict=True:
      - raises TypeError/ValueError on the first bad value.

    Args:
        partial: Candidate mapping.
        strict: Whether to raise instead of dropping values.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized fields and warnings.
    """
    warnings: List[str] = []

    if partial is None:
        return {}, warnings

    if not isinstance(partial, Mapping):
        msg = f"Invalid partial config: expected a mapping, got {type(partial).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(msg + " Ignored.")
        logger.warning(msg)
        return {}, warnings

    clean: Dict[str, Any] = {}
    for key in CONFIG_FIELDS:
        if key not in partial:
            continue
        ok, value = _VALIDATORS[key](partial[key], warnings, strict)
        if ok:
            clean[key] = value

    return clean, warnings


# -----------------------------------------------------------------------------
# Field validators
# -----------------------------------------------------------------------------
def _reject(msg: str, warnings: List[str], strict: bool, exc: type = TypeError) -> Tuple[bool, Any]:
    if strict:
        raise exc(msg)
    warnings.append(msg + " Value dropped.")
    logger.warning(msg)
    return False, None


def _as_level(value: Any, warnings: List[str], strict: bool) -> Tuple[bool, Any]:
    level = parse_level(value)
    if level is not None:
        return True, level
    allowed = [lvl.value for lvl in LogLevel]
    return _reject(f"Field 'level' invalid: {value!r}. Allowed: {allowed}.", warnings, strict, ValueError)


def _as_bool(value: Any, warnings: List[str], strict: bool) -> Tuple[bool, Any]:
    if isinstance(value, bool):
        return True, value

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field 'prefix_enabled' converted from number {value} to bool.")
            return True, bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in _TRUE_STRINGS:
                warnings.append(f"Field 'prefix_enabled' converted from str '{value}' to bool True.")
                return True, True
            if s in _FALSE_STRINGS:
                warnings.append(f"Field 'prefix_enabled' converted from str '{value}' to bool False.")
                return True, False

    return _reject(
        f"Field 'prefix_enabled' invalid: expected bool, got {type(value).__name__}.",
        warnings,
        strict,
    )


def _as_str(value: Any, warnings: List[str], strict: bool) -> Tuple[bool, Any]:
    if isinstance(value, str):
        return True, value
    return _reject(
        f"Field 'prefix_format' invalid: expected str, got {type(value).__name__}.",
        warnings,
        strict,
    )


def _as_placeholders(value: Any, warnings: List[str], strict: bool) -> Tuple[bool, Any]:
    if not isinstance(value, Mapping):
        return _reject(
            f"Field 'placeholders' invalid: expected mapping, got {type(value).__name__}.",
            warnings,
            strict,
        )

    out: Dict[str, str] = {}
    for token, replacement in value.items():
        if not isinstance(token, str):
            msg = f"Field 'placeholders[{token!r}]' invalid: keys must be str."
            if strict:
                raise TypeError(msg)
            warnings.append(msg + " Entry dropped.")
            logger.warning(msg)
            continue
        out[token] = replacement if isinstance(replacement, str) else str(replacement)
    return True, out


_VALIDATORS = {
    "level": _as_level,
    "prefix_enabled": _as_bool,
    "prefix_format": _as_str,
    "placeholders": _as_placeholders,
}
