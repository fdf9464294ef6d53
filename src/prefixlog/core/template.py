from __future__ import annotations

"""
Prefix Template Renderer.

Renders templates made of literal text, '%<identifier>' tokens and the
'%%' escape. Unknown tokens are kept verbatim; rendering never raises.
"""

import re
from typing import Mapping, Optional

from prefixlog.domain.levels import LogLevel

# '%%' first so that '%%name' renders as '%name' rather than '%' + lookup
_TOKEN_RE = re.compile(r"%%|%[A-Za-z0-9_]+")

LOGGER_NAME_TOKEN = "%loggerName"
LOG_LEVEL_TOKEN = "%logLevel"
ESCAPE_TOKEN = "%%"


def render_template(template: str, substitutions: Optional[Mapping[str, str]] = None) -> str:
    """
    Substitute every token of 'template' found in 'substitutions'.

    Args:
        template: Template text.
        substitutions: Token text (including the leading '%') to value.

    Returns:
        str: The rendered text.
    """
    subs = substitutions or {}

    def _replace(match: re.Match) -> str:
        token = match.group(0)
        if token == ESCAPE_TOKEN:
            return "%"
        value = subs.get(token)
        return token if value is None else str(value)

    return _TOKEN_RE.sub(_replace, template)


def render_prefix(
        template: str,
        placeholders: Mapping[str, str],
        logger_name: str,
        level: LogLevel,
) -> str:
    """
    Render a logger prefix for one severity level.

    The reserved '%loggerName' and '%logLevel' tokens are always resolvable
    and take precedence over caller-supplied placeholders of the same name.

    Args:
        template: Prefix template.
        placeholders: User-defined substitutions.
        logger_name: Name of the logger being bound.
        level: Severity the prefix is rendered for.

    Returns:
        str: The rendered prefix.
    """
    substitutions = dict(placeholders)
    substitutions[LOGGER_NAME_TOKEN] = logger_name
    substitutions[LOG_LEVEL_TOKEN] = level.value.upper()
    return render_template(template, substitutions)
