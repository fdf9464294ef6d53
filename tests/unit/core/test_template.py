from __future__ import annotations

"""
Unit tests for the Prefix Template Renderer.

Verifies:
1. Escape handling ('%%').
2. Verbatim pass-through of unresolved tokens.
3. Precedence of the reserved name/level tokens.
"""

from prefixlog.core.template import render_prefix, render_template
from prefixlog.domain.levels import LogLevel


def test_escape_renders_single_percent() -> None:
    assert render_template("%%") == "%"
    assert render_template("100%% done") == "100% done"


def test_unknown_token_is_left_verbatim() -> None:
    assert render_template("%unknown") == "%unknown"
    assert render_template("[%a][%b]", {"%a": "x"}) == "[x][%b]"


def test_escape_is_consumed_before_identifier() -> None:
    """'%%name' is an escaped percent followed by literal text."""
    assert render_template("%%name", {"%name": "X"}) == "%name"


def test_lone_percent_and_punctuation_are_literal() -> None:
    assert render_template("50% - %") == "50% - %"
    assert render_template("%-x", {"%-x": "nope"}) == "%-x"


def test_token_stops_at_non_identifier_character() -> None:
    assert render_template("%app-%app", {"%app": "A"}) == "A-A"
    assert render_template("%app_id", {"%app": "A"}) == "%app_id"


def test_substitution_keys_include_percent() -> None:
    assert render_template("%custom", {"custom": "no"}) == "%custom"


def test_render_prefix_resolves_reserved_tokens() -> None:
    rendered = render_prefix("(%loggerName) %logLevel:", {}, "svc", LogLevel.INFO)
    assert rendered == "(svc) INFO:"


def test_reserved_tokens_win_over_placeholders() -> None:
    placeholders = {"%loggerName": "fake", "%logLevel": "fake", "%env": "prod"}
    rendered = render_prefix("%env/%loggerName/%logLevel", placeholders, "db", LogLevel.WARN)
    assert rendered == "prod/db/WARN"


def test_render_prefix_does_not_mutate_placeholders() -> None:
    placeholders = {"%env": "prod"}
    render_prefix("%env", placeholders, "db", LogLevel.ERROR)
    assert placeholders == {"%env": "prod"}


def test_full_template_mix() -> None:
    rendered = render_prefix(
        "[%%][%loggerName][%logLevel][%appName][%custom][%missing]",
        {"%appName": "root", "%custom": "override"},
        "svc",
        LogLevel.INFO,
    )
    assert rendered == "[%][svc][INFO][root][override][%missing]"
