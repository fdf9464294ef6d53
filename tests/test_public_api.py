from __future__ import annotations

"""
End-to-end scenarios through the module-level API.

Each test runs against a fresh process-wide registry wired to a
recording output primitive (see conftest.py).
"""

from typing import Any

import pytest

import prefixlog
from prefixlog import InvalidArgumentError, LogLevel

LEVELS = ["trace", "debug", "info", "warn", "error", "silent"]
RANK = {"trace": 10, "debug": 20, "info": 30, "warn": 40, "error": 50, "silent": 100}


def test_default_prefix_scenario(output: Any) -> None:
    prefixlog.get_logger("svc").info("x")

    assert output.calls == [("info", ("(svc) INFO:", "x"))]


def test_placeholder_override_scenario(output: Any) -> None:
    prefixlog.set_default_config({
        "prefix_format": "[%%][%loggerName][%logLevel][%custom]",
        "placeholders": {"%custom": "A"},
    })
    prefixlog.set_logger_config("svc", {"placeholders": {"%custom": "B"}})

    prefixlog.get_logger("svc").info("m")
    prefixlog.get_logger("other").info("m")

    assert output.calls == [
        ("info", ("[%][svc][INFO][B]", "m")),
        ("info", ("[%][other][INFO][A]", "m")),
    ]


def test_missing_trace_falls_back_to_log(output_factory: Any) -> None:
    fallback = output_factory(missing=("trace",))
    prefixlog.set_output(fallback)

    prefixlog.set_log_level("trace")
    prefixlog.get_logger("x").trace("m")

    assert fallback.calls == [("log", ("(x) TRACE:", "m"))]


def test_no_output_methods_is_silent(output_factory: Any) -> None:
    empty = output_factory(missing=output_factory.METHODS)
    prefixlog.set_output(empty)

    captured: list = []
    log = prefixlog.get_logger("silent")
    log.error("no-op", captured)

    assert captured == []
    assert empty.calls == []


@pytest.mark.parametrize("base", LEVELS)
def test_level_matrix(base: str, output: Any) -> None:
    prefixlog.set_log_level(base)
    log = prefixlog.get_logger(f"LogLevel-{base}")

    for severity in LEVELS[:-1]:
        getattr(log, severity)(severity[0])

    expected = [
        (severity, (f"(LogLevel-{base}) {severity.upper()}:", severity[0]))
        for severity in LEVELS[:-1]
        if RANK[base] <= RANK[severity]
    ]
    assert output.calls == expected


def test_error_level_blocks_warn(output: Any) -> None:
    prefixlog.set_log_level(LogLevel.ERROR)
    log = prefixlog.get_logger("errors-only")

    log.warn("skip")
    log.error("recorded")

    assert output.calls == [("error", ("(errors-only) ERROR:", "recorded"))]


def test_prefix_disabled_passes_bare_arguments(output: Any) -> None:
    log = prefixlog.get_logger("api")

    prefixlog.set_default_config(prefix_enabled=False)
    log.info("no prefix")

    assert output.calls == [("info", ("no prefix",))]


def test_prefix_reenable_reproduces_prefix(output: Any) -> None:
    prefixlog.set_default_config(prefix_format="<%loggerName:%logLevel>")
    log = prefixlog.get_logger("rt")
    log.warn("a")

    prefixlog.set_logger_config("rt", prefix_enabled=False)
    log.warn("b")
    prefixlog.set_logger_config("rt", prefix_enabled=True)
    log.warn("c")

    assert output.calls_for("warn") == [("<rt:WARN>", "a"), ("b",), ("<rt:WARN>", "c")]


def test_handles_are_identity_stable_across_reconfiguration() -> None:
    first = prefixlog.get_logger("core")
    prefixlog.set_log_level("debug")
    prefixlog.set_logger_level("core", "error")

    assert prefixlog.get_logger(" core ") is first


def test_invalid_names_raise() -> None:
    with pytest.raises(InvalidArgumentError, match="logger name must be a non-empty string"):
        prefixlog.get_logger("")
    with pytest.raises(InvalidArgumentError, match="logger name must be a non-empty string"):
        prefixlog.set_logger_config("", {"level": "error"})
    with pytest.raises(InvalidArgumentError):
        prefixlog.set_logger_level("   ", "error")


def test_library_and_runtime_defaults_accessors() -> None:
    library = prefixlog.get_library_defaults()
    defaults = prefixlog.get_default_config()

    assert library.to_dict() == {
        "level": "info",
        "prefix_enabled": True,
        "prefix_format": "(%loggerName) %logLevel:",
        "placeholders": {},
    }
    assert defaults == library
    assert defaults is not library
    assert dict(prefixlog.get_per_logger_config()) == {}


def test_output_exceptions_propagate(output_factory: Any) -> None:
    class Exploding:
        def info(self, *args: Any) -> None:
            raise RuntimeError("sink down")

    prefixlog.set_output(Exploding())

    with pytest.raises(RuntimeError, match="sink down"):
        prefixlog.get_logger("boom").info("m")


def test_get_output_returns_installed_primitive(output: Any) -> None:
    assert prefixlog.get_output() is output
