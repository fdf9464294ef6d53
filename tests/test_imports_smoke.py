# tests/test_imports_smoke.py
# -----------------------------------------------------------------------------
# Smoke tests for imports and the public API contract of the package root.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

import prefixlog


def test_package_importable():
    assert prefixlog is not None
    assert prefixlog.__version__


def test_public_api_contract():
    for name in prefixlog.__all__:
        assert hasattr(prefixlog, name), f"prefixlog missing: {name}"


def test_package_logger_has_null_handler():
    handlers = logging.getLogger("prefixlog").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
