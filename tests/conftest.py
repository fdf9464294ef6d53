from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A recording output primitive that captures forwarded calls.
3. A fresh process-wide registry for every test.
"""

import os
import sys
from typing import Any, List, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from prefixlog.core.registry import LoggerRegistry, reset_registry  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class RecordingOutput:
    """
    Output primitive that records every call as (method, args).

    Methods listed in 'missing' are not exposed, to exercise fallbacks.
    """

    METHODS = ("trace", "debug", "info", "warn", "error", "log")

    def __init__(self, missing: Tuple[str, ...] = ()) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        for method in self.METHODS:
            if method not in missing:
                setattr(self, method, self._recorder(method))

    def _recorder(self, method: str):
        def _record(*args: Any) -> None:
            self.calls.append((method, args))
        return _record

    def calls_for(self, method: str) -> List[Tuple[Any, ...]]:
        return [args for name, args in self.calls if name == method]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def output() -> RecordingOutput:
    """Return a recording output primitive with every method available."""
    return RecordingOutput()


@pytest.fixture(autouse=True)
def registry(output: RecordingOutput) -> LoggerRegistry:
    """
    Install a fresh process-wide registry wired to the recording output.

    Returns:
        LoggerRegistry: The registry used by the module-level API.
    """
    return reset_registry(output=output)


@pytest.fixture
def output_factory():
    """Return the RecordingOutput class so tests can drop specific methods."""
    return RecordingOutput
