from __future__ import annotations

"""
Output Primitives.

Default write targets for logger handles. ConsoleOutput mimics a
terminal console with per-level write functions; LoggingOutput forwards
to a standard library logger so prefixed channels can share an existing
logging setup.
"""

import logging
import sys
import traceback
from typing import Any, Optional, TextIO

# Numeric level for 'trace' records on the stdlib bridge
TRACE_LEVEL_NUM = 5


def _join(args: tuple) -> str:
    return " ".join(str(a) for a in args)


class ConsoleOutput:
    """
    Console-like output primitive.

    log/debug/info go to stdout; warn/error/trace go to stderr. Streams
    default to the current sys.stdout/sys.stderr at write time.
    """

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> None:
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def _write(self, stream: TextIO, args: tuple) -> None:
        stream.write(_join(args) + "\n")
        stream.flush()

    def log(self, *args: Any) -> None:
        self._write(self.stdout, args)

    def debug(self, *args: Any) -> None:
        self._write(self.stdout, args)

    def info(self, *args: Any) -> None:
        self._write(self.stdout, args)

    def warn(self, *args: Any) -> None:
        self._write(self.stderr, args)

    def error(self, *args: Any) -> None:
        self._write(self.stderr, args)

    def trace(self, *args: Any) -> None:
        """Write 'Trace: <args>' followed by the caller's stack."""
        stream = self.stderr
        stream.write(_join(("Trace:",) + args) + "\n")
        # Drop this frame from the printed stack
        traceback.print_stack(sys._getframe(1), file=stream)
        stream.flush()


class LoggingOutput:
    """
    Output primitive backed by a standard library logger.

    Exposes no generic 'log' function: every level maps to a logger method.
    Records point at the code that called the logger handle.
    """

    def __init__(self, target: logging.Logger) -> None:
        self.target = target
        # Name the trace level only once a bridge exists, and never rename it
        if logging.getLevelName(TRACE_LEVEL_NUM) == f"Level {TRACE_LEVEL_NUM}":
            logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")

    def trace(self, *args: Any) -> None:
        self.target.log(TRACE_LEVEL_NUM, _join(args), stacklevel=2)

    def debug(self, *args: Any) -> None:
        self.target.debug(_join(args), stacklevel=2)

    def info(self, *args: Any) -> None:
        self.target.info(_join(args), stacklevel=2)

    def warn(self, *args: Any) -> None:
        self.target.warning(_join(args), stacklevel=2)

    def error(self, *args: Any) -> None:
        self.target.error(_join(args), stacklevel=2)
