"""Logging for the ``remote_outcome`` logger tree.

Adds a TRACE level below DEBUG for raw captured streams. Console records go
to stderr so stdout stays reserved for the printed outcome; with tracing on,
every record is also kept in ``<trace_dir>/trace-<operation>-<timestamp>.log``.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from remote_outcome.config import DebugConfig

TRACE = 5
TRACE_DIR = "debug"
LOGGER_NAME = "remote_outcome"

logging.addLevelName(TRACE, "TRACE")

_CONSOLE_FMT = "%(levelname)s %(name)s: %(message)s"
_FILE_FMT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s:%(funcName)s:%(lineno)d %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def console_level(debug: DebugConfig) -> int:
    """Threshold of the console handler for the given debug settings."""
    if debug.trace and debug.verbose:
        return TRACE
    if debug.enabled or debug.trace:
        return logging.DEBUG
    return logging.INFO


def trace_file_path(operation: str, trace_dir: str | None = None) -> Path:
    """Timestamped trace file for one classified ``operation``."""
    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    return Path(trace_dir or TRACE_DIR) / f"trace-{operation}-{timestamp}.log"


def setup_logging(
    debug: DebugConfig, *, operation: str = "run", trace_dir: str | None = None
) -> logging.Logger:
    """Configure the package logger and return it.

    Safe to call repeatedly: handlers from a previous call are closed and
    replaced.

    Args:
        debug: Debug settings, already merged with command-line overrides.
        operation: Name of the classified operation, used in the trace file name.
        trace_dir: Directory for trace files. Defaults to ``TRACE_DIR``.

    Returns:
        The ``remote_outcome`` logger.
    """
    root = logging.getLogger(LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(TRACE)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level(debug))
    console.setFormatter(logging.Formatter(_CONSOLE_FMT))
    root.addHandler(console)

    if debug.trace:
        path = trace_file_path(operation, trace_dir)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setLevel(TRACE)
        fh.setFormatter(logging.Formatter(_FILE_FMT, datefmt=_FILE_DATEFMT))
        root.addHandler(fh)
        root.debug("Tracing %s to %s", operation, path)

    return root
