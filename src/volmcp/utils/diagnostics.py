"""Diagnostic output routing for the stdio server.

stdout carries protocol messages only. While the server runs, log records
go to stderr and anything that prints to ``sys.stdout`` is redirected to
stderr as well.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from collections.abc import Iterator

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@contextlib.contextmanager
def stderr_diagnostics(level: str = "INFO") -> Iterator[None]:
    """Send logging and stray stdout writes to stderr for the duration of the block."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    previous_level = root.level
    root.addHandler(handler)
    root.setLevel(level)
    try:
        with contextlib.redirect_stdout(sys.stderr):
            yield
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
