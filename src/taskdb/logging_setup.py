"""Logging configuration for the t command."""

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Route all log records to stderr at the given level.

    Call this once, before the first log call. Existing root handlers are
    removed so repeated calls (tests, re-entry) do not duplicate output.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)
