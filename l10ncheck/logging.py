"""Logging setup for l10ncheck.

Diagnostics always go to stderr (and optionally a log file) so that the
report written to stdout is identical with or without ``--verbose``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_ROOT = "l10ncheck"
_CONSOLE_FORMAT = "[l10ncheck] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the l10ncheck hierarchy."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(*, verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Attach a stderr handler, and a DEBUG-level file handler when ``log_file`` is set.

    Calling this again replaces the previous handlers.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_ROOT)
    logger.propagate = False
    _drop_handlers(logger)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    # The file sink records everything, independent of console verbosity.
    if log_file is not None:
        sink = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(console_level)

    return logger


__all__ = ["configure_logging", "get_logger"]
