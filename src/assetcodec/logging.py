"""Logging utilities for assetcodec.

Codec modules log through the stdlib ``assetcodec`` logger. The CLI calls
``configure_logging`` once, which forwards records to the active reporter.
"""

from __future__ import annotations

import logging

from .reporting import get_reporter

_LOGGER_NAME = "assetcodec"

__all__ = [
    "get_logger",
    "configure_logging",
]


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


class _ReporterHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            rep = get_reporter()
            msg = self.format(record)
            lvl = record.levelno
            if lvl >= logging.ERROR:
                rep.error(msg)
            elif lvl >= logging.WARNING:
                rep.warning(msg)
            elif lvl >= logging.INFO:
                rep.status(msg)
            else:
                rep.verbose(msg)
        except Exception:
            self.handleError(record)


def configure_logging(verbosity: int = 0) -> None:
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbosity >= 1 else logging.INFO)

    for h in list(logger.handlers):
        if isinstance(h, _ReporterHandler):
            logger.removeHandler(h)

    handler = _ReporterHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
