"""Colored terminal logging through click."""

from __future__ import annotations

import logging

import click

_LEVEL_COLORS = {
    logging.DEBUG: "bright_black",
    logging.INFO: "cyan",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "bright_red",
}


class ClickLogHandler(logging.Handler):
    """Write log records to stderr, colored by level."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            color = _LEVEL_COLORS.get(record.levelno, "white")
            click.echo(click.style(msg, fg=color), err=True)
        except Exception:
            self.handleError(record)


def level_for(verbosity: int, quiet: bool = False) -> int:
    if quiet:
        return logging.ERROR
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbosity: int = 0, quiet: bool = False) -> logging.Logger:
    """Attach a single ClickLogHandler to the package logger."""
    logger = logging.getLogger("circular_scan")
    for handler in list(logger.handlers):
        if isinstance(handler, ClickLogHandler):
            logger.removeHandler(handler)

    handler = ClickLogHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level_for(verbosity, quiet))
    return logger
