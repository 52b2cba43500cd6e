"""
Logging configuration for the hab-export CLI.

Called once by main.py.  Modules log through
``logger = logging.getLogger(__name__)``.

Console logs go to stderr through click, so they share click's stream
handling with the ``UI`` status lines (which go to stdout) and are
captured alongside them by ``CliRunner``.  Level precedence:

    --debug / --verbose / --quiet  >  HAB_EXPORT_LOG_LEVEL  >  WARNING

HAB_EXPORT_LOG_FILE adds a file handler, at HAB_EXPORT_LOG_FILE_LEVEL
or the console level.
"""

from __future__ import annotations

import logging

import click

# Console: bare message at WARNING and above, source logger below it
_FMT_CONSOLE = "%(message)s"
_FMT_CONSOLE_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_CONSOLE = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

_LEVEL_COLORS = {
    logging.DEBUG: "bright_black",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "red",
}


class ClickHandler(logging.Handler):
    """Writes records to stderr with ``click.secho``, coloured by level."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            click.secho(message, fg=_LEVEL_COLORS.get(record.levelno), err=True)
        except Exception:
            self.handleError(record)


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    env_level: str | None = None,
) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return env_level or "WARNING"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Install the console handler and, optionally, a file handler.

    Replaces any handlers already on the root logger, so calling it
    again (one CLI invocation after another in tests) does not stack
    output.
    """
    numeric_level = _parse_level(level)

    console = ClickHandler()
    console.setLevel(numeric_level)
    if numeric_level < logging.WARNING:
        console.setFormatter(logging.Formatter(_FMT_CONSOLE_VERBOSE, datefmt=_DATEFMT_CONSOLE))
    else:
        console.setFormatter(logging.Formatter(_FMT_CONSOLE))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    effective_level = numeric_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)


def _parse_level(level: str | None) -> int:
    """Level name to its numeric constant; unknown names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
