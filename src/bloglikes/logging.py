"""Logging setup for the bloglikes CLI.

The library itself only creates module loggers; handlers are attached here,
once per CLI run:

- a Rich console handler on stderr whose level follows ``-v``/``-q``, with
  source paths and timestamps under ``--debug``;
- an optional plain-text log file that records every DEBUG line of the run.

stdout is never touched so query results stay machine-readable.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

CONSOLE_FORMAT = "%(message)s"
DEBUG_CONSOLE_FORMAT = "%(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d: %(message)s"


def console_level(verbose: int, quiet: int) -> int:
    """Return the console level: WARNING, one step per ``-v`` down and ``-q`` up."""
    level = logging.WARNING + 10 * (quiet - verbose)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def console_handler(level: int, debug: bool = False, color: bool = True) -> RichHandler:
    """Build the stderr handler; ``debug`` forces DEBUG and shows source paths."""
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        show_time=debug,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(
        logging.Formatter(DEBUG_CONSOLE_FORMAT if debug else CONSOLE_FORMAT)
    )
    return handler


def file_handler(path: Path) -> logging.FileHandler:
    """Build a handler that rewrites ``path`` with every record of this run."""
    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def configure_logging(
    *, level: int, debug: bool, color: bool, log_path: Path | None
) -> list[logging.Handler]:
    """Attach the console handler (and the file handler, if any) to the root logger.

    Returns:
        The handlers now attached, console first.
    """
    handlers: list[logging.Handler] = [console_handler(level, debug, color)]
    if log_path is not None:
        handlers.append(file_handler(log_path))
    # root captures everything; each handler applies its own level
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    return handlers
