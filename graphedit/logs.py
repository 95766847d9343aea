"""Logging configuration."""

import logging
import sys
from logging import Formatter, LogRecord, StreamHandler
from typing import NoReturn, Optional, TextIO

# ANSI color codes for level names.
COLORS = {
    logging.FATAL: 31,
    logging.ERROR: 31,
    logging.WARNING: 33,
    logging.INFO: 32,
    logging.DEBUG: 35,
}


class LevelFormatter(Formatter):

    """Prefixes messages with the level name, bold and colored if enabled."""

    def __init__(self, use_color: bool):
        super().__init__("%(message)s")
        self.use_color = use_color

    def format(self, record: LogRecord) -> str:
        level = f"{record.levelname}:"
        code = COLORS.get(record.levelno)
        if self.use_color and code:
            level = f"\x1b[{code};1m{level}\x1b[0m"
        return f"{level} {super().format(record)}"


class ExitStreamHandler(StreamHandler):

    """Stream handler that exits with status 1 after logs at exit_level or above.

    With --keep-going, exit_level is FATAL so that only fatal() exits.
    """

    def __init__(self, stream: TextIO, exit_level: int):
        super().__init__(stream)
        self.exit_level = exit_level

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def setup_logging(
    stream: TextIO, log_level: int, exit_level: int, color: Optional[bool] = None
) -> ExitStreamHandler:
    """Send root logger output to stream.

    Uses color when stream is a TTY, unless color says otherwise.
    """
    assert log_level <= exit_level <= logging.FATAL
    if color is None:
        color = stream.isatty()
    handler = ExitStreamHandler(stream, exit_level)
    handler.setFormatter(LevelFormatter(use_color=color))
    logger = logging.getLogger()
    logger.setLevel(log_level)
    logger.addHandler(handler)
    logging.addLevelName(logging.FATAL, "FATAL")
    return handler


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """Log at FATAL level, which always exits once logging is set up."""
    logging.fatal(msg, *args, **kwargs)
    assert False  # convince mypy it will not return
