"""
Logging Configuration

Central logging setup for the satellite console. Log records go to stderr so
they never interleave with the prompt/status protocol on stdout, and
timestamps are rendered in a configurable display timezone.
"""

import logging
import sys
from datetime import datetime, timezone as dt_timezone
from pathlib import Path
from typing import Optional, TextIO, Union
from zoneinfo import ZoneInfo

ROOT_LOGGER_NAME = "satellite_console"

DETAILED_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
SIMPLE_FORMAT = "[%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


class TimezoneFormatter(logging.Formatter):
    """Formatter that renders asctime in a fixed timezone."""

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        tz_name: Optional[str] = None,
    ):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.tz = ZoneInfo(tz_name) if tz_name else dt_timezone.utc

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=self.tz)
        return stamp.strftime(datefmt or DATE_FORMAT)


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    simple_format: bool = False,
    timezone: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Minimum level for the stderr handler
        log_file: Optional path receiving every record at DEBUG and above
        simple_format: Use "[LEVEL] message" lines on stderr
        timezone: IANA timezone name for timestamps (UTC when None)
        stream: Stream for console records (defaults to sys.stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        TimezoneFormatter(SIMPLE_FORMAT if simple_format else DETAILED_FORMAT, tz_name=timezone)
    )
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(TimezoneFormatter(DETAILED_FORMAT, tz_name=timezone))
        logger.addHandler(file_handler)

    return logger
