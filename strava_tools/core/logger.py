"""Loguru sinks for strava-tools.

Tool results are printed on stdout, so diagnostics only ever go to stderr
and, when configured, a log file.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{file.name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {file.name}:{line} - {message}"


def setup_logger(level: str = "INFO", log_file: str | Path | None = None) -> None:
    """Replace loguru's default sink with a stderr sink and an optional file sink.

    The file sink rotates at 10 MB and keeps a week of history.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation="10 MB",
            retention="7 days",
            encoding="utf-8",
        )
        logger.debug(f"Writing logs to {log_path}")
