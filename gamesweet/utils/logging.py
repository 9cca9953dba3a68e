"""Logging configuration for applications built on gamesweet.

The package disables its own loguru logger on import, so library callers see
no output. Scripts call setup_logging() to turn it on.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

# Search diagnostics are dense; keep the console line short
CONSOLE_FORMAT = "<level>{level: <7}</level> <cyan>{name}</cyan> | {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = "INFO", log_file: Optional[Union[str, Path]] = None) -> None:
    """Enable gamesweet's log output.

    Args:
        level: Minimum log level. DEBUG adds per-move root statistics, TRACE
            adds every UCB1 score computed during selection.
        log_file: Optional path of a file that receives the same records.
            It is overwritten on every run.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_path, level=level, format=FILE_FORMAT, mode="w")

    logger.enable("gamesweet")
