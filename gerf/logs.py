from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Union

from .errors import ResourceError

LOG_FILE_NAME = "gerf.log"
LOGGER_NAME = "gerf"

FILE_FORMAT = "[%(asctime)s] %(levelname)-7s [%(module)s:%(lineno)d] %(message)s"
CONSOLE_FORMAT = "%(levelname)s %(message)s"


def log_path(config_dir: Union[str, Path]) -> Path:
    return Path(config_dir) / LOG_FILE_NAME


def setup_logging(config_dir: Union[str, Path], level: Union[str, int] = "INFO") -> logging.Logger:
    """Log to ``<config_dir>/gerf.log`` (appending) and duplicate to stderr.

    Calling this again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    try:
        file_handler = logging.FileHandler(log_path(config_dir), mode="a", encoding="utf-8")
    except OSError as e:
        raise ResourceError(f"Unable to open log file in {config_dir}: {e}") from e
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)
    return logger


def show_log_file(config_dir: Union[str, Path]) -> str:
    path = log_path(config_dir)
    try:
        if not path.exists():
            return f"No log file found: {path}"
        with open(path, "r", encoding="utf-8") as f:
            contents = f.read()
    except OSError as e:
        raise ResourceError(f"Unable to read logs: {e}") from e
    return f"Log location: {path}\n{contents}"
