"""Error types raised below the CLI and turned into exit codes by ``cli.main``."""

from __future__ import annotations

import logging
from typing import Optional


class GerfError(Exception):
    exit_code: int = 1
    level: int = logging.WARNING

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class InputError(GerfError):
    """Size or flags given on the command line could not be used."""

    exit_code = 1


class PolicyRefusal(GerfError):
    """Size is over the hard cap, or the user declined to go over the soft threshold."""

    exit_code = 0


class ExistingFileConflict(GerfError):
    exit_code = 0


class ResourceError(GerfError):
    """Config directory, log file or destination could not be used."""

    exit_code = 1
    level = logging.ERROR


class ConfigError(ResourceError):
    pass
