from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .errors import ExistingFileConflict, ResourceError

logger = logging.getLogger(__name__)


def check_destination(path: Union[str, Path], force: bool) -> Path:
    path = Path(path)
    if path.is_dir():
        raise ResourceError(f"'{path}' is a directory")
    if path.exists() and not force:
        raise ExistingFileConflict(
            f"The file '{path}' already exists!",
            hint="Use the [ -f ] or [ --force ] flag to override the existing file",
        )
    return path


def populate_file(path: Union[str, Path], content: bytes) -> int:
    """Write ``content`` to ``path`` in binary mode, replacing any existing file."""
    path = Path(path)
    try:
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            written = f.write(content)
    except OSError as e:
        raise ResourceError(f"Unable to write '{path}': {e}") from e
    logger.debug("Wrote %d bytes to %s", written, path)
    return written
