"""Idempotent directory creation."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import DirectoryCreationError

logger = logging.getLogger(__name__)


def ensure_directory(path: Path, *, allow_existing_file: bool = True) -> None:
    """Make sure ``path`` exists, creating missing parents as needed.

    A plain file already occupying ``path`` counts as success when
    ``allow_existing_file`` is set; nothing is created in that case and the
    subsequent write into the directory will fail instead.
    """
    if path.is_dir():
        return

    if path.exists():
        if allow_existing_file:
            logger.warning("%s exists but is not a directory; leaving it in place", path)
            return
        raise DirectoryCreationError(f"A file already occupies {path}", path)

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Could not create directory %s: %s", path, exc)
        raise DirectoryCreationError(f"Could not create directory {path}: {exc}", path) from exc
    logger.debug("Created directory %s", path)
