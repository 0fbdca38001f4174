"""Path composition for files under the storage root."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..config import CONTENT_DIR


def resolve_path(root: Path, subdirectory: Optional[str], file_name: str) -> Path:
    """Compose ``root/subdirectory/file_name`` without touching the file system.

    ``subdirectory`` may be ``None``, in which case the file sits directly
    under ``root``. The file name is not validated here.
    """
    if subdirectory:
        return root / subdirectory / file_name
    return root / file_name


def resolve_content_file(root: Path, file_name: str, content_dir: str = CONTENT_DIR) -> Path:
    """Location of a content file; used for both saving and loading."""
    return resolve_path(root, content_dir, file_name)


def is_within(path: Path, base: Path) -> bool:
    """Whether ``path`` stays strictly inside ``base`` once ``..`` and links are resolved."""
    candidate = path.resolve()
    base = base.resolve()
    return candidate != base and candidate.is_relative_to(base)
