"""Saving and loading content files under the storage root."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..config import CONTENT_DIR, Settings
from ..errors import (
    ContentNotFoundError,
    ContentStoreError,
    InvalidFileNameError,
    ReadError,
    StorageRootError,
    WriteError,
)
from ..models import StoredFile
from .directories import ensure_directory
from .paths import is_within, resolve_content_file, resolve_path

logger = logging.getLogger(__name__)


class ContentStore:
    """Write and read byte payloads as files in ``storage_root/content_dir``.

    ``write_bytes``/``read_bytes`` raise :class:`ContentStoreError` subclasses;
    ``save_content_file``/``load_content_file`` report any such failure as
    ``None``.
    """

    def __init__(
        self,
        storage_root: Path,
        content_dir: str = CONTENT_DIR,
        *,
        allow_existing_file: bool = True,
        confine_file_names: bool = True,
    ) -> None:
        storage_root = Path(storage_root).expanduser()
        if not storage_root.is_absolute():
            raise StorageRootError(f"Storage root must be an absolute path, got {storage_root}")
        self.storage_root = storage_root
        self.content_dir = content_dir
        self.allow_existing_file = allow_existing_file
        self.confine_file_names = confine_file_names

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContentStore":
        return cls(
            settings.storage_root,
            settings.content_dir,
            allow_existing_file=settings.allow_existing_file,
            confine_file_names=settings.confine_file_names,
        )

    @property
    def content_path(self) -> Path:
        return self.storage_root / self.content_dir

    def local_file_path(self, file_name: str) -> Path:
        """Path a content file with this name is saved to and loaded from."""
        return resolve_content_file(self.storage_root, file_name, self.content_dir)

    # ------------------------------------------------------------ raising API
    def write_bytes(self, file_name: str, data: bytes) -> StoredFile:
        """Save ``data`` as a content file, replacing any previous file of that name."""
        return self.write_to_root(file_name, data, subdirectory=self.content_dir)

    def write_to_root(self, file_name: str, data: bytes, subdirectory: Optional[str] = None) -> StoredFile:
        """Save ``data`` under the storage root, optionally inside ``subdirectory``.

        The subdirectory is created on demand; the storage root itself is
        expected to exist already.
        """
        target = self._checked_path(file_name, subdirectory)
        if subdirectory:
            ensure_directory(
                resolve_path(self.storage_root, None, subdirectory),
                allow_existing_file=self.allow_existing_file,
            )

        try:
            size = target.write_bytes(data)
        except (OSError, ValueError) as exc:
            logger.error("Could not write %s: %s", target, exc)
            raise WriteError(f"Could not write {target}: {exc}", target) from exc

        logger.debug("Saved %d bytes to %s", size, target)
        return StoredFile(name=file_name, path=target, size=size)

    def read_bytes(self, file_name: str) -> bytes:
        """Return the full content of a saved file."""
        target = self._checked_path(file_name, self.content_dir)
        if not target.exists():
            raise ContentNotFoundError(f"No content file at {target}", target)
        try:
            return target.read_bytes()
        except (OSError, ValueError) as exc:
            raise ReadError(f"Could not read {target}: {exc}", target) from exc

    # ---------------------------------------------------------- collapsed API
    def save_content_file(self, file_name: str, data: bytes) -> Path | None:
        """Save a content file and return its path, or ``None`` if anything failed."""
        try:
            return self.write_bytes(file_name, data).path
        except ContentStoreError as exc:
            logger.warning("Saving content file %r failed: %s", file_name, exc)
            return None

    def load_content_file(self, file_name: str) -> bytes | None:
        """Load a content file, or ``None`` when it is missing or unreadable."""
        try:
            return self.read_bytes(file_name)
        except ContentNotFoundError:
            logger.info("Content file %r does not exist", file_name)
        except ContentStoreError as exc:
            logger.warning("Loading content file %r failed: %s", file_name, exc)
        return None

    # ----------------------------------------------------------------- private
    def _checked_path(self, file_name: str, subdirectory: Optional[str]) -> Path:
        target = resolve_path(self.storage_root, subdirectory, file_name)
        if self.confine_file_names:
            base = resolve_path(self.storage_root, None, subdirectory) if subdirectory else self.storage_root
            if "\x00" in file_name:
                raise InvalidFileNameError(f"Invalid file name {file_name!r}: embedded null byte", target)
            try:
                within = is_within(target, base)
            except ValueError as exc:
                raise InvalidFileNameError(f"Invalid file name {file_name!r}: {exc}", target) from exc
            if not within:
                raise InvalidFileNameError(
                    f"Invalid file name {file_name!r}; must reside under {base}.", target
                )
        return target
