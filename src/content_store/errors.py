"""Exception hierarchy for content storage."""

from __future__ import annotations

from pathlib import Path


class ContentStoreError(Exception):
    """Recoverable storage failure; the collapsed API turns these into ``None``."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidFileNameError(ContentStoreError):
    pass


class DirectoryCreationError(ContentStoreError):
    pass


class WriteError(ContentStoreError):
    pass


class ReadError(ContentStoreError):
    pass


class ContentNotFoundError(ReadError):
    pass


class EncodeError(ContentStoreError):
    pass


class DecodeError(ContentStoreError):
    pass


class ConfigurationError(Exception):
    """Broken environment or packaging; never swallowed by the store."""


class StorageRootError(ConfigurationError):
    pass


class MissingBundledResourceError(ConfigurationError):
    def __init__(self, name: str, extension: str, resource_dir: Path) -> None:
        super().__init__(f"Could not find resource {name}.{extension} in {resource_dir}")
        self.name = name
        self.extension = extension
        self.resource_dir = resource_dir
