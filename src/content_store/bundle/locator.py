"""Read-only JSON resources packaged with the application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import JsonValue

from ..codec.json_codec import decode
from ..config import PACKAGE_DATA_DIR, Settings, get_settings
from ..errors import DecodeError, MissingBundledResourceError

logger = logging.getLogger(__name__)


class BundleResourceLocator:
    """Find and load resources named ``<name>.<extension>`` in ``resource_dir``."""

    def __init__(
        self,
        resource_dir: Path = PACKAGE_DATA_DIR,
        extension: str = "json",
        *,
        abort_on_missing: bool = False,
    ) -> None:
        self.resource_dir = Path(resource_dir)
        self.extension = extension.lstrip(".")
        self.abort_on_missing = abort_on_missing

    @classmethod
    def from_settings(cls, settings: Settings) -> "BundleResourceLocator":
        return cls(
            settings.resource_dir,
            settings.resource_extension,
            abort_on_missing=settings.abort_on_missing_resource,
        )

    def locate(self, name: str) -> Path | None:
        candidate = self.resource_dir / f"{name}.{self.extension}"
        if candidate.is_file():
            return candidate
        return None

    def load(self, name: str) -> JsonValue | None:
        """Parse a bundled resource.

        An absent resource means the package was built without it and raises
        :class:`MissingBundledResourceError` (or exits the process when
        ``abort_on_missing`` is set). A resource that exists but cannot be
        read or parsed yields ``None``.
        """
        path = self.locate(name)
        if path is None:
            error = MissingBundledResourceError(name, self.extension, self.resource_dir)
            if self.abort_on_missing:
                logger.critical("%s", error)
                raise SystemExit(1) from error
            raise error

        try:
            data = path.read_bytes()
        except OSError as exc:
            logger.warning("Could not read bundled resource %s: %s", path, exc)
            return None

        try:
            return decode(data)
        except DecodeError as exc:
            logger.warning("Bundled resource %s is not valid JSON: %s", path, exc)
            return None


def load_bundled_resource(name: str, locator: Optional[BundleResourceLocator] = None) -> JsonValue | None:
    """Load a bundled JSON resource using the configured locator by default."""
    if locator is None:
        locator = BundleResourceLocator.from_settings(get_settings())
    return locator.load(name)
