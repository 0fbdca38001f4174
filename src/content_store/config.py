"""Configuration management for the content store."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import appdirs
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Subdirectory of the storage root that holds saved content files
CONTENT_DIR = "content"
DEFAULT_APP_NAME = "content-store"
PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Storage locations and policies, injected into the store at construction."""

    model_config = SettingsConfigDict(
        env_prefix="CONTENT_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default=DEFAULT_APP_NAME,
        description="Application name used to locate the per-user data directory.",
    )
    storage_root: Optional[Path] = Field(
        default=None,
        validate_default=True,
        description="Writable root directory; defaults to the user data dir for app_name.",
    )
    content_dir: str = Field(default=CONTENT_DIR)

    # Bundled resources
    resource_dir: Path = Field(
        default_factory=lambda: PACKAGE_DATA_DIR,
        description="Directory holding read-only JSON resources shipped with the package.",
    )
    resource_extension: str = Field(default="json")

    # Policies
    allow_existing_file: bool = Field(
        default=True,
        description="Treat a plain file occupying the content directory name as an existing directory.",
    )
    confine_file_names: bool = Field(
        default=True,
        description="Reject file names that resolve outside the content directory.",
    )
    abort_on_missing_resource: bool = Field(
        default=False,
        description="Exit the process instead of raising when a bundled resource is absent.",
    )

    @field_validator("storage_root", mode="before")
    @classmethod
    def _resolve_storage_root(cls, value: Any, info: ValidationInfo) -> Path:
        if value is None or value == "":
            app_name = info.data.get("app_name", DEFAULT_APP_NAME)
            value = appdirs.user_data_dir(app_name)
        candidate = Path(value).expanduser()
        if candidate.is_absolute():
            return candidate
        return Path.cwd() / candidate

    @field_validator("content_dir")
    @classmethod
    def _single_component(cls, value: str) -> str:
        value = value.strip()
        if not value or value in {".", ".."} or "/" in value or "\\" in value:
            raise ValueError("content_dir must be a single directory name.")
        return value

    @field_validator("resource_dir", mode="before")
    @classmethod
    def _expand_resource_dir(cls, value: Path | str) -> Path:
        return Path(value).expanduser()

    @field_validator("resource_extension")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        return value.lstrip(".")

    @property
    def content_path(self) -> Path:
        return self.storage_root / self.content_dir


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
