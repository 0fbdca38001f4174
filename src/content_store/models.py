"""Data models for stored content."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class StoredFile(BaseModel):
    """A content file materialised on disk by a save."""

    name: str = Field(description="Caller-supplied logical file name.")
    path: Path = Field(description="Absolute location of the file.")
    size: int = Field(ge=0, description="Number of bytes written.")
