from __future__ import annotations

from pathlib import Path

import pytest

from content_store.errors import DirectoryCreationError
from content_store.storage.directories import ensure_directory


def test_ensure_directory_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "content"

    ensure_directory(target)
    ensure_directory(target)

    assert target.is_dir()
    assert [p.name for p in (tmp_path / "a" / "b").iterdir()] == ["content"]


def test_existing_file_is_accepted_when_permissive(tmp_path: Path) -> None:
    target = tmp_path / "content"
    target.write_text("x", encoding="utf-8")

    ensure_directory(target, allow_existing_file=True)

    assert target.is_file()


def test_existing_file_is_rejected_when_strict(tmp_path: Path) -> None:
    target = tmp_path / "content"
    target.write_text("x", encoding="utf-8")

    with pytest.raises(DirectoryCreationError):
        ensure_directory(target, allow_existing_file=False)


def test_creation_failure_is_reported(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(DirectoryCreationError) as excinfo:
        ensure_directory(blocker / "content")

    assert excinfo.value.path == blocker / "content"
    assert isinstance(excinfo.value.__cause__, OSError)
