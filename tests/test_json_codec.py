from __future__ import annotations

from pathlib import Path

import pytest

from content_store.codec.json_codec import JsonContent, decode, encode
from content_store.config import Settings
from content_store.errors import DecodeError, EncodeError
from content_store.storage.files import ContentStore


@pytest.fixture
def content(tmp_path: Path) -> JsonContent:
    return JsonContent(ContentStore(tmp_path))


def test_json_round_trip(content: JsonContent) -> None:
    value = {
        "name": "Pallet",
        "sizes": [1, 2.5, -3],
        "active": True,
        "notes": None,
        "nested": {"label": "café"},
    }

    path = content.save_json(value, "pallet.json")

    assert path is not None
    assert content.load_json("pallet.json") == value


def test_scalar_fragments_round_trip(content: JsonContent) -> None:
    content.save_json("just a string", "fragment")
    assert content.load_json("fragment") == "just a string"


def test_malformed_content_returns_none(content: JsonContent) -> None:
    target = content.store.local_file_path("broken.json")
    target.parent.mkdir(parents=True)
    target.write_bytes(b"{not json")

    assert content.load_json("broken.json") is None
    with pytest.raises(DecodeError):
        content.read("broken.json")


def test_load_missing_json_returns_none(content: JsonContent) -> None:
    assert content.load_json("missing.json") is None


def test_unencodable_value_writes_nothing(content: JsonContent) -> None:
    cyclic: list = []
    cyclic.append(cyclic)

    assert content.save_json(cyclic, "cyclic.json") is None
    assert content.save_json({"when": object()}, "obj.json") is None
    assert content.save_json(float("nan"), "nan.json") is None
    assert content.save_json({"k": "\ud800"}, "surrogate.json") is None
    assert not content.store.content_path.exists()


def test_unreadable_json_file_returns_none(content: JsonContent) -> None:
    content.store.local_file_path("folder.json").mkdir(parents=True)

    assert content.load_json("folder.json") is None


def test_encode_and_decode_errors() -> None:
    assert decode(encode({"a": [1, "ü"]})) == {"a": [1, "ü"]}
    with pytest.raises(EncodeError):
        encode({1, 2})
    with pytest.raises(EncodeError):
        encode(["\udfff"])
    with pytest.raises(DecodeError):
        decode(b"\x80abc")


def test_from_settings(tmp_path: Path) -> None:
    settings = Settings(storage_root=tmp_path, content_dir="cache")
    content = JsonContent.from_settings(settings)

    stored = content.dump({"k": 1}, "k.json")

    assert stored.path == tmp_path / "cache" / "k.json"
    assert content.read("k.json") == {"k": 1}
