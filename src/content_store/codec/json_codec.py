"""JSON encoding of content files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import JsonValue

from ..config import Settings
from ..errors import ContentNotFoundError, ContentStoreError, DecodeError, EncodeError
from ..models import StoredFile
from ..storage.files import ContentStore

logger = logging.getLogger(__name__)


def encode(value: JsonValue) -> bytes:
    """Serialise ``value`` to UTF-8 JSON bytes."""
    try:
        # lone surrogates only fail at the utf-8 step
        return json.dumps(value, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodeError(f"Value is not JSON serialisable: {exc}") from exc


def decode(data: bytes) -> JsonValue:
    """Parse JSON bytes; any top-level JSON value is accepted."""
    try:
        return json.loads(data)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise DecodeError(f"Malformed JSON content: {exc}") from exc


class JsonContent:
    """Save and load JSON values as content files."""

    def __init__(self, store: ContentStore) -> None:
        self.store = store

    @classmethod
    def from_settings(cls, settings: Settings) -> "JsonContent":
        return cls(ContentStore.from_settings(settings))

    def dump(self, value: JsonValue, file_name: str) -> StoredFile:
        return self.store.write_bytes(file_name, encode(value))

    def read(self, file_name: str) -> JsonValue:
        return decode(self.store.read_bytes(file_name))

    def save_json(self, value: JsonValue, file_name: str) -> Path | None:
        """Encode and save ``value``; nothing is written if encoding fails."""
        try:
            data = encode(value)
        except EncodeError as exc:
            logger.warning("Not saving %r: %s", file_name, exc)
            return None
        return self.store.save_content_file(file_name, data)

    def load_json(self, file_name: str) -> JsonValue | None:
        """Load a JSON content file, or ``None`` if it is missing, unreadable or malformed."""
        try:
            return self.read(file_name)
        except ContentNotFoundError:
            logger.info("JSON content file %r does not exist", file_name)
        except DecodeError as exc:
            logger.warning("JSON content file %r is corrupted: %s", file_name, exc)
        except ContentStoreError as exc:
            logger.warning("Loading JSON content file %r failed: %s", file_name, exc)
        return None
