"""JSON subtitle document encoding and decoding."""

from pathlib import Path

from pydantic import ValidationError

from .errors import ParseError, ReadError, WriteError
from .models import SubtitleDocument


def decode(data: bytes | str) -> SubtitleDocument:
    """Parse JSON subtitle content.

    Missing keys and nulls fall back to zero values; values of the wrong
    type are rejected.
    """
    try:
        return SubtitleDocument.model_validate_json(data)
    except ValidationError as e:
        raise ParseError(f"Invalid JSON subtitles: {e}") from e


def encode(document: SubtitleDocument) -> bytes:
    """Serialize a document using the schema's key names."""
    return document.model_dump_json(by_alias=True).encode("utf-8")


def read_json(path: str | Path) -> SubtitleDocument:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ReadError(f"Cannot read {path}: {e.strerror or e}") from e
    return decode(data)


def write_json(document: SubtitleDocument, path: str | Path) -> None:
    path = Path(path)
    try:
        path.write_bytes(encode(document))
    except OSError as e:
        raise WriteError(f"Cannot write {path}: {e.strerror or e}") from e
