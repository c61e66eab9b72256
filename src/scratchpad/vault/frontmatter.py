"""Frontmatter encoding and decoding for note files.

A note file is a fixed key-value header between ``---`` delimiter lines,
a blank line, then the note body verbatim::

    ---
    id: 3f2a
    title: Groceries
    folder: default
    parent_id: null
    created_at: 1700000000000
    updated_at: 1700000000000
    ---

    Milk, eggs

Nothing is escaped. Decoding is tolerant: missing or malformed header values
fall back to per-field defaults instead of failing, so a hand-edited file
still loads as a best-effort note.
"""

import re
from collections.abc import Callable
from typing import Any

from scratchpad.core.types import (
    DEFAULT_FOLDER_ID,
    DecodeResult,
    DecodeStatus,
    Note,
)

DELIMITER = "---"
NULL_TOKEN = "null"

# Header fields in on-disk order
FIELD_ORDER = ("id", "title", "folder", "parent_id", "created_at", "updated_at")

_OPEN = f"{DELIMITER}\n"
_CLOSE = f"{DELIMITER}\n\n"
_KEY_SEPARATOR = ": "
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def encode(note: Note) -> str:
    """
    Serialize a note to its on-disk text.

    Args:
        note: Note to serialize

    Returns:
        Header block followed by the raw content
    """
    lines = []
    for name in FIELD_ORDER:
        value = getattr(note, name)
        lines.append(f"{name}{_KEY_SEPARATOR}{NULL_TOKEN if value is None else value}\n")
    return _OPEN + "".join(lines) + _CLOSE + note.content


def split_document(text: str) -> tuple[str, str] | None:
    """Split text into (header, body) on the first closing delimiter."""
    parts = text.split(_CLOSE, 1)
    if len(parts) != 2:
        return None
    header, body = parts
    while header.startswith(_OPEN):
        header = header[len(_OPEN) :]
    return header, body


def parse_header(header: str) -> dict[str, str]:
    """
    Parse header lines into a mapping of key to raw value.

    Each line is split on the first ``": "`` so values may contain colons.
    Lines without a separator are ignored; a repeated key keeps its last value.
    """
    fields: dict[str, str] = {}
    for line in header.split("\n"):
        line = line.removesuffix("\r")
        key, sep, value = line.partition(_KEY_SEPARATOR)
        if sep:
            fields[key] = value
    return fields


def _parse_text(raw: str) -> str:
    return raw


def _parse_parent(raw: str) -> str | None:
    return None if raw == NULL_TOKEN else raw


def _parse_timestamp(raw: str) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f"not an integer timestamp: {raw!r}")
    value = int(raw)
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"timestamp out of range: {raw!r}")
    return value


# field -> (parser, default). A parser raising ValueError means "use default".
FIELD_POLICY: dict[str, tuple[Callable[[str], Any], Any]] = {
    "id": (_parse_text, ""),
    "title": (_parse_text, ""),
    "folder": (_parse_text, DEFAULT_FOLDER_ID),
    "parent_id": (_parse_parent, None),
    "created_at": (_parse_timestamp, 0),
    "updated_at": (_parse_timestamp, 0),
}


def decode(text: str) -> DecodeResult:
    """
    Decode note text, reporting which fields needed defaults.

    Args:
        text: Full file contents

    Returns:
        DecodeResult with status PARSED, DEGRADED or NOT_A_NOTE
    """
    split = split_document(text)
    if split is None:
        return DecodeResult(status=DecodeStatus.NOT_A_NOTE)

    header, body = split
    raw_fields = parse_header(header)

    values: dict[str, Any] = {}
    defaulted: list[str] = []
    for name in FIELD_ORDER:
        parser, default = FIELD_POLICY[name]
        if name not in raw_fields:
            values[name] = default
            defaulted.append(name)
            continue
        try:
            values[name] = parser(raw_fields[name])
        except ValueError:
            values[name] = default
            defaulted.append(name)

    note = Note(content=body, **values)
    status = DecodeStatus.DEGRADED if defaulted else DecodeStatus.PARSED
    return DecodeResult(status=status, note=note, defaulted=tuple(defaulted))


def decode_note(text: str) -> Note | None:
    """Decode note text, returning None when it is not a note."""
    return decode(text).note
