"""Shared types and data structures for Scratchpad."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

DEFAULT_FOLDER_ID = "default"
DEFAULT_FOLDER_NAME = "Notes"

__all__ = [
    "DEFAULT_FOLDER_ID",
    "DEFAULT_FOLDER_NAME",
    "DecodeResult",
    "DecodeStatus",
    "Folder",
    "LoadReport",
    "Note",
]


@dataclass(frozen=True)
class Note:
    """A single user-authored note, stored as <id>.md."""

    id: str
    title: str
    content: str
    folder: str = DEFAULT_FOLDER_ID
    parent_id: str | None = None
    created_at: int = 0
    updated_at: int = 0


@dataclass(frozen=True)
class Folder:
    """Folder record in the folder tree."""

    id: str
    name: str
    parent_id: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "parent_id": self.parent_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Folder":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            parent_id=data.get("parent_id"),
        )


class DecodeStatus(Enum):
    """Outcome of decoding a note file."""

    PARSED = "parsed"
    DEGRADED = "degraded"
    NOT_A_NOTE = "not_a_note"


@dataclass(frozen=True)
class DecodeResult:
    """Result of decoding note text.

    ``note`` is None only when ``status`` is NOT_A_NOTE. ``defaulted`` names
    the fields that were missing or malformed and fell back to defaults.
    """

    status: DecodeStatus
    note: Note | None = None
    defaulted: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.note is not None


@dataclass(frozen=True)
class LoadReport:
    """Everything a bulk note load saw, including what it skipped."""

    notes: list[Note] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    degraded: list[Path] = field(default_factory=list)
