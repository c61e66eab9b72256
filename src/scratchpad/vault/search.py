"""Linear full-text search over notes."""

from collections.abc import Iterable

from scratchpad.core.types import Note


def matches(query: str, note: Note) -> bool:
    """Check whether a note's title or content contains the query, ignoring case."""
    needle = query.lower()
    return needle in note.title.lower() or needle in note.content.lower()


def search(query: str, notes: Iterable[Note]) -> list[Note]:
    """
    Filter notes by case-insensitive substring match on title or content.

    Args:
        query: Text to look for; empty matches every note
        notes: Notes to filter

    Returns:
        Matching notes in input order
    """
    return [note for note in notes if matches(query, note)]
