"""Notebook - the operation surface over the note and folder stores.

Each method is one self-contained operation as called by a frontend:
there is no session, transaction or cache. Every load goes to disk.
"""

import logging
from pathlib import Path
from threading import Lock

from scratchpad.core.types import Folder, LoadReport, Note
from scratchpad.vault.folders import FolderStore
from scratchpad.vault.layout import (
    ensure_vault_structure,
    get_folders_path,
    get_note_count,
    get_notes_path,
    get_vault_root,
)
from scratchpad.vault.notes import NoteStore
from scratchpad.vault.search import search

logger = logging.getLogger(__name__)


class Notebook:
    """Notes and folders stored under one vault root."""

    def __init__(self, root: Path | str | None = None):
        """
        Initialize notebook.

        Args:
            root: Vault root directory (defaults to SCRATCHPAD_DATA_DIR)
        """
        self.root = get_vault_root(root)
        self.notes = NoteStore(get_notes_path(self.root))
        self.folders = FolderStore(get_folders_path(self.root))

    def save_note(self, note: Note) -> None:
        """Create or overwrite a note."""
        self.notes.save(note)

    def load_notes(self) -> list[Note]:
        """Load every readable note; malformed files are skipped."""
        return self.notes.load_all()

    def get_note(self, note_id: str) -> Note:
        """Load one note by id."""
        return self.notes.get(note_id)

    def delete_note(self, note_id: str) -> None:
        """Delete a note. Raises NoteNotFoundError if it does not exist."""
        self.notes.delete(note_id)

    def search_notes(self, query: str) -> list[Note]:
        """Search all notes by title or content, ignoring case."""
        return search(query, self.notes.load_all())

    def save_folders(self, folders: list[Folder]) -> None:
        """Replace the whole folder list."""
        self.folders.save(folders)

    def load_folders(self) -> list[Folder]:
        """Load the folder list, seeding the default folder on first use."""
        return self.folders.load()

    def scan_notes(self) -> LoadReport:
        """Load notes and report skipped or degraded files."""
        return self.notes.scan()

    def ensure_structure(self) -> None:
        """Create the vault directories if missing."""
        ensure_vault_structure(self.root)

    def health_check(self) -> dict[str, tuple[bool, str]]:
        """
        Check that the vault directories are usable.

        Returns:
            Dict mapping component name to (healthy, message)
        """
        notes_dir = self.notes.notes_dir
        if notes_dir.is_dir():
            notes_status = (True, f"{get_note_count(self.root)} note files")
        else:
            notes_status = (False, f"missing directory {notes_dir}")

        folders_file = self.folders.folders_file
        if folders_file.exists():
            folders_status = (True, str(folders_file))
        else:
            folders_status = (True, "not created yet")

        return {"notes": notes_status, "folders": folders_status}

    def __repr__(self) -> str:
        return f"Notebook({self.root})"


_notebook: Notebook | None = None
_notebook_lock = Lock()


def get_notebook() -> Notebook:
    """Get or create the default notebook instance."""
    global _notebook
    if _notebook is None:
        with _notebook_lock:
            if _notebook is None:
                _notebook = Notebook()
                _notebook.ensure_structure()
                logger.info("Using vault at %s", _notebook.root)
    return _notebook


def set_notebook(notebook: Notebook | None) -> None:
    """Set the default notebook instance (for testing)."""
    global _notebook
    _notebook = notebook
