"""Vault module - flat-file persistence for notes and folders.

Notes live as individual Markdown files with a small frontmatter header,
editable outside the app. Folders live in a single JSON document.
"""

from scratchpad.vault.errors import FolderFormatError, NoteNotFoundError, StorageError
from scratchpad.vault.folders import FolderStore, default_folders
from scratchpad.vault.layout import (
    ensure_vault_structure,
    get_folders_path,
    get_notes_path,
    get_vault_root,
)
from scratchpad.vault.notes import NoteStore
from scratchpad.vault.search import search

__all__ = [
    "FolderFormatError",
    "FolderStore",
    "NoteNotFoundError",
    "NoteStore",
    "StorageError",
    "default_folders",
    "ensure_vault_structure",
    "get_folders_path",
    "get_notes_path",
    "get_vault_root",
    "search",
]
