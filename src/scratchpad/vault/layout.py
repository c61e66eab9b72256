"""Vault layout and path helpers.

The vault is a single data directory holding one ``notes/`` directory
(one ``<id>.md`` per note) and a ``folders.json`` document.
"""

from pathlib import Path

from scratchpad.core.config import SCRATCHPAD_DATA_DIR

NOTES_DIRNAME = "notes"
FOLDERS_FILENAME = "folders.json"
NOTE_SUFFIX = ".md"


def get_vault_root(root: Path | str | None = None) -> Path:
    """
    Get the vault root directory.

    Args:
        root: Optional override (defaults to SCRATCHPAD_DATA_DIR)

    Returns:
        Path to vault root
    """
    if root is None:
        return SCRATCHPAD_DATA_DIR
    return Path(root).expanduser()


def get_notes_path(root: Path | str | None = None) -> Path:
    """Get the notes directory path."""
    return get_vault_root(root) / NOTES_DIRNAME


def get_folders_path(root: Path | str | None = None) -> Path:
    """Get the folders document path."""
    return get_vault_root(root) / FOLDERS_FILENAME


def get_note_path(notes_dir: Path, note_id: str) -> Path:
    """Get the file path backing a note id."""
    return notes_dir / f"{note_id}{NOTE_SUFFIX}"


def ensure_vault_structure(root: Path | str | None = None) -> Path:
    """
    Ensure the vault directory structure exists.

    Safe to call multiple times.

    Returns:
        Path to vault root
    """
    vault_root = get_vault_root(root)
    vault_root.mkdir(parents=True, exist_ok=True)
    get_notes_path(vault_root).mkdir(parents=True, exist_ok=True)
    return vault_root


def get_note_count(root: Path | str | None = None) -> int:
    """
    Get the number of note files in the vault.

    Returns:
        Number of ``.md`` files, whether or not they decode
    """
    notes_dir = get_notes_path(root)
    if not notes_dir.exists():
        return 0
    return sum(1 for p in notes_dir.glob(f"*{NOTE_SUFFIX}") if p.is_file())
