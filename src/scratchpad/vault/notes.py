"""Note store - one markdown file per note in a flat directory."""

import logging
from pathlib import Path

from scratchpad.core.types import DecodeStatus, LoadReport, Note
from scratchpad.vault import frontmatter
from scratchpad.vault.errors import NoteNotFoundError, StorageError
from scratchpad.vault.layout import NOTE_SUFFIX, get_note_path

logger = logging.getLogger(__name__)


class NoteStore:
    """Reads and writes notes as ``<id>.md`` files.

    Every call goes to disk; nothing is cached between calls.
    """

    def __init__(self, notes_dir: Path | str):
        """
        Initialize note store.

        Args:
            notes_dir: Directory holding the note files
        """
        self.notes_dir = Path(notes_dir)

    def path_for(self, note_id: str) -> Path:
        """Get the file path for a note id."""
        return get_note_path(self.notes_dir, note_id)

    def save(self, note: Note) -> Path:
        """
        Write a note, replacing any existing file with the same id.

        Args:
            note: Note to persist

        Returns:
            Path of the written file

        Raises:
            StorageError: If the directory or file cannot be written
        """
        path = self.path_for(note.id)
        try:
            self.notes_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(frontmatter.encode(note))
        except OSError as e:
            raise StorageError(f"Failed to write note {path}: {e}") from e
        logger.debug("Saved note %s to %s", note.id, path)
        return path

    def get(self, note_id: str) -> Note:
        """
        Read a single note by id.

        Raises:
            NoteNotFoundError: If the file is missing or is not a note
            StorageError: If the file exists but cannot be read
        """
        path = self.path_for(note_id)
        try:
            text = _read_text(path)
        except FileNotFoundError as e:
            raise NoteNotFoundError(f"Note not found: {note_id}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read note {path}: {e}") from e

        note = frontmatter.decode_note(text)
        if note is None:
            raise NoteNotFoundError(f"File {path} is not a note")
        return note

    def scan(self) -> LoadReport:
        """
        Decode every note file, recording what was skipped or degraded.

        Returns:
            LoadReport; empty if the directory cannot be listed
        """
        report = LoadReport()
        try:
            entries = list(self.notes_dir.iterdir())
        except OSError as e:
            logger.warning("Cannot list notes directory %s: %s", self.notes_dir, e)
            return report

        for path in entries:
            if path.suffix != NOTE_SUFFIX:
                continue
            try:
                text = _read_text(path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Skipping unreadable note file %s: %s", path, e)
                report.skipped.append(path)
                continue

            result = frontmatter.decode(text)
            if not result.ok:
                logger.warning("Skipping %s: no frontmatter header", path)
                report.skipped.append(path)
                continue
            if result.status is DecodeStatus.DEGRADED:
                logger.debug(
                    "Note %s loaded with defaults for: %s",
                    path,
                    ", ".join(result.defaulted),
                )
                report.degraded.append(path)
            report.notes.append(result.note)

        return report

    def load_all(self) -> list[Note]:
        """
        Load every note that decodes, skipping the rest.

        Order follows directory enumeration and is not stable.
        """
        return self.scan().notes

    def delete(self, note_id: str) -> None:
        """
        Remove a note file.

        Raises:
            NoteNotFoundError: If no file exists for the id
            StorageError: If the file cannot be removed
        """
        path = self.path_for(note_id)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise NoteNotFoundError(f"Note not found: {note_id}") from e
        except OSError as e:
            raise StorageError(f"Failed to delete note {path}: {e}") from e
        logger.debug("Deleted note %s", note_id)


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF content byte-exact
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()
