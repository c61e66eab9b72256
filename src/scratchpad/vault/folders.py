"""Folder store - the whole folder tree as one JSON document."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from strif import atomic_output_file

from scratchpad.core.types import DEFAULT_FOLDER_ID, DEFAULT_FOLDER_NAME, Folder
from scratchpad.vault.errors import FolderFormatError, StorageError

logger = logging.getLogger(__name__)


class FolderRecord(BaseModel):
    """On-disk shape of one folder entry."""

    model_config = ConfigDict(strict=True, extra="ignore")

    id: str
    name: str
    parent_id: str | None = None


_FOLDER_LIST = TypeAdapter(list[FolderRecord])


def default_folders() -> list[Folder]:
    """The collection a fresh vault starts with."""
    return [Folder(id=DEFAULT_FOLDER_ID, name=DEFAULT_FOLDER_NAME, parent_id=None)]


class FolderStore:
    """Persists the folder list as a single file, replaced on every save.

    There is no per-folder update and no concurrency check: the last
    ``save`` wins.
    """

    def __init__(self, folders_file: Path | str):
        """
        Initialize folder store.

        Args:
            folders_file: Path to the folders JSON document
        """
        self.folders_file = Path(folders_file)

    def save(self, folders: list[Folder]) -> None:
        """
        Replace the folders document with ``folders``.

        Raises:
            StorageError: If the document cannot be written
        """
        data = json.dumps(
            [folder.to_dict() for folder in folders], indent=2, ensure_ascii=False
        )
        path = self.folders_file
        try:
            with atomic_output_file(path, make_parents=True) as tmp:
                Path(tmp).write_text(data, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write folders {path}: {e}") from e
        logger.debug("Saved %d folders to %s", len(folders), path)

    def load(self) -> list[Folder]:
        """
        Load the folder list, seeding and saving the default on first use.

        Raises:
            FolderFormatError: If the document is not a valid folder list
            StorageError: If the document cannot be read or seeded
        """
        path = self.folders_file
        if not path.exists():
            folders = default_folders()
            logger.info("No folders file at %s, seeding default folder", path)
            self.save(folders)
            return folders

        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read folders {path}: {e}") from e

        try:
            records = _FOLDER_LIST.validate_json(raw)
        except ValidationError as e:
            logger.error("Invalid folders file %s: %s", path, e)
            raise FolderFormatError(f"Invalid folders file {path}: {e}") from e

        return [Folder.from_dict(r.model_dump()) for r in records]
