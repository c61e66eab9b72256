"""Request and response models for the REST API."""

from pydantic import BaseModel, Field

from scratchpad.core.types import DEFAULT_FOLDER_ID, Folder, Note


class NoteModel(BaseModel):
    """A note as sent over the wire."""

    id: str = Field(min_length=1, description="Caller-generated note id")
    title: str
    content: str
    folder: str = DEFAULT_FOLDER_ID
    parent_id: str | None = None
    created_at: int = 0
    updated_at: int = 0

    @classmethod
    def from_note(cls, note: Note) -> "NoteModel":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            folder=note.folder,
            parent_id=note.parent_id,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )

    def to_note(self) -> Note:
        return Note(
            id=self.id,
            title=self.title,
            content=self.content,
            folder=self.folder,
            parent_id=self.parent_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class FolderModel(BaseModel):
    """A folder as sent over the wire."""

    id: str
    name: str
    parent_id: str | None = None

    @classmethod
    def from_folder(cls, folder: Folder) -> "FolderModel":
        return cls(id=folder.id, name=folder.name, parent_id=folder.parent_id)

    def to_folder(self) -> Folder:
        return Folder(id=self.id, name=self.name, parent_id=self.parent_id)
