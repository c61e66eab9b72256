"""Note endpoints."""

from fastapi import APIRouter, HTTPException, Response, status

from scratchpad.api.deps import NotebookDep
from scratchpad.api.schemas import NoteModel

router = APIRouter()


@router.get("/notes", response_model=list[NoteModel])
def load_notes(notebook: NotebookDep) -> list[NoteModel]:
    """
    List all notes.

    Files that cannot be decoded are skipped.
    """
    return [NoteModel.from_note(note) for note in notebook.load_notes()]


@router.get("/notes/search", response_model=list[NoteModel])
def search_notes(notebook: NotebookDep, q: str = "") -> list[NoteModel]:
    """Search notes by title or content, ignoring case."""
    return [NoteModel.from_note(note) for note in notebook.search_notes(q)]


@router.get("/notes/{note_id}", response_model=NoteModel)
def get_note(note_id: str, notebook: NotebookDep) -> NoteModel:
    """Get a single note."""
    return NoteModel.from_note(notebook.get_note(note_id))


@router.put("/notes/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def save_note(note_id: str, request: NoteModel, notebook: NotebookDep) -> Response:
    """
    Create or overwrite a note.

    The path id must match the body id.
    """
    if request.id != note_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Note id mismatch: path {note_id!r}, body {request.id!r}",
        )
    notebook.save_note(request.to_note())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/notes/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(note_id: str, notebook: NotebookDep) -> Response:
    """Delete a note."""
    notebook.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
