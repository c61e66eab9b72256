"""Folder endpoints."""

from fastapi import APIRouter, Response, status

from scratchpad.api.deps import NotebookDep
from scratchpad.api.schemas import FolderModel

router = APIRouter()


@router.get("/folders", response_model=list[FolderModel])
def load_folders(notebook: NotebookDep) -> list[FolderModel]:
    """
    Get the folder list.

    The first call on a fresh vault creates the default folder.
    """
    return [FolderModel.from_folder(f) for f in notebook.load_folders()]


@router.put("/folders", status_code=status.HTTP_204_NO_CONTENT)
def save_folders(request: list[FolderModel], notebook: NotebookDep) -> Response:
    """Replace the whole folder list."""
    notebook.save_folders([f.to_folder() for f in request])
    return Response(status_code=status.HTTP_204_NO_CONTENT)
