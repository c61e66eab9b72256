"""Scratchpad core library - types, configuration and the notebook facade."""

from typing import TYPE_CHECKING

from scratchpad.core.types import (
    DecodeResult,
    DecodeStatus,
    Folder,
    LoadReport,
    Note,
)

if TYPE_CHECKING:
    from scratchpad.core.notebook import Notebook, get_notebook

__all__ = [
    # Facade
    "Notebook",
    "get_notebook",
    # Types
    "DecodeResult",
    "DecodeStatus",
    "Folder",
    "LoadReport",
    "Note",
]


def __getattr__(name: str):
    if name == "Notebook":
        from scratchpad.core.notebook import Notebook

        return Notebook
    if name == "get_notebook":
        from scratchpad.core.notebook import get_notebook

        return get_notebook
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
