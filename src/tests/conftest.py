"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from scratchpad.core.notebook import Notebook, set_notebook
from scratchpad.core.types import Note


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for tests."""
    return tmp_path


@pytest.fixture
def notes_dir(tmp_path):
    """Empty notes directory."""
    path = tmp_path / "notes"
    path.mkdir()
    return path


@pytest.fixture
def folders_file(tmp_path):
    """Path to a folders document that does not exist yet."""
    return tmp_path / "folders.json"


@pytest.fixture
def notebook(tmp_path):
    """Notebook rooted in a temporary vault."""
    nb = Notebook(tmp_path / "vault")
    nb.ensure_structure()
    return nb


@pytest.fixture(autouse=True)
def reset_default_notebook():
    """Never let tests share or create the default notebook."""
    yield
    set_notebook(None)


@pytest.fixture
def make_note():
    """Factory for Note objects with sensible defaults."""

    def _make_note(note_id: str = "n1", **overrides) -> Note:
        fields = {
            "id": note_id,
            "title": f"Title {note_id}",
            "content": f"Body of {note_id}\n",
            "folder": "default",
            "parent_id": None,
            "created_at": 1700000000000,
            "updated_at": 1700000000500,
        }
        fields.update(overrides)
        return Note(**fields)

    return _make_note


@pytest.fixture
def sample_note_text():
    """A well-formed note file as written to disk."""
    return (
        "---\n"
        "id: abc\n"
        "title: Groceries\n"
        "folder: work\n"
        "parent_id: null\n"
        "created_at: 1700000000000\n"
        "updated_at: 1700000001000\n"
        "---\n"
        "\n"
        "Milk, eggs\n"
    )
