"""Tests for scratchpad.vault.notes."""

import os
import sys

import pytest

from scratchpad.vault import frontmatter
from scratchpad.vault.errors import NoteNotFoundError, StorageError
from scratchpad.vault.notes import NoteStore


class TestNoteStoreSave:
    """Tests for NoteStore.save()."""

    def test_save_writes_id_md(self, notes_dir, make_note):
        """Note is written to <id>.md with the encoded text."""
        note = make_note("abc")
        path = NoteStore(notes_dir).save(note)

        assert path == notes_dir / "abc.md"
        assert path.read_bytes().decode("utf-8") == frontmatter.encode(note)

    def test_save_creates_directory(self, tmp_path, make_note):
        """Missing notes directory is created."""
        notes_dir = tmp_path / "nested" / "notes"
        NoteStore(notes_dir).save(make_note("a"))

        assert (notes_dir / "a.md").exists()

    def test_save_overwrites(self, notes_dir, make_note):
        """Saving the same id replaces the whole file."""
        store = NoteStore(notes_dir)
        store.save(make_note("a", title="First", content="a much longer body\n"))
        store.save(make_note("a", title="Second", content="short"))

        notes = store.load_all()
        assert len(notes) == 1
        assert notes[0].title == "Second"
        assert notes[0].content == "short"

    def test_save_keeps_crlf(self, notes_dir, make_note):
        """Line endings in content are written untranslated."""
        note = make_note("a", content="one\r\ntwo\r\n")
        store = NoteStore(notes_dir)
        store.save(note)

        assert store.get("a") == note

    @pytest.mark.skipif(
        sys.platform == "win32" or os.geteuid() == 0,
        reason="permission bits not enforced",
    )
    def test_save_surfaces_io_error(self, notes_dir, make_note):
        """Write failures raise StorageError."""
        notes_dir.chmod(0o500)
        try:
            with pytest.raises(StorageError, match="Failed to write note"):
                NoteStore(notes_dir).save(make_note("a"))
        finally:
            notes_dir.chmod(0o700)


class TestNoteStoreLoadAll:
    """Tests for NoteStore.load_all() and scan()."""

    def test_load_all_empty(self, notes_dir):
        """Empty directory yields no notes."""
        assert NoteStore(notes_dir).load_all() == []

    def test_load_all_missing_directory(self, tmp_path):
        """A directory that cannot be listed yields an empty list."""
        assert NoteStore(tmp_path / "missing").load_all() == []

    def test_load_all_skips_malformed(self, notes_dir, make_note):
        """One bad file does not fail the whole load."""
        store = NoteStore(notes_dir)
        store.save(make_note("good"))
        (notes_dir / "bad.md").write_text("no delimiter at all\n")

        notes = store.load_all()

        assert [n.id for n in notes] == ["good"]

    def test_load_all_ignores_other_extensions(self, notes_dir, make_note):
        """Only .md files are considered."""
        store = NoteStore(notes_dir)
        store.save(make_note("a"))
        (notes_dir / "b.txt").write_text(frontmatter.encode(make_note("b")))
        (notes_dir / "c.md.bak").write_text(frontmatter.encode(make_note("c")))

        assert [n.id for n in store.load_all()] == ["a"]

    def test_load_all_skips_directories(self, notes_dir, make_note):
        """A directory named like a note is skipped."""
        store = NoteStore(notes_dir)
        store.save(make_note("a"))
        (notes_dir / "folder.md").mkdir()

        assert [n.id for n in store.load_all()] == ["a"]

    def test_load_all_skips_invalid_utf8(self, notes_dir, make_note):
        """Files that are not UTF-8 are skipped."""
        store = NoteStore(notes_dir)
        store.save(make_note("a"))
        (notes_dir / "binary.md").write_bytes(b"---\n\xff\xfe\n---\n\n")

        assert [n.id for n in store.load_all()] == ["a"]

    def test_load_all_accepts_hand_edited_file(self, notes_dir):
        """Files missing fields still load with defaults."""
        (notes_dir / "x.md").write_text("---\nid: x\ntitle: Hand made\n---\n\nhi")

        notes = NoteStore(notes_dir).load_all()

        assert len(notes) == 1
        assert notes[0].folder == "default"
        assert notes[0].created_at == 0

    def test_id_comes_from_header_not_filename(self, notes_dir):
        """The decoded id is the header value, whatever the file is called."""
        (notes_dir / "renamed.md").write_text("---\nid: original\n---\n\n")

        assert NoteStore(notes_dir).load_all()[0].id == "original"

    def test_scan_reports_skipped_and_degraded(self, notes_dir, make_note):
        """scan() says which files were skipped or defaulted."""
        store = NoteStore(notes_dir)
        store.save(make_note("good"))
        (notes_dir / "bad.md").write_text("garbage")
        (notes_dir / "partial.md").write_text("---\nid: partial\n---\n\n")

        report = store.scan()

        assert sorted(n.id for n in report.notes) == ["good", "partial"]
        assert report.skipped == [notes_dir / "bad.md"]
        assert report.degraded == [notes_dir / "partial.md"]

    def test_scan_logs_skipped_file(self, notes_dir, caplog):
        """Skipped files are logged as warnings."""
        (notes_dir / "bad.md").write_text("garbage")
        caplog.set_level("WARNING", logger="scratchpad.vault.notes")

        NoteStore(notes_dir).scan()

        assert "bad.md" in caplog.text


class TestNoteStoreGet:
    """Tests for NoteStore.get()."""

    def test_get_existing(self, notes_dir, make_note):
        """get() returns the saved note."""
        store = NoteStore(notes_dir)
        note = make_note("a", parent_id="p")
        store.save(note)

        assert store.get("a") == note

    def test_get_missing(self, notes_dir):
        """Missing file raises NoteNotFoundError."""
        with pytest.raises(NoteNotFoundError):
            NoteStore(notes_dir).get("nope")

    def test_get_malformed(self, notes_dir):
        """A file that is not a note is reported as not found."""
        (notes_dir / "bad.md").write_text("garbage")

        with pytest.raises(NoteNotFoundError, match="not a note"):
            NoteStore(notes_dir).get("bad")


class TestNoteStoreDelete:
    """Tests for NoteStore.delete()."""

    def test_delete_removes_exactly_one(self, notes_dir, make_note):
        """Deleting a removes a.md and leaves b."""
        store = NoteStore(notes_dir)
        store.save(make_note("a"))
        store.save(make_note("b"))

        store.delete("a")

        assert [n.id for n in store.load_all()] == ["b"]
        assert not (notes_dir / "a.md").exists()

    def test_delete_missing_raises(self, notes_dir):
        """Deleting a missing note is an error, not a no-op."""
        with pytest.raises(NoteNotFoundError, match="nope"):
            NoteStore(notes_dir).delete("nope")

    def test_delete_twice_raises(self, notes_dir, make_note):
        """Second delete of the same id fails."""
        store = NoteStore(notes_dir)
        store.save(make_note("a"))
        store.delete("a")

        with pytest.raises(NoteNotFoundError):
            store.delete("a")

    def test_not_found_is_storage_error(self):
        """Callers can catch every store failure as StorageError."""
        assert issubclass(NoteNotFoundError, StorageError)
