"""
Unit tests for the JSON note storage.
"""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../backend"))

import storage as storage_module
from storage import NOTES_FILENAME, NoteStorage


class TestNoteStorage:
    """Test suite for NoteStorage."""

    @pytest.fixture(autouse=True)
    def _storage(self, tmp_path):
        self.root = tmp_path
        self.storage = NoteStorage(root=tmp_path)

    def test_missing_file_is_empty(self):
        assert self.storage.list_notes() == []

    def test_save_puts_newest_first(self):
        first = self.storage.save_note("first note")
        second = self.storage.save_note("second note")

        notes = self.storage.list_notes()
        assert [note.id for note in notes] == [second.id, first.id]
        assert notes[1].content == "first note"

    def test_ids_are_unique_within_one_millisecond(self, monkeypatch):
        monkeypatch.setattr(storage_module, "_now_ms", lambda: 1700000000000)
        first = self.storage.save_note("a")
        second = self.storage.save_note("b")

        assert first.id == "1700000000000"
        assert second.id == "1700000000001"
        assert first.timestamp == second.timestamp == 1700000000000

    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    def test_blank_note_is_rejected(self, content):
        with pytest.raises(ValueError):
            self.storage.save_note(content)
        assert self.storage.list_notes() == []

    def test_get_note(self):
        saved = self.storage.save_note("remember the milk")
        assert self.storage.get_note(saved.id) == saved
        with pytest.raises(FileNotFoundError):
            self.storage.get_note("missing")

    def test_delete_note(self):
        keep = self.storage.save_note("keep")
        drop = self.storage.save_note("drop")

        assert self.storage.delete_note(drop.id) == drop.id
        assert [note.id for note in self.storage.list_notes()] == [keep.id]

        with pytest.raises(FileNotFoundError):
            self.storage.delete_note(drop.id)

    def test_persists_across_instances(self):
        saved = self.storage.save_note("durable")
        reopened = NoteStorage(root=self.root)
        assert reopened.list_notes() == [saved]

        with open(self.root / NOTES_FILENAME, "r", encoding="utf-8") as handle:
            raw = json.load(handle)
        assert raw == [{"id": saved.id, "content": "durable", "timestamp": saved.timestamp}]

    def test_failed_write_leaves_no_temp_file(self, monkeypatch):
        saved = self.storage.save_note("survives")

        def failing_dump(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(storage_module.json, "dump", failing_dump)
        with pytest.raises(OSError):
            self.storage.save_note("lost")
        monkeypatch.undo()

        assert not (self.root / (NOTES_FILENAME + ".tmp")).exists()
        assert self.storage.list_notes() == [saved]

    def test_corrupt_file_reads_as_empty(self):
        (self.root / NOTES_FILENAME).write_text("{not json", encoding="utf-8")
        assert self.storage.list_notes() == []

    def test_skips_malformed_entries(self):
        (self.root / NOTES_FILENAME).write_text(
            json.dumps([{"id": 1, "content": "ok", "timestamp": "bad"}, "junk", {"content": "no id"}]),
            encoding="utf-8",
        )
        notes = self.storage.list_notes()
        assert len(notes) == 1
        assert notes[0].id == "1"
        assert notes[0].timestamp == 0
