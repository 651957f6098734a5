"""Filesystem-backed storage for saved notes."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import List, Optional

from models import SavedNote

logger = logging.getLogger(__name__)

NOTES_FILENAME = "saved-notes.json"


def _now_ms() -> int:
    return int(time.time() * 1000)


class NoteStorage:
    """Single JSON file holding every saved note, newest first."""

    def __init__(self, root: Optional[Path] = None):
        base_dir = Path(root) if root else Path(__file__).resolve().parent / "storage"
        base_dir.mkdir(parents=True, exist_ok=True)
        self.storage_dir = base_dir
        self.notes_path = base_dir / NOTES_FILENAME

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def list_notes(self) -> List[SavedNote]:
        """Return a snapshot of the collection, most recently saved first."""
        return self._load_all()

    def get_note(self, note_id: str) -> SavedNote:
        for note in self._load_all():
            if note.id == note_id:
                return note
        raise FileNotFoundError(f"Note not found: {note_id}")

    def save_note(self, content: str) -> SavedNote:
        if not content or not content.strip():
            raise ValueError("Cannot save an empty note")

        notes = self._load_all()
        timestamp = _now_ms()
        note_id = timestamp
        taken = {note.id for note in notes}
        while str(note_id) in taken:
            note_id += 1

        note = SavedNote(id=str(note_id), content=content, timestamp=timestamp)
        self._persist_all([note] + notes)
        logger.info("Saved note %s (%d notes total)", note.id, len(notes) + 1)
        return note

    def delete_note(self, note_id: str) -> str:
        notes = self._load_all()
        remaining = [note for note in notes if note.id != note_id]
        if len(remaining) == len(notes):
            raise FileNotFoundError(f"Note not found: {note_id}")
        self._persist_all(remaining)
        logger.info("Deleted note %s", note_id)
        return note_id

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _load_all(self) -> List[SavedNote]:
        if not self.notes_path.exists():
            return []
        try:
            with open(self.notes_path, "r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read %s, treating as empty: %s", self.notes_path, exc)
            return []

        if not isinstance(raw, list):
            logger.warning("Ignoring %s: expected a list of notes", self.notes_path)
            return []

        notes: List[SavedNote] = []
        for item in raw:
            if not isinstance(item, dict) or "id" not in item:
                continue
            try:
                timestamp = int(item.get("timestamp", 0))
            except (TypeError, ValueError):
                timestamp = 0
            notes.append(
                SavedNote(
                    id=str(item["id"]),
                    content=str(item.get("content", "")),
                    timestamp=timestamp,
                )
            )
        return notes

    def _persist_all(self, notes: List[SavedNote]):
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        payload = [
            {"id": note.id, "content": note.content, "timestamp": note.timestamp}
            for note in notes
        ]
        tmp_path = self.notes_path.with_suffix(".json.tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2)
            tmp_path.replace(self.notes_path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
