"""Backend application state shared by the HTTP endpoints."""

from __future__ import annotations

import threading
from typing import Optional

from config import Settings
from services import EditorService, NoteService
from storage import NoteStorage


class ScrapprAppState:
    """Holds the note store and open documents.

    Suggestion work is synchronous and must not interleave, so every endpoint
    runs its service call while holding `lock`.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.lock = threading.RLock()
        self.settings = settings or Settings.from_env()
        self.storage = NoteStorage(root=self.settings.storage_dir)
        self.notes = NoteService(storage=self.storage)
        self.editor = EditorService(notes=self.notes, settings=self.settings)
