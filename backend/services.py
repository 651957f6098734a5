"""Service layer coordinating note storage, documents and suggestions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from buffers import TextBuffer
from config import Settings
from context_models import (
    AcceptResponsePayload,
    AnchorPayload,
    CursorPayload,
    DocumentPayload,
    EditRequest,
    EditResponsePayload,
    SuggestionPayload,
    SuggestionsResponsePayload,
)
from models import CursorPosition, SavedNote, preview
from storage import NoteStorage
from suggestion_engine import SuggestionEngine, SuggestionView

logger = logging.getLogger(__name__)


class NoteService:
    """Thin wrapper over the note collection."""

    def __init__(self, storage: NoteStorage | None = None):
        self.storage = storage or NoteStorage()

    def list_notes(self) -> List[SavedNote]:
        return self.storage.list_notes()

    def get_note(self, note_id: str) -> SavedNote:
        return self.storage.get_note(note_id)

    def save_note(self, content: str) -> SavedNote:
        return self.storage.save_note(content)

    def delete_note(self, note_id: str) -> str:
        return self.storage.delete_note(note_id)


@dataclass
class EditorSession:
    buffer: TextBuffer
    engine: SuggestionEngine


class EditorService:
    """Open documents, each with its own suggestion engine.

    Edits and context queries are separate phases: an edit is fully applied to the
    buffer before any context is read from it.
    """

    def __init__(self, notes: NoteService | None = None, settings: Settings | None = None):
        self.notes = notes or NoteService()
        self.settings = settings or Settings()
        self._sessions: Dict[str, EditorSession] = {}

    def create_document(self, text: str = "") -> DocumentPayload:
        buffer = TextBuffer.from_text(text)
        self._sessions[buffer.buffer_id] = EditorSession(
            buffer=buffer,
            engine=SuggestionEngine(
                limit=self.settings.suggestion_limit,
                min_block_chars=self.settings.min_block_chars,
            ),
        )
        logger.info("Opened document %s with %d runs", buffer.buffer_id, len(buffer.runs))
        return self._document_payload(buffer)

    def get_document(self, document_id: str) -> DocumentPayload:
        return self._document_payload(self._session(document_id).buffer)

    def close_document(self, document_id: str) -> None:
        if self._sessions.pop(document_id, None) is None:
            raise FileNotFoundError(f"Document not found: {document_id}")

    def edit(self, document_id: str, request: EditRequest) -> EditResponsePayload:
        session = self._session(document_id)
        session.buffer.replace(request.run_index, request.start, request.end, request.text)

        suggestions = None
        if request.cursor is not None:
            suggestions = self._refresh(session, request.cursor)
        return EditResponsePayload(
            document=self._document_payload(session.buffer),
            suggestions=suggestions,
        )

    def context(self, document_id: str, cursor: CursorPayload) -> SuggestionsResponsePayload:
        return self._refresh(self._session(document_id), cursor)

    def accept(self, document_id: str, note_id: str) -> AcceptResponsePayload:
        session = self._session(document_id)
        note = session.engine.find_suggestion(note_id)
        if note is None:
            raise FileNotFoundError(f"Suggestion not found: {note_id}")

        result = session.engine.on_suggestion_accepted(note, session.buffer)
        cursor = None
        if result.cursor is not None:
            cursor = CursorPayload(
                run_index=result.cursor.run_index,
                offset=result.cursor.offset,
                cursor_offset=session.buffer.flat_offset(result.cursor.run_index, result.cursor.offset),
            )
        return AcceptResponsePayload(
            applied=result.applied,
            document=self._document_payload(session.buffer),
            cursor=cursor,
        )

    def dismiss(self, document_id: str) -> None:
        self._session(document_id).engine.clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _session(self, document_id: str) -> EditorSession:
        session = self._sessions.get(document_id)
        if session is None:
            raise FileNotFoundError(f"Document not found: {document_id}")
        return session

    def _refresh(self, session: EditorSession, cursor: CursorPayload) -> SuggestionsResponsePayload:
        position = self._resolve_cursor(session.buffer, cursor)
        view = session.engine.on_context_changed(session.buffer, position, self.notes.list_notes())
        return self._suggestions_payload(view)

    def _resolve_cursor(self, buffer: TextBuffer, cursor: CursorPayload) -> Optional[CursorPosition]:
        if cursor.cursor_offset is not None:
            located = buffer.locate(cursor.cursor_offset)
            if located is None:
                return CursorPosition(run_index=None, offset=0)
            run_index, offset = located
            focus = None
            if cursor.selection_end is not None:
                focus = offset + (cursor.selection_end - cursor.cursor_offset)
            return CursorPosition(run_index=run_index, offset=offset, focus=focus)

        if cursor.offset is None:
            return None
        return CursorPosition(run_index=cursor.run_index, offset=cursor.offset, focus=cursor.focus)

    def _suggestions_payload(self, view: SuggestionView) -> SuggestionsResponsePayload:
        anchor = None
        if view.anchor is not None:
            anchor = AnchorPayload(run_index=view.anchor.run_index, offset=view.anchor.offset)
        return SuggestionsResponsePayload(
            suggestions=[
                SuggestionPayload(
                    id=note.id,
                    content=note.content,
                    preview=preview(note.content, self.settings.preview_chars),
                    timestamp=note.timestamp,
                )
                for note in view.suggestions
            ],
            anchor=anchor,
        )

    @staticmethod
    def _document_payload(buffer: TextBuffer) -> DocumentPayload:
        return DocumentPayload(
            document_id=buffer.buffer_id,
            revision=buffer.revision,
            runs=buffer.runs,
            text=buffer.text,
        )
