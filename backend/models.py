"""Shared backend models for Scrappr."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class SavedNote:
    """A saved note. Immutable once created; only ever removed."""

    id: str
    content: str
    timestamp: int


@dataclass(frozen=True)
class CursorPosition:
    """Insertion point (or selection) inside a text buffer.

    `run_index` is None when the point sits between elements rather than inside
    a text run. A selection is represented by a `focus` offset that differs from
    `offset`.
    """

    run_index: Optional[int]
    offset: int
    focus: Optional[int] = None

    @property
    def is_collapsed(self) -> bool:
        return self.focus is None or self.focus == self.offset


@dataclass(frozen=True)
class TextSpan:
    """Half-open `[start, end)` range of one run, pinned to a buffer revision."""

    buffer_id: str
    run_index: int
    start: int
    end: int
    revision: int


@dataclass(frozen=True)
class Context:
    word: str
    sentence: str


@dataclass(frozen=True)
class ScoredNote:
    note: SavedNote
    score: int


def preview(content: str, limit: int = 100) -> str:
    """Shorten note content for display in a suggestion list."""
    if len(content) <= limit:
        return content
    return content[:limit] + "..."


# API payloads

class SavedNotePayload(BaseModel):
    id: str
    content: str
    timestamp: int

    @classmethod
    def from_note(cls, note: SavedNote) -> "SavedNotePayload":
        return cls(id=note.id, content=note.content, timestamp=note.timestamp)


class NotesResponsePayload(BaseModel):
    notes: List[SavedNotePayload] = Field(default_factory=list)


# Request payloads

class CreateNoteRequest(BaseModel):
    content: str
