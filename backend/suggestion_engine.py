"""Contextual note suggestions for one editing surface.

The engine keeps only the list currently on display and the span of the word
that produced it. Notes are passed in fresh on every call and never retained
beyond the displayed suggestions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import context_extractor
import ranker
import replacement
import scoring
from buffers import TextBuffer
from config import DEFAULT_MIN_BLOCK_CHARS, DEFAULT_SUGGESTION_LIMIT
from models import CursorPosition, SavedNote, TextSpan
from replacement import ReplacementResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuggestionAnchor:
    """Where the list should be placed: the start of the matched word."""

    run_index: int
    offset: int


@dataclass(frozen=True)
class SuggestionView:
    suggestions: List[SavedNote] = field(default_factory=list)
    anchor: Optional[SuggestionAnchor] = None


class SuggestionEngine:
    def __init__(
        self,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
        min_block_chars: int = DEFAULT_MIN_BLOCK_CHARS,
    ):
        self.limit = limit
        self.min_block_chars = min_block_chars
        self.suggestions: List[SavedNote] = []
        self.active_span: Optional[TextSpan] = None

    def clear(self) -> None:
        self.suggestions = []
        self.active_span = None

    def on_context_changed(
        self,
        buffer: TextBuffer,
        cursor: Optional[CursorPosition],
        notes: Sequence[SavedNote],
    ) -> SuggestionView:
        """Rebuild the suggestion list for the cursor's current context.

        Must be called with the buffer state after the triggering edit has been
        applied.
        """
        self.clear()

        extracted = context_extractor.extract(buffer, cursor, self.min_block_chars)
        if extracted is None:
            return SuggestionView()
        context, span = extracted

        suggestions = ranker.rank(scoring.score(context, notes), self.limit)
        logger.debug(
            "buffer=%s rev=%s word=%r: %d of %d notes suggested",
            buffer.buffer_id,
            buffer.revision,
            context.word,
            len(suggestions),
            len(notes),
        )
        if not suggestions:
            return SuggestionView()

        self.suggestions = suggestions
        self.active_span = span
        return SuggestionView(
            suggestions=list(suggestions),
            anchor=SuggestionAnchor(run_index=span.run_index, offset=span.start),
        )

    def find_suggestion(self, note_id: str) -> Optional[SavedNote]:
        for note in self.suggestions:
            if note.id == note_id:
                return note
        return None

    def on_suggestion_accepted(self, note: SavedNote, buffer: TextBuffer) -> ReplacementResult:
        """Replace the word that triggered the current list with `note`'s content."""
        span = self.active_span
        self.clear()
        return replacement.apply(buffer, span, note.content)
