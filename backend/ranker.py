"""Ranking of scored notes into the displayed suggestion list."""

from __future__ import annotations

from typing import Iterable, List

from config import DEFAULT_SUGGESTION_LIMIT
from models import SavedNote, ScoredNote


def rank(scored_notes: Iterable[ScoredNote], limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[SavedNote]:
    """Keep positive scores, best first, at most `limit` notes.

    The sort is stable, so ties keep the collection's own order (newest first).
    """
    relevant = [item for item in scored_notes if item.score > 0]
    relevant.sort(key=lambda item: item.score, reverse=True)
    return [item.note for item in relevant[: max(0, limit)]]
