"""Lexical relevance scoring between an editing context and saved notes."""

from __future__ import annotations

from typing import List, Sequence

from models import Context, SavedNote, ScoredNote
from tokenizer import normalize

SHARED_TOKEN_WEIGHT = 1
WORD_TOKEN_BONUS = 3
SENTENCE_CONTAINED_BONUS = 10
WORD_CONTAINED_BONUS = 5


def score(context: Context, notes: Sequence[SavedNote]) -> List[ScoredNote]:
    """Score every note against `context`, in input order.

    Returns an empty list when the sentence has no significant tokens; the
    results are neither filtered nor sorted.
    """
    sentence_tokens = normalize(context.sentence)
    if not sentence_tokens:
        return []

    word = context.word.lower()
    sentence = context.sentence.strip().lower()

    scored: List[ScoredNote] = []
    for note in notes:
        content = note.content.lower()
        note_tokens = normalize(note.content)

        total = SHARED_TOKEN_WEIGHT * len(sentence_tokens & note_tokens)
        # An empty word (cursor on whitespace) earns no word bonus; "" is in every note.
        if word and word in note_tokens:
            total += WORD_TOKEN_BONUS

        # Compared trimmed, so leading/trailing spaces in the run never block a match.
        if sentence in content:
            total += SENTENCE_CONTAINED_BONUS
        elif word and word in content:
            total += WORD_CONTAINED_BONUS

        scored.append(ScoredNote(note=note, score=total))
    return scored
