"""Word normalization for note/context overlap scoring."""

from __future__ import annotations

import re
from typing import Set

_NON_WORD_RE = re.compile(r"[^\w\s]")

# Closed list of function words ignored when comparing text.
STOP_WORDS: Set[str] = {
    # articles / determiners
    "a",
    "an",
    "the",
    "this",
    "that",
    "these",
    "those",
    # pronouns
    "i",
    "me",
    "my",
    "mine",
    "myself",
    "you",
    "your",
    "yours",
    "yourself",
    "he",
    "him",
    "his",
    "himself",
    "she",
    "her",
    "hers",
    "herself",
    "it",
    "its",
    "itself",
    "we",
    "us",
    "our",
    "ours",
    "ourselves",
    "they",
    "them",
    "their",
    "theirs",
    "themselves",
    "what",
    "which",
    "who",
    "whom",
    # auxiliary verbs
    "am",
    "is",
    "are",
    "was",
    "were",
    "be",
    "been",
    "being",
    "have",
    "has",
    "had",
    "having",
    "do",
    "does",
    "did",
    "doing",
    "will",
    "would",
    "shall",
    "should",
    "can",
    "could",
    "may",
    "might",
    "must",
    # prepositions
    "in",
    "on",
    "at",
    "by",
    "for",
    "with",
    "about",
    "against",
    "between",
    "into",
    "through",
    "during",
    "before",
    "after",
    "above",
    "below",
    "to",
    "from",
    "up",
    "down",
    "of",
    "off",
    "over",
    "under",
    # conjunctions
    "and",
    "but",
    "or",
    "nor",
    "so",
    "yet",
    "if",
    "because",
    "as",
    "until",
    "while",
    "than",
    "then",
}


def normalize(text: str) -> Set[str]:
    """Lower-case `text`, strip punctuation and return its significant words.

    Punctuation is removed rather than replaced, so "don't" becomes "dont".
    Single-character words and stop words are dropped.
    """
    if not text or not text.strip():
        return set()
    cleaned = _NON_WORD_RE.sub("", text.lower())
    return {token for token in cleaned.split() if len(token) > 1 and token not in STOP_WORDS}
