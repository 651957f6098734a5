"""Derive the word and enclosing block around an insertion point.

Extraction never raises for degenerate input. It returns None when:
- the cursor is a selection rather than a collapsed insertion point
- the insertion point is not inside a text run (between elements, or out of range)
- the enclosing run is too short to score (trimmed length <= `min_block_chars`)

The gate is on the block, not the word: a cursor touching a one-letter (or empty)
word inside a substantial line still produces a context.
"""

from __future__ import annotations

from typing import Optional, Tuple

from buffers import TextBuffer
from config import DEFAULT_MIN_BLOCK_CHARS
from models import Context, CursorPosition, TextSpan


def word_bounds(text: str, offset: int) -> Tuple[int, int]:
    """Expand `offset` over adjacent non-whitespace characters."""
    start = offset
    end = offset
    while start > 0 and not text[start - 1].isspace():
        start -= 1
    while end < len(text) and not text[end].isspace():
        end += 1
    return start, end


def extract(
    buffer: TextBuffer,
    cursor: Optional[CursorPosition],
    min_block_chars: int = DEFAULT_MIN_BLOCK_CHARS,
) -> Optional[Tuple[Context, TextSpan]]:
    if cursor is None or not cursor.is_collapsed:
        return None
    if cursor.run_index is None:
        return None

    block = buffer.run(cursor.run_index)
    if block is None or not 0 <= cursor.offset <= len(block):
        return None

    start, end = word_bounds(block, cursor.offset)
    word = block[start:end].strip()

    if len(block.strip()) <= min_block_chars:
        return None

    span = TextSpan(
        buffer_id=buffer.buffer_id,
        run_index=cursor.run_index,
        start=start,
        end=end,
        revision=buffer.revision,
    )
    return Context(word=word, sentence=block), span
