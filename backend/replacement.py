"""Replace a captured word span with accepted suggestion text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from buffers import TextBuffer
from models import CursorPosition, TextSpan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplacementResult:
    applied: bool
    cursor: Optional[CursorPosition] = None


def is_current(buffer: TextBuffer, span: Optional[TextSpan]) -> bool:
    """True while `span` still refers to the buffer state that produced it."""
    if span is None:
        return False
    if span.buffer_id != buffer.buffer_id or span.revision != buffer.revision:
        return False
    run = buffer.run(span.run_index)
    return run is not None and 0 <= span.start <= span.end <= len(run)


def apply(buffer: TextBuffer, span: Optional[TextSpan], replacement_text: str) -> ReplacementResult:
    """Replace `[span.start, span.end)` with the text plus one trailing space.

    A stale span is refused and leaves the buffer untouched.
    """
    if not is_current(buffer, span):
        logger.info(
            "Refusing replacement on buffer %s: span is stale (buffer revision %s)",
            buffer.buffer_id,
            buffer.revision,
        )
        return ReplacementResult(applied=False)

    inserted = replacement_text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ") + " "
    buffer.replace(span.run_index, span.start, span.end, inserted)
    return ReplacementResult(
        applied=True,
        cursor=CursorPosition(run_index=span.run_index, offset=span.start + len(inserted)),
    )
