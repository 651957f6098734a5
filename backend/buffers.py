"""In-memory document buffers with revision tracking."""

from __future__ import annotations

import uuid
from typing import List, Optional, Tuple


def _clean_text(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


class TextBuffer:
    """A document held as ordered text runs.

    A run is one contiguous stretch of raw text (a line of the document). Every
    mutation bumps `revision`, which is what spans are validated against.
    """

    def __init__(self, runs: Optional[List[str]] = None, buffer_id: Optional[str] = None):
        self.buffer_id = buffer_id or uuid.uuid4().hex
        self._runs: List[str] = list(runs) if runs else [""]
        self.revision = 0

    @classmethod
    def from_text(cls, text: str, buffer_id: Optional[str] = None) -> "TextBuffer":
        return cls(_clean_text(text or "").split("\n"), buffer_id=buffer_id)

    @property
    def runs(self) -> List[str]:
        return list(self._runs)

    @property
    def text(self) -> str:
        return "\n".join(self._runs)

    def run(self, run_index: int) -> Optional[str]:
        if 0 <= run_index < len(self._runs):
            return self._runs[run_index]
        return None

    def locate(self, flat_offset: int) -> Optional[Tuple[int, int]]:
        """Map an offset into `text` to `(run_index, offset)`."""
        if flat_offset < 0:
            return None
        remaining = flat_offset
        for idx, run in enumerate(self._runs):
            if remaining <= len(run):
                return idx, remaining
            # +1 for the newline separating runs
            remaining -= len(run) + 1
        return None

    def flat_offset(self, run_index: int, offset: int) -> int:
        return sum(len(run) + 1 for run in self._runs[:run_index]) + offset

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def replace(self, run_index: int, start: int, end: int, text: str) -> int:
        """Replace `[start, end)` of one run with `text`. Returns the new revision.

        Line breaks in `text` split the run: the first line joins the text before
        `start`, the last line joins the text after `end`, and lines in between
        become runs of their own. The whole edit is one revision.
        """
        run = self.run(run_index)
        if run is None:
            raise ValueError(f"Run {run_index} does not exist")
        if not 0 <= start <= end <= len(run):
            raise ValueError(f"Invalid range [{start}, {end}) for run of length {len(run)}")
        lines = _clean_text(text).split("\n")
        lines[0] = run[:start] + lines[0]
        lines[-1] = lines[-1] + run[end:]
        self._runs[run_index : run_index + 1] = lines
        self.revision += 1
        return self.revision
