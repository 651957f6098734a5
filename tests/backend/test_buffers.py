"""
Unit tests for TextBuffer.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../backend"))

from buffers import TextBuffer


class TestTextBuffer:
    """Test suite for the TextBuffer class."""

    def setup_method(self):
        self.buffer = TextBuffer.from_text("first line\r\nsecond line\n\nfourth")

    def test_from_text_splits_runs(self):
        assert self.buffer.runs == ["first line", "second line", "", "fourth"]
        assert self.buffer.text == "first line\nsecond line\n\nfourth"
        assert self.buffer.revision == 0

    def test_empty_buffer_has_one_run(self):
        assert TextBuffer.from_text("").runs == [""]
        assert TextBuffer().runs == [""]

    def test_runs_are_a_copy(self):
        runs = self.buffer.runs
        runs[0] = "changed"
        assert self.buffer.run(0) == "first line"

    def test_locate(self):
        assert self.buffer.locate(0) == (0, 0)
        assert self.buffer.locate(10) == (0, 10)
        assert self.buffer.locate(11) == (1, 0)
        assert self.buffer.locate(23) == (2, 0)
        assert self.buffer.locate(len(self.buffer.text)) == (3, 6)
        assert self.buffer.locate(len(self.buffer.text) + 1) is None
        assert self.buffer.locate(-1) is None

    def test_flat_offset_inverts_locate(self):
        for flat in range(len(self.buffer.text) + 1):
            run_index, offset = self.buffer.locate(flat)
            assert self.buffer.flat_offset(run_index, offset) == flat

    def test_replace_bumps_revision(self):
        revision = self.buffer.replace(0, 0, 5, "1st")
        assert revision == 1
        assert self.buffer.revision == 1
        assert self.buffer.run(0) == "1st line"

    @pytest.mark.parametrize(
        "run_index, start, end",
        [(9, 0, 0), (0, 4, 2), (0, 0, 99), (0, -1, 2)],
    )
    def test_replace_rejects_invalid_ranges(self, run_index, start, end):
        with pytest.raises(ValueError):
            self.buffer.replace(run_index, start, end, "x")
        assert self.buffer.revision == 0

    def test_replace_with_line_break_splits_run(self):
        revision = self.buffer.replace(0, 5, 5, "\nnew")

        assert revision == 1
        assert self.buffer.runs == ["first", "new line", "second line", "", "fourth"]

    def test_replace_with_several_lines(self):
        self.buffer.replace(1, 0, 6, "one\r\ntwo\nthree")

        assert self.buffer.runs == ["first line", "one", "two", "three line", "", "fourth"]
        assert self.buffer.revision == 1

    def test_replace_can_join_text_into_empty_run(self):
        self.buffer.replace(2, 0, 0, "third")
        assert self.buffer.runs == ["first line", "second line", "third", "fourth"]
