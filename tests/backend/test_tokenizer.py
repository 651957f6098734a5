"""
Unit tests for the tokenizer module.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../backend"))

from tokenizer import STOP_WORDS, normalize


class TestNormalize:
    """Test suite for normalize()."""

    def test_empty_and_whitespace_input(self):
        assert normalize("") == set()
        assert normalize("   \n\t ") == set()

    def test_lowercases_and_collapses_duplicates(self):
        assert normalize("Hiking HIKING hiking") == {"hiking"}

    def test_punctuation_is_removed_not_split(self):
        tokens = normalize("Don't stop, believing!")
        assert "dont" in tokens
        assert "don" not in tokens
        assert "believing" in tokens

    def test_single_characters_are_dropped(self):
        assert normalize("x y z mountains") == {"mountains"}

    def test_stop_words_are_dropped(self):
        assert normalize("I love hiking in the mountains") == {"love", "hiking", "mountains"}

    def test_punctuation_only_input(self):
        assert normalize("... !!! ,,,") == set()

    def test_every_token_is_significant(self):
        text = "The quick brown fox, and a lazy dog; it was 1 of 2 (or 3) dogs!"
        for token in normalize(text):
            assert len(token) >= 2
            assert token not in STOP_WORDS

    @pytest.mark.parametrize(
        "text",
        [
            "I love hiking in the mountains",
            "Don't panic: it's only a re-test...",
            "   mixed   CASE, with\ttabs\nand newlines ",
            "",
        ],
    )
    def test_normalize_is_idempotent(self, text):
        tokens = normalize(text)
        assert normalize(" ".join(tokens)) == tokens
