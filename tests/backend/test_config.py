"""
Unit tests for environment-backed settings.
"""

import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../backend"))

from config import Settings


def test_defaults(monkeypatch):
    for name in (
        "SCRAPPR_SUGGESTION_LIMIT", "SCRAPPR_MIN_BLOCK_CHARS", "SCRAPPR_PREVIEW_CHARS", "SCRAPPR_STORAGE_DIR", "SCRAPPR_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.suggestion_limit == 5
    assert settings.min_block_chars == 2
    assert settings.preview_chars == 100
    assert settings.log_level == "INFO"
    assert settings.storage_dir.name == "storage"


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SCRAPPR_SUGGESTION_LIMIT", "3")
    monkeypatch.setenv("SCRAPPR_STORAGE_DIR", str(tmp_path))
    monkeypatch.setenv("SCRAPPR_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.suggestion_limit == 3
    assert settings.storage_dir == Path(tmp_path)
    assert settings.log_level == "DEBUG"


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("SCRAPPR_SUGGESTION_LIMIT", "many")
    monkeypatch.setenv("SCRAPPR_PREVIEW_CHARS", "0")
    settings = Settings.from_env()
    assert settings.suggestion_limit == 5
    assert settings.preview_chars == 1
