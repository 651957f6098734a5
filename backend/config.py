"""Environment-backed settings for the Scrappr backend."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SUGGESTION_LIMIT = 5
DEFAULT_MIN_BLOCK_CHARS = 2
DEFAULT_PREVIEW_CHARS = 100


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, value)


@dataclass(frozen=True)
class Settings:
    suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT
    min_block_chars: int = DEFAULT_MIN_BLOCK_CHARS
    preview_chars: int = DEFAULT_PREVIEW_CHARS
    storage_dir: Path = Path(__file__).resolve().parent / "storage"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        storage_dir = os.environ.get("SCRAPPR_STORAGE_DIR", "").strip()
        return cls(
            suggestion_limit=_env_int("SCRAPPR_SUGGESTION_LIMIT", DEFAULT_SUGGESTION_LIMIT, minimum=1),
            min_block_chars=_env_int("SCRAPPR_MIN_BLOCK_CHARS", DEFAULT_MIN_BLOCK_CHARS),
            preview_chars=_env_int("SCRAPPR_PREVIEW_CHARS", DEFAULT_PREVIEW_CHARS, minimum=1),
            storage_dir=Path(storage_dir).expanduser() if storage_dir else cls.storage_dir,
            log_level=(os.environ.get("SCRAPPR_LOG_LEVEL") or "INFO").strip().upper(),
            host=os.environ.get("SCRAPPR_HOST") or "127.0.0.1",
            port=_env_int("SCRAPPR_PORT", 8000, minimum=1),
        )
