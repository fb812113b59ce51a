# nytg/core/env.py
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

from ..clients.nyt_client import DEFAULT_BASE_URL

KNOWN_KEYS = [
    "NYTG_STATE_PATH",   # state blob, default ~/.config/nytg_cli/state.json
    "NYTG_BASE_URL",     # service root for the three endpoints
    "NYTG_TIMEOUT",      # request timeout, seconds
    "NYTG_WORDS_PATH",   # replacement for the bundled word list
    "NYTG_LOG_PATH",     # log file used while the game owns the terminal
    "NYTG_PUZZLE_DIR",   # serve puzzles from <dir>/<game>/<date>.json
]


@dataclass(frozen=True)
class Settings:
    state_path: Path
    base_url: str
    timeout: float
    words_path: Path | None
    log_path: Path
    puzzle_dir: Path | None


def default_state_path() -> Path:
    return Path.home() / ".config" / "nytg_cli" / "state.json"


def mask(value: str) -> str:
    return value[:4] + "…" if len(value) > 4 else "…"


def load_env(dotenv_path: str | None = None) -> Dict[str, str]:
    """
    Load .env once. Returns a dict of which keys are present (masked).
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    found = {}
    for k in KNOWN_KEYS:
        v = os.getenv(k)
        if v:
            found[k] = mask(v)
    return found


def load_settings(dotenv_path: str | None = None) -> Settings:
    load_env(dotenv_path)
    state_path = Path(os.getenv("NYTG_STATE_PATH") or default_state_path()).expanduser()
    words = os.getenv("NYTG_WORDS_PATH")
    puzzle_dir = os.getenv("NYTG_PUZZLE_DIR")
    try:
        timeout = float(os.getenv("NYTG_TIMEOUT", "10"))
    except ValueError:
        raise ValueError(f"NYTG_TIMEOUT must be a number, got {os.getenv('NYTG_TIMEOUT')!r}")
    return Settings(
        state_path=state_path,
        base_url=os.getenv("NYTG_BASE_URL") or DEFAULT_BASE_URL,
        timeout=timeout,
        words_path=Path(words).expanduser() if words else None,
        log_path=Path(os.getenv("NYTG_LOG_PATH") or state_path.with_name("nytg.log")).expanduser(),
        puzzle_dir=Path(puzzle_dir).expanduser() if puzzle_dir else None,
    )


def describe_settings(settings: Settings, dotenv_path: str | None = None) -> Dict[str, Any]:
    """Printable view for --debug: resolved settings plus the masked env keys that set them."""
    return {
        "env_keys_detected": load_env(dotenv_path),
        "settings": {f.name: str(getattr(settings, f.name)) for f in fields(settings)},
    }
