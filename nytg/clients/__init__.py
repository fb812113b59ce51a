"""
Puzzle sources.

Usage:
    from nytg.clients import get_client

    client = get_client()                       # NYT endpoints
    client = get_client(puzzle_dir="puzzles/")  # local JSON files

    raw = client.fetch(GameKind.WORDLE, date.today())
"""

from __future__ import annotations

from pathlib import Path

from .base_client import PuzzleClient
from .local_client import LocalClient
from .nyt_client import DEFAULT_BASE_URL, NytClient


def get_client(
    base_url: str | None = None,
    timeout: float = 10.0,
    puzzle_dir: str | Path | None = None,
) -> PuzzleClient:
    """Pick the local directory client when ``puzzle_dir`` is set, the HTTP client otherwise."""
    if puzzle_dir:
        return LocalClient(puzzle_dir)
    return NytClient(base_url=base_url, timeout=timeout)


__all__ = [
    "get_client",
    "PuzzleClient",
    "NytClient",
    "LocalClient",
    "DEFAULT_BASE_URL",
]
