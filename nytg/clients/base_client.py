from __future__ import annotations

from datetime import date
from typing import Protocol

from ..puzzles import GameKind


class PuzzleClient(Protocol):
    """Protocol defining the interface every puzzle source must implement."""

    def fetch(self, kind: GameKind, day: date) -> str:
        """
        Fetch the raw JSON text of one daily puzzle.

        Args:
            kind: Which game to fetch
            day: The puzzle's calendar date

        Returns:
            The response body, undecoded

        Raises:
            NetworkFailure: If the puzzle could not be retrieved
        """
        ...
