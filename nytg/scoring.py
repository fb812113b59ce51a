"""
Pure scoring functions for Wordle, Connections and Strands guesses.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum, IntEnum
from typing import Iterable, List, Sequence


class Tile(Enum):
    """Per-letter Wordle feedback."""
    MATCH = "G"
    PARTIAL = "Y"
    NONE = "N"


class GroupStatus(IntEnum):
    """Connections feedback, ordered so that max() picks the best outcome."""
    INCORRECT = 0
    ONE_AWAY = 1
    CORRECT = 2

    @property
    def message(self) -> str:
        return GROUP_MESSAGES[self]


GROUP_MESSAGES = {
    GroupStatus.INCORRECT: "More than one away",
    GroupStatus.ONE_AWAY: "One away",
    GroupStatus.CORRECT: "Correct!",
}


class FindResult(Enum):
    SPANGRAM = "spangram"
    THEME_WORD = "theme_word"
    NO_MATCH = "no_match"


def score_wordle(solution: str, guess: str) -> List[Tile]:
    """
    Two-pass Wordle scoring.

    Exact positions are marked first; the remaining solution letters are then
    handed out left to right as partial matches, so a letter is never marked
    more often than it occurs in the solution.

    Args:
        solution: The answer word
        guess: The submitted word

    Returns:
        One Tile per guess letter
    """
    solution = solution.lower()
    guess = guess.lower()

    tiles = [Tile.NONE] * len(guess)
    remaining: Counter = Counter()

    for i, ch in enumerate(guess):
        if i < len(solution) and solution[i] == ch:
            tiles[i] = Tile.MATCH
        elif i < len(solution):
            remaining[solution[i]] += 1

    for i, ch in enumerate(guess):
        if tiles[i] is not Tile.MATCH and remaining[ch] > 0:
            tiles[i] = Tile.PARTIAL
            remaining[ch] -= 1

    return tiles


def tiles_to_str(tiles: Iterable[Tile]) -> str:
    return "".join(t.value for t in tiles)


def has_repeats(selection: Sequence[str]) -> bool:
    """True when any item of ``selection`` appears more than once."""
    return len(set(selection)) != len(selection)


def score_group(words: Sequence[str], categories: Iterable[Sequence[str]]) -> GroupStatus:
    """
    Score a Connections selection against every category.

    Each category is scored on its own (4 shared words -> CORRECT, 3 -> ONE_AWAY)
    and the best result across categories wins.
    """
    selected = set(words)
    best = GroupStatus.INCORRECT
    for members in categories:
        overlap = len(selected & set(members))
        if overlap == 4:
            return GroupStatus.CORRECT
        if overlap == 3:
            best = max(best, GroupStatus.ONE_AWAY)
    return best


def score_find(guess: str, spangram: str, theme_words: Iterable[str]) -> FindResult:
    """Classify a Strands guess, ignoring case."""
    guess = guess.lower()
    if spangram and guess == spangram.lower():
        return FindResult.SPANGRAM
    if any(guess == tw.lower() for tw in theme_words if tw):
        return FindResult.THEME_WORD
    return FindResult.NO_MATCH
