"""
Per-tab game state: the guess buffer, submitted guesses, the display log and
the puzzle description, plus the submit rules for each game.
"""

from __future__ import annotations

import logging
import random
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import AbstractSet, Any, Callable, Dict, List, Optional, cast

from rich.markup import escape

from .puzzles import ConnectionsPuzzle, GameKind, Puzzle, StrandsPuzzle, WordlePuzzle
from .scoring import FindResult, GroupStatus, Tile, has_repeats, score_find, score_group, score_wordle

logger = logging.getLogger(__name__)

Shuffle = Callable[[List[str]], None]

LABELS = string.ascii_lowercase

COMPLETE_LINE = "Game complete!"

TILE_STYLES = {
    Tile.MATCH: "green",
    Tile.PARTIAL: "yellow",
    Tile.NONE: "bright_black",
}


class Rejection(Enum):
    """Why a submission was ignored."""
    WRONG_LENGTH = "wrong_length"
    DUPLICATE_SELECTION = "duplicate_selection"
    UNKNOWN_LABEL = "unknown_label"
    ALREADY_USED = "already_used"
    UNKNOWN_WORD = "unknown_word"
    ALREADY_FOUND = "already_found"
    GAME_COMPLETE = "game_complete"


def format_tiles(guess: str, tiles: List[Tile]) -> str:
    """Wordle log line as rich markup, e.g. ``crane, GYNNG`` with coloured tiles."""
    marks = "".join(f"[{TILE_STYLES[t]}]{t.value}[/]" for t in tiles)
    return f"{escape(guess)}, {marks}"


@dataclass
class GameState:
    guess_buffer: List[str] = field(default_factory=list)
    guesses: List[str] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)
    game_string: List[str] = field(default_factory=list)
    game_complete: bool = False

    # Connections
    word_order: List[str] = field(default_factory=list)
    used_words: List[str] = field(default_factory=list)

    # Strands
    found_words: List[str] = field(default_factory=list)
    needed_words: int = 0

    def clear(self) -> None:
        self.guess_buffer.clear()
        self.guesses.clear()
        self.lines.clear()
        self.game_string.clear()
        self.game_complete = False
        self.word_order.clear()
        self.used_words.clear()
        self.found_words.clear()
        self.needed_words = 0

    @property
    def guess(self) -> str:
        return "".join(self.guess_buffer)

    def type_char(self, kind: GameKind, ch: str) -> bool:
        if len(self.guess_buffer) >= kind.max_guess_len:
            return False
        self.guess_buffer.append(ch)
        return True

    def backspace(self) -> bool:
        if not self.guess_buffer:
            return False
        self.guess_buffer.pop()
        return True

    # ------------------------------------------------------------------
    # description

    def describe(self, kind: GameKind, puzzle: Puzzle, shuffle: Shuffle = random.shuffle) -> None:
        """Rebuild ``game_string`` (and the Connections word order) for ``puzzle``."""
        self.game_string.clear()

        if kind is GameKind.WORDLE:
            self._banner("Wordle: Guess a five letter word to win the game.", puzzle)
            self.game_string.append("")

        elif kind is GameKind.CONNECTIONS:
            self._banner("Connections: Group words by a common thread.", puzzle)
            self.game_string.append("")

            words = cast(ConnectionsPuzzle, puzzle).words
            shuffle(words)
            self.word_order = words
            for label, word in zip(LABELS, words):
                self.game_string.append(f"{label}. {word}")
            self.game_string.append("")

        elif kind is GameKind.STRANDS:
            strands = cast(StrandsPuzzle, puzzle)
            self._banner("Strands: Uncover words.", strands)
            self.game_string.append(f"Clue: {strands.clue}")
            self.needed_words = strands.needed_words
            self.game_string.append(f"Theme words: {self.needed_words}")
            self.game_string.append("")
            self.game_string.extend(strands.starting_board)
            self.game_string.append("")

    def _banner(self, text: str, puzzle: Puzzle) -> None:
        self.game_string.append(text)
        if puzzle.editor:
            self.game_string.append(f"Edited by {puzzle.editor}")

    # ------------------------------------------------------------------
    # submit

    def submit(
        self,
        kind: GameKind,
        puzzle: Puzzle,
        words: AbstractSet[str] = frozenset(),
    ) -> Optional[Rejection]:
        """
        Process the enter key for the active game.

        Returns None when the guess was scored, otherwise the reason it was
        ignored. Rejected guesses keep the buffer so it can be corrected; the
        one exception is an already-found Strands word, which clears it.
        """
        if self.game_complete:
            return self._reject(Rejection.GAME_COMPLETE)

        size = len(self.guess_buffer)
        if kind is GameKind.STRANDS:
            if size < 4:
                return self._reject(Rejection.WRONG_LENGTH)
        elif size != kind.max_guess_len:
            return self._reject(Rejection.WRONG_LENGTH)

        guess = self.guess
        self.guesses.append(guess)

        if kind is GameKind.WORDLE:
            rejection = self._submit_wordle(guess.lower(), cast(WordlePuzzle, puzzle), words)
        elif kind is GameKind.CONNECTIONS:
            rejection = self._submit_connections(guess.lower(), cast(ConnectionsPuzzle, puzzle))
        else:
            rejection = self._submit_strands(guess.lower(), cast(StrandsPuzzle, puzzle))

        if rejection is not None:
            self._reject(rejection)
            if rejection is Rejection.ALREADY_FOUND:
                self.guess_buffer.clear()
            return rejection

        self.guess_buffer.clear()
        return None

    def _reject(self, rejection: Rejection) -> Rejection:
        logger.debug("rejected guess %r: %s", self.guess, rejection.value)
        return rejection

    def _complete(self) -> None:
        self.game_complete = True
        self.lines.append(COMPLETE_LINE)

    def _submit_wordle(self, guess: str, puzzle: WordlePuzzle, words: AbstractSet[str]) -> Optional[Rejection]:
        if words and guess not in words and guess != puzzle.solution:
            return Rejection.UNKNOWN_WORD

        self.lines.append(format_tiles(guess, score_wordle(puzzle.solution, guess)))
        if guess == puzzle.solution:
            self._complete()
        return None

    def _submit_connections(self, guess: str, puzzle: ConnectionsPuzzle) -> Optional[Rejection]:
        if has_repeats(guess):
            return Rejection.DUPLICATE_SELECTION

        selection = []
        for label in guess:
            index = LABELS.find(label)
            if index < 0 or index >= len(self.word_order):
                return Rejection.UNKNOWN_LABEL
            selection.append(self.word_order[index])

        if any(word in self.used_words for word in selection):
            return Rejection.ALREADY_USED

        status = score_group(selection, [cat.words for cat in puzzle.categories])
        self.lines.append(f"{escape(', '.join(selection))} - {status.message}")

        if status is GroupStatus.CORRECT:
            self.used_words.extend(selection)
            if len(self.used_words) == len(self.word_order):
                self._complete()
        return None

    def _submit_strands(self, guess: str, puzzle: StrandsPuzzle) -> Optional[Rejection]:
        if guess in self.found_words:
            return Rejection.ALREADY_FOUND

        result = score_find(guess, puzzle.spangram, puzzle.theme_words)
        if result is FindResult.SPANGRAM:
            self.lines.append(f"{escape(guess)} is the Spangram!")
            self.found_words.append(guess)
        elif result is FindResult.THEME_WORD:
            self.lines.append(f"{escape(guess)} is a theme word!")
            self.found_words.append(guess)

        if len(self.found_words) == self.needed_words:
            self._complete()
        return None

    # ------------------------------------------------------------------
    # persistence

    def to_dict(self) -> Dict[str, Any]:
        return {
            "guess_buffer": list(self.guess_buffer),
            "guesses": list(self.guesses),
            "lines": list(self.lines),
            "game_string": list(self.game_string),
            "game_complete": self.game_complete,
            "word_order": list(self.word_order),
            "used_words": list(self.used_words),
            "found_words": list(self.found_words),
            "needed_words": self.needed_words,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        def strings(key: str) -> List[str]:
            value = data.get(key)
            return [str(v) for v in value] if isinstance(value, list) else []

        needed = data.get("needed_words", 0)
        return cls(
            guess_buffer=strings("guess_buffer"),
            guesses=strings("guesses"),
            lines=strings("lines"),
            game_string=strings("game_string"),
            game_complete=bool(data.get("game_complete", False)),
            word_order=strings("word_order"),
            used_words=strings("used_words"),
            found_words=strings("found_words"),
            needed_words=needed if isinstance(needed, int) else 0,
        )
