"""
Session state and the controller that drives it from key events.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import AbstractSet, Any, Dict, Optional

import orjson

from .cache import PuzzleCache
from .clients.base_client import PuzzleClient
from .errors import FetchError, MalformedResponse, ServerError
from .game_state import GameState, Rejection, Shuffle
from .puzzles import NO_PUZZLE, GameKind, Puzzle, decode_puzzle, empty_puzzle
from .tabs import Tabber

logger = logging.getLogger(__name__)


class Key(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""


@dataclass
class SessionState:
    """Everything persisted between runs."""
    page: Tabber = field(default_factory=Tabber)
    game_cache: PuzzleCache = field(default_factory=PuzzleCache)
    day: date = field(default_factory=date.today)
    current_kind: int = NO_PUZZLE
    puzzle: Optional[Puzzle] = None
    game: GameState = field(default_factory=GameState)

    @property
    def kind(self) -> GameKind:
        return GameKind(self.page.index)

    @property
    def has_puzzle(self) -> bool:
        return self.current_kind != NO_PUZZLE and self.puzzle is not None

    def active_puzzle(self) -> Puzzle:
        """The loaded puzzle, or an empty one when nothing matching is loaded."""
        if self.has_puzzle and self.current_kind == self.kind:
            return self.puzzle
        return empty_puzzle(self.kind)

    def to_dict(self) -> Dict[str, Any]:
        payload = self.puzzle.to_payload() if self.puzzle is not None else {}
        return {
            "page": self.page.to_dict(),
            "game_cache": self.game_cache.to_list(),
            "date": self.day.isoformat(),
            "current_game": [self.current_kind, payload],
            **self.game.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionState":
        """
        Rebuild a state from its persisted form. Missing keys take defaults;
        a wrongly typed value raises ``TypeError``/``ValueError``.
        """
        page = Tabber.from_dict(data.get("page") or {})
        saved_day = data.get("date")
        current_kind, payload = data.get("current_game") or (NO_PUZZLE, {})
        current_kind = int(current_kind)

        puzzle = None
        if current_kind != NO_PUZZLE:
            puzzle = decode_puzzle(GameKind(current_kind), payload)

        return cls(
            page=page,
            game_cache=PuzzleCache.from_list(data.get("game_cache")),
            day=date.fromisoformat(saved_day) if saved_day else date.today(),
            current_kind=current_kind,
            puzzle=puzzle,
            game=GameState.from_dict(data),
        )


class Session:
    """
    Applies key events to a SessionState.

    Args:
        state: The state to drive (mutated in place)
        client: Fetch collaborator used on cache misses
        words: Known Wordle words; empty accepts every guess
        shuffle: In-place permutation used for the Connections word order
    """

    def __init__(
        self,
        state: SessionState,
        client: PuzzleClient,
        words: AbstractSet[str] = frozenset(),
        shuffle: Shuffle = random.shuffle,
    ):
        self.state = state
        self.client = client
        self.words = words
        self.shuffle = shuffle
        self.should_quit = False

    @property
    def game(self) -> GameState:
        return self.state.game

    def start(self) -> None:
        """
        Load the active puzzle unless the state already carries it, described,
        for the active tab. A state saved mid-refresh is reloaded.
        """
        state = self.state
        if (
            state.current_kind == NO_PUZZLE
            or state.current_kind != state.page.index
            or not self.game.game_string
        ):
            self.refresh()

    def handle(self, event: KeyEvent) -> None:
        handlers = {
            Key.BACKSPACE: self.backspace,
            Key.ENTER: self.enter,
            Key.LEFT: self.left,
            Key.RIGHT: self.right,
            Key.UP: self.up,
            Key.DOWN: self.down,
            Key.QUIT: self.quit,
        }
        if event.key is Key.CHAR:
            self.key(event.char)
        else:
            handlers[event.key]()

    def key(self, char: str) -> None:
        self.game.type_char(self.state.kind, char)

    def backspace(self) -> None:
        self.game.backspace()

    def enter(self) -> Optional[Rejection]:
        return self.game.submit(self.state.kind, self.state.active_puzzle(), self.words)

    def left(self) -> None:
        self.state.page.prev()
        self.refresh()

    def right(self) -> None:
        self.state.page.next()
        self.refresh()

    def up(self) -> None:
        self.state.day += timedelta(days=1)
        self.refresh()

    def down(self) -> None:
        self.state.day -= timedelta(days=1)
        self.refresh()

    def quit(self) -> None:
        self.should_quit = True

    def refresh(self) -> None:
        """Clear the per-game state, load the puzzle for the active tab and day, describe it."""
        self.game.clear()
        puzzle = self.download()
        if puzzle is None:
            self.state.current_kind = NO_PUZZLE
            self.state.puzzle = None
        else:
            self.state.current_kind = int(self.state.kind)
            self.state.puzzle = puzzle
        self.game.describe(self.state.kind, self.state.active_puzzle(), self.shuffle)

    def download(self) -> Optional[Puzzle]:
        """
        Fetch-or-cache the puzzle for the active tab and day.

        Failures append a diagnostic line to the display log and leave the
        cache untouched, so navigating back retries the request. A cached
        entry that no longer decodes is dropped and fetched again.
        """
        kind, day = self.state.kind, self.state.day

        raw = self.state.game_cache.lookup(kind, day)
        if raw is not None:
            try:
                return decode_puzzle(kind, parse_payload(raw))
            except FetchError as e:
                logger.warning("dropping cached %s puzzle for %s: %s", kind.label, day, e)
                self.state.game_cache.discard(kind, day)

        try:
            raw = self.client.fetch(kind, day)
            payload = parse_payload(raw)
        except ServerError as e:
            logger.info("no %s puzzle for %s: %s", kind.label, day, e)
            self.game.lines.append(f"No puzzle available for {day.isoformat()}")
            return None
        except FetchError as e:
            logger.warning("fetching %s for %s failed: %s", kind.label, day, e)
            self.game.lines.append(e.log_line)
            return None

        self.state.game_cache.store(kind, day, raw)
        logger.info("fetched %s puzzle for %s", kind.label, day)
        return decode_puzzle(kind, payload)


def parse_payload(raw: str) -> Dict[str, Any]:
    """
    Decode a raw response body.

    Raises:
        MalformedResponse: If the body is not a JSON object
        ServerError: If the object carries ``"status": "ERROR"``
    """
    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise MalformedResponse(f"Invalid JSON in response: {e}") from e
    if not isinstance(payload, dict):
        raise MalformedResponse(f"Expected a JSON object, got {type(payload).__name__}")
    if payload.get("status") == "ERROR":
        raise ServerError(str(payload.get("errors") or payload.get("message") or "ERROR"))
    return payload
