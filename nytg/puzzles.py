"""
Structured puzzle content for the three games.

Payloads arrive as loosely shaped JSON objects. Decoding happens once, here:
missing arrays become empty lists and missing strings become "", so the
scoring code never has to guess at the payload's shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Union

# Tag persisted in place of a GameKind while no puzzle is loaded.
NO_PUZZLE = 255


class GameKind(IntEnum):
    WORDLE = 0
    CONNECTIONS = 1
    STRANDS = 2

    @property
    def label(self) -> str:
        return TAB_LABELS[self]

    @property
    def endpoint(self) -> str:
        return self.name.lower()

    @property
    def max_guess_len(self) -> int:
        return MAX_GUESS_LEN[self]


TAB_LABELS = {
    GameKind.WORDLE: "Wordle",
    GameKind.CONNECTIONS: "Connections",
    GameKind.STRANDS: "Strands",
}

MAX_GUESS_LEN = {
    GameKind.WORDLE: 5,
    GameKind.CONNECTIONS: 4,
    GameKind.STRANDS: 20,
}


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


@dataclass
class WordlePuzzle:
    solution: str = ""
    print_date: str = ""
    editor: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "WordlePuzzle":
        return cls(
            solution=_str(payload.get("solution")).lower(),
            print_date=_str(payload.get("print_date")),
            editor=_str(payload.get("editor")),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "solution": self.solution,
            "print_date": self.print_date,
            "editor": self.editor,
        }


@dataclass
class Card:
    content: str = ""
    position: Optional[int] = None


@dataclass
class Category:
    title: str = ""
    cards: List[Card] = field(default_factory=list)

    @property
    def words(self) -> List[str]:
        return [c.content for c in self.cards]


@dataclass
class ConnectionsPuzzle:
    categories: List[Category] = field(default_factory=list)
    print_date: str = ""
    editor: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ConnectionsPuzzle":
        categories = []
        for cat in _list(payload.get("categories")):
            cat = _dict(cat)
            cards = []
            for card in _list(cat.get("cards")):
                # non-object cards are skipped entirely
                if not isinstance(card, dict):
                    continue
                position = card.get("position")
                cards.append(Card(
                    content=_str(card.get("content")),
                    position=position if isinstance(position, int) else None,
                ))
            categories.append(Category(title=_str(cat.get("title")), cards=cards))
        return cls(
            categories=categories,
            print_date=_str(payload.get("print_date")),
            editor=_str(payload.get("editor")),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "categories": [
                {
                    "title": cat.title,
                    "cards": [
                        {"content": c.content, "position": c.position} for c in cat.cards
                    ],
                }
                for cat in self.categories
            ],
            "print_date": self.print_date,
            "editor": self.editor,
        }

    @property
    def words(self) -> List[str]:
        """Every card's word, in category order."""
        return [w for cat in self.categories for w in cat.words]


@dataclass
class StrandsPuzzle:
    clue: str = ""
    spangram: str = ""
    theme_words: List[str] = field(default_factory=list)
    starting_board: List[str] = field(default_factory=list)
    print_date: str = ""
    editor: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "StrandsPuzzle":
        return cls(
            clue=_str(payload.get("clue")),
            spangram=_str(payload.get("spangram")),
            theme_words=[_str(w) for w in _list(payload.get("themeWords"))],
            starting_board=[_str(row) for row in _list(payload.get("startingBoard"))],
            print_date=_str(payload.get("printDate")),
            editor=_str(payload.get("editor")),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "clue": self.clue,
            "spangram": self.spangram,
            "themeWords": list(self.theme_words),
            "startingBoard": list(self.starting_board),
            "printDate": self.print_date,
            "editor": self.editor,
        }

    @property
    def needed_words(self) -> int:
        # the spangram counts as one more found word
        return len(self.theme_words) + 1


Puzzle = Union[WordlePuzzle, ConnectionsPuzzle, StrandsPuzzle]

PUZZLE_TYPES = {
    GameKind.WORDLE: WordlePuzzle,
    GameKind.CONNECTIONS: ConnectionsPuzzle,
    GameKind.STRANDS: StrandsPuzzle,
}


def decode_puzzle(kind: GameKind, payload: Any) -> Puzzle:
    """
    Build the structured puzzle for ``kind`` from a decoded JSON value.

    Anything that is not a JSON object decodes to an empty puzzle.
    """
    return PUZZLE_TYPES[GameKind(kind)].from_payload(_dict(payload))


def empty_puzzle(kind: GameKind) -> Puzzle:
    return PUZZLE_TYPES[GameKind(kind)]()
