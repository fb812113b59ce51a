from datetime import date

import orjson
import pytest

from nytg.errors import NetworkFailure
from nytg.puzzles import GameKind
from nytg.session import Session, SessionState

DAY = date(2024, 6, 1)

WORDLE = {"id": 1, "solution": "crane", "print_date": "2024-06-01", "editor": ""}

CONNECTIONS = {
    "status": "OK",
    "print_date": "2024-06-01",
    "categories": [
        {"title": "FISH", "cards": [{"content": "BASS", "position": 0}, {"content": "PIKE", "position": 1},
                                    {"content": "CARP", "position": 2}, {"content": "SOLE", "position": 3}]},
        {"title": "TREES", "cards": [{"content": "OAK", "position": 4}, {"content": "ELM", "position": 5},
                                     {"content": "ASH", "position": 6}, {"content": "FIR", "position": 7}]},
        {"title": "COLORS", "cards": [{"content": "RED", "position": 8}, {"content": "BLUE", "position": 9},
                                      {"content": "GREEN", "position": 10}, {"content": "PINK", "position": 11}]},
        {"title": "NOTES", "cards": [{"content": "DO", "position": 12}, {"content": "RE", "position": 13},
                                     {"content": "MI", "position": 14}, {"content": "FA", "position": 15}]},
    ],
}

STRANDS = {
    "printDate": "2024-06-01",
    "clue": "Under the sea",
    "spangram": "OCEANLIFE",
    "themeWords": ["CRAB", "SHARK"],
    "startingBoard": ["OCEA", "NLIF", "ECRA", "BSHA"],
}

PAYLOADS = {
    GameKind.WORDLE: WORDLE,
    GameKind.CONNECTIONS: CONNECTIONS,
    GameKind.STRANDS: STRANDS,
}


class FakeClient:
    """Serves canned payloads and records every request."""

    def __init__(self, responses=None):
        self.responses = responses if responses is not None else {
            (kind, DAY): orjson.dumps(payload).decode() for kind, payload in PAYLOADS.items()
        }
        self.calls = []

    def fetch(self, kind, day):
        self.calls.append((kind, day))
        try:
            return self.responses[(kind, day)]
        except KeyError:
            raise NetworkFailure(f"no response for {kind} {day}")


def identity(words):
    pass


@pytest.fixture()
def client():
    return FakeClient()


@pytest.fixture()
def make_session(client):
    def _make(index=0, words=frozenset({"crane", "slate", "eaten"})):
        state = SessionState(day=DAY)
        state.page.index = index
        session = Session(state, client, words=words, shuffle=identity)
        session.start()
        return session
    return _make


def type_word(session, word):
    for ch in word:
        session.key(ch)
