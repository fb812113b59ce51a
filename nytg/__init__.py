"""
NYT Games CLI - puzzle-state engine for Wordle, Connections and Strands.
"""

from .puzzles import GameKind, decode_puzzle
from .scoring import score_wordle, score_group, score_find
from .session import Session, SessionState, Key, KeyEvent
from .state import load_or_default, save_state

__version__ = "0.1.0"

__all__ = [
    "GameKind",
    "decode_puzzle",
    "score_wordle",
    "score_group",
    "score_find",
    "Session",
    "SessionState",
    "Key",
    "KeyEvent",
    "load_or_default",
    "save_state",
]
