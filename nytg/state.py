"""
Load and save the session state blob.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import orjson

from .errors import StateLoadError
from .session import SessionState

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def dumps(state: SessionState) -> bytes:
    return orjson.dumps(state.to_dict(), option=orjson.OPT_INDENT_2)


def loads(data: Union[str, bytes]) -> SessionState:
    """
    Decode a state blob.

    Raises:
        StateLoadError: If the blob is not valid JSON or does not describe a state
    """
    try:
        obj = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise StateLoadError(f"Invalid JSON in state: {e}") from e
    if not isinstance(obj, dict):
        raise StateLoadError(f"Expected a JSON object, got {type(obj).__name__}")
    try:
        return SessionState.from_dict(obj)
    except (AttributeError, TypeError, ValueError) as e:
        raise StateLoadError(f"Bad state: {e}") from e


def load_state(path: PathLike) -> SessionState:
    with open(path, "rb") as f:
        return loads(f.read())


def load_or_default(path: PathLike) -> SessionState:
    """Load the saved state, falling back to a fresh one on any failure."""
    try:
        return load_state(path)
    except FileNotFoundError:
        logger.info("no saved state at %s, starting fresh", path)
    except (OSError, StateLoadError) as e:
        logger.warning("ignoring saved state at %s: %s", path, e)
    return SessionState()


def save_state(state: SessionState, path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        f.write(dumps(state))
    logger.info("saved state to %s", path)
