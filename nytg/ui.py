"""
Terminal front end: draws a SessionState with rich and reads raw key presses.
"""

from __future__ import annotations

import os
import select
import sys
import termios
import tty
from typing import List, Optional

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from .session import Key, KeyEvent, SessionState

POLL_INTERVAL = 0.05

CONTROLS = "Controls: ~: exit, up/down: change date, left/right: change tab"

ESCAPE_KEYS = {
    "\x1b[A": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1b[C": Key.RIGHT,
    "\x1b[D": Key.LEFT,
    "\x1bOA": Key.UP,
    "\x1bOB": Key.DOWN,
    "\x1bOC": Key.RIGHT,
    "\x1bOD": Key.LEFT,
}

CONTROL_KEYS = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
    "~": Key.QUIT,
}


def decode_key(data: str) -> Optional[KeyEvent]:
    """Map the bytes of one key press to an event; None for keys the game ignores."""
    if not data:
        return None
    if data.startswith("\x1b"):
        key = ESCAPE_KEYS.get(data)
        return KeyEvent(key) if key else None
    if data in CONTROL_KEYS:
        return KeyEvent(CONTROL_KEYS[data])
    if len(data) == 1 and data.isprintable():
        return KeyEvent(Key.CHAR, data)
    return None


class KeyReader:
    """
    Puts stdin in cbreak mode for the lifetime of the context and polls it for
    key presses.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.fd = self.stream.fileno()
        self._saved = None

    def __enter__(self) -> "KeyReader":
        self._saved = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        return self

    def __exit__(self, *exc) -> None:
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
            self._saved = None

    def _ready(self, timeout: float) -> bool:
        ready, _, _ = select.select([self.fd], [], [], timeout)
        return bool(ready)

    def read(self, timeout: float = POLL_INTERVAL) -> Optional[KeyEvent]:
        if not self._ready(timeout):
            return None
        data = os.read(self.fd, 1)
        # escape sequences arrive as a burst; collect the rest of it
        if data == b"\x1b":
            while self._ready(0.01):
                data += os.read(self.fd, 1)
        return decode_key(data.decode("utf-8", errors="ignore"))


def render_tabs(state: SessionState) -> Text:
    text = Text()
    for i, label in enumerate(state.page.values):
        if i:
            text.append(" │ ", style="blue")
        text.append(label, style="bold green" if i == state.page.index else "blue")
    return text


def render_body(state: SessionState) -> List[Text]:
    game = state.game
    lines = [Text(line) for line in game.game_string]
    lines.extend(Text.from_markup(line) for line in game.lines)
    if not game.game_complete:
        lines.append(Text(f"GUESS: {game.guess}"))
    return lines


def render_frame(state: SessionState) -> RenderableType:
    """One full frame: tab bar, game panel, controls footer."""
    title = f"{state.page.current} on {state.day.isoformat()}"
    return Group(
        Panel(render_tabs(state), title="NYT Games CLI", border_style="blue"),
        Panel(Group(*render_body(state)), title=title, title_align="left"),
        Text(CONTROLS, style="dim"),
    )
