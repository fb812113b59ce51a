import io

import pytest
from rich.console import Console

from nytg.cli.play import run
from nytg.session import Key, KeyEvent
from nytg.ui import decode_key, render_frame

from conftest import type_word


@pytest.mark.parametrize("data,expected", [
    ("a", KeyEvent(Key.CHAR, "a")),
    ("\r", KeyEvent(Key.ENTER)),
    ("\x7f", KeyEvent(Key.BACKSPACE)),
    ("~", KeyEvent(Key.QUIT)),
    ("\x1b[A", KeyEvent(Key.UP)),
    ("\x1b[B", KeyEvent(Key.DOWN)),
    ("\x1b[C", KeyEvent(Key.RIGHT)),
    ("\x1b[D", KeyEvent(Key.LEFT)),
    ("\x1b[3~", None),
    ("\x01", None),
    ("\x03", None),
    ("", None),
])
def test_decode_key(data, expected):
    assert decode_key(data) == expected


def render_text(state):
    console = Console(file=io.StringIO(), width=80, record=True)
    console.print(render_frame(state))
    return console.export_text()


def test_frame_contents(make_session):
    session = make_session()
    type_word(session, "cr")
    text = render_text(session.state)
    assert "NYT Games CLI" in text
    assert "Wordle on 2024-06-01" in text
    assert "Guess a five letter word" in text
    assert "GUESS: cr" in text
    assert "Controls: ~: exit" in text


def test_frame_hides_guess_when_complete(make_session):
    session = make_session()
    type_word(session, "crane")
    session.enter()
    text = render_text(session.state)
    assert "crane, GGGGG" in text
    assert "Game complete!" in text
    assert "GUESS:" not in text


class ScriptedReader:
    def __init__(self, events):
        self.events = list(events)

    def read(self, timeout):
        if not self.events:
            return KeyEvent(Key.QUIT)
        event = self.events.pop(0)
        if isinstance(event, BaseException):
            raise event
        return event


def test_run_loop_applies_events(make_session):
    session = make_session()
    events = [KeyEvent(Key.CHAR, ch) for ch in "crane"] + [None, KeyEvent(Key.ENTER)]
    run(session, ScriptedReader(events), console=Console(file=io.StringIO()), screen=False)
    assert session.game.game_complete
    assert session.should_quit


def test_run_loop_quits_on_interrupt(make_session):
    session = make_session()
    run(session, ScriptedReader([KeyboardInterrupt()]), console=Console(file=io.StringIO()), screen=False)
    assert session.should_quit


def test_run_loop_quits_on_interrupt_during_download(make_session, client):
    session = make_session()

    def interrupted(kind, day):
        raise KeyboardInterrupt

    client.fetch = interrupted
    run(session, ScriptedReader([KeyEvent(Key.RIGHT)]), console=Console(file=io.StringIO()), screen=False)
    assert session.should_quit
    assert session.state.page.index == 1
    assert session.state.current_kind == 0
