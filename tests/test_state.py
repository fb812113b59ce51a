import pytest

from nytg.errors import StateLoadError
from nytg.puzzles import NO_PUZZLE
from nytg.session import SessionState
from nytg.state import dumps, load_or_default, load_state, loads, save_state

from conftest import type_word


def test_round_trip_fresh_state():
    state = SessionState()
    assert loads(dumps(state)) == state


def test_round_trip_mid_game(make_session):
    session = make_session(index=1)
    type_word(session, "abcd")
    session.enter()
    type_word(session, "ef")
    session.left()
    session.right()
    type_word(session, "ijkl")
    session.enter()

    restored = loads(dumps(session.state))
    assert restored == session.state
    assert restored.game.word_order == session.game.word_order


def test_round_trip_every_game(make_session):
    for index in range(3):
        session = make_session(index=index)
        assert loads(dumps(session.state)) == session.state


def test_blob_layout(make_session):
    import orjson
    blob = orjson.loads(dumps(make_session().state))
    assert blob["page"] == {"index": 0, "values": ["Wordle", "Connections", "Strands"]}
    assert blob["date"] == "2024-06-01"
    assert blob["current_game"][0] == 0
    assert blob["game_cache"][0][:2] == [0, "2024-06-01"]


def test_missing_keys_take_defaults():
    state = loads(b'{"date": "2024-06-01"}')
    assert state.current_kind == NO_PUZZLE
    assert state.page.index == 0
    assert state.game.guesses == []


@pytest.mark.parametrize("blob", [
    b"not json",
    b"[]",
    b'{"current_game": [9, {}]}',
    b'{"date": "yesterday"}',
    b'{"page": "Wordle"}',
])
def test_bad_blobs_raise(blob):
    with pytest.raises(StateLoadError):
        loads(blob)


def test_load_or_default_missing_file(tmp_path):
    state = load_or_default(tmp_path / "missing.json")
    assert state.current_kind == NO_PUZZLE


def test_load_or_default_corrupt_file(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{{{")
    assert load_or_default(path).current_kind == NO_PUZZLE


def test_save_creates_parent_dirs(tmp_path, make_session):
    session = make_session()
    path = tmp_path / "nested" / "state.json"
    save_state(session.state, path)
    assert load_state(path) == session.state
