from nytg.puzzles import (
    ConnectionsPuzzle,
    GameKind,
    StrandsPuzzle,
    WordlePuzzle,
    decode_puzzle,
    empty_puzzle,
)

from conftest import CONNECTIONS, STRANDS, WORDLE


def test_game_kind_properties():
    assert [k.label for k in GameKind] == ["Wordle", "Connections", "Strands"]
    assert [k.max_guess_len for k in GameKind] == [5, 4, 20]
    assert GameKind.STRANDS.endpoint == "strands"


def test_decode_wordle():
    puzzle = decode_puzzle(GameKind.WORDLE, WORDLE)
    assert puzzle == WordlePuzzle(solution="crane", print_date="2024-06-01")


def test_decode_connections():
    puzzle = decode_puzzle(GameKind.CONNECTIONS, CONNECTIONS)
    assert isinstance(puzzle, ConnectionsPuzzle)
    assert [c.title for c in puzzle.categories] == ["FISH", "TREES", "COLORS", "NOTES"]
    assert puzzle.categories[0].words == ["BASS", "PIKE", "CARP", "SOLE"]
    assert len(puzzle.words) == 16
    assert puzzle.categories[1].cards[0].position == 4


def test_decode_strands():
    puzzle = decode_puzzle(GameKind.STRANDS, STRANDS)
    assert isinstance(puzzle, StrandsPuzzle)
    assert puzzle.clue == "Under the sea"
    assert puzzle.spangram == "OCEANLIFE"
    assert puzzle.theme_words == ["CRAB", "SHARK"]
    assert puzzle.starting_board[0] == "OCEA"
    assert puzzle.needed_words == 3


def test_missing_fields_default_to_empty():
    assert decode_puzzle(GameKind.WORDLE, {}) == WordlePuzzle()
    assert decode_puzzle(GameKind.CONNECTIONS, {"categories": None}).categories == []
    strands = decode_puzzle(GameKind.STRANDS, {"themeWords": "nope"})
    assert strands.theme_words == []
    assert strands.needed_words == 1


def test_malformed_cards_are_skipped():
    payload = {"categories": [{"cards": ["BASS", {"content": "PIKE"}, {"position": 3}]}, "junk"]}
    puzzle = decode_puzzle(GameKind.CONNECTIONS, payload)
    assert puzzle.categories[0].words == ["PIKE", ""]
    assert puzzle.categories[1].cards == []


def test_non_object_payload_decodes_empty():
    assert decode_puzzle(GameKind.STRANDS, ["x"]) == StrandsPuzzle()


def test_payload_round_trip():
    for kind, payload in [(GameKind.WORDLE, WORDLE), (GameKind.CONNECTIONS, CONNECTIONS), (GameKind.STRANDS, STRANDS)]:
        puzzle = decode_puzzle(kind, payload)
        assert decode_puzzle(kind, puzzle.to_payload()) == puzzle


def test_empty_puzzle():
    assert empty_puzzle(GameKind.CONNECTIONS) == ConnectionsPuzzle()
