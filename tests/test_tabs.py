from nytg.tabs import Tabber


def test_next_three_times_returns_home():
    tabs = Tabber()
    for _ in range(3):
        tabs.next()
    assert tabs.index == 0


def test_prev_wraps_from_zero():
    tabs = Tabber()
    tabs.prev()
    assert tabs.index == 2
    assert tabs.current == "Strands"


def test_next_then_prev():
    tabs = Tabber(index=1)
    tabs.next()
    tabs.prev()
    assert tabs.index == 1


def test_from_dict_repairs_bad_values():
    assert Tabber.from_dict({"index": 7}) == Tabber()
    assert Tabber.from_dict({"values": "Wordle"}) == Tabber()
    assert Tabber.from_dict(Tabber(index=2).to_dict()) == Tabber(index=2)
