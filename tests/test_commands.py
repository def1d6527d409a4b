import itertools

import pytest

from lightsout.engine.commands import Command, click_at, dispatch
from lightsout.engine.state import GameSession
from lightsout.rng import SeededRandom

def make_session(size=9, start=100, **kw):
    return GameSession(size, rng=SeededRandom(entropy=itertools.count(start).__next__), **kw)

def test_replay_and_new_board():
    s = make_session()
    cells = list(s.cells)
    dispatch(s, Command.REPLAY)
    assert s.attempts == 2 and s.seed == 100 and s.cells == cells
    dispatch(s, Command.NEW_BOARD)
    assert s.attempts == 1 and s.seed == 101

def test_toggle_size_command():
    s = make_session(9)
    dispatch(s, Command.TOGGLE_SIZE)
    assert s.size == 5
    dispatch(s, Command.TOGGLE_SIZE)
    assert s.size == 9

def test_unknown_command():
    with pytest.raises(ValueError):
        dispatch(make_session(), "quit")

def test_click_at_maps_pixels_to_cells():
    s = make_session(5, generation_strength=0)
    # 5x5 board: 72px lights starting at x=280
    assert click_at(s, (280 + 72 * 2 + 5, 72 * 2 + 5)) is True
    assert s.board.get(2, 2) and s.board.get(2, 1) and s.board.get(1, 2)
    assert s.clicks == 1

def test_click_left_of_board_is_ignored():
    s = make_session(5, generation_strength=0)
    assert click_at(s, (279, 10)) is False
    assert click_at(s, (10, 10)) is False
    assert s.board.is_dark() and s.clicks == 0
