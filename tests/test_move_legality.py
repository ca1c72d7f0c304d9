from __future__ import annotations

import pytest

from tetris_state import Coord, Move, Position, Shape

from conftest import make_state


@pytest.mark.parametrize("move", [Move.DOWN, Move.LEFT, Move.RIGHT, Move.STAND, Move.CLOCKWISE])
def test_moves_allowed_on_empty_board(move: Move):
    state = make_state()
    assert state.can_piece_move(move)


@pytest.mark.parametrize("move", [Move.UP, Move.UP + Move.LEFT, Move(row=-2)])
def test_upward_moves_are_never_allowed(move: Move):
    state = make_state()
    assert not state.can_piece_move(move)


@pytest.mark.parametrize("flag", ["is_game_over", "is_paused"])
def test_flags_block_every_move(flag: str):
    state = make_state()
    setattr(state, flag, True)
    for move in (Move.DOWN, Move.LEFT, Move.RIGHT, Move.STAND, Move.CLOCKWISE):
        assert not state.can_piece_move(move)


def test_inactive_piece_cannot_move():
    state = make_state()
    state.place_piece()
    assert not state.piece.active
    assert not state.can_piece_move(Move.DOWN)
    assert not state.move_piece(Move.DOWN)


def test_walls_and_floor_stop_the_piece():
    state = make_state(rows=6, cols=10)
    entry_col = state.entry_coord.col
    for _ in range(entry_col):
        assert state.move_piece(Move.LEFT)
    assert not state.move_piece(Move.LEFT)
    assert state.piece.position.location.col == 0

    for _ in range(10 - 2):
        assert state.move_piece(Move.RIGHT)
    assert not state.move_piece(Move.RIGHT)

    assert state.hard_drop() == 3
    assert not state.can_piece_move(Move.DOWN)
    assert state.piece_in_bounds()


def test_occupied_cells_reject_positions():
    state = make_state()
    below = state.piece.position + Move.DOWN
    assert state.is_position_valid(below)
    state.set_cell(Coord(3, state.entry_coord.col), 4)
    assert not state.is_position_valid(below)
    assert not state.can_piece_move(Move.DOWN)
    assert state.can_piece_move(Move.STAND)


def test_out_of_bounds_positions_are_invalid():
    state = make_state(rows=6, cols=10)
    assert not state.is_position_valid(Position(Coord(-1, 0)))
    assert not state.is_position_valid(Position(Coord(5, 0)))
    assert not state.is_position_valid(Position(Coord(0, 9)))
    assert state.is_position_valid(Position(Coord(4, 8)))


def test_column_spread_over_four_is_rejected():
    wide = Shape("wide", 9, (((0, 0), (0, 5)),))
    state = make_state(rows=6, cols=10, shapes=(wide,))
    position = Position(Coord(1, 2))
    coords = state.get_shape_coords_at_position(position)
    assert all(state.validate_coord(c) and state.is_cell_empty(c) for c in coords)
    assert not state.is_position_valid(position)
    assert not state.can_piece_move(Move.STAND)


def test_column_spread_of_four_is_accepted():
    gapped = Shape("gapped", 9, (((0, 0), (0, 4)),))
    state = make_state(rows=6, cols=10, shapes=(gapped,))
    assert state.is_position_valid(Position(Coord(1, 2)))


def test_move_piece_applies_only_legal_moves():
    state = make_state()
    start = state.piece.position
    assert state.move_piece(Move.DOWN)
    assert state.piece.position == start + Move.DOWN
    assert not state.move_piece(Move.UP)
    assert state.piece.position == start + Move.DOWN
