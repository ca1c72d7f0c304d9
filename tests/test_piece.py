from __future__ import annotations

from typing import Set

from tetris_state import SHAPES, Coord, Move, Piece, Position, TetrominoType

from conftest import make_state


class FakeBoard:
    def __init__(self, occupied: Set[Coord], rows: int = 6, cols: int = 6) -> None:
        self.occupied = occupied
        self.rows = rows
        self.cols = cols

    def validate_coord(self, location: Coord) -> bool:
        return 0 <= location.row < self.rows and 0 <= location.col < self.cols

    def is_cell_empty(self, location: Coord) -> bool:
        return location not in self.occupied


def test_block_coords_follow_position(o_shape):
    piece = Piece.spawn(Coord(1, 4), o_shape)
    assert piece.active
    assert piece.position == Position(Coord(1, 4))
    assert set(piece.block_coords) == {Coord(1, 4), Coord(1, 5), Coord(2, 4), Coord(2, 5)}

    piece.move(Move.DOWN + Move.LEFT)
    assert set(piece.block_coords) == {Coord(2, 3), Coord(2, 4), Coord(3, 3), Coord(3, 4)}


def test_disable_is_idempotent_and_reset_reactivates(o_shape, i_shape):
    piece = Piece.spawn(Coord(0, 0), o_shape)
    piece.move(Move.DOWN + Move.CLOCKWISE)
    piece.disable()
    piece.disable()
    assert not piece.active

    piece.reset(Coord(1, 2), i_shape)
    assert piece.active
    assert piece.shape is i_shape
    assert piece.position == Position(Coord(1, 2), 0)


def test_intersects_occupied_cells(o_shape):
    piece = Piece.spawn(Coord(0, 0), o_shape)
    assert not piece.intersects(FakeBoard(set()))
    assert piece.intersects(FakeBoard({Coord(1, 1)}))


def test_blocks_off_the_board_intersect(o_shape):
    piece = Piece.spawn(Coord(0, 0), o_shape)
    piece.move(Move(row=-1))
    assert piece.intersects(FakeBoard(set()))

    piece = Piece.spawn(Coord(4, 5), o_shape)
    assert piece.intersects(FakeBoard(set()))


def test_intersects_against_game_state():
    state = make_state()
    board_piece = Piece.spawn(state.entry_coord, SHAPES[TetrominoType.T])
    assert not board_piece.intersects(state)
    state.set_cell(state.entry_coord.shifted(0, 1), 3)
    assert board_piece.intersects(state)


def test_copy_is_independent(o_shape):
    piece = Piece.spawn(Coord(1, 1), o_shape)
    clone = piece.copy()
    clone.move(Move.DOWN)
    clone.disable()
    assert piece.active
    assert piece.position == Position(Coord(1, 1))
    assert clone.shape is piece.shape
