from __future__ import annotations

from typing import Sequence

import pytest

from tetris_state.shape import SHAPES, Shape, TetrominoType
from tetris_state.shape_queue import BagRandomizer, ShapeQueue
from tetris_state.game_state import TetrisState


def single_shape_queue(*shapes: Shape) -> ShapeQueue:
    """Queue dealing ``shapes`` in order, forever."""

    return ShapeQueue(BagRandomizer(shapes, shuffle=False))


def make_state(
    rows: int = 8,
    cols: int = 10,
    shapes: Sequence[Shape] = (SHAPES[TetrominoType.O],),
    **kwargs,
) -> TetrisState:
    return TetrisState(rows, cols, next_shapes=single_shape_queue(*shapes), **kwargs)


@pytest.fixture
def o_shape() -> Shape:
    return SHAPES[TetrominoType.O]


@pytest.fixture
def i_shape() -> Shape:
    return SHAPES[TetrominoType.I]
