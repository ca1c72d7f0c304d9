"""Authoritative state for a falling-block puzzle game."""

from .coord import Coord
from .move import Move
from .position import Position, ROTATION_STATES
from .shape import CATALOG, MAX_CELL_VALUE, SHAPES, Shape, TetrominoType
from .shape_queue import BagRandomizer, Randomizer, ShapeQueue, UniformRandomizer
from .piece import Piece
from .lines_per_level import (
    ConstantLinesPerLevel,
    FunctionLinesPerLevel,
    LinesPerLevel,
    as_lines_per_level,
)
from .game_state import TetrisState

__all__ = [
    "BagRandomizer",
    "CATALOG",
    "ConstantLinesPerLevel",
    "Coord",
    "FunctionLinesPerLevel",
    "LinesPerLevel",
    "MAX_CELL_VALUE",
    "Move",
    "Piece",
    "Position",
    "ROTATION_STATES",
    "Randomizer",
    "SHAPES",
    "Shape",
    "ShapeQueue",
    "TetrisState",
    "TetrominoType",
    "UniformRandomizer",
    "as_lines_per_level",
]
