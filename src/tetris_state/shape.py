"""Shape catalog.

A :class:`Shape` bundles the block offsets of every orientation with the
integer written into the board when the shape is placed.  Only the spawn
orientation of each tetromino is spelled out; the remaining orientations are
derived by rotating it.  Shapes are frozen and shared freely between pieces,
queues and copies of the game state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .coord import Coord
from .position import ROTATION_STATES, Position

Offset = Tuple[int, int]
RotationState = Tuple[Offset, ...]

# Board cells are stored as uint8.
MAX_CELL_VALUE = 255


class TetrominoType(str, Enum):
    """Names of the seven standard tetrominoes, in catalog order."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


@dataclass(frozen=True)
class Shape:
    """One entry of the shape catalog."""

    name: str
    value: int
    rotations: Tuple[RotationState, ...]

    def __post_init__(self) -> None:
        if not 0 < self.value <= MAX_CELL_VALUE:
            raise ValueError(f"Shape value must be between 1 and {MAX_CELL_VALUE}")
        if not self.rotations or any(not state for state in self.rotations):
            raise ValueError("Shape needs at least one non-empty rotation state")

    @classmethod
    def from_picture(cls, name: str, value: int, picture: str) -> "Shape":
        """Build a shape from its spawn orientation drawn with ``#`` cells.

        Rows are separated by ``/``.  The other orientations are the spawn
        orientation turned clockwise, one quarter at a time.
        """

        state = tuple(
            (r, c)
            for r, line in enumerate(picture.split("/"))
            for c, cell in enumerate(line)
            if cell == "#"
        )
        rotations = [state]
        for _ in range(ROTATION_STATES - 1):
            rotations.append(_turn_clockwise(rotations[-1]))
        return cls(name, value, tuple(rotations))

    def __deepcopy__(self, memo: dict) -> "Shape":
        # Catalog entries are shared, never duplicated.
        return self

    def offsets(self, rotation: int) -> RotationState:
        """Return the block offsets for ``rotation``.

        Values are wrapped so any integer is accepted.
        """

        return self.rotations[rotation % len(self.rotations)]

    def coords_at(self, position: Position) -> List[Coord]:
        """Return the board coordinates of the blocks at ``position``."""

        anchor = position.location
        return [anchor.shifted(dr, dc) for dr, dc in self.offsets(position.rotation)]


def _turn_clockwise(state: RotationState) -> RotationState:
    # The last row becomes the first column; the result stays anchored at (0, 0).
    height = max(r for r, _ in state) + 1
    return tuple(sorted((c, height - 1 - r) for r, c in state))


_PICTURES: Dict[TetrominoType, str] = {
    TetrominoType.I: "####",
    TetrominoType.O: "##/##",
    TetrominoType.T: "###/.#.",
    TetrominoType.S: ".##/##.",
    TetrominoType.Z: "##./.##",
    TetrominoType.J: "#../###",
    TetrominoType.L: "..#/###",
}

SHAPES: Dict[TetrominoType, Shape] = {
    t_type: Shape.from_picture(t_type.value, value, _PICTURES[t_type])
    for value, t_type in enumerate(TetrominoType, start=1)
}

CATALOG: Tuple[Shape, ...] = tuple(SHAPES.values())


__all__ = ["CATALOG", "MAX_CELL_VALUE", "SHAPES", "Shape", "TetrominoType"]
