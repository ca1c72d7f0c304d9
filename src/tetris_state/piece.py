"""The falling piece."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Protocol

from .coord import Coord
from .move import Move
from .position import Position
from .shape import Shape


class BoardLike(Protocol):
    """Anything that can answer occupancy questions about board cells."""

    def validate_coord(self, location: Coord) -> bool:
        ...

    def is_cell_empty(self, location: Coord) -> bool:
        ...


@dataclass
class Piece:
    """Active falling piece in the game.

    Only ``position`` changes while the piece falls.  Once ``disable`` has been
    called the piece is inert until ``reset`` gives it a new anchor and shape.
    """

    position: Position
    shape: Shape
    active: bool = True

    @classmethod
    def spawn(cls, anchor: Coord, shape: Shape) -> "Piece":
        """Return an active piece at ``anchor`` in its spawn orientation."""

        return cls(Position(anchor), shape)

    @property
    def block_coords(self) -> List[Coord]:
        """Return the global block coordinates for this piece."""

        return self.shape.coords_at(self.position)

    def move(self, move: Move) -> None:
        """Apply ``move`` to the position without any legality check."""

        self.position = self.position + move

    def disable(self) -> None:
        self.active = False

    def reset(self, anchor: Coord, shape: Shape) -> None:
        """Reactivate the piece at ``anchor`` with ``shape``."""

        self.position = Position(anchor)
        self.shape = shape
        self.active = True

    def intersects(self, board: BoardLike) -> bool:
        """Return ``True`` if any block is off the board or on an occupied cell."""

        return any(
            not board.validate_coord(coord) or not board.is_cell_empty(coord)
            for coord in self.block_coords
        )

    def copy(self) -> "Piece":
        # Position and Shape are frozen, so a shallow replace is a full copy.
        return replace(self)


__all__ = ["BoardLike", "Piece"]
