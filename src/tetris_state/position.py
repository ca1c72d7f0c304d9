"""Piece placement anchors."""

from __future__ import annotations

from dataclasses import dataclass

from .coord import Coord
from .move import Move

# Every shape in the catalog is described by four orientations.
ROTATION_STATES = 4


@dataclass(frozen=True)
class Position:
    """Anchor location of a piece plus its rotation index."""

    location: Coord
    rotation: int = 0

    def __add__(self, move: Move) -> "Position":
        if not isinstance(move, Move):
            return NotImplemented
        return Position(
            self.location.shifted(move.row, move.col),
            (self.rotation + move.rotation) % ROTATION_STATES,
        )
