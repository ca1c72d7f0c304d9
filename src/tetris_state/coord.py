"""Board coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coord:
    """Immutable ``(row, col)`` location on the board."""

    row: int
    col: int

    def __add__(self, other: "Coord") -> "Coord":
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.row + other.row, self.col + other.col)

    def shifted(self, rows: int, cols: int) -> "Coord":
        """Return this coordinate translated by ``rows`` and ``cols``."""

        return Coord(self.row + rows, self.col + cols)
