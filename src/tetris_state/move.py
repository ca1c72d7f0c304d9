"""Displacement and rotation deltas applied to the active piece."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Move:
    """A ``(row, col, rotation)`` delta.

    Rows grow downwards, so ``DOWN`` has a positive row delta.  A positive
    rotation delta turns the piece clockwise.  Moves compose with ``+`` and
    the named constants (``Move.LEFT``, ``Move.CLOCKWISE`` ...) are ordinary
    frozen values, so comparing against them is a plain value comparison.
    """

    row: int = 0
    col: int = 0
    rotation: int = 0

    STAND: ClassVar["Move"]
    LEFT: ClassVar["Move"]
    RIGHT: ClassVar["Move"]
    DOWN: ClassVar["Move"]
    UP: ClassVar["Move"]
    CLOCKWISE: ClassVar["Move"]
    COUNTERCLOCKWISE: ClassVar["Move"]

    def __add__(self, other: "Move") -> "Move":
        if not isinstance(other, Move):
            return NotImplemented
        return Move(
            self.row + other.row,
            self.col + other.col,
            self.rotation + other.rotation,
        )

    def __mul__(self, times: int) -> "Move":
        """Return the move added to itself ``times`` times."""

        if not isinstance(times, int):
            return NotImplemented
        return Move(self.row * times, self.col * times, self.rotation * times)

    __rmul__ = __mul__

    @property
    def is_rotation(self) -> bool:
        """``True`` only for the bare ``CLOCKWISE``/``COUNTERCLOCKWISE`` moves."""

        return self == Move.CLOCKWISE or self == Move.COUNTERCLOCKWISE


Move.STAND = Move()
Move.LEFT = Move(col=-1)
Move.RIGHT = Move(col=1)
Move.DOWN = Move(row=1)
Move.UP = Move(row=-1)
Move.CLOCKWISE = Move(rotation=1)
Move.COUNTERCLOCKWISE = Move(rotation=-1)


__all__ = ["Move"]
