"""Authoritative state of a game session.

:class:`TetrisState` owns the board, the falling piece and the shape queue.
It answers every legality question a driver may ask (can the piece move
there, which kick makes a rotation fit, which rows are full) and performs
the few mutations that must stay consistent with those answers: moving the
piece, placing it, spawning the next one and collapsing cleared rows.

Progress counters (score, level, lines) are stored here but owned by the
driver; the state never recomputes them.  Illegal moves are rejected
silently, ``can_piece_move`` returns ``False`` and ``validate_rotation``
returns ``Move.STAND``, because callers probe speculatively and often.

The board is a flat, row-major ``numpy`` array.  ``get_cell`` and
``set_cell`` index it directly without bounds checks; use
``validate_coord`` first when a location may be off the board.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

import numpy as np
from numpy.typing import NDArray

from .coord import Coord
from .lines_per_level import LinesPerLevelLike, as_lines_per_level
from .move import Move
from .piece import Piece
from .position import Position
from .shape import CATALOG, Shape
from .shape_queue import ShapeQueue


LOGGER = logging.getLogger(__name__)

DEFAULT_NUM_ROWS = 20
DEFAULT_NUM_COLS = 10
DEFAULT_LINES_PER_LEVEL = 10

# Largest sideways shift tried when a rotation does not fit in place.
MAX_KICK_OFFSET = 2
# No shape spans more columns than this; a wider spread means the column
# arithmetic wrapped around the board edge.
MAX_COLUMN_SPREAD = 4

Board = NDArray[np.uint8]


class TetrisState:
    """Board, falling piece, shape queue and progress counters."""

    def __init__(
        self,
        rows: int = DEFAULT_NUM_ROWS,
        cols: int = DEFAULT_NUM_COLS,
        entry_coord: Optional[Coord] = None,
        lines_per_level: LinesPerLevelLike = DEFAULT_LINES_PER_LEVEL,
        *,
        next_shapes: Optional[ShapeQueue] = None,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("Board dimensions must be positive")
        if entry_coord is None:
            entry_coord = Coord(1 if rows > 1 else 0, self.calc_entry_column(cols))

        self.rows = rows
        self.cols = cols
        if not self.validate_coord(entry_coord):
            raise ValueError(f"Entry coordinate {entry_coord} is off the board")
        self.entry_coord = entry_coord

        self._board: Board = np.zeros(rows * cols, dtype=np.uint8)
        self._is_game_over = False
        self._is_paused = False
        self._is_clearing_lines = False
        self._has_started = False
        self._level = 0
        self._score = 0
        self._lines_cleared = 0
        self._num_pieces_dropped = 0
        self._lines_per_level = as_lines_per_level(lines_per_level)
        self._lines_until_next_level = 0
        self._dist: Dict[str, int] = {shape.name: 0 for shape in CATALOG}
        self._next_shapes = next_shapes if next_shapes is not None else ShapeQueue()
        self._piece = Piece.spawn(self.entry_coord, self._next_shapes.poll())

    @staticmethod
    def calc_entry_column(cols: int) -> int:
        """Return the spawn column: the centre, or just left of it when even."""

        return cols // 2 - (1 if cols % 2 == 0 else 0)

    def copy(self) -> "TetrisState":
        """Return a fully independent clone of this state."""

        clone = type(self).__new__(type(self))
        clone.rows = self.rows
        clone.cols = self.cols
        clone.entry_coord = self.entry_coord
        clone._board = self._board.copy()
        clone._is_game_over = self._is_game_over
        clone._is_paused = self._is_paused
        clone._is_clearing_lines = self._is_clearing_lines
        clone._has_started = self._has_started
        clone._level = self._level
        clone._score = self._score
        clone._lines_cleared = self._lines_cleared
        clone._num_pieces_dropped = self._num_pieces_dropped
        clone._lines_per_level = self._lines_per_level
        clone._lines_until_next_level = self._lines_until_next_level
        clone._dist = dict(self._dist)
        clone._next_shapes = self._next_shapes.copy()
        clone._piece = self._piece.copy()
        return clone

    # ------------------------------------------------------------------
    # Public accessors
    # ------------------------------------------------------------------
    @property
    def board(self) -> Board:
        """Return a copy of the flat, row-major board."""

        return self._board.copy()

    @property
    def piece(self) -> Piece:
        """Return a snapshot of the falling piece.

        Changing the snapshot has no effect on the game; use ``move_piece``,
        ``rotate_piece``, ``hard_drop``, ``place_piece`` and ``reset_piece``.
        """

        return self._piece.copy()

    @property
    def next_shapes(self) -> ShapeQueue:
        return self._next_shapes.copy()

    @property
    def dist(self) -> Dict[str, int]:
        """Return how many pieces of each shape have been placed."""

        return dict(self._dist)

    @property
    def num_pieces_dropped(self) -> int:
        return self._num_pieces_dropped

    @property
    def is_game_over(self) -> bool:
        return self._is_game_over

    @is_game_over.setter
    def is_game_over(self, value: bool) -> None:
        if value and not self._is_game_over:
            LOGGER.debug("Game over after %d pieces", self._num_pieces_dropped)
        self._is_game_over = value

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    @is_paused.setter
    def is_paused(self, value: bool) -> None:
        self._is_paused = value

    @property
    def is_clearing_lines(self) -> bool:
        return self._is_clearing_lines

    @is_clearing_lines.setter
    def is_clearing_lines(self, value: bool) -> None:
        self._is_clearing_lines = value

    @property
    def has_started(self) -> bool:
        return self._has_started

    @has_started.setter
    def has_started(self, value: bool) -> None:
        self._has_started = value

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        self._level = value

    @property
    def score(self) -> int:
        return self._score

    @score.setter
    def score(self, value: int) -> None:
        self._score = value

    @property
    def lines_cleared(self) -> int:
        return self._lines_cleared

    @lines_cleared.setter
    def lines_cleared(self, value: int) -> None:
        self._lines_cleared = value

    @property
    def lines_until_next_level(self) -> int:
        return self._lines_until_next_level

    @lines_until_next_level.setter
    def lines_until_next_level(self, value: int) -> None:
        self._lines_until_next_level = value

    def lines_per_level(self) -> int:
        """Return the number of lines needed to finish the current level."""

        return self._lines_per_level.evaluate(self._level)

    def get_next_shapes(self, count: int) -> List[Shape]:
        """Peek at the next ``count`` shapes in the queue."""

        return self._next_shapes.peek_next(count)

    def is_running(self) -> bool:
        """Return ``True`` once the game has started and until it is over."""

        return self._has_started and not self._is_game_over

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------
    def set_cell(self, location: Coord, value: int) -> None:
        self._board[location.row * self.cols + location.col] = value

    def get_cell(self, location: Coord) -> int:
        return int(self._board[location.row * self.cols + location.col])

    def is_cell_empty(self, location: Coord) -> bool:
        return self.get_cell(location) == 0

    def validate_coord(self, location: Coord) -> bool:
        """Return ``True`` if ``location`` lies within the board."""

        return 0 <= location.row < self.rows and 0 <= location.col < self.cols

    def grid(self, include_piece: bool = False) -> List[List[int]]:
        """Return the board as a list of rows.

        With ``include_piece`` the active piece is overlaid using its shape
        value, which is what a renderer wants to draw without placing it.
        """

        grid = self._board.reshape(self.rows, self.cols).tolist()
        if include_piece and self._piece.active:
            for coord in self._piece.block_coords:
                if self.validate_coord(coord):
                    grid[coord.row][coord.col] = self._piece.shape.value
        return grid

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------
    def piece_in_bounds(self) -> bool:
        return all(self.validate_coord(coord) for coord in self._piece.block_coords)

    def get_shape_coords_at_position(self, position: Position) -> List[Coord]:
        """Return the block coordinates of the current shape at ``position``."""

        return self._piece.shape.coords_at(position)

    def is_position_valid(self, position: Position) -> bool:
        """Return ``True`` if the current shape fits at ``position``.

        Every block must be on the board and on an empty cell, and the blocks
        may not spread over more than ``MAX_COLUMN_SPREAD`` columns.
        """

        coords = self.get_shape_coords_at_position(position)
        min_col = max_col = coords[0].col
        for coord in coords:
            min_col = min(min_col, coord.col)
            max_col = max(max_col, coord.col)
            if (
                not self.validate_coord(coord)
                or not self.is_cell_empty(coord)
                or max_col - min_col > MAX_COLUMN_SPREAD
            ):
                return False
        return True

    def can_piece_move(self, move: Move) -> bool:
        """Return ``True`` if the active piece may end up at its position plus ``move``.

        Only the destination is checked, so this does not imply a path exists
        unless the move is a single step or a single rotation.  Pieces never
        move upwards.
        """

        return (
            not self._is_game_over
            and self._piece.active
            and not self._is_paused
            and move.row >= 0
            and self.is_position_valid(self._piece.position + move)
        )

    def validate_rotation(self, move: Move) -> Move:
        """Resolve a rotation into the move that actually fits.

        The bare rotation is preferred.  Otherwise sideways kicks of one and
        then two columns are tried, left before right at each distance.
        Returns ``Move.STAND`` for non-rotations and for rotations that do not
        fit at all.
        """

        if not move.is_rotation:
            return Move.STAND
        if self.can_piece_move(move):
            return move

        kick_left = kick_right = move
        for offset in range(1, MAX_KICK_OFFSET + 1):
            kick_left = kick_left + Move.LEFT
            if self.can_piece_move(kick_left):
                LOGGER.debug("Rotation kicked %d column(s) left", offset)
                return kick_left
            kick_right = kick_right + Move.RIGHT
            if self.can_piece_move(kick_right):
                LOGGER.debug("Rotation kicked %d column(s) right", offset)
                return kick_right
        return Move.STAND

    def piece_overlaps_blocks(self) -> bool:
        """Return ``True`` if the active piece is blocked where it stands.

        A block hanging off the board counts as blocked, so a spawn that does
        not fit on a narrow board is reported like one landing on blocks.
        """

        return self._piece.active and self._piece.intersects(self)

    # ------------------------------------------------------------------
    # Piece mutation
    # ------------------------------------------------------------------
    def move_piece(self, move: Move) -> bool:
        """Apply ``move`` to the piece if it is legal and report whether it was."""

        if not self.can_piece_move(move):
            return False
        self._piece.move(move)
        return True

    def rotate_piece(self, move: Move) -> Move:
        """Rotate the piece, kicking it sideways if needed.

        Returns the move that was applied, ``Move.STAND`` when none was.
        """

        resolved = self.validate_rotation(move)
        if resolved != Move.STAND:
            self._piece.move(resolved)
        return resolved

    def hard_drop(self) -> int:
        """Move the piece down as far as it goes and return the distance."""

        distance = 0
        while self.move_piece(Move.DOWN):
            distance += 1
        return distance

    def place_piece(self) -> None:
        """Write the active piece into the board and disable it.

        Nothing happens unless the piece is active and entirely on the board.
        """

        if not self._piece.active:
            return
        if not self.piece_in_bounds():
            LOGGER.warning("Refusing to place %s off the board", self._piece.shape.name)
            return
        shape = self._piece.shape
        for coord in self._piece.block_coords:
            self.set_cell(coord, shape.value)
        self._piece.disable()
        self._num_pieces_dropped += 1
        self._dist[shape.name] = self._dist.get(shape.name, 0) + 1
        LOGGER.debug(
            "Placed %s at %s (%d pieces)",
            shape.name,
            self._piece.position.location,
            self._num_pieces_dropped,
        )

    def reset_piece(self) -> None:
        """Spawn the next shape from the queue at the entry coordinate.

        The caller decides what an immediate overlap means, typically by
        checking ``piece_overlaps_blocks`` and ending the game.
        """

        shape = self._next_shapes.poll()
        self._piece.reset(self.entry_coord, shape)
        LOGGER.debug("Spawned %s at %s", shape.name, self.entry_coord)

    def set_next_shape(self, shape: Shape) -> None:
        """Fast-forward the queue until ``shape`` is next.

        Raises:
            ValueError: If the queue can never produce ``shape``.
        """

        if not self._next_shapes.can_produce(shape):
            raise ValueError(f"Shape queue cannot produce shape {shape.name!r}")
        skipped = 0
        while self._next_shapes.peek() != shape:
            self._next_shapes.poll()
            skipped += 1
        LOGGER.debug("Skipped %d shape(s) to bring %s forward", skipped, shape.name)

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------
    def _is_row_full(self, row: int) -> bool:
        start = row * self.cols
        return bool(np.all(self._board[start : start + self.cols] != 0))

    def get_full_rows(self) -> List[int]:
        """Return the indices of full rows in ascending order."""

        return [row for row in range(self.rows) if self._is_row_full(row)]

    def clear_rows(self, rows: Iterable[int]) -> int:
        """Remove ``rows`` and let everything above them fall into place.

        Empty rows are inserted at the top so the board keeps its size.
        Returns the number of rows removed.

        Raises:
            IndexError: If a row index is outside the board.
        """

        targets = sorted(set(rows))
        if not targets:
            return 0
        if targets[0] < 0 or targets[-1] >= self.rows:
            raise IndexError("Row out of bounds")

        grid = self._board.reshape(self.rows, self.cols)
        keep = np.ones(self.rows, dtype=bool)
        keep[targets] = False
        new_rows = np.zeros((len(targets), self.cols), dtype=self._board.dtype)
        self._board = np.vstack((new_rows, grid[keep])).reshape(-1)
        LOGGER.debug("Cleared rows %s", targets)
        return len(targets)


__all__ = [
    "DEFAULT_LINES_PER_LEVEL",
    "DEFAULT_NUM_COLS",
    "DEFAULT_NUM_ROWS",
    "MAX_COLUMN_SPREAD",
    "MAX_KICK_OFFSET",
    "TetrisState",
]
