"""
Board - square grid of integer cells with the placement scoring rule.

Cell values:
    -1 = empty (EMPTY)
    any other int = owner tag (usually a 0-based index into the player list)

Boards are value-like: building one from a matrix or another Board always
copies the cells, so AI search can clone a board per hypothetical move.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence, Union

import numpy as np

from grid_points.core.lines import (
    EMPTY,
    FALLING,
    RISING,
    diagonal_points,
    line_has_single_gap,
)

CELL_DTYPE = np.int32


class BoardPosition(NamedTuple):
    """Zero-based (row, column) pair."""

    row: int
    column: int


class Board:
    """
    Fixed-size N×N board.

    Accessors do not bounds-check: coordinates must satisfy
    0 <= row, column < size.
    """

    __slots__ = ("_cells",)

    def __init__(self, obj: Union[int, "Board", np.ndarray, Sequence[Sequence[int]]]):
        if isinstance(obj, Board):
            cells = obj._cells.copy()
        elif isinstance(obj, (int, np.integer)) and not isinstance(obj, bool):
            if obj < 1:
                raise ValueError(f"Board size must be positive, got {obj}")
            cells = np.full((int(obj), int(obj)), EMPTY, dtype=CELL_DTYPE)
        else:
            try:
                raw = np.asarray(obj)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Board matrix is not a rectangular array: {e}") from e
            if raw.ndim != 2 or raw.shape[0] != raw.shape[1] or raw.shape[0] == 0:
                raise ValueError(
                    f"Board matrix must be square and non-empty, got shape {raw.shape}"
                )
            if raw.dtype.kind not in "iu":
                raise ValueError(f"Board cells must be integers, got dtype {raw.dtype}")
            # np.array always copies, so the caller's matrix is never aliased
            cells = np.array(raw, dtype=CELL_DTYPE)
        self._cells = cells

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._cells.shape[0]

    @property
    def cells(self) -> np.ndarray:
        """The underlying (size, size) array. Mutating it mutates the board."""
        return self._cells

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def get_cell(self, row: int, column: int) -> int:
        return int(self._cells[row, column])

    def set_cell(self, row: int, column: int, value: int) -> None:
        self._cells[row, column] = value

    def get_cell_by_position(self, position: BoardPosition) -> int:
        return int(self._cells[position.row, position.column])

    def set_cell_by_position(self, position: Optional[BoardPosition], value: int) -> None:
        """Write a cell; a missing position is ignored."""
        if position:
            self._cells[position.row, position.column] = value

    # ------------------------------------------------------------------
    # Occupancy
    # ------------------------------------------------------------------

    def is_free(self, row: int, column: int) -> bool:
        return self.get_cell(row, column) == EMPTY

    def is_free_by_position(self, position: BoardPosition) -> bool:
        return self.get_cell_by_position(position) == EMPTY

    def is_filled(self) -> bool:
        return not np.any(self._cells == EMPTY)

    def free_positions(self) -> List[BoardPosition]:
        """Empty cells in row-major order."""
        return [BoardPosition(int(r), int(c)) for r, c in np.argwhere(self._cells == EMPTY)]

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def giving_points(self, row: int, column: int) -> Optional[int]:
        """
        Points earned by placing at (row, column).

        Returns None if the cell is occupied. Otherwise sums:
            - size, if the target is the last empty cell of its row
            - size, if the target is the last empty cell of its column
            - for each diagonal, the span length when every other cell on
              it is occupied and the span is at least 2 cells
        """
        if not self.is_free(row, column):
            return None

        cells = self._cells
        points = 0

        if line_has_single_gap(cells[row, :]):
            points += self.size
        if line_has_single_gap(cells[:, column]):
            points += self.size

        points += diagonal_points(cells, row, column, RISING)
        points += diagonal_points(cells, row, column, FALLING)
        return points

    def giving_points_by_position(self, position: BoardPosition) -> Optional[int]:
        return self.giving_points(position.row, position.column)

    def points_map(self) -> np.ndarray:
        """giving_points for every cell, -1 where the cell is occupied."""
        result = np.full(self._cells.shape, -1, dtype=CELL_DTYPE)
        for r, c in self.free_positions():
            result[r, c] = self.giving_points(r, c)
        return result

    # ------------------------------------------------------------------
    # Copying / comparison
    # ------------------------------------------------------------------

    def copy(self) -> "Board":
        return Board(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Board({self._cells.tolist()!r})"
