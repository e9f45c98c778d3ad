"""
Line-scanning helpers for square boards.

All functions work on a square int board where EMPTY (-1) marks a free cell.
Rows, columns and the two diagonals through a cell are the lines that score.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

EMPTY = -1

Direction = Tuple[int, int]

# (direction A, direction B) pairs; A is always scanned first
RISING: Tuple[Direction, Direction] = ((1, -1), (-1, 1))
FALLING: Tuple[Direction, Direction] = ((-1, -1), (1, 1))


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def line_has_single_gap(line: np.ndarray) -> bool:
    """
    Return True if the line holds at most one empty cell.

    Counting may stop at the second empty cell; the answer is the same.
    """
    return int(np.count_nonzero(line == EMPTY)) <= 1


def scan_direction(
    board: np.ndarray, row: int, column: int, dr: int, dc: int
) -> Tuple[int, bool]:
    """
    Walk away from (row, column) by (dr, dc) until the edge or an empty cell.

    Returns:
        (steps, found): cells examined, and whether an empty cell was hit.
        The empty cell itself counts as examined.
    """
    steps = 0
    r, c = row + dr, column + dc
    while in_bounds(board, r, c):
        steps += 1
        if board[r, c] == EMPTY:
            return steps, True
        r += dr
        c += dc
    return steps, False


def diagonal_points(
    board: np.ndarray,
    row: int,
    column: int,
    directions: Tuple[Direction, Direction],
) -> int:
    """
    Points for one diagonal through (row, column).

    Direction B is only scanned when direction A reached the edge without
    meeting an empty cell. A fully occupied span of at least two cells
    (target included) is worth its length.
    """
    (ar, ac), (br, bc) = directions

    steps_a, found = scan_direction(board, row, column, ar, ac)
    if found:
        return 0

    steps_b, found = scan_direction(board, row, column, br, bc)
    if found:
        return 0

    span = steps_a + steps_b + 1
    return span if span >= 2 else 0
