"""
Terminal rendering of boards and their points maps.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from grid_points.core.board import Board
from grid_points.core.lines import EMPTY

OCCUPIED_MARK = "·"


def _grid(rows: List[List[str]]) -> str:
    """Draw a box grid around pre-formatted cell strings."""
    n = len(rows)
    width = max((len(cell) for row in rows for cell in row), default=1)
    bar = "─" * (width + 2)

    lines = ["╭" + "┬".join([bar] * n) + "╮"]
    for i, row in enumerate(rows):
        lines.append("│ " + " │ ".join(cell.center(width) for cell in row) + " │")
        if i < n - 1:
            lines.append("├" + "┼".join([bar] * n) + "┤")
    lines.append("╰" + "┴".join([bar] * n) + "╯")
    return "\n".join(lines)


def board_string(board: Board, cell_strings: Optional[Dict[int, str]] = None) -> str:
    """
    Pretty string of the board.

    Empty cells are blank; owner tags use cell_strings when given
    (e.g. {0: "X", 1: "O"}), else their number.
    """
    cell_strings = cell_strings or {}
    rows = []
    for r in range(board.size):
        row = []
        for c in range(board.size):
            value = board.get_cell(r, c)
            if value == EMPTY:
                row.append(" ")
            else:
                row.append(cell_strings.get(value, str(value)))
        rows.append(row)
    return _grid(rows)


def points_string(board: Board) -> str:
    """Grid of giving_points for free cells, OCCUPIED_MARK elsewhere."""
    points = board.points_map()
    rows = [
        [
            str(int(points[r, c])) if board.is_free(r, c) else OCCUPIED_MARK
            for c in range(board.size)
        ]
        for r in range(board.size)
    ]
    return _grid(rows)
