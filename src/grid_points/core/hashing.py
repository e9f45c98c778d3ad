"""
Board hashing utilities.
"""

import hashlib
from typing import Union

import numpy as np

from grid_points.core.board import CELL_DTYPE, Board


def hash_board(board: Union[Board, np.ndarray]) -> str:
    """
    Stable key for a board position (transposition tables, caches).

    Accepts a Board or a raw (size, size) cell array. Cells are normalised
    to CELL_DTYPE and C order, so a Board and the array it was built from
    produce the same key.
    """
    cells = board.cells if isinstance(board, Board) else np.asarray(board)
    data = np.ascontiguousarray(cells, dtype=CELL_DTYPE).tobytes()
    size = int(cells.shape[0]).to_bytes(2, "little")
    return hashlib.sha256(size + data).hexdigest()[:16]
