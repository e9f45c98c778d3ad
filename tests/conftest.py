"""
Shared test fixtures for grid_points tests.
"""

from typing import Callable, List, Tuple

import numpy as np
import pytest

from grid_points.core.board import Board
from grid_points.core.types import Player, PlayerType


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Empty 5x5 board."""
    return Board(5)


@pytest.fixture
def full_except() -> Callable[..., Board]:
    """
    Build a board where every cell is owned by player 0 except the given
    empty cells.
    """
    def _build(size: int, *empties: Tuple[int, int]) -> Board:
        cells = np.zeros((size, size), dtype=int)
        for r, c in empties:
            cells[r, c] = -1
        return Board(cells)
    return _build


# =============================================================================
# Player Fixtures
# =============================================================================

@pytest.fixture
def players() -> List[Player]:
    """Two players, human first."""
    return [
        Player(name="Ann", type=PlayerType.HUMAN),
        Player(name="Bot", type=PlayerType.MINMAX_AB),
    ]
