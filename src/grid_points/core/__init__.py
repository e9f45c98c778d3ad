"""
Core module - board, scoring and shared data contracts.
"""

from grid_points.core.lines import EMPTY, in_bounds, scan_direction, diagonal_points
from grid_points.core.board import Board, BoardPosition
from grid_points.core.hashing import hash_board
from grid_points.core.types import PlayerType, Player, AiWeightState, AiOrderState

__all__ = [
    # Board
    "Board",
    "BoardPosition",
    "EMPTY",
    # Types
    "PlayerType",
    "Player",
    "AiWeightState",
    "AiOrderState",
    # Functions
    "hash_board",
    "in_bounds",
    "scan_direction",
    "diagonal_points",
]
