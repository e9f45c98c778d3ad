"""
Grid Points - board model and placement scoring for a square-grid game.

Quick Start:
    from grid_points import Board, GameState, Player, PlayerType

    state = GameState(5, [Player("Ann", PlayerType.HUMAN), Player("Bot", PlayerType.RANDOM)])
    board = state.board
    if board.is_free(2, 2):
        points = board.giving_points(2, 2)
        board.set_cell(2, 2, state.next_player)

Modules:
    core  - Board, scoring, hashing and shared data contracts
    games - GameState aggregate
    utils - GameConfig and factory helpers
    debug - Terminal rendering
"""

from grid_points.core import (
    Board,
    BoardPosition,
    EMPTY,
    PlayerType,
    Player,
    AiWeightState,
    AiOrderState,
    hash_board,
)
from grid_points.games import GameState
from grid_points.utils.config import GameConfig

__version__ = "1.0.0"

__all__ = [
    # Model
    "Board",
    "BoardPosition",
    "EMPTY",
    "GameState",
    # Types
    "PlayerType",
    "Player",
    "AiWeightState",
    "AiOrderState",
    "GameConfig",
    # Functions
    "hash_board",
]
