"""
Games module - game state aggregate.
"""

from grid_points.games.game_state import GameState

__all__ = [
    "GameState",
]
