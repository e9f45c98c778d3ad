"""
Factory functions for creating players and game states.
"""

import logging
from typing import List, Optional, Sequence

from grid_points.core.types import Player, PlayerType
from grid_points.games.game_state import GameState
from grid_points.utils.config import GameConfig

logger = logging.getLogger(__name__)


def create_players(
    types: Sequence[PlayerType],
    names: Optional[Sequence[str]] = None,
) -> List[Player]:
    """
    Create one player record per type.

    Args:
        types: Player types in turn order
        names: Display names; defaults to "Player 1", "Player 2", ...

    Returns:
        List of players with zero points and no actor bound
    """
    if names is not None and len(names) != len(types):
        raise ValueError(
            f"Got {len(names)} names for {len(types)} player types"
        )

    players: List[Player] = []
    for i, player_type in enumerate(types):
        name = names[i] if names is not None else f"Player {i + 1}"
        players.append(Player(name=name, type=player_type))

    return players


def create_game_state(config: GameConfig) -> GameState:
    """
    Create a fresh game state from a configuration.

    Args:
        config: Board size and players

    Returns:
        GameState with an empty board and player 0 to move
    """
    logger.debug(
        "Creating %dx%d game for %d player(s)",
        config.size, config.size, len(config.players),
    )
    return GameState(config.size, config.players)
