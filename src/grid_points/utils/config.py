"""
Game configuration and defaults.
"""

from typing import Any, List, Mapping, Optional

from grid_points.core.types import Player, PlayerType


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_SIZE = 5
DEFAULT_PLAYER_TYPES = (PlayerType.HUMAN, PlayerType.RANDOM)


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------

def _parse_player_type(value: Optional[str]) -> Optional[PlayerType]:
    """Look up a PlayerType by name (case-insensitive)."""
    if value is None:
        return None
    try:
        return PlayerType[str(value).upper()]
    except KeyError as e:
        available = ", ".join(t.name for t in PlayerType)
        raise ValueError(f"Unknown player type: {value}. Available: {available}") from e


def _parse_player(data: Mapping[str, Any]) -> Player:
    if not isinstance(data, Mapping):
        raise ValueError(f"Player entry must be a mapping, got {data!r}")

    raw_points = data.get("player_points", 0)
    try:
        player_points = int(raw_points)
    except (TypeError, ValueError) as e:
        raise ValueError(f"player_points must be an integer, got {raw_points!r}") from e

    return Player(
        name=data.get("name"),
        type=_parse_player_type(data.get("type")),
        player_points=player_points,
    )


class GameConfig:
    """Board size and the ordered list of players."""

    def __init__(self, size: int = DEFAULT_SIZE, players: Optional[List[Player]] = None):
        if players is None:
            players = [
                Player(name=f"Player {i}", type=t)
                for i, t in enumerate(DEFAULT_PLAYER_TYPES, start=1)
            ]

        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"Board size must be a positive integer, got {size!r}")
        if not players:
            raise ValueError("At least one player is required")

        self.size = size
        self.players = players

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        """
        Build a config from a mapping, e.g. a parsed JSON file:

            {"size": 5, "players": [{"name": "Ann", "type": "HUMAN"}]}

        Missing keys fall back to the defaults.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Game config must be a mapping, got {type(data).__name__}")

        size = data.get("size", DEFAULT_SIZE)
        raw_players = data.get("players")
        if raw_players is not None and not isinstance(raw_players, list):
            raise ValueError(f"players must be a list, got {type(raw_players).__name__}")
        players = None if raw_players is None else [_parse_player(p) for p in raw_players]
        return cls(size=size, players=players)

    def __repr__(self) -> str:
        return f"GameConfig(size={self.size}, players={self.players!r})"


# Default configuration
DEFAULT_CONFIG = GameConfig()
