"""
Data contracts shared with players, AI strategies and the game loop.

Nothing here has behaviour: the scoring core never interprets player types
or actor handles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from grid_points.core.board import Board, BoardPosition


class PlayerType(Enum):
    """Strategy driving a player. HEURISTICS_<focus>_<family>."""

    HUMAN = 0
    MINMAX = 1
    MINMAX_AB = 2
    RANDOM = 3
    HEURISTICS_DIFF_LDO = 4
    HEURISTICS_CORNERS_LDO = 5
    HEURISTICS_CIRCLE_LDO = 6
    HEURISTICS_DIFF_MF = 7
    HEURISTICS_CORNERS_MF = 8
    HEURISTICS_CIRCLE_MF = 9


@dataclass
class Player:
    name: Optional[str] = None
    type: Optional[PlayerType] = None
    player_points: int = 0  # Accumulated score, updated by the game loop
    actor: Any = None  # Opaque handle used by the messaging layer to reach the player's agent


@dataclass
class AiWeightState:
    """Hint bundle for weighting a single candidate move."""

    position: Optional["BoardPosition"] = None
    board: Optional["Board"] = None
    next_player: Optional[int] = None


@dataclass
class AiOrderState:
    """Hint bundle for ordering candidate moves."""

    positions: List["BoardPosition"] = field(default_factory=list)
    size: Optional[int] = None
