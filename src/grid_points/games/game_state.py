"""
GameState - board plus players plus whose turn it is.
"""

from __future__ import annotations

from typing import List

from grid_points.core.board import Board
from grid_points.core.types import Player


class GameState:
    """
    Mutable game aggregate.

    The players list is held by reference. next_player is an index into it
    and is advanced by the turn manager, not by this class.
    """
    __slots__ = ('size', 'board', 'players', 'next_player')

    def __init__(self, size: int, players: List[Player]):
        self.size = size
        self.board = Board(size)
        self.players = players
        self.next_player = 0

    def copy(self) -> "GameState":
        """Copy for lookahead - the board is deep-copied, player records are shared."""
        state = GameState.__new__(GameState)
        state.size = self.size
        state.board = self.board.copy()
        state.players = list(self.players)
        state.next_player = self.next_player
        return state
