"""
Tests for grid_points.core.types

Tests the plain data contracts.
"""

from grid_points.core.board import Board, BoardPosition
from grid_points.core.types import AiOrderState, AiWeightState, Player, PlayerType


class TestPlayerType:

    def test_members_in_order(self):
        """Values follow declaration order from 0."""
        assert [t.value for t in PlayerType] == list(range(10))
        assert PlayerType(0) is PlayerType.HUMAN
        assert PlayerType(9) is PlayerType.HEURISTICS_CIRCLE_MF

    def test_heuristic_variants(self):
        """Three focuses for each of the two families."""
        heuristics = [t.name for t in PlayerType if t.name.startswith("HEURISTICS_")]
        assert len(heuristics) == 6
        for focus in ("DIFF", "CORNERS", "CIRCLE"):
            for family in ("LDO", "MF"):
                assert f"HEURISTICS_{focus}_{family}" in heuristics


class TestPlayer:

    def test_defaults(self):
        player = Player()
        assert player.name is None
        assert player.type is None
        assert player.player_points == 0
        assert player.actor is None

    def test_actor_is_opaque(self):
        """Any object can be bound as the actor handle."""
        handle = object()
        player = Player("Ann", PlayerType.HUMAN, actor=handle)
        assert player.actor is handle

    def test_mutable_points(self):
        player = Player("Bot", PlayerType.RANDOM)
        player.player_points += 7
        assert player.player_points == 7


class TestAiStates:

    def test_weight_state_defaults(self):
        state = AiWeightState()
        assert state.position is None
        assert state.board is None
        assert state.next_player is None

    def test_weight_state_holds_snapshot(self):
        board = Board(3)
        state = AiWeightState(position=BoardPosition(1, 1), board=board, next_player=1)
        assert state.board.giving_points_by_position(state.position) == 0

    def test_order_state_default_list_not_shared(self):
        a, b = AiOrderState(), AiOrderState()
        a.positions.append(BoardPosition(0, 0))
        assert b.positions == []
        assert a.size is None
