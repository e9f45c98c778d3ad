"""
Command-line interface for inspecting boards and their points maps.
"""

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from grid_points.core.board import Board
from grid_points.debug.viz import board_string, points_string
from grid_points.games.game_state import GameState
from grid_points.utils.config import DEFAULT_SIZE, GameConfig
from grid_points.utils.factory import create_game_state

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-points",
        description="Show a board and the points each free cell would give",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--size", "-s",
        type=int,
        default=None,
        help=f"Size of an empty board (default: {DEFAULT_SIZE})",
    )
    source.add_argument(
        "--board", "-b",
        type=Path,
        default=None,
        help="JSON file holding a square matrix of cells (-1 = empty)",
    )
    source.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="JSON game config, e.g. {\"size\": 5, \"players\": [...]}",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _read_json(parser: argparse.ArgumentParser, path: Path):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        parser.error(f"Cannot read {path}: {e}")


def load_game_state(args: argparse.Namespace, parser: argparse.ArgumentParser) -> GameState:
    """Build the game state described by the parsed arguments."""
    try:
        if args.config is not None:
            config = GameConfig.from_dict(_read_json(parser, args.config))
            return create_game_state(config)

        if args.board is not None:
            board = Board(_read_json(parser, args.board))
            state = create_game_state(GameConfig(size=board.size))
            state.board = board
            return state

        size = args.size if args.size is not None else DEFAULT_SIZE
        return create_game_state(GameConfig(size=size))
    except ValueError as e:
        parser.error(str(e))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    state = load_game_state(args, parser)
    board = state.board
    logger.debug("Loaded %dx%d board, filled=%s", board.size, board.size, board.is_filled())

    print("Players:")
    for i, player in enumerate(state.players):
        kind = player.type.name if player.type is not None else "-"
        print(f"  {i}: {player.name} ({kind})")
    print()
    print(board_string(board))
    print()
    print("Points:")
    print(points_string(board))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
