"""
Tests for grid_points.cli
"""

import json
from pathlib import Path

import pytest

from grid_points.cli import build_parser, main


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(name: str, data) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.size is None
        assert args.board is None
        assert args.config is None
        assert args.verbose is False

    def test_sources_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--size", "3", "--board", "b.json"])


class TestMain:

    def test_default_board(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Players:" in out
        assert "Points:" in out

    def test_size(self, capsys):
        assert main(["-s", "2"]) == 0
        out = capsys.readouterr().out
        # two boards of two rows each
        assert out.count("╭") == 2

    def test_board_file(self, capsys, write_json):
        path = write_json("board.json", [[0, 0, 1], [1, -1, 0], [0, 1, 1]])
        assert main(["--board", path]) == 0
        out = capsys.readouterr().out
        assert "12" in out

    def test_config_file(self, capsys, write_json):
        path = write_json("game.json", {
            "size": 3,
            "players": [{"name": "Ann", "type": "HUMAN"}, {"name": "Bot", "type": "MINMAX"}],
        })
        assert main(["--config", path]) == 0
        out = capsys.readouterr().out
        assert "Ann (HUMAN)" in out
        assert "Bot (MINMAX)" in out

    @pytest.mark.parametrize("argv", [
        ["--size", "0"],
        ["--board", "does-not-exist.json"],
    ])
    def test_invalid_input_exits(self, argv):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 2

    @pytest.mark.parametrize("data", [
        [[-1, -1], [-1]],   # ragged
        {"a": 1},           # not a matrix
        None,
        [[-1.5, 0], [0, 0]],
    ])
    def test_malformed_board_file_exits(self, write_json, data):
        path = write_json("bad.json", data)
        with pytest.raises(SystemExit) as exc:
            main(["--board", path])
        assert exc.value.code == 2

    @pytest.mark.parametrize("data", [
        {"players": 5},
        {"players": [{"player_points": None}]},
        [1, 2],
    ])
    def test_malformed_config_file_exits(self, write_json, data):
        path = write_json("bad.json", data)
        with pytest.raises(SystemExit) as exc:
            main(["--config", path])
        assert exc.value.code == 2

    def test_unknown_player_type_exits(self, write_json):
        path = write_json("bad.json", {"players": [{"type": "WIZARD"}]})
        with pytest.raises(SystemExit) as exc:
            main(["--config", path])
        assert exc.value.code == 2
