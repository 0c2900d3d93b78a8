import pytest

from potion_maze import cli

FLAGS = ["--width", "1", "--height", "1", "--cell-size", "1", "--seed", "0", "--fog", "0"]


def _inputs(*lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return fake_input


def test_show_prints_maze(capsys):
    assert cli.main(["--width", "3", "--height", "2", "--cell-size", "1", "--seed", "4", "--fog", "0", "--show"]) == 0
    out = capsys.readouterr().out
    assert "Maze size: 3x2 cells, 7x5 characters" in out


def test_play_to_escape(capsys):
    assert cli.main(FLAGS + ["--potions", "0"], input_fn=_inputs("dd")) == 0
    assert "Congratulations" in capsys.readouterr().out


def test_collect_then_quit(capsys):
    # the single potion sits on the only interior cell
    assert cli.main(FLAGS + ["--potions", "1"], input_fn=_inputs("d", "e")) == 0
    out = capsys.readouterr().out
    assert "Potions: 1" in out
    assert "Congratulations" not in out


def test_eof_ends_game():
    assert cli.main(FLAGS, input_fn=_inputs()) == 0


def test_prompts_for_missing_values(capsys):
    assert cli.main(["--show"], input_fn=_inputs("2", "2", "1", "5", "0")) == 0
    assert "Maze size: 2x2 cells, 5x5 characters" in capsys.readouterr().out


def test_invalid_width_exits_with_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main(FLAGS[:1] + ["0"] + FLAGS[2:] + ["--show"])
    assert exc.value.code == 2


def test_non_integer_prompt_exits():
    with pytest.raises(SystemExit) as exc:
        cli.main(["--show"], input_fn=_inputs("wide"))
    assert exc.value.code == 2


def test_out_saves_image(tmp_path):
    pytest.importorskip("matplotlib")
    import matplotlib
    matplotlib.use("Agg")
    out = tmp_path / "m.png"
    assert cli.main(FLAGS + ["--show", "--out", str(out)]) == 0
    assert out.exists()


def test_play_reports_missing_potions(capsys):
    from potion_maze import Maze, MazeGame
    from potion_maze.grid import PASSAGE

    game = MazeGame(Maze(1, 1, potions=1))
    game.grid[1, 1] = PASSAGE
    assert cli.play(game, _inputs("dd", "e")) == 0
    out = capsys.readouterr().out
    assert "You only have 0 potions, you need 1 to escape the maze." in out
    assert game.finished and not game.escaped


def test_stdout_carries_only_the_game(capsys, monkeypatch):
    monkeypatch.setenv("POTION_MAZE_LOG_LEVEL", "debug")
    assert cli.main(FLAGS + ["--potions", "0"], input_fn=_inputs("dd")) == 0
    captured = capsys.readouterr()
    assert "level=" not in captured.out
    assert "event=maze_escaped" in captured.err

    assert cli.main(FLAGS + ["--show"]) == 0
    captured = capsys.readouterr()
    assert "level=" not in captured.out
    assert captured.out.startswith("Maze size:")
    assert "event=potion_placement_short" in captured.err


def test_prompt_eof_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main(["--show"], input_fn=_inputs("4"))
    assert exc.value.code == 2


def test_root_launcher_puts_src_on_path():
    import os
    import runpy
    import sys

    root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    ns = runpy.run_path(os.path.join(root, "main.py"), run_name="launcher")
    assert ns["SRC_DIR"] == os.path.join(root, "src")
    assert ns["SRC_DIR"] in sys.path
    assert ns["main"] is cli.main
