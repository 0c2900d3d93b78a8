import json

from potion_maze import Maze
from potion_maze.logging_utils import get_logger


def test_key_value_output(capsys, monkeypatch):
    monkeypatch.setenv("POTION_MAZE_LOG_LEVEL", "info")
    monkeypatch.delenv("POTION_MAZE_LOG_JSON", raising=False)
    get_logger("test").info(event="hello world", n=3)
    captured = capsys.readouterr()
    assert captured.out == ""
    out = captured.err
    assert "level=info" in out
    assert "event=hello_world" in out
    assert "n=3" in out
    assert "logger=test" in out


def test_level_filtering(capsys, monkeypatch):
    monkeypatch.setenv("POTION_MAZE_LOG_LEVEL", "warn")
    log = get_logger("test")
    log.info(event="hidden")
    log.error(event="shown")
    err = capsys.readouterr().err
    assert "event=hidden" not in err
    assert "event=shown" in err


def test_json_mode(capsys, monkeypatch):
    monkeypatch.setenv("POTION_MAZE_LOG_LEVEL", "debug")
    monkeypatch.setenv("POTION_MAZE_LOG_JSON", "1")
    get_logger("test").debug(event="tick", skipped=None)
    rec = json.loads(capsys.readouterr().err.strip())
    assert rec["event"] == "tick"
    assert rec["level"] == "debug"
    assert "skipped" not in rec


def test_generation_logs_at_debug(capsys, monkeypatch):
    monkeypatch.setenv("POTION_MAZE_LOG_LEVEL", "debug")
    monkeypatch.delenv("POTION_MAZE_LOG_JSON", raising=False)
    Maze(3, 3, seed=1)
    assert "event=maze_generated" in capsys.readouterr().err


def test_short_potion_placement_warns(capsys, monkeypatch):
    monkeypatch.setenv("POTION_MAZE_LOG_LEVEL", "warn")
    monkeypatch.delenv("POTION_MAZE_LOG_JSON", raising=False)
    Maze(1, 1)
    out = capsys.readouterr().err
    assert "event=potion_placement_short" in out
    assert "placed=1" in out
