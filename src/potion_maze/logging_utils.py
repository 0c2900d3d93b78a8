"""Small structured logger writing key=value lines.

Usage:
    from .logging_utils import get_logger
    log = get_logger("potion_maze.maze")
    log.debug(event="maze_generated", width=10, height=10)

Level comes from ``POTION_MAZE_LOG_LEVEL`` (debug, info, warn, error) and
``POTION_MAZE_LOG_JSON=1`` switches to one JSON object per line. Both are
read when a record is emitted, so tests can flip them with monkeypatch.
Every record goes to stderr so stdout stays free for the game screen.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "TRUE", "yes", "on")


def _current_level() -> int:
    return LEVELS.get(os.getenv("POTION_MAZE_LOG_LEVEL", "info").lower(), 20)


def _json_mode() -> bool:
    return os.getenv("POTION_MAZE_LOG_JSON", "0") in _TRUTHY


def _format(level: str, **fields) -> str:
    if _json_mode():
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "potion_maze"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < _current_level():
            return
        fields.setdefault("logger", self.name)
        print(_format(lvl, **fields), file=sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]

