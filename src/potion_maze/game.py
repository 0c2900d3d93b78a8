from enum import Enum
from typing import Dict, Tuple

from .grid import WALL, PASSAGE, POTION
from .logging_utils import get_logger
from .maze import Maze
from .render import render_fog, render_text

log = get_logger("potion_maze.game")

# Movement keys and their vectors (row, col)
MOVES: Dict[str, Tuple[int, int]] = {"w": (-1, 0), "a": (0, -1), "s": (1, 0), "d": (0, 1)}
QUIT_KEY = "e"


class MoveResult(Enum):
    MOVED = "moved"
    BLOCKED = "blocked"
    NEED_POTIONS = "need_potions"
    ESCAPED = "escaped"
    QUIT = "quit"
    IGNORED = "ignored"


class MazeGame:
    """One play-through of a generated maze.

    The game works on its own copy of the maze matrix: collected potions are
    cleared from the copy while the player position is kept as an overlay.
    The player starts on the entrance and leaves through the exit once every
    potion placed in the maze has been picked up.
    """

    def __init__(self, maze: Maze, fog_radius: int = 0) -> None:
        if fog_radius < 0:
            raise ValueError(f"fog_radius must be >= 0, got {fog_radius}")
        self.maze = maze
        self.grid = maze.grid.copy()
        self.fog_radius = fog_radius
        self.player: Tuple[int, int] = maze.entrance
        self.collected = 0
        self.required = maze.potions
        self.finished = False
        self.escaped = False

    def move(self, key: str) -> MoveResult:
        """Apply one key press (w/a/s/d moves, e quits) and report what happened."""
        if self.finished:
            return MoveResult.IGNORED
        if key == QUIT_KEY:
            self.finished = True
            return MoveResult.QUIT
        if key not in MOVES:
            return MoveResult.IGNORED

        dr, dc = MOVES[key]
        target = (self.player[0] + dr, self.player[1] + dc)
        H, W = self.grid.shape
        if not (0 <= target[0] < H and 0 <= target[1] < W) or self.grid[target] == WALL:
            return MoveResult.BLOCKED
        if target == self.maze.exit and self.collected < self.required:
            return MoveResult.NEED_POTIONS

        if self.grid[target] == POTION:
            self.collected += 1
            self.grid[target] = PASSAGE
            log.debug(event="potion_collected", at=target, collected=self.collected)
        self.player = target
        if target == self.maze.exit:
            self.finished = True
            self.escaped = True
            log.info(event="maze_escaped", seed=self.maze.seed, potions=self.collected)
            return MoveResult.ESCAPED
        return MoveResult.MOVED

    def view(self) -> str:
        if self.fog_radius > 0:
            return render_fog(self.grid, self.player, self.fog_radius, self.collected)
        return render_text(self.grid, self.collected, self.player)
