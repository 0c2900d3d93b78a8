from .config import MazeConfig
from .game import MazeGame, MoveResult
from .grid import GridMapper, NEEDED_POTIONS, PASSAGE, POTION, WALL
from .maze import Maze, generate_maze
from .stack import FrontierStack, StackCapacityError

__all__ = [
    "FrontierStack",
    "GridMapper",
    "Maze",
    "MazeConfig",
    "MazeGame",
    "MoveResult",
    "NEEDED_POTIONS",
    "PASSAGE",
    "POTION",
    "StackCapacityError",
    "WALL",
    "generate_maze",
]
