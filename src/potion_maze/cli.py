import argparse
import sys
from typing import Callable, Optional, Sequence

from .config import MazeConfig
from .game import MazeGame, MoveResult
from .grid import NEEDED_POTIONS
from .maze import Maze

# Prompted in this order when the matching flag is not given
PROMPTS = [
    ("width", "Maze width: "),
    ("height", "Maze height: "),
    ("cell_size", "Maze cell size: "),
    ("seed", "Maze seed: "),
    ("fog", "Fog radius: "),
]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate a perfect maze and collect the potions to escape")
    p.add_argument("--width", type=int, default=None, help="Maze width in cells")
    p.add_argument("--height", type=int, default=None, help="Maze height in cells")
    p.add_argument("--cell-size", dest="cell_size", type=int, default=None, help="Characters per cell side")
    p.add_argument("--seed", type=int, default=None, help="Random seed; same seed gives the same maze")
    p.add_argument("--fog", type=int, default=None, help="Fog radius around the player (0 shows the whole maze)")
    p.add_argument("--potions", type=int, default=NEEDED_POTIONS, help="Number of potions to place")
    p.add_argument("--show", action="store_true", help="Print the maze and exit without playing")
    p.add_argument("--out", type=str, default=None, help="Save an image of the maze to this file")
    return p


def parse_args(argv: Optional[Sequence[str]] = None, input_fn: Callable[[str], str] = input) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    for name, prompt in PROMPTS:
        if getattr(args, name) is None:
            try:
                raw = input_fn(prompt)
            except EOFError:
                parser.error(f"no value given for {name}")
            try:
                setattr(args, name, int(raw.strip()))
            except ValueError:
                parser.error(f"{name} must be an integer, got {raw!r}")
    return args


def config_from_args(args: argparse.Namespace) -> MazeConfig:
    return MazeConfig(width=args.width, height=args.height, cell_size=args.cell_size,
                      seed=args.seed, potions=args.potions, fog_radius=args.fog)


def play(game: MazeGame, input_fn: Callable[[str], str] = input) -> int:
    """Read keys until the player escapes or quits; return the exit status."""
    print(game.view())
    while not game.finished:
        try:
            line = input_fn("")
        except EOFError:
            break
        for key in line.strip().lower():
            result = game.move(key)
            if result is MoveResult.MOVED:
                print(game.view())
            elif result is MoveResult.NEED_POTIONS:
                print(f"You only have {game.collected} potions, you need {game.required} to escape the maze.")
            elif result is MoveResult.ESCAPED:
                print(game.view())
                print(f"\nCongratulations you have collected all {game.collected} potions and beaten the maze.")
            if game.finished:
                break
    return 0


def main(argv: Optional[Sequence[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    args = parse_args(argv, input_fn)
    try:
        config = config_from_args(args).validate()
    except ValueError as exc:
        build_parser().error(str(exc))

    maze = Maze.from_config(config)
    print(f"Maze size: {config.width}x{config.height} cells, {maze.matrix_width}x{maze.matrix_height} characters. "
          f"Entrance={maze.entrance} Exit={maze.exit} Potions={maze.potions}")

    if args.out:
        maze.render(savepath=args.out)

    if args.show:
        print(maze.to_text())
        return 0

    return play(MazeGame(maze, fog_radius=config.fog_radius), input_fn)


if __name__ == "__main__":
    sys.exit(main())
