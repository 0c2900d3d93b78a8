"""
Potion Maze: generate a perfect maze and walk it in the terminal.

Run ``python main.py --help`` for the flags; anything left out is asked for
interactively. Move with w/a/s/d, quit with e. The exit only opens once every
potion (#) has been collected.
"""
import os
import sys

# Run straight from a checkout of the src/ layout
SRC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from potion_maze.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
