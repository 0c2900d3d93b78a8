from typing import List, Tuple, Optional
import random
import numpy as np

from .config import MazeConfig
from .grid import GridMapper, WALL, PASSAGE, POTION, VISITED, NEEDED_POTIONS
from .logging_utils import get_logger
from .stack import FrontierStack

# matplotlib optional for rendering
try:
    import matplotlib.pyplot as plt
    from matplotlib.colors import ListedColormap
except Exception:
    plt = None  # render disabled if matplotlib missing

log = get_logger("potion_maze.maze")

# Glyph -> colour index for image rendering: wall, passage, potion
_GLYPH_CODES = {WALL: 0, PASSAGE: 1, POTION: 2}


class Maze:
    """A perfect maze stored as a character matrix.

    The maze is carved with a randomized depth-first backtracker over a
    ``width`` x ``height`` grid of logical cells. Each cell is drawn as a
    ``cell_size`` x ``cell_size`` block of passages and blocks are separated
    by one-character walls. Column 0 holds the entrance, the last column the
    exit, and ``potions`` markers are dropped on random open cells.
    The same arguments always produce the same matrix.
    """

    def __init__(self, width: int, height: int, cell_size: int = 1, seed: int = 0,
                 potions: int = NEEDED_POTIONS) -> None:
        MazeConfig(width=width, height=height, cell_size=cell_size, seed=seed, potions=potions).validate()
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.seed = seed
        self.mapper = GridMapper(cell_size)
        self._rng = random.Random(seed)
        self.grid: np.ndarray = np.full(self.mapper.matrix_shape(width, height), WALL, dtype="<U1")
        self.entrance: Tuple[int, int] = (-1, -1)
        self.exit: Tuple[int, int] = (-1, -1)
        self.potion_cells: List[Tuple[int, int]] = []
        self._generate()
        self._unmark_visited()
        self._carve_entrance()
        self._carve_exit()
        self._place_potions(potions)
        log.debug(event="maze_generated", width=width, height=height, cell_size=cell_size,
                  seed=seed, entrance=self.entrance, exit=self.exit, potions=self.potions)

    @classmethod
    def from_config(cls, config: MazeConfig) -> "Maze":
        return cls(config.width, config.height, config.cell_size, config.seed, config.potions)

    @property
    def matrix_height(self) -> int:
        return self.grid.shape[0]

    @property
    def matrix_width(self) -> int:
        return self.grid.shape[1]

    @property
    def potions(self) -> int:
        return len(self.potion_cells)

    # --- generation ---------------------------------------------------
    def _neighbours(self, cell: Tuple[int, int]) -> List[Tuple[int, int]]:
        """Unvisited neighbour centers of ``cell`` in order up, left, right, down."""
        m = self.mapper
        r, c = cell
        first_row, last_row = m.cell_to_matrix_index(0), m.cell_to_matrix_index(self.height - 1)
        first_col, last_col = m.cell_to_matrix_index(0), m.cell_to_matrix_index(self.width - 1)
        candidates = [
            (r > first_row, (m.previous_cell_index(r), c)),
            (c > first_col, (r, m.previous_cell_index(c))),
            (c < last_col, (r, m.next_cell_index(c))),
            (r < last_row, (m.next_cell_index(r), c)),
        ]
        return [n for inside, n in candidates if inside and self.grid[n] != VISITED]

    def _remove_wall(self, a: Tuple[int, int], b: Tuple[int, int]) -> None:
        """Open the cell_size-wide band of wall between two adjacent centers."""
        m = self.mapper
        if a[0] == b[0]:
            top = m.block_start(a[0])
            self.grid[top:top + self.cell_size, m.wall_between(a[1], b[1])] = PASSAGE
        else:
            left = m.block_start(a[1])
            self.grid[m.wall_between(a[0], b[0]), left:left + self.cell_size] = PASSAGE

    def _generate(self) -> None:
        m = self.mapper
        stack = FrontierStack()
        # start on the left border at a random row
        cell = (m.cell_to_matrix_index(self._rng.randrange(self.height)), m.cell_to_matrix_index(0))
        self.grid[cell] = VISITED
        stack.push(cell)
        while not stack.is_empty():
            cell = stack.pop()
            neighbours = self._neighbours(cell)
            if neighbours:
                # keep the current cell as a backtrack anchor
                stack.push(cell)
                nxt = self._rng.choice(neighbours)
                self.grid[nxt] = VISITED
                self._remove_wall(cell, nxt)
                stack.push(nxt)

    def _unmark_visited(self) -> None:
        size = self.cell_size
        for r, c in np.argwhere(self.grid == VISITED):
            top, left = self.mapper.block_start(int(r)), self.mapper.block_start(int(c))
            self.grid[top:top + size, left:left + size] = PASSAGE

    def _carve_entrance(self) -> None:
        for row in range(self.matrix_height):
            if self.grid[row, 1] == PASSAGE:
                self.grid[row, 0] = PASSAGE
                self.entrance = (row, 0)
                return

    def _carve_exit(self) -> None:
        col = self.mapper.cell_to_matrix_index(self.width - 1)
        last = self.matrix_width - 1
        for row in range(self.matrix_height - 1, -1, -1):
            if self.grid[row, col] == PASSAGE:
                self.grid[row, last] = PASSAGE
                self.exit = (row, last)
                return

    def _place_potions(self, count: int) -> None:
        """Drop ``count`` potions on random interior passages (rejection sampling).

        Draws are not deduplicated; a cell that already holds a potion is no
        longer a passage, so it is simply rejected like a wall.
        """
        H, W = self.grid.shape
        interior = self.grid[1:H - 1, 1:W - 1]
        for placed in range(count):
            if not (interior == PASSAGE).any():
                log.warn(event="potion_placement_short", wanted=count, placed=placed,
                         width=self.width, height=self.height, cell_size=self.cell_size)
                return
            while True:
                row = self._rng.randrange(1, H - 1)
                col = self._rng.randrange(1, W - 1)
                if self.grid[row, col] == PASSAGE:
                    break
            self.grid[row, col] = POTION
            self.potion_cells.append((row, col))

    # --- queries -----------------------------------------------------
    def is_free(self, pos: Tuple[int, int]) -> bool:
        r, c = pos
        return 0 <= r < self.matrix_height and 0 <= c < self.matrix_width and self.grid[r, c] != WALL

    def to_text(self) -> str:
        return "\n".join("".join(row) for row in self.grid)

    def render(self, path_positions: Optional[List[Tuple[int, int]]] = None, savepath: Optional[str] = None,
               figsize: Tuple[int, int] = (6, 6)) -> None:
        if plt is None:
            print("matplotlib not available; render skipped.")
            return
        codes = np.vectorize(_GLYPH_CODES.get, otypes=[np.int8])(self.grid)
        fig, ax = plt.subplots(figsize=figsize)
        ax.imshow(codes, cmap=ListedColormap(["black", "white", "tab:purple"]), vmin=0, vmax=2,
                  interpolation="nearest")
        ax.set_xticks([])
        ax.set_yticks([])
        if path_positions:
            xs = [p[1] for p in path_positions]
            ys = [p[0] for p in path_positions]
            ax.plot(xs, ys, linewidth=2)
        ax.scatter([self.entrance[1], self.exit[1]], [self.entrance[0], self.exit[0]], c="red")
        if savepath:
            plt.savefig(savepath, bbox_inches="tight")
            print(f"Saved visual to {savepath}")
        plt.close(fig)


def generate_maze(width: int, height: int, cell_size: int = 1, seed: int = 0,
                  potions: int = NEEDED_POTIONS) -> np.ndarray:
    """Return a freshly generated maze matrix (rows x columns of characters)."""
    return Maze(width, height, cell_size=cell_size, seed=seed, potions=potions).grid
