from typing import Tuple

# Glyphs used in the rendered matrix
WALL = "w"
PASSAGE = " "
POTION = "#"
VISITED = "v"  # only present while the walk is running

NEEDED_POTIONS = 3


class GridMapper:
    """Translate between logical cell indices and matrix indices.

    Each logical cell becomes a ``cell_size`` x ``cell_size`` block and
    neighbouring blocks are separated by a single wall line. Cells are
    addressed by the matrix index of their block center, which uses floor
    division so even block sizes sit one step off true center.
    """

    def __init__(self, cell_size: int = 1) -> None:
        if cell_size < 1:
            raise ValueError(f"cell_size must be >= 1, got {cell_size}")
        self.cell_size = cell_size
        self.step = cell_size + 1

    def cell_to_matrix_index(self, cell: int) -> int:
        return self.step * cell + self.cell_size // 2 + 1

    def dimension_to_matrix_extent(self, dimension: int) -> int:
        return self.step * dimension + 1

    def previous_cell_index(self, idx: int) -> int:
        return idx - self.step

    def next_cell_index(self, idx: int) -> int:
        return idx + self.step

    def block_start(self, center: int) -> int:
        """First matrix index covered by the block centered at ``center``."""
        return center - self.cell_size // 2

    def wall_between(self, a: int, b: int) -> int:
        # the wall line sits right before the block of the higher center
        return self.block_start(max(a, b)) - 1

    def matrix_shape(self, width: int, height: int) -> Tuple[int, int]:
        return self.dimension_to_matrix_extent(height), self.dimension_to_matrix_extent(width)
