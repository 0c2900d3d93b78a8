from typing import List, Optional, Tuple
import numpy as np

PLAYER = "@"


def _overlay(grid: np.ndarray, player: Optional[Tuple[int, int]]) -> np.ndarray:
    view = grid.copy()
    if player is not None:
        view[player] = PLAYER
    return view


def fog_window(shape: Tuple[int, int], player: Tuple[int, int], radius: int) -> Tuple[int, int, int, int]:
    """Inclusive (start_row, end_row, start_col, end_col) around ``player``, clipped to the matrix."""
    H, W = shape
    r, c = player
    return max(r - radius, 0), min(r + radius, H - 1), max(c - radius, 0), min(c + radius, W - 1)


def render_text(grid: np.ndarray, potions_collected: int = 0, player: Optional[Tuple[int, int]] = None) -> str:
    """Whole maze as text, preceded by the potion counter line."""
    lines: List[str] = [f"Potions: {potions_collected}"]
    lines.extend("".join(row) for row in _overlay(grid, player))
    return "\n".join(lines)


def render_fog(grid: np.ndarray, player: Tuple[int, int], radius: int, potions_collected: int = 0) -> str:
    """Only the square of ``radius`` cells around the player."""
    r0, r1, c0, c1 = fog_window(grid.shape, player, radius)
    window = _overlay(grid, player)[r0:r1 + 1, c0:c1 + 1]
    lines: List[str] = [f"Potions: {potions_collected}"]
    lines.extend("".join(row) for row in window)
    return "\n".join(lines)
