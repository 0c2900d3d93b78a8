from typing import List, Optional, Tuple

Cell = Tuple[int, int]


class StackCapacityError(RuntimeError):
    """Raised when a push would exceed the stack capacity."""


class FrontierStack:
    """Backtracking stack for the depth-first walk.

    Slot 0 holds a sentinel (``None``) so popping an empty stack hands the
    sentinel back instead of failing; check :meth:`is_empty` first.
    ``capacity=None`` lets the stack grow on demand.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        self._cells: List[Optional[Cell]] = [None]

    def __len__(self) -> int:
        return len(self._cells) - 1

    def is_empty(self) -> bool:
        return len(self._cells) == 1

    def push(self, cell: Cell) -> None:
        if self.capacity is not None and len(self) >= self.capacity:
            raise StackCapacityError(
                f"cannot push {cell}: stack already holds {self.capacity} cells"
            )
        self._cells.append(cell)

    def pop(self) -> Optional[Cell]:
        if self.is_empty():
            return self._cells[0]
        return self._cells.pop()

    def peek(self) -> Optional[Cell]:
        return self._cells[-1]
