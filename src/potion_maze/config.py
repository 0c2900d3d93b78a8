from dataclasses import dataclass

from .grid import NEEDED_POTIONS


@dataclass
class MazeConfig:
    width: int = 10
    height: int = 10
    cell_size: int = 1
    seed: int = 0
    potions: int = NEEDED_POTIONS
    fog_radius: int = 0

    def validate(self) -> "MazeConfig":
        """Raise ValueError on the first out-of-range field; return self."""
        for name in ("width", "height", "cell_size"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")
        if self.potions < 0:
            raise ValueError(f"potions must be >= 0, got {self.potions}")
        if self.fog_radius < 0:
            raise ValueError(f"fog_radius must be >= 0, got {self.fog_radius}")
        return self


__all__ = ["MazeConfig"]
