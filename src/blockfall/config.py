"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .geometry import GridSize


# Size of a single board cell in pixels
CELL_EDGE = 20
# Milliseconds between automatic downward moves
TICK_INTERVAL_MS = 500
# Frames per second to run the front-end at
FPS = 60


@dataclass(frozen=True)
class GameConfig:
    """Surface dimensions, timing and randomness for one session.

    The grid is derived once from the surface: ``floor(surface / cell_edge)``
    cells along each axis.
    """

    surface_width: int = 200
    surface_height: int = 400
    cell_edge: int = CELL_EDGE
    tick_interval_ms: float = TICK_INTERVAL_MS
    fps: int = FPS
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.cell_edge <= 0:
            raise ValueError("cell_edge must be positive")
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive")
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if self.surface_width < self.cell_edge or self.surface_height < self.cell_edge:
            raise ValueError("Surface must fit at least one cell")

    @classmethod
    def from_surface(cls, width: int, height: int, **kwargs) -> "GameConfig":
        """Build a config for a rendering surface of ``width`` x ``height`` pixels."""

        return cls(surface_width=int(width), surface_height=int(height), **kwargs)

    @property
    def grid_size(self) -> GridSize:
        return GridSize(
            self.surface_width // self.cell_edge, self.surface_height // self.cell_edge
        )


__all__ = ["GameConfig", "CELL_EDGE", "TICK_INTERVAL_MS", "FPS"]
