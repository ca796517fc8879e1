# fov/entities/observer.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from fov import settings
from fov.world.grid import Grid

@dataclass(slots=True)
class Observer:
    grid: Grid
    col: int = settings.START_COL
    row: int = settings.START_ROW
    radius_px: int = max(4, settings.TILE_SIZE // 3)

    @property
    def pos(self) -> tuple[int, int]:
        return self.col, self.row

    def step(self, dc: int, dr: int) -> bool:
        """Move one tile; walls and the map edge stop it. Returns True if it moved."""
        nc, nr = self.col + dc, self.row + dr
        if not self.grid.is_passable(nc, nr):
            return False
        self.col, self.row = nc, nr
        return True

    def draw(self, surface: pygame.Surface) -> None:
        cx, cy = self.grid.center_px(self.col, self.row)
        pygame.draw.circle(surface, settings.OBSERVER_COLOR, (cx, cy), self.radius_px)
