# fov/world/grid.py
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Iterable, Set
from fov import settings

Coord = tuple[int, int]

@dataclass(slots=True)
class Grid:
    """Dense tile grid with a wall set. Satisfies GridMap for the shadowcaster."""
    cols: int = settings.WORLD_COLS
    rows: int = settings.WORLD_ROWS
    tile_size: int = settings.TILE_SIZE
    walls: Set[Coord] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"Grid dimensions must be positive: {self.cols}x{self.rows}")

    @classmethod
    def from_rows(
        cls,
        lines: Iterable[str],
        *,
        wall: str = "#",
        floor: str = ".",
        observer: str = "@",
        tile_size: int = settings.TILE_SIZE,
    ) -> tuple["Grid", Coord | None]:
        """
        Build a grid from ASCII rows (row 0 first).
        Returns (grid, start) where start is the observer glyph's cell, or None.
        """
        rows = [line.rstrip("\n") for line in lines]
        rows = [r for r in rows if r]
        if not rows:
            raise ValueError("Map has no rows")
        width = len(rows[0])
        walls: set[Coord] = set()
        start: Coord | None = None
        for r, line in enumerate(rows):
            if len(line) != width:
                raise ValueError(f"Map row {r} has width {len(line)}, expected {width}")
            for c, ch in enumerate(line):
                if ch == wall:
                    walls.add((c, r))
                elif ch == observer:
                    if start is not None:
                        raise ValueError(f"Map has more than one observer: {start} and {(c, r)}")
                    start = (c, r)
                elif ch != floor:
                    raise ValueError(f"Unknown map glyph {ch!r} at {(c, r)}")
        return cls(width, len(rows), tile_size, walls), start

    # --- GridMap ---
    def index(self, col: int, row: int) -> tuple[int, int]:
        # storage order is row-major
        return row, col

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def is_opaque(self, col: int, row: int) -> bool:
        return (col, row) in self.walls

    # --- walls ---
    def is_passable(self, col: int, row: int) -> bool:
        return self.in_bounds(col, row) and (col, row) not in self.walls

    def toggle_wall(self, col: int, row: int) -> bool:
        """Flip a wall; returns True if the grid changed."""
        if not self.in_bounds(col, row):
            return False
        if (col, row) in self.walls:
            self.walls.remove((col, row))
        else:
            self.walls.add((col, row))
        return True

    # --- math ---
    def to_px(self, col: int, row: int) -> tuple[int, int]:
        return col * self.tile_size, row * self.tile_size

    def center_px(self, col: int, row: int) -> tuple[int, int]:
        x, y = self.to_px(col, row)
        half = self.tile_size // 2
        return x + half, y + half

    def from_px(self, x: int, y: int) -> tuple[int, int]:
        return x // self.tile_size, y // self.tile_size

    def tile_rect(self, col: int, row: int) -> pygame.Rect:
        x, y = self.to_px(col, row)
        return pygame.Rect(x, y, self.tile_size, self.tile_size)

    # --- drawing ---
    def draw_lines(self, surface: pygame.Surface) -> None:
        ts = self.tile_size
        w, h = self.cols * ts, self.rows * ts
        color = settings.GRID_COLOR
        for c in range(self.cols + 1):
            pygame.draw.line(surface, color, (c * ts, 0), (c * ts, h), 1)
        for r in range(self.rows + 1):
            pygame.draw.line(surface, color, (0, r * ts), (w, r * ts), 1)

    def draw_walls(self, surface: pygame.Surface) -> None:
        for c, r in self.walls:
            rect = self.tile_rect(c, r)
            pygame.draw.rect(surface, settings.WALL_RGB, rect)
            pygame.draw.rect(surface, settings.WALL_BORDER_RGB, rect, width=1)

    def draw_highlight(self, surface: pygame.Surface, mouse_pos: tuple[int, int]) -> None:
        col, row = self.from_px(*mouse_pos)
        if not self.in_bounds(col, row):
            return
        pygame.draw.rect(surface, settings.GRID_HILITE, self.tile_rect(col, row), width=2)
