# fov/settings.py
from __future__ import annotations

# Window / render
SCREEN_WIDTH: int = 1280
SCREEN_HEIGHT: int = 720
SCREEN_SIZE: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT)
WINDOW_TITLE: str = "shadowfov - recursive shadowcasting demo"
FPS: int = 60

# Grid
TILE_SIZE: int = 24

# WORLD DIMENSIONS (in tiles): sized to fit the window, no camera
WORLD_COLS: int = SCREEN_WIDTH // TILE_SIZE
WORLD_ROWS: int = SCREEN_HEIGHT // TILE_SIZE

# Observer start (tiles)
START_COL: int = 8
START_ROW: int = 14

# Sight radius (tiles)
SIGHT_RADIUS_TILES: int = 12
SIGHT_RADIUS_MIN: int = 0
SIGHT_RADIUS_MAX: int = 40

# Colors
BG_COLOR: tuple[int, int, int] = (15, 15, 20)
GRID_COLOR: tuple[int, int, int] = (45, 45, 60)
GRID_HILITE: tuple[int, int, int] = (70, 70, 100)
OBSERVER_COLOR: tuple[int, int, int] = (220, 220, 40)

# Walls (render)
WALL_RGB: tuple[int, int, int] = (160, 40, 40)
WALL_BORDER_RGB: tuple[int, int, int] = (220, 80, 80)

# Visible floor tint
VISIBLE_RGBA: tuple[int, int, int, int] = (255, 240, 180, 40)

# Fog (single level: no explored memory)
FOG_RGBA: tuple[int, int, int, int] = (0, 0, 0, 200)

# HUD
HUD_BG_RGBA: tuple[int, int, int, int] = (0, 0, 0, 150)
HUD_TEXT_RGB: tuple[int, int, int] = (240, 240, 240)
HUD_FONT_SIZE: int = 20

# Demo walls: (col, row) offsets from the observer start, seeded with R
DEMO_PILLARS: tuple[tuple[int, int], ...] = (
    (4, 0), (4, -3), (6, 3), (9, -1), (12, 2), (12, -4), (15, 0), (18, 5),
)
DEMO_WALL_COL_OFFSET: int = 22      # vertical wall with a doorway
DEMO_WALL_DOOR_ROWS: tuple[int, ...] = (-1, 0)

# Logging
LOG_LEVEL: str = "INFO"
LOG_FILE: str | None = None
