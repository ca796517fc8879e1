# fov/scenes/viewer.py
from __future__ import annotations
import pygame
from dataclasses import dataclass, field

from fov import settings
from fov.core.log import get_logger
from fov.world.grid import Grid, Coord
from fov.entities.observer import Observer
from fov.world.shadowcast import VisibilityField

log = get_logger(__name__)

MOVE_KEYS: dict[int, tuple[int, int]] = {
    pygame.K_LEFT: (-1, 0), pygame.K_a: (-1, 0),
    pygame.K_RIGHT: (1, 0), pygame.K_d: (1, 0),
    pygame.K_UP: (0, -1), pygame.K_w: (0, -1),
    pygame.K_DOWN: (0, 1), pygame.K_s: (0, 1),
}
RADIUS_UP_KEYS = (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS)
RADIUS_DOWN_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS)


@dataclass
class ViewerScene:
    """
    Field-of-view sandbox:
    - Arrows/WASD step the observer
    - LMB toggles a wall, C clears walls, R re-seeds the demo walls
    - +/- change the sight radius
    Everything outside the current field is fogged; nothing is remembered.
    """
    screen: pygame.Surface
    grid: Grid = field(default_factory=Grid)
    observer: Observer = field(init=False)
    radius: int = settings.SIGHT_RADIUS_TILES
    view: VisibilityField = field(default_factory=VisibilityField, init=False)

    def __post_init__(self) -> None:
        self.observer = Observer(self.grid)
        self._font = pygame.font.Font(None, settings.HUD_FONT_SIZE)
        self._seed_demo_walls()

    # ---- Input ----
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
            elif event.key in MOVE_KEYS:
                if self.observer.step(*MOVE_KEYS[event.key]):
                    self._recompute_visibility()
            elif event.key in RADIUS_UP_KEYS:
                self._set_radius(self.radius + 1)
            elif event.key in RADIUS_DOWN_KEYS:
                self._set_radius(self.radius - 1)
            elif event.key == pygame.K_c:
                self.grid.walls.clear()
                log.debug("walls cleared")
                self._recompute_visibility()
            elif event.key == pygame.K_r:
                self._seed_demo_walls()

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            col, row = self.grid.from_px(*event.pos)
            if (col, row) == self.observer.pos:
                return
            if self.grid.toggle_wall(col, row):
                log.debug("wall toggled at %s", (col, row))
                self._recompute_visibility()

    def _set_radius(self, radius: int) -> None:
        radius = min(max(radius, settings.SIGHT_RADIUS_MIN), settings.SIGHT_RADIUS_MAX)
        if radius == self.radius:
            return
        self.radius = radius
        log.debug("sight radius -> %d", radius)
        self._recompute_visibility()

    # ---- Fog / visibility ----
    def _recompute_visibility(self) -> None:
        self.view.compute(self.grid, self.observer.col, self.observer.row, self.radius)

    # ---- Render ----
    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(settings.BG_COLOR)
        self._draw_visible_floor(surface)
        self.grid.draw_walls(surface)
        self.grid.draw_lines(surface)
        self.observer.draw(surface)
        self._draw_fog(surface)
        self.grid.draw_highlight(surface, pygame.mouse.get_pos())
        self._draw_hud(surface)

    def _draw_visible_floor(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for c, r in self.view:
            overlay.fill(settings.VISIBLE_RGBA, self.grid.tile_rect(c, r))
        surface.blit(overlay, (0, 0))

    def _draw_fog(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for c in range(self.grid.cols):
            for r in range(self.grid.rows):
                if self.view.is_visible(c, r):
                    continue
                overlay.fill(settings.FOG_RGBA, self.grid.tile_rect(c, r))
        surface.blit(overlay, (0, 0))

    def _draw_hud(self, surface: pygame.Surface) -> None:
        pieces = [
            f"Pos: {self.observer.col},{self.observer.row}",
            f"Radius: {self.radius}",
            f"Visible: {len(self.view)}",
            "Move: arrows/WASD | +/- radius | LMB wall | C clear | R demo",
        ]
        text = "  |  ".join(pieces)
        pad = 8
        surf_text = self._font.render(text, True, settings.HUD_TEXT_RGB)
        w, h = surf_text.get_size()
        pill = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        pill.fill(settings.HUD_BG_RGBA)
        pill.blit(surf_text, (pad, pad))
        surface.blit(pill, (10, 10))

    # ---- Demo helper ----
    def _seed_demo_walls(self) -> None:
        base_c, base_r = self.observer.pos
        cells: list[Coord] = [(base_c + dc, base_r + dr) for dc, dr in settings.DEMO_PILLARS]
        wall_c = base_c + settings.DEMO_WALL_COL_OFFSET
        for r in range(self.grid.rows):
            if r - base_r not in settings.DEMO_WALL_DOOR_ROWS:
                cells.append((wall_c, r))
        for c, r in cells:
            if self.grid.in_bounds(c, r) and (c, r) != self.observer.pos:
                self.grid.walls.add((c, r))
        log.debug("seeded %d demo walls", len(self.grid.walls))
        self._recompute_visibility()
