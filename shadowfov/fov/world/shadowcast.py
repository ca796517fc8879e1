# fov/world/shadowcast.py
"""Recursive shadowcasting field of view.

The engine only talks to the host grid through ``GridMap``: a bounds check and
an opacity check. Each of the eight octants around the observer is scanned
band by band (one band per distance step). A run of transparent cells keeps
its wedge of slopes open into the next band; an opaque cell narrows it, and
cells inside the shadow are never visited.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Iterator, Protocol, runtime_checkable

from fov.core.log import get_logger
from fov.world.octant import OCTANTS, Coord, distance_between, octant_to_xy

log = get_logger(__name__)


@runtime_checkable
class GridMap(Protocol):
    """What the engine needs from a grid. is_opaque is only asked for in-bounds cells."""

    def index(self, x: int, y: int) -> tuple[int, int]: ...

    def in_bounds(self, x: int, y: int) -> bool: ...

    def is_opaque(self, x: int, y: int) -> bool: ...


def scan_octant(
    grid: GridMap,
    px: int,
    py: int,
    distance: int,
    low_slope: float,
    high_slope: float,
    octant: int,
    radius: int,
    visible: set[Coord],
) -> None:
    """Scan one band of an octant and recurse outward through its open wedges."""
    if distance > radius:
        return

    # round half up, not to even: decides which cell sits on a wedge edge
    low = math.floor(low_slope * distance + 0.5)
    high = math.floor(high_slope * distance + 0.5)

    in_gap = False  # previous cell in this band was transparent
    for height in range(low, high + 1):
        x, y = octant_to_xy(px, py, distance, height, octant)
        in_bounds = grid.in_bounds(x, y)
        if in_bounds and distance_between(px, py, x, y) < radius:
            # walls are seen too; only what lies behind them is not
            visible.add((x, y))

        if in_bounds and not grid.is_opaque(x, y):
            if not in_gap and height > low:
                # first light after an opaque run: the wedge restarts here
                low_slope = (height - 0.5) / distance
            in_gap = True
        else:
            if in_gap:
                scan_octant(grid, px, py, distance + 1, low_slope, (height - 0.5) / distance, octant, radius, visible)
            in_gap = False

    if in_gap:
        scan_octant(grid, px, py, distance + 1, low_slope, high_slope, octant, radius, visible)


@dataclass(slots=True)
class VisibilityField:
    """
    Cells visible from one observer, as of the last compute().
    Reuse one instance per observer; each compute() replaces the result.
    """
    visible: set[Coord] = field(default_factory=set)
    origin: Coord | None = None
    radius: int = 0

    def compute(self, grid: GridMap, px: int, py: int, radius: int) -> None:
        self.visible = {(px, py)}
        self.origin = (px, py)
        self.radius = radius
        for octant in OCTANTS:
            scan_octant(grid, px, py, 1, 0.0, 1.0, octant, radius, self.visible)
        log.debug("fov origin=%s radius=%d visible=%d", self.origin, radius, len(self.visible))

    def is_visible(self, x: int, y: int) -> bool:
        return (x, y) in self.visible

    def __contains__(self, cell: object) -> bool:
        return cell in self.visible

    def __len__(self) -> int:
        return len(self.visible)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.visible)
