# fov/world/octant.py
from __future__ import annotations
import math

Coord = tuple[int, int]

# Octant ids. Low three bits: 1 = flip distance, 2 = flip height, 4 = swap axes.
# 8 has none of them set and is the unrotated octant.
OCTANTS: range = range(1, 9)


def octant_to_xy(px: int, py: int, distance: int, height: int, octant: int) -> Coord:
    """Map (distance, height) inside an octant to absolute grid coords around (px, py)."""
    if octant & 0x1:
        distance = -distance
    if octant & 0x2:
        height = -height
    if octant & 0x4:
        return px + height, py + distance
    return px + distance, py + height


def distance_between(x1: int, y1: int, x2: int, y2: int) -> int:
    """Euclidean distance truncated toward zero (not rounded)."""
    return int(math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2))
