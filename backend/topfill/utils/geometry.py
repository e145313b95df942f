"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def winding_number(point: tuple[float, float], polygon_points: NDArray[np.float64]) -> int:
    """Compute winding number of point w.r.t. a closed ring.

    The ring must repeat its first point at the end. Non-zero → point is inside.
    """
    px, py = point
    x0 = polygon_points[:-1, 0]
    y0 = polygon_points[:-1, 1]
    x1 = polygon_points[1:, 0]
    y1 = polygon_points[1:, 1]

    cross = (x1 - x0) * (py - y0) - (px - x0) * (y1 - y0)
    upward = (y0 <= py) & (y1 > py) & (cross > 0)
    downward = (y0 > py) & (y1 <= py) & (cross < 0)
    return int(np.count_nonzero(upward)) - int(np.count_nonzero(downward))


FILL_RULES = ("nonzero", "evenodd")


def check_fill_rule(fill_rule: str) -> str:
    if fill_rule not in FILL_RULES:
        raise ValueError(f"Unknown fill rule: {fill_rule!r} (expected one of {', '.join(FILL_RULES)})")
    return fill_rule


def is_filled(winding: int, fill_rule: str = "nonzero") -> bool:
    """Apply an SVG fill rule to a summed winding number."""
    if check_fill_rule(fill_rule) == "evenodd":
        return winding % 2 != 0
    return winding != 0


def rotated_corners(
    cx: float,
    cy: float,
    half_w: float,
    half_h: float,
    rotation_deg: float,
) -> list[tuple[float, float]]:
    """Corners of a centred box, rotated by ``rotation_deg`` and moved to (cx, cy)."""
    rad = rotation_deg * math.pi / 180
    cos = math.cos(rad)
    sin = math.sin(rad)
    corners = [(-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h)]
    return [(cx + dx * cos - dy * sin, cy + dx * sin + dy * cos) for dx, dy in corners]


def clear_of(
    x: float,
    y: float,
    radius: float,
    others: list[tuple[float, float, float]],
    pad: float = 5.0,
) -> bool:
    """True when (x, y, radius) keeps ``pad`` clearance from every (x, y, radius) in ``others``."""
    for ox, oy, orad in others:
        dx = x - ox
        dy = y - oy
        min_d = radius + orad + pad
        if dx * dx + dy * dy < min_d * min_d:
            return False
    return True
