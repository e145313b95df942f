"""Data model shared by the selector, the builders and the assembler.

Everything here is immutable once built: a Silhouette is read-only after
parsing, specs are fixed before a builder runs, and builders return tuples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import shapely
from shapely.geometry.base import BaseGeometry


@dataclass(frozen=True)
class Silhouette:
    """Path geometry plus derived bounds and filled region."""

    d: str
    # Exact path bounds: (min_x, min_y, max_x, max_y)
    bounds: tuple[float, float, float, float]
    # Filled region (prepared), possibly empty
    region: BaseGeometry

    def padded_bounds(self, pad: float, canvas: float) -> tuple[float, float, float, float]:
        """Bounds grown by ``pad`` and clamped to the canvas."""
        min_x, min_y, max_x, max_y = self.bounds
        return (
            max(0.0, min_x - pad),
            max(0.0, min_y - pad),
            min(float(canvas), max_x + pad),
            min(float(canvas), max_y + pad),
        )

    def contains(self, x: float, y: float) -> bool:
        if self.region.is_empty:
            return False
        return bool(shapely.contains_xy(self.region, x, y))

    @property
    def area(self) -> float:
        return float(self.region.area)


@dataclass(frozen=True)
class BarsSpec:
    palette: tuple[str, ...]
    angle: float
    density: float
    w_min: float
    w_max: float
    gap_max: float


@dataclass(frozen=True)
class FacesSpec:
    glyphs: tuple[str, ...]
    opacity_levels: tuple[float, ...]
    fill: str
    target: int


@dataclass(frozen=True)
class RectSegment:
    x: float
    y: float
    width: float
    height: float
    color_index: int


@dataclass(frozen=True)
class BarsLayout:
    rects: tuple[RectSegment, ...]
    background_index: int


@dataclass(frozen=True)
class Placement:
    x: float
    y: float
    scale: float
    rotation: float
    glyph_index: int
    opacity_index: int
    # Bounding radius used by the spacing test
    radius: float


@dataclass(frozen=True)
class Symbol:
    symbol_id: str
    glyph_index: int
    opacity_index: int


@dataclass(frozen=True)
class FacesLayout:
    placements: tuple[Placement, ...]
    symbols: tuple[Symbol, ...]
    attempts: int

    def symbol_for(self, placement: Placement) -> Symbol:
        for sym in self.symbols:
            if (sym.glyph_index, sym.opacity_index) == (placement.glyph_index, placement.opacity_index):
                return sym
        raise KeyError((placement.glyph_index, placement.opacity_index))


@dataclass
class GenerationResult:
    """Generated document plus the metadata reported to the caller."""

    pattern: str
    name: str
    svg: str
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def bytes(self) -> int:
        return len(self.svg.encode("utf-8"))
