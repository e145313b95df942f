"""Faces builder — scatter rotated glyphs inside the silhouette without overlap.

Pass 1 walks a shuffled, jittered grid of candidates so placements spread
evenly. Pass 2 falls back to uniform random points. Both share one attempt
budget of ``target × 400``; running out is not an error, the layout simply
holds fewer placements.
"""

from __future__ import annotations

import logging
import math

from topfill.engine.config import (
    FACES_ATTEMPTS_PER_GLYPH,
    FACES_BOUNDS_PAD,
    FACES_GRID_SAMPLES,
    FACES_JITTER,
    FACES_ROTATION,
    FACES_SAMPLING_PAD,
    FACES_SCALE,
    FONT_SIZE,
)
from topfill.engine.context import FacesLayout, FacesSpec, Placement, Silhouette, Symbol
from topfill.engine.rng import Mulberry32
from topfill.utils.geometry import clear_of, rotated_corners

logger = logging.getLogger(__name__)


def glyph_metrics(scale: float, text: str) -> tuple[float, float, float]:
    """Approximate (half_width, half_height, radius) of a glyph string at ``scale``.

    Character advance is taken as 0.6 em; long strings get one extra glyph of slack.
    """
    length = max(1, len(text))
    glyphs = length + (2 if length >= 8 else 1)
    half_w = scale * FONT_SIZE * 0.6 * (glyphs / 2)
    half_h = scale * FONT_SIZE * 0.75
    return half_w, half_h, math.sqrt(half_w * half_w + half_h * half_h)


def glyph_fits(
    silhouette: Silhouette,
    x: float,
    y: float,
    scale: float,
    rotation: float,
    text: str,
) -> bool:
    """Centre and all four rotated corners must lie inside the silhouette."""
    if not silhouette.contains(x, y):
        return False
    half_w, half_h, _ = glyph_metrics(scale, text)
    return all(silhouette.contains(px, py) for px, py in rotated_corners(x, y, half_w, half_h, rotation))


def candidate_grid(
    rng: Mulberry32,
    bounds: tuple[float, float, float, float],
    target: int,
) -> list[tuple[float, float]]:
    """Jittered grid of ceil(sqrt(2·target)) cells per axis, two samples per cell, shuffled."""
    bx0, by0, bx1, by1 = bounds
    w = max(1.0, bx1 - bx0)
    h = max(1.0, by1 - by0)
    grid_n = math.ceil(math.sqrt(target * 2))
    if grid_n == 0:
        return []
    cell_w = w / grid_n
    cell_h = h / grid_n

    lo, hi = FACES_JITTER
    candidates: list[tuple[float, float]] = []
    for gy in range(grid_n):
        for gx in range(grid_n):
            for _ in range(FACES_GRID_SAMPLES):
                x = bx0 + gx * cell_w + rng.float_in_range(lo, hi) * cell_w
                y = by0 + gy * cell_h + rng.float_in_range(lo, hi) * cell_h
                candidates.append((x, y))
    rng.shuffle(candidates)
    return candidates


def dedupe_symbols(placements: list[Placement] | tuple[Placement, ...]) -> tuple[Symbol, ...]:
    """One Symbol per distinct (glyph, opacity) pair, ids assigned in first-seen order."""
    seen: dict[tuple[int, int], Symbol] = {}
    for p in placements:
        key = (p.glyph_index, p.opacity_index)
        if key not in seen:
            seen[key] = Symbol(symbol_id=f"s{len(seen)}", glyph_index=key[0], opacity_index=key[1])
    return tuple(seen.values())


class _Packer:
    """Append-only placement list for one run."""

    def __init__(self, silhouette: Silhouette, spec: FacesSpec, rng: Mulberry32) -> None:
        self.silhouette = silhouette
        self.spec = spec
        self.rng = rng
        self.placed: list[Placement] = []

    def try_place_at(self, x: float, y: float) -> bool:
        rng = self.rng
        scale = rng.float_in_range(*FACES_SCALE)
        rotation = rng.float_in_range(*FACES_ROTATION)
        glyph_index = rng.int_in_range(0, len(self.spec.glyphs) - 1)
        opacity_index = rng.int_in_range(0, len(self.spec.opacity_levels) - 1)

        text = self.spec.glyphs[glyph_index]
        _, _, radius = glyph_metrics(scale, text)

        if not glyph_fits(self.silhouette, x, y, scale, rotation, text):
            return False
        others = [(p.x, p.y, p.radius) for p in self.placed]
        if not clear_of(x, y, radius, others, pad=FACES_SAMPLING_PAD):
            return False

        self.placed.append(Placement(x, y, scale, rotation, glyph_index, opacity_index, radius))
        return True


def build_faces(
    silhouette: Silhouette,
    spec: FacesSpec,
    rng: Mulberry32,
    canvas: int,
) -> FacesLayout:
    bounds = silhouette.padded_bounds(FACES_BOUNDS_PAD, canvas)
    bx0, by0, bx1, by1 = bounds
    target = spec.target

    candidates = candidate_grid(rng, bounds, target)
    packer = _Packer(silhouette, spec, rng)
    attempts = 0

    for x, y in candidates:
        if len(packer.placed) >= target:
            break
        attempts += 1
        packer.try_place_at(x, y)

    logger.debug("Faces pass 1: %d/%d placed from %d candidates", len(packer.placed), target, len(candidates))

    max_attempts = target * FACES_ATTEMPTS_PER_GLYPH
    while len(packer.placed) < target and attempts < max_attempts:
        attempts += 1
        x = rng.float_in_range(bx0, bx1)
        y = rng.float_in_range(by0, by1)
        packer.try_place_at(x, y)

    if len(packer.placed) < target:
        logger.warning("Faces attempt cap reached: placed %d/%d after %d attempts", len(packer.placed), target, attempts)

    placements = tuple(packer.placed)
    return FacesLayout(placements=placements, symbols=dedupe_symbols(placements), attempts=attempts)
