"""Bars builder — one left-to-right sweep of vertical bars across the silhouette bounds.

The bars are laid out unrotated; the assembler rotates the whole group about
the canvas centre, which is why full bars span 2.4× the canvas height.
"""

from __future__ import annotations

import logging

from topfill.engine.config import (
    BARS_BOUNDS_PAD,
    BARS_CHUNK_MIN_SPAN,
    BARS_CHUNK_OVERHANG,
    BARS_CHUNK_PROB,
    BARS_MAX_RECTS,
    BARS_NEXT_COLOR_PROB,
    BARS_SECOND_CHUNK_PROB,
    BARS_SPAN_HEIGHT_MULT,
    BARS_SPAN_TOP_MULT,
    BARS_SWEEP_MARGIN,
)
from topfill.engine.context import BarsLayout, BarsSpec, RectSegment, Silhouette
from topfill.engine.rng import Mulberry32

logger = logging.getLogger(__name__)


def build_bars(
    silhouette: Silhouette,
    spec: BarsSpec,
    rng: Mulberry32,
    canvas: int,
) -> BarsLayout:
    """Sweep bars from left of the bounds to right of them, capped at BARS_MAX_RECTS."""
    bx0, by0, bx1, by1 = silhouette.padded_bounds(BARS_BOUNDS_PAD, canvas)
    n_colors = len(spec.palette)

    big_y = canvas * BARS_SPAN_TOP_MULT
    big_h = canvas * BARS_SPAN_HEIGHT_MULT
    h_span = max(BARS_CHUNK_MIN_SPAN, by1 - by0)

    x = bx0 - BARS_SWEEP_MARGIN
    x_end = bx1 + BARS_SWEEP_MARGIN
    rects: list[RectSegment] = []

    color_idx = rng.int_in_range(0, n_colors - 1)

    while x < x_end and len(rects) < BARS_MAX_RECTS:
        w = rng.float_in_range(spec.w_min, spec.w_max)
        fill_idx = color_idx

        if rng.random() < BARS_NEXT_COLOR_PROB:
            color_idx = (color_idx + 1) % n_colors
        else:
            color_idx = rng.int_in_range(0, n_colors - 1)

        if rng.random() < BARS_CHUNK_PROB:
            seg_h = rng.float_in_range(h_span * 0.55, h_span * 1.10)
            seg_y = rng.float_in_range(by0 - BARS_CHUNK_OVERHANG, by1 - seg_h + BARS_CHUNK_OVERHANG)
            rects.append(RectSegment(x, seg_y, w, seg_h, fill_idx))

            # A second chunk in the same slot; the draw happens even at the cap
            if rng.random() < BARS_SECOND_CHUNK_PROB and len(rects) < BARS_MAX_RECTS:
                seg_h2 = rng.float_in_range(h_span * 0.40, h_span * 0.85)
                seg_y2 = rng.float_in_range(by0 - BARS_CHUNK_OVERHANG, by1 - seg_h2 + BARS_CHUNK_OVERHANG)
                rects.append(RectSegment(x, seg_y2, w, seg_h2, fill_idx))
        else:
            rects.append(RectSegment(x, big_y, w, big_h, fill_idx))

        x += w + rng.float_in_range(0, spec.gap_max)

    if len(rects) >= BARS_MAX_RECTS:
        logger.warning("Bars hit the %d-rect cap at x=%.1f (end %.1f)", BARS_MAX_RECTS, x, x_end)

    background_idx = rng.int_in_range(0, n_colors - 1)
    return BarsLayout(rects=tuple(rects), background_index=background_idx)
