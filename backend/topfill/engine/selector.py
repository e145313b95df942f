"""Pattern parameter selection — palette size, palette, angle, density, background.

Draw order matters for reproducibility: colour count, palette shuffle, angle.
"""

from __future__ import annotations

from topfill.engine.config import (
    ANGLE_JITTER,
    BASE_ANGLES,
    COLOR_COUNTS,
    DENSITY_MAX,
    DENSITY_MIN,
)
from topfill.engine.context import BarsSpec, FacesSpec
from topfill.engine.glyphs import (
    BARS_COLOR_POOL,
    FACES_BACKGROUNDS,
    OPACITY_LEVELS,
    glyph_set,
)
from topfill.engine.rng import Mulberry32


def choose_color_count(rng: Mulberry32, forced: int | None = None) -> int:
    if forced in COLOR_COUNTS:
        return int(forced)
    return COLOR_COUNTS[rng.int_in_range(0, len(COLOR_COUNTS) - 1)]


def choose_palette(rng: Mulberry32, count: int) -> tuple[str, ...]:
    pool = rng.shuffle(list(BARS_COLOR_POOL))
    return tuple(pool[:count])


def choose_angle(rng: Mulberry32, forced: float | None = None) -> float:
    if forced is not None:
        return float(forced)
    base = BASE_ANGLES[rng.int_in_range(0, len(BASE_ANGLES) - 1)]
    return base + rng.float_in_range(-ANGLE_JITTER, ANGLE_JITTER)


def clamp_density(density: float) -> float:
    return max(DENSITY_MIN, min(DENSITY_MAX, float(density)))


def bar_widths(density: float) -> tuple[float, float, float]:
    """(w_min, w_max, gap_max) for a density. Higher density → thinner bars, smaller gaps."""
    w_min = max(2.5, 6 / density)
    w_max = max(w_min + 2, 26 / density)
    gap_max = max(0.5, 3.2 / density)
    return w_min, w_max, gap_max


def select_bars_spec(
    rng: Mulberry32,
    colors: int | None = None,
    angle: float | None = None,
    density: float = 1.6,
) -> BarsSpec:
    count = choose_color_count(rng, colors)
    palette = choose_palette(rng, count)
    chosen_angle = choose_angle(rng, angle)
    density = clamp_density(density)
    w_min, w_max, gap_max = bar_widths(density)
    return BarsSpec(
        palette=palette,
        angle=chosen_angle,
        density=density,
        w_min=w_min,
        w_max=w_max,
        gap_max=gap_max,
    )


def select_faces_spec(
    rng: Mulberry32,
    target: int = 42,
    ascii_only: bool = True,
    fill: str | None = None,
) -> FacesSpec:
    background = fill if fill else rng.pick(FACES_BACKGROUNDS)
    return FacesSpec(
        glyphs=glyph_set(ascii_only),
        opacity_levels=OPACITY_LEVELS,
        fill=background,
        target=max(0, int(target)),
    )
