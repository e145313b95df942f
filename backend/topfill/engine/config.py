"""Generation configuration — per-run options and the fixed engine constants."""

from __future__ import annotations

from dataclasses import dataclass

# Colour counts the bars palette may take.
COLOR_COUNTS: tuple[int, ...] = (3, 6, 9)
# Base stripe directions (degrees) before jitter.
BASE_ANGLES: tuple[float, ...] = (0, 90, 25, -25, 45, -45, 65, -65)
ANGLE_JITTER = 6.0

DENSITY_MIN = 0.6
DENSITY_MAX = 3.0

# Bars
BARS_BOUNDS_PAD = 6.0
BARS_SWEEP_MARGIN = 60.0
BARS_SPAN_HEIGHT_MULT = 2.4  # of canvas, so rotation still covers
BARS_SPAN_TOP_MULT = -0.7
BARS_CHUNK_PROB = 0.22
BARS_SECOND_CHUNK_PROB = 0.18
BARS_NEXT_COLOR_PROB = 0.8
BARS_CHUNK_MIN_SPAN = 40.0
BARS_CHUNK_OVERHANG = 18.0
BARS_MAX_RECTS = 260

# Faces
FACES_BOUNDS_PAD = 2.0
FACES_GRID_SAMPLES = 2
FACES_JITTER = (0.15, 0.85)
FACES_SCALE = (0.75, 1.25)
FACES_ROTATION = (-14.0, 14.0)
FACES_SAMPLING_PAD = 6.0
FACES_ATTEMPTS_PER_GLYPH = 400
FONT_SIZE = 12.0


@dataclass
class GenerationConfig:
    """Options for one generation run. Builders never mutate it."""

    canvas: int = 420
    # Decimals used when writing coordinates
    decimals: int = 0
    minify: bool = True
    seed: int | None = None

    # Bars: forced palette size (3/6/9, anything else ignored) and angle
    colors: int | None = None
    angle: float | None = None
    density: float = 1.6

    # Faces
    faces: int = 42
    ascii_only: bool = True
    fill: str | None = None

    # Silhouette fill rule used by the containment test
    fill_rule: str = "nonzero"
    # Curve samples per segment when flattening the silhouette
    samples_per_segment: int = 16
