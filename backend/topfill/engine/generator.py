"""Generation orchestrator — path document → silhouette → spec → layout → SVG.

One Mulberry32 instance is owned by each run (or by a caller batching several
silhouettes); nothing here touches global random state.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from topfill.engine.bars import build_bars
from topfill.engine.config import BARS_CHUNK_PROB, GenerationConfig
from topfill.engine.context import GenerationResult, Silhouette
from topfill.engine.faces import build_faces
from topfill.engine.registry import get_registry, pattern
from topfill.engine.rng import Mulberry32
from topfill.engine.selector import select_bars_spec, select_faces_spec
from topfill.svg.documents import bars_document, faces_document
from topfill.svg.parser import parse_silhouette
from topfill.svg.path_source import extract_path_data

logger = logging.getLogger(__name__)


@pattern(name="bars", description="Rotated stripes of varying width in a 3/6/9 colour palette")
def generate_bars(
    silhouette: Silhouette,
    config: GenerationConfig,
    rng: Mulberry32,
    name: str,
) -> GenerationResult:
    spec = select_bars_spec(rng, colors=config.colors, angle=config.angle, density=config.density)
    layout = build_bars(silhouette, spec, rng, config.canvas)
    svg = bars_document(name, silhouette, spec, layout, config.canvas, config.decimals, config.minify)
    return GenerationResult(
        pattern="bars",
        name=name,
        svg=svg,
        meta={
            "colors_n": len(spec.palette),
            "colors": list(spec.palette),
            "angle": spec.angle,
            "density": spec.density,
            "rect_count": len(layout.rects),
            "w_min": spec.w_min,
            "w_max": spec.w_max,
            "gap_max": spec.gap_max,
            "chunk_prob": BARS_CHUNK_PROB,
            "background": spec.palette[layout.background_index],
        },
    )


@pattern(name="faces", description="Scattered, rotated emoticon glyphs packed inside the silhouette")
def generate_faces(
    silhouette: Silhouette,
    config: GenerationConfig,
    rng: Mulberry32,
    name: str,
) -> GenerationResult:
    spec = select_faces_spec(rng, target=config.faces, ascii_only=config.ascii_only, fill=config.fill)
    layout = build_faces(silhouette, spec, rng, config.canvas)
    svg = faces_document(name, silhouette, spec, layout, config.canvas, config.decimals, config.minify)
    return GenerationResult(
        pattern="faces",
        name=name,
        svg=svg,
        meta={
            "placed": len(layout.placements),
            "target": spec.target,
            "attempts": layout.attempts,
            "fill": spec.fill,
            "symbols": len(layout.symbols),
            "glyph_count": len(spec.glyphs),
            "opacity_levels": len(spec.opacity_levels),
            "ascii_only": config.ascii_only,
        },
    )


def generate(
    pattern_name: str,
    doc: Any,
    config: GenerationConfig | None = None,
    rng: Mulberry32 | None = None,
    name: str = "top",
) -> GenerationResult:
    """Run one generation.

    ``doc`` is anything extract_path_data accepts. Pass ``rng`` to thread one
    stream through several silhouettes; otherwise a fresh one is seeded from
    ``config.seed``. Raises PathDataError for unusable geometry and KeyError
    for an unknown pattern name.
    """
    config = config or GenerationConfig()
    spec = get_registry().get(pattern_name)
    rng = rng if rng is not None else Mulberry32(config.seed)

    start = time.perf_counter()
    d = extract_path_data(doc)
    silhouette = parse_silhouette(d, fill_rule=config.fill_rule, samples_per_segment=config.samples_per_segment)
    result = spec.fn(silhouette, config, rng, name)
    elapsed = (time.perf_counter() - start) * 1000

    logger.info(
        "Generated %s/%s: %d bytes in %.0fms (%s)",
        pattern_name,
        name,
        result.bytes,
        elapsed,
        ", ".join(f"{k}={v}" for k, v in result.meta.items() if k not in ("colors",)),
    )
    return result
