"""Silhouette parser — facade over svgpathtools + shapely.

Converts a path ``d`` string → Silhouette (exact bounds + prepared filled region).
"""

from __future__ import annotations

import logging

import numpy as np
import shapely
from numpy.typing import NDArray
from shapely.geometry import LineString, Polygon
from shapely.ops import polygonize, unary_union
from svgpathtools import Line, Path, parse_path

from topfill.engine.context import Silhouette
from topfill.svg.path_source import PathDataError
from topfill.utils.geometry import check_fill_rule, is_filled, winding_number

logger = logging.getLogger(__name__)


def parse_silhouette(
    d: str,
    fill_rule: str = "nonzero",
    samples_per_segment: int = 16,
) -> Silhouette:
    """Parse a path string into a Silhouette.

    Raises PathDataError when the string is empty or not valid path data, and
    ValueError for a fill rule other than nonzero or evenodd.
    """
    check_fill_rule(fill_rule)
    if not d or not d.strip():
        raise PathDataError("Empty path data")

    try:
        path = parse_path(d)
    except Exception as e:
        raise PathDataError(f"Failed to parse path: {e}") from e

    if len(path) == 0:
        raise PathDataError("Path has no drawable segments")

    xmin, xmax, ymin, ymax = path.bbox()
    bounds = (float(xmin), float(ymin), float(xmax), float(ymax))

    rings = [_sample_ring(sp, samples_per_segment) for sp in path.continuous_subpaths()]
    rings = [r for r in rings if len(r) >= 4]
    region = _filled_region(rings, fill_rule)
    shapely.prepare(region)

    logger.info(
        "Parsed silhouette: %d ring(s), bounds (%.1f, %.1f, %.1f, %.1f), area %.0f (%s)",
        len(rings), *bounds, region.area, fill_rule,
    )
    return Silhouette(d=d, bounds=bounds, region=region)


def _sample_ring(subpath: Path, samples_per_segment: int) -> NDArray[np.float64]:
    """Flatten one continuous sub-path into a closed ring of points.

    Lines contribute their start point; curves and arcs are sampled evenly.
    """
    points: list[complex] = []
    for seg in subpath:
        if isinstance(seg, Line):
            points.append(seg.start)
            continue
        for t in np.linspace(0, 1, samples_per_segment, endpoint=False):
            points.append(seg.point(t))
    points.append(subpath[-1].end)

    # Fill implicitly closes the sub-path
    if abs(points[0] - points[-1]) > 1e-9:
        points.append(points[0])

    pts = np.array([(p.real, p.imag) for p in points], dtype=np.float64)
    # Three distinct vertices minimum
    if len({(round(x, 6), round(y, 6)) for x, y in pts}) < 3:
        return np.empty((0, 2))
    return pts


def _filled_region(rings: list[NDArray[np.float64]], fill_rule: str):
    """Node all rings, polygonize, keep faces the fill rule paints."""
    if not rings:
        return Polygon()

    noded = unary_union([LineString(r) for r in rings])
    kept = []
    for face in polygonize(noded):
        if face.is_empty or face.area <= 0:
            continue
        probe = face.representative_point()
        winding = sum(winding_number((probe.x, probe.y), r) for r in rings)
        if is_filled(winding, fill_rule):
            kept.append(face)

    if not kept:
        return Polygon()
    return unary_union(kept)
