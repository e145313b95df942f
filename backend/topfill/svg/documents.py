"""Document assembly — wrap a bars or faces layout and the silhouette into one SVG.

Layout: a canvas-sized <pattern> in <defs>, the silhouette filled with that
pattern, then the silhouette again as a faint outline.
"""

from __future__ import annotations

from functools import partial

from topfill.engine.context import BarsLayout, BarsSpec, FacesLayout, FacesSpec, Silhouette
from topfill.svg.serializer import Element, format_number, format_plain, serialize_svg

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

OUTLINE_ATTRS = {
    "fill": "none",
    "stroke": "#000",
    "stroke-opacity": "0.25",
    "stroke-width": "1",
}
GLYPH_FONT = "Arial"


def _svg_root(canvas: int, xlink: bool = False) -> Element:
    size = format_plain(canvas)
    attrs = {"xmlns": SVG_NS}
    if xlink:
        attrs["xmlns:xlink"] = XLINK_NS
    attrs.update({"width": size, "height": size, "viewBox": f"0 0 {size} {size}"})
    return Element("svg", attrs)


def _pattern(pattern_id: str, canvas: int, background: str) -> Element:
    size = format_plain(canvas)
    pattern = Element(
        "pattern",
        {
            "id": pattern_id,
            "patternUnits": "userSpaceOnUse",
            "patternContentUnits": "userSpaceOnUse",
            "x": "0",
            "y": "0",
            "width": size,
            "height": size,
        },
    )
    pattern.append(Element("rect", {"x": "0", "y": "0", "width": size, "height": size, "fill": background}))
    return pattern


def _silhouette_paths(root: Element, silhouette: Silhouette, pattern_id: str) -> None:
    root.append(Element("path", {"d": silhouette.d, "fill": f"url(#{pattern_id})"}))
    root.append(Element("path", {"d": silhouette.d, **OUTLINE_ATTRS}))


def bars_document(
    name: str,
    silhouette: Silhouette,
    spec: BarsSpec,
    layout: BarsLayout,
    canvas: int,
    decimals: int = 0,
    minify: bool = True,
) -> str:
    fmt = partial(format_number, decimals=decimals)
    pattern_id = f"pat_{name}"

    root = _svg_root(canvas)
    defs = root.append(Element("defs"))
    pattern = defs.append(_pattern(pattern_id, canvas, spec.palette[layout.background_index]))

    centre = canvas / 2
    group = pattern.append(Element("g", {"transform": f"rotate({fmt(spec.angle)} {fmt(centre)} {fmt(centre)})"}))
    for r in layout.rects:
        group.append(
            Element(
                "rect",
                {
                    "x": fmt(r.x),
                    "y": fmt(r.y),
                    "width": fmt(r.width),
                    "height": fmt(r.height),
                    "fill": spec.palette[r.color_index],
                },
            )
        )

    _silhouette_paths(root, silhouette, pattern_id)
    return serialize_svg(root, minify=minify)


def glyph_symbol(symbol_id: str, text: str, opacity: float) -> Element:
    symbol = Element("symbol", {"id": symbol_id, "overflow": "visible"})
    symbol.append(
        Element(
            "text",
            {
                "x": "0",
                "y": "0",
                "text-anchor": "middle",
                "dominant-baseline": "middle",
                "font-family": GLYPH_FONT,
                "font-size": "12",
                "fill": "#000",
                "fill-opacity": format_plain(opacity),
            },
            text=text,
        )
    )
    return symbol


def faces_document(
    name: str,
    silhouette: Silhouette,
    spec: FacesSpec,
    layout: FacesLayout,
    canvas: int,
    decimals: int = 0,
    minify: bool = True,
) -> str:
    fmt = partial(format_number, decimals=decimals)
    pattern_id = f"pat_{name}"

    root = _svg_root(canvas, xlink=True)
    defs = root.append(Element("defs"))
    for sym in layout.symbols:
        defs.append(glyph_symbol(sym.symbol_id, spec.glyphs[sym.glyph_index], spec.opacity_levels[sym.opacity_index]))

    pattern = defs.append(_pattern(pattern_id, canvas, spec.fill))
    for p in layout.placements:
        sym = layout.symbol_for(p)
        pattern.append(
            Element(
                "use",
                {
                    "xlink:href": f"#{sym.symbol_id}",
                    "transform": f"translate({fmt(p.x)} {fmt(p.y)}) rotate({fmt(p.rotation)}) scale({fmt(p.scale)})",
                },
            )
        )

    _silhouette_paths(root, silhouette, pattern_id)
    return serialize_svg(root, minify=minify)
