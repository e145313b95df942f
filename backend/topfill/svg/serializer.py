"""Write SVG markup from a small element tree.

Geometry code never builds strings: it hands the assembler numbers, the
assembler builds Elements, and only this module turns them into text. Every
attribute value and text node is escaped on the way out.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_ESCAPES = (
    ("&", "&amp;"),  # must be first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_WS_RE = re.compile(r"\s+")
_BETWEEN_TAGS_RE = re.compile(r">\s+<")


def xml_escape(text: str) -> str:
    """Escape the five XML-reserved characters."""
    text = str(text)
    for raw, entity in _ESCAPES:
        text = text.replace(raw, entity)
    return text


def format_number(value: float, decimals: int = 0) -> str:
    """Fixed-point rendering with ties rounded away from zero.

    Rounds the exact binary value, so 2.5 → "3" and 0.125 → "0.13" at 2 decimals.
    Small negatives keep their sign (-0.3 → "-0"); only an exact zero prints "0".
    """
    if value == 0:
        value = 0.0
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def format_plain(value: float) -> str:
    """Shortest form for constants: 1.0 → "1", 0.45 → "0.45"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass
class Element:
    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list["Element"] = field(default_factory=list)
    text: str | None = None

    def append(self, child: "Element") -> "Element":
        self.children.append(child)
        return child


def _open_tag(elem: Element) -> str:
    attr_str = "".join(f' {k}="{xml_escape(v)}"' for k, v in elem.attrs.items())
    return f"<{elem.tag}{attr_str}"


def _render(elem: Element, depth: int, lines: list[str]) -> None:
    indent = "  " * depth
    head = _open_tag(elem)
    if elem.text is not None:
        lines.append(f"{indent}{head}>{xml_escape(elem.text)}</{elem.tag}>")
    elif not elem.children:
        lines.append(f"{indent}{head}/>")
    else:
        lines.append(f"{indent}{head}>")
        for child in elem.children:
            _render(child, depth + 1, lines)
        lines.append(f"{indent}</{elem.tag}>")


def serialize_svg(root: Element, minify: bool = False) -> str:
    """Serialize an element tree as a standalone document with an XML declaration."""
    lines = [XML_DECLARATION]
    _render(root, 0, lines)
    out = "\n".join(lines)
    return minify_svg(out) if minify else out


def minify_svg(svg: str) -> str:
    """Drop comments and collapse whitespace; text content keeps single spaces."""
    svg = _COMMENT_RE.sub("", svg)
    svg = _WS_RE.sub(" ", svg)
    svg = _BETWEEN_TAGS_RE.sub("><", svg)
    return svg.strip()
