"""Repair pass for already-serialized documents whose <text> content is not valid XML.

Only the content between ``<text …>`` and ``</text>`` is touched. Entity
references already present are kept as-is, so repairing twice is a no-op.
"""

from __future__ import annotations

import logging
import re

from topfill.svg.serializer import xml_escape

logger = logging.getLogger(__name__)

_TEXT_NODE_RE = re.compile(r"<text\b([^>]*)>(.*?)</text>", re.DOTALL)
_ENTITY_RE = re.compile(r"&(?:lt|gt|amp|quot|apos);|&#\d+;|&#x[0-9a-fA-F]+;")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def escape_text_content(content: str) -> str:
    """Escape reserved characters while leaving existing entity references intact."""
    out: list[str] = []
    pos = 0
    for m in _ENTITY_RE.finditer(content):
        out.append(xml_escape(content[pos:m.start()]))
        out.append(m.group(0))
        pos = m.end()
    out.append(xml_escape(content[pos:]))
    return "".join(out)


def repair_text_nodes(svg: str) -> tuple[str, int]:
    """Return (repaired svg, number of text nodes changed)."""
    changed = 0

    def _fix(m: re.Match[str]) -> str:
        nonlocal changed
        attrs, content = m.group(1), m.group(2)
        fixed = escape_text_content(content)
        if fixed != content:
            changed += 1
        return f"<text{attrs}>{fixed}</text>"

    out = _TEXT_NODE_RE.sub(_fix, svg)
    out = _CONTROL_RE.sub("", out)
    if changed:
        logger.info("Repaired %d text node(s)", changed)
    return out, changed
