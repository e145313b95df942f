"""Pull the silhouette path string out of a loosely-shaped input document.

Accepted shapes, tried in order:
  1. a raw path string
  2. a mapping with a string ``path`` (or ``d``) field
  3. a mapping whose ``paths`` list holds strings or ``{d|path}`` mappings
  4. a top-level list of the same entries
Nothing usable → PathDataError.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class PathDataError(ValueError):
    """Input document carries no usable path geometry."""


def _entry_path(entry: Any) -> str:
    if not entry:
        return ""
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        if isinstance(entry.get("d"), str):
            return entry["d"]
        if isinstance(entry.get("path"), str):
            return entry["path"]
    return ""


def _join_entries(entries: list[Any]) -> str:
    parts = [p for p in (_entry_path(e) for e in entries) if p]
    return " ".join(parts)


def extract_path_data(doc: Any) -> str:
    """Return the path ``d`` string carried by ``doc``."""
    if not doc:
        raise PathDataError("Empty document")

    if isinstance(doc, str):
        return doc.strip()

    if isinstance(doc, dict):
        if isinstance(doc.get("path"), str):
            return doc["path"].strip()
        if isinstance(doc.get("d"), str):
            return doc["d"].strip()
        if isinstance(doc.get("paths"), list):
            joined = _join_entries(doc["paths"])
            if joined:
                return joined

    if isinstance(doc, list):
        joined = _join_entries(doc)
        if joined:
            return joined

    raise PathDataError("Could not find path data. Expected keys: path, d, paths.")


def load_path_document(path: str | Path) -> str:
    """Read a JSON document from disk and extract its path data."""
    raw = Path(path).read_text(encoding="utf-8")
    try:
        doc = json.loads(raw)
    except json.JSONDecodeError as e:
        raise PathDataError(f"{path}: invalid JSON ({e})") from e
    d = extract_path_data(doc)
    logger.debug("Loaded %s: %d chars of path data", path, len(d))
    return d
