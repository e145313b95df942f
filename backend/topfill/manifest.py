"""Manifest builder — hex-encode generated documents, in a fixed order, for on-chain storage.

Each document goes through the text-node repair pass first, so the stored
bytes always parse as XML.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from topfill.svg.text_repair import repair_text_nodes

logger = logging.getLogger(__name__)


@dataclass
class ManifestItem:
    index: int
    name: str
    filename: str
    bytes: int
    hex: str


def encode_item(index: int, name: str, filename: str, svg: str) -> ManifestItem:
    repaired, _ = repair_text_nodes(svg)
    data = repaired.encode("utf-8")
    return ManifestItem(index=index, name=name, filename=filename, bytes=len(data), hex="0x" + data.hex())


def build_manifest(
    documents: list[tuple[str, str, str]],
    input_dir: str = "",
) -> dict[str, Any]:
    """``documents`` is an ordered list of (name, filename, svg text)."""
    items = [encode_item(i, name, filename, svg) for i, (name, filename, svg) in enumerate(documents)]
    return {
        "generatedAt": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "inputDir": input_dir,
        "count": len(items),
        "items": [asdict(item) for item in items],
    }


def write_manifest(input_dir: str | Path, filenames: list[str], out_path: str | Path) -> dict[str, Any]:
    """Read ``filenames`` from ``input_dir`` in order and write the manifest JSON to ``out_path``."""
    input_dir = Path(input_dir)
    documents: list[tuple[str, str, str]] = []
    for filename in filenames:
        full = input_dir / filename
        if not full.exists():
            raise FileNotFoundError(f"Missing file: {full}")
        documents.append((Path(filename).stem, filename, full.read_text(encoding="utf-8")))

    manifest = build_manifest(documents, input_dir=str(input_dir))
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")

    for item in manifest["items"]:
        logger.info("ok: %s bytes=%d", item["name"], item["bytes"])
    logger.info("Wrote manifest %s (%d items)", out_path, manifest["count"])
    return manifest
