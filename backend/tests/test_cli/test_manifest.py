"""Tests for the hex manifest builder."""

from __future__ import annotations

import json

import pytest

from topfill.manifest import build_manifest, encode_item, write_manifest


def test_encode_item_hex_round_trip():
    svg = '<svg><text x="0">hi</text></svg>'
    item = encode_item(0, "hoodieTopBars", "hoodieTopBars.svg", svg)
    assert item.hex.startswith("0x")
    assert bytes.fromhex(item.hex[2:]).decode("utf-8") == svg
    assert item.bytes == len(svg.encode("utf-8"))


def test_encode_item_repairs_text_first():
    item = encode_item(3, "t", "t.svg", "<svg><text><3</text></svg>")
    assert bytes.fromhex(item.hex[2:]).decode("utf-8") == "<svg><text>&lt;3</text></svg>"
    assert item.index == 3


def test_build_manifest_order_and_shape():
    docs = [("b", "b.svg", "<svg/>"), ("a", "a.svg", "<svg><g/></svg>")]
    manifest = build_manifest(docs, input_dir="out")
    assert manifest["count"] == 2
    assert manifest["inputDir"] == "out"
    assert manifest["generatedAt"].endswith("Z")
    assert [(i["index"], i["name"]) for i in manifest["items"]] == [(0, "b"), (1, "a")]
    assert set(manifest["items"][0]) == {"index", "name", "filename", "bytes", "hex"}


def test_write_manifest(tmp_path):
    (tmp_path / "x.svg").write_text("<svg>ü</svg>", encoding="utf-8")
    out = tmp_path / "nested" / "manifest.json"
    manifest = write_manifest(tmp_path, ["x.svg"], out)
    on_disk = json.loads(out.read_text(encoding="utf-8"))
    assert on_disk == manifest
    # Multi-byte characters count as bytes, not characters
    assert on_disk["items"][0]["bytes"] == len("<svg>ü</svg>".encode("utf-8"))


def test_write_manifest_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_manifest(tmp_path, ["missing.svg"], tmp_path / "m.json")
