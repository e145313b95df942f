"""Tests for path data extraction."""

from __future__ import annotations

import pytest

from topfill.svg.path_source import PathDataError, extract_path_data, load_path_document


@pytest.mark.parametrize(
    "doc,expected",
    [
        ("  M0 0 L10 0 Z  ", "M0 0 L10 0 Z"),
        ({"path": "M1 1", "d": "M2 2"}, "M1 1"),
        ({"d": " M2 2 "}, "M2 2"),
        ({"path": 5, "d": "M2 2"}, "M2 2"),
        ({"paths": ["M1 1", {"d": "M2 2"}, {"path": "M3 3"}]}, "M1 1 M2 2 M3 3"),
        ({"paths": [None, 5, "", {"d": 7}, "M4 4"]}, "M4 4"),
        (["M1 1", {"path": "M2 2"}], "M1 1 M2 2"),
    ],
)
def test_accepted_shapes(doc, expected):
    assert extract_path_data(doc) == expected


def test_d_preferred_over_path_inside_entries():
    assert extract_path_data({"paths": [{"d": "M1 1", "path": "M9 9"}]}) == "M1 1"


@pytest.mark.parametrize("doc", [None, "", {}, [], 0, 42, {"paths": []}, {"paths": [{}]}, {"name": "x"}])
def test_rejected_shapes(doc):
    with pytest.raises(PathDataError):
        extract_path_data(doc)


def test_error_is_value_error():
    assert issubclass(PathDataError, ValueError)


def test_load_from_disk(tmp_path):
    src = tmp_path / "top.json"
    src.write_text('{"paths": [{"d": "M0 0 H10 V10 Z"}]}', encoding="utf-8")
    assert load_path_document(src) == "M0 0 H10 V10 Z"


def test_load_invalid_json(tmp_path):
    src = tmp_path / "broken.json"
    src.write_text("{not json", encoding="utf-8")
    with pytest.raises(PathDataError, match="invalid JSON"):
        load_path_document(src)
