"""Shared test fixtures."""

from __future__ import annotations

import json

import pytest

from topfill.engine.config import GenerationConfig
from topfill.svg.parser import parse_silhouette


# Sample silhouettes on the default 420 canvas

SQUARE_D = "M30 30 H390 V390 H30 Z"

# T-shirt outline: shoulders, sleeves, a curved collar
SHIRT_D = (
    "M120 60 L170 40 Q210 70 250 40 L300 60 L370 120 L330 170 L300 150 "
    "L300 380 L120 380 L120 150 L90 170 L50 120 Z"
)

# Square with a square hole wound the opposite way
FRAME_D = "M40 40 H380 V380 H40 Z M160 160 V260 H260 V160 Z"

# Same inner square wound the same way as the outer one
NESTED_D = "M40 40 H380 V380 H40 Z M160 160 H260 V260 H160 Z"

# Too small to hold any glyph
TINY_D = "M10 10 H14 V14 H10 Z"

CURVE_D = "M0 0 Q50 100 100 0 Z"


@pytest.fixture
def square():
    return parse_silhouette(SQUARE_D)


@pytest.fixture
def shirt():
    return parse_silhouette(SHIRT_D)


@pytest.fixture
def tiny():
    return parse_silhouette(TINY_D)


@pytest.fixture
def seeded_config() -> GenerationConfig:
    return GenerationConfig(seed=123, canvas=420)


@pytest.fixture
def tops_dir(tmp_path):
    """Input folder with one good top, one unusable top, and no tankTop."""
    in_dir = tmp_path / "jsons"
    in_dir.mkdir()
    (in_dir / "hoodieTop.json").write_text(json.dumps({"path": SHIRT_D}), encoding="utf-8")
    (in_dir / "shirtTop.json").write_text(json.dumps({"paths": [{"d": SQUARE_D}]}), encoding="utf-8")
    (in_dir / "turtleTop.json").write_text(json.dumps({"name": "no geometry"}), encoding="utf-8")
    return in_dir
