"""Tests for the text-node repair pass."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from topfill.svg.text_repair import escape_text_content, repair_text_nodes


def test_escapes_raw_content():
    svg = '<svg><text x="0">&lt;3 & <3</text></svg>'
    fixed, changed = repair_text_nodes(svg)
    assert fixed == '<svg><text x="0">&lt;3 &amp; &lt;3</text></svg>'
    assert changed == 1


def test_idempotent():
    svg = "<svg><text>(><)</text><text>ok</text></svg>"
    once, changed = repair_text_nodes(svg)
    twice, changed_again = repair_text_nodes(once)
    assert changed == 1
    assert changed_again == 0
    assert once == twice


def test_keeps_numeric_entities():
    assert escape_text_content("&#60;3 &#x3C;3 &amp;") == "&#60;3 &#x3C;3 &amp;"


def test_strips_control_characters():
    fixed, _ = repair_text_nodes("<svg><text>a\x01b\x1fc</text></svg>")
    assert fixed == "<svg><text>abc</text></svg>"


def test_other_elements_untouched():
    svg = '<svg><path d="M0 0"/><textPath>a</textPath></svg>'
    fixed, changed = repair_text_nodes(svg)
    assert fixed == svg
    assert changed == 0


def test_repaired_document_parses():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg">'
        '<text font-size="12">(><)</text><text>t(--t) & <3</text></svg>'
    )
    fixed, changed = repair_text_nodes(svg)
    assert changed == 2
    root = ET.fromstring(fixed)
    texts = [t.text for t in root.iter("{http://www.w3.org/2000/svg}text")]
    assert texts == ["(><)", "t(--t) & <3"]
