"""Tests for the inspection parser."""

import pytest

from aurasvg.engine.composer import compose
from aurasvg.models.record import ArtRecord, Category
from aurasvg.svg.parser import parse_svg

SAMPLE = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 50">
  <rect x="10" y="5" width="20" height="10" fill="#000000"/>
  <circle cx="50" cy="25" r="5" fill="#ffffff"/>
  <path d="M0 0 L100 50" stroke="#ffffff"/>
</svg>'''


def test_viewbox():
    doc = parse_svg(SAMPLE)
    assert doc.viewbox == (0.0, 0.0, 100.0, 50.0)
    assert doc.width == 100.0
    assert doc.height == 50.0


def test_element_bboxes():
    doc = parse_svg(SAMPLE)
    rect, circle, path = doc.elements
    assert rect.bbox == (10.0, 5.0, 30.0, 15.0)
    assert circle.bbox == (45.0, 20.0, 55.0, 30.0)
    assert path.path_data == "M0 0 L100 50"
    assert path.bbox == pytest.approx((0.0, 0.0, 100.0, 50.0))


def test_malformed_raises():
    with pytest.raises(ValueError, match="Malformed"):
        parse_svg("<svg><circle></svg>")


def test_non_svg_root_raises():
    with pytest.raises(ValueError, match="expected <svg>"):
        parse_svg("<html/>")


def test_unparsable_path_is_tolerated():
    doc = parse_svg('<svg xmlns="http://www.w3.org/2000/svg"><path d="Q Q Q"/></svg>')
    assert doc.elements[0].bbox is None


def test_rendered_document_structure(scenario_record):
    doc = parse_svg(compose(scenario_record))
    assert doc.viewbox == (0.0, 0.0, 400.0, 400.0)
    assert {"coreGlow", "breath", "glow"} <= doc.ids
    assert len(doc.by_tag("radialGradient")) == 1
    assert len(doc.by_tag("linearGradient")) == 1
    assert len(doc.by_tag("filter")) == 1
    # defs content carries no geometry
    assert all(e.bbox is None for e in doc.by_tag("stop"))


@pytest.mark.parametrize("entropy", [0, 1, 0xFFFFFFFF, 2**256 - 1, 0x123456789ABCDEF0123456789ABCDEF0])
def test_everything_drawn_inside_canvas(entropy):
    record = ArtRecord(identity=b"\x42" * 20, entropy=entropy, category=Category.VERDANT)
    doc = parse_svg(compose(record))
    drawn = [e for e in doc.elements if e.bbox is not None]
    assert len(drawn) == 1 + 5 + 22
    for e in drawn:
        xmin, ymin, xmax, ymax = e.bbox
        assert 0 <= xmin <= xmax <= 400
        assert 0 <= ymin <= ymax <= 400


def test_flow_paths_start_at_origin_column(zero_record):
    doc = parse_svg(compose(zero_record))
    for path in doc.by_tag("path"):
        assert path.path_data.startswith("M50 ")
        assert path.bbox[0] == pytest.approx(50.0)
