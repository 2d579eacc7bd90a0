"""SVG parser — facade over ElementTree + svgpathtools.

Turns rendered markup back into an SvgDocument for preview and inspection.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

import numpy as np
from svgpathtools import parse_path

from aurasvg.models.svg_document import SvgDocument, SvgElement
from aurasvg.utils.geometry import bbox, circle_bbox, complex_to_points

logger = logging.getLogger(__name__)

# Samples per path when estimating a bounding box
_PATH_SAMPLES = 64

# Containers whose content is referenced, not drawn
_DEFS_TAGS = {"defs", "radialGradient", "linearGradient", "filter"}


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _strip_attr_ns(attrib: dict[str, str]) -> dict[str, str]:
    return {_strip_ns(k): v for k, v in attrib.items()}


def _path_bbox(d: str) -> tuple[float, float, float, float] | None:
    try:
        path = parse_path(d)
    except Exception as e:
        logger.warning("Failed to parse path %r: %s", d, e)
        return None
    if len(path) == 0:
        return None
    t = np.linspace(0.0, 1.0, _PATH_SAMPLES)
    samples = np.array([path.point(ti) for ti in t])
    return bbox(complex_to_points(samples))


def _element_bbox(tag: str, attrs: dict[str, str]) -> tuple[float, float, float, float] | None:
    try:
        if tag == "circle":
            return circle_bbox(float(attrs["cx"]), float(attrs["cy"]), float(attrs["r"]))
        if tag == "rect":
            x, y = float(attrs.get("x", 0)), float(attrs.get("y", 0))
            return (x, y, x + float(attrs["width"]), y + float(attrs["height"]))
    except (KeyError, ValueError):
        return None
    if tag == "path" and "d" in attrs:
        return _path_bbox(attrs["d"])
    return None


def _walk(element: ET.Element, depth: int, inside_defs: bool, out: list[SvgElement]) -> None:
    for child in element:
        tag = _strip_ns(child.tag)
        attrs = _strip_attr_ns(child.attrib)
        out.append(
            SvgElement(
                tag=tag,
                attributes=attrs,
                path_data=attrs.get("d") if tag == "path" else None,
                bbox=None if inside_defs else _element_bbox(tag, attrs),
                depth=depth,
            )
        )
        _walk(child, depth + 1, inside_defs or tag in _DEFS_TAGS, out)


def parse_svg(svg_text: str) -> SvgDocument:
    """Parse markup into an SvgDocument. Raises ValueError if it is not well-formed."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise ValueError(f"Malformed SVG: {e}") from e

    if _strip_ns(root.tag) != "svg":
        raise ValueError(f"Root element is <{_strip_ns(root.tag)}>, expected <svg>")

    doc = SvgDocument(raw_svg=svg_text)
    viewbox = root.get("viewBox")
    if viewbox:
        parts = viewbox.replace(",", " ").split()
        if len(parts) == 4:
            doc.viewbox = tuple(float(p) for p in parts)
            doc.width, doc.height = doc.viewbox[2], doc.viewbox[3]

    _walk(root, 1, False, doc.elements)

    logger.debug("Parsed SVG: %d elements", len(doc.elements))
    return doc
