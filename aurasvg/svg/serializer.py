"""Write SVG markup from structured primitives."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from aurasvg.svg.primitives import Primitive

SVG_NS = "http://www.w3.org/2000/svg"
_INDENT = "  "


def _as_element(item: Primitive | dict[str, Any]) -> dict[str, Any]:
    return item if isinstance(item, dict) else item.to_element()


def _emit(elem: dict[str, Any], depth: int, lines: list[str]) -> None:
    tag = elem.get("tag", "path")
    children = elem.get("children") or []
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "children") and v is not None}
    attr_str = "".join(f' {k}="{v}"' for k, v in attrs.items())
    pad = _INDENT * depth

    if not children:
        lines.append(f"{pad}<{tag}{attr_str}/>")
        return
    lines.append(f"{pad}<{tag}{attr_str}>")
    for child in children:
        _emit(child, depth + 1, lines)
    lines.append(f"{pad}</{tag}>")


def serialize_svg(
    defs: Iterable[Primitive | dict[str, Any]],
    elements: Iterable[Primitive | dict[str, Any]],
    canvas_w: int = 400,
    canvas_h: int = 400,
) -> str:
    """Generate SVG markup: root tag, optional <defs> block, then elements in paint order."""
    lines = [f'<svg xmlns="{SVG_NS}" viewBox="0 0 {canvas_w} {canvas_h}">']

    def_elems = [_as_element(d) for d in defs]
    if def_elems:
        _emit({"tag": "defs", "children": def_elems}, 1, lines)

    for elem in elements:
        _emit(_as_element(elem), 1, lines)

    lines.append("</svg>")
    return "\n".join(lines)
