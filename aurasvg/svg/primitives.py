"""Structured shape and definition primitives.

Generators build these values; nothing becomes markup until the serializer
walks ``to_element()`` dicts. Opacities are stored as integer percentages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, Union

from aurasvg.utils.formatting import format_opacity

Point = tuple[int, int]


def ref(element_id: str) -> str:
    return f"url(#{element_id})"


class Primitive(Protocol):
    kind: ClassVar[str]

    def to_element(self) -> dict[str, Any]: ...


@dataclass(frozen=True)
class GradientStop:
    offset: int  # percent along the gradient
    color: str
    opacity: int | None = None

    def to_element(self) -> dict[str, Any]:
        elem: dict[str, Any] = {"tag": "stop", "offset": f"{self.offset}%", "stop-color": self.color}
        if self.opacity is not None:
            elem["stop-opacity"] = format_opacity(self.opacity)
        return elem


@dataclass(frozen=True)
class RadialGradient:
    kind: ClassVar[str] = "gradient"

    id: str
    stops: tuple[GradientStop, ...]
    cx: int = 50
    cy: int = 50
    r: int = 50

    def to_element(self) -> dict[str, Any]:
        return {
            "tag": "radialGradient",
            "id": self.id,
            "cx": f"{self.cx}%",
            "cy": f"{self.cy}%",
            "r": f"{self.r}%",
            "children": [s.to_element() for s in self.stops],
        }


@dataclass(frozen=True)
class LinearGradient:
    kind: ClassVar[str] = "gradient"

    id: str
    stops: tuple[GradientStop, ...]
    x1: int = 0
    y1: int = 0
    x2: int = 100
    y2: int = 100

    def to_element(self) -> dict[str, Any]:
        return {
            "tag": "linearGradient",
            "id": self.id,
            "x1": f"{self.x1}%",
            "y1": f"{self.y1}%",
            "x2": f"{self.x2}%",
            "y2": f"{self.y2}%",
            "children": [s.to_element() for s in self.stops],
        }


@dataclass(frozen=True)
class GlowFilter:
    """Gaussian blur tinted by a flood colour, merged under the source graphic."""

    kind: ClassVar[str] = "filter"

    id: str
    color: str
    blur: int = 4
    flood_opacity: int = 60

    def to_element(self) -> dict[str, Any]:
        return {
            "tag": "filter",
            "id": self.id,
            "x": "-50%",
            "y": "-50%",
            "width": "200%",
            "height": "200%",
            "children": [
                {"tag": "feGaussianBlur", "in": "SourceGraphic", "stdDeviation": str(self.blur), "result": "blur"},
                {
                    "tag": "feFlood",
                    "flood-color": self.color,
                    "flood-opacity": format_opacity(self.flood_opacity),
                    "result": "tint",
                },
                {"tag": "feComposite", "in": "tint", "in2": "blur", "operator": "in", "result": "halo"},
                {
                    "tag": "feMerge",
                    "children": [
                        {"tag": "feMergeNode", "in": "halo"},
                        {"tag": "feMergeNode", "in": "SourceGraphic"},
                    ],
                },
            ],
        }


@dataclass(frozen=True)
class Rect:
    kind: ClassVar[str] = "rect"

    width: int
    height: int
    fill: str
    x: int = 0
    y: int = 0

    def to_element(self) -> dict[str, Any]:
        return {
            "tag": "rect",
            "x": str(self.x),
            "y": str(self.y),
            "width": str(self.width),
            "height": str(self.height),
            "fill": self.fill,
        }


@dataclass(frozen=True)
class CubicCurve:
    kind: ClassVar[str] = "curve"

    start: Point
    ctrl1: Point
    ctrl2: Point
    end: Point
    stroke: str
    stroke_width: int
    opacity: int
    filter: str | None = None

    @property
    def path_data(self) -> str:
        (sx, sy), (c1x, c1y), (c2x, c2y), (ex, ey) = self.start, self.ctrl1, self.ctrl2, self.end
        return f"M{sx} {sy} C{c1x} {c1y}, {c2x} {c2y}, {ex} {ey}"

    def to_element(self) -> dict[str, Any]:
        elem: dict[str, Any] = {
            "tag": "path",
            "d": self.path_data,
            "stroke": self.stroke,
            "stroke-width": str(self.stroke_width),
            "fill": "none",
            "stroke-linecap": "round",
            "opacity": format_opacity(self.opacity),
        }
        if self.filter:
            elem["filter"] = ref(self.filter)
        return elem


@dataclass(frozen=True)
class Circle:
    kind: ClassVar[str] = "circle"

    cx: int
    cy: int
    r: int
    fill: str
    opacity: int | None = None
    filter: str | None = None

    def to_element(self) -> dict[str, Any]:
        elem: dict[str, Any] = {
            "tag": "circle",
            "cx": str(self.cx),
            "cy": str(self.cy),
            "r": str(self.r),
            "fill": self.fill,
        }
        if self.opacity is not None:
            elem["opacity"] = format_opacity(self.opacity)
        if self.filter:
            elem["filter"] = ref(self.filter)
        return elem


Definition = Union[RadialGradient, LinearGradient, GlowFilter]
Shape = Union[Rect, CubicCurve, Circle]
