"""Parsed vector document model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SvgElement(BaseModel):
    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    path_data: str | None = None
    # (xmin, ymin, xmax, ymax) for drawable elements, None for defs content
    bbox: tuple[float, float, float, float] | None = None
    # Nesting depth below the root <svg>; defs children are depth >= 2
    depth: int = 1


class SvgDocument(BaseModel):
    """Represents a parsed SVG document."""

    viewbox: tuple[float, float, float, float] = (0.0, 0.0, 400.0, 400.0)
    width: float = 400.0
    height: float = 400.0
    elements: list[SvgElement] = Field(default_factory=list)
    raw_svg: str = ""

    def by_tag(self, tag: str) -> list[SvgElement]:
        return [e for e in self.elements if e.tag == tag]

    @property
    def ids(self) -> set[str]:
        return {e.attributes["id"] for e in self.elements if "id" in e.attributes}
