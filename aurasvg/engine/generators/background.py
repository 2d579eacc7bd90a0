"""Background — a single canvas-filling rectangle."""

from __future__ import annotations

from aurasvg.engine.config import RenderConfig
from aurasvg.engine.palette import Palette
from aurasvg.engine.registry import Layer, generator
from aurasvg.svg.primitives import Rect


@generator(id="background", layer=Layer.BACKGROUND, description="Fill the canvas with the background colour")
def background(entropy: int, palette: Palette, config: RenderConfig) -> list[Rect]:
    return [Rect(width=config.canvas_size, height=config.canvas_size, fill=palette.background)]
