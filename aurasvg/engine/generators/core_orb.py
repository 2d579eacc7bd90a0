"""Core orb — gradient-filled outer circle with a bright inner disc, always painted last."""

from __future__ import annotations

from aurasvg.engine.config import RenderConfig
from aurasvg.engine.defs import CORE_GLOW_ID, GLOW_FILTER_ID
from aurasvg.engine.entropy import CORE_ORB_DRAWS, sample_all
from aurasvg.engine.palette import Palette
from aurasvg.engine.registry import Layer, generator
from aurasvg.svg.primitives import Circle, ref


@generator(id="core", layer=Layer.CORE, description="Concentric core orb")
def core_orb(entropy: int, palette: Palette, config: RenderConfig) -> list[Circle]:
    p = sample_all(CORE_ORB_DRAWS, entropy)
    # r >= 25, so the inner radius is never zero
    inner_r = p["r"] // 3
    return [
        Circle(cx=p["x"], cy=p["y"], r=p["r"], fill=ref(CORE_GLOW_ID), filter=GLOW_FILTER_ID),
        Circle(cx=p["x"], cy=p["y"], r=inner_r, fill=palette.glow, opacity=config.core_inner_opacity),
    ]
