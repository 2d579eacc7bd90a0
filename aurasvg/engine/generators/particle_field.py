"""Particle field — twenty small glowing dots.

Particle i reads a 12-bit window at bit 12*i. Colour alternates between
primary (even index) and secondary (odd index).
"""

from __future__ import annotations

from aurasvg.engine.config import RenderConfig
from aurasvg.engine.defs import GLOW_FILTER_ID
from aurasvg.engine.entropy import PARTICLE_DRAWS, PARTICLE_WINDOW, sample_all
from aurasvg.engine.palette import Palette
from aurasvg.engine.registry import Layer, generator
from aurasvg.svg.primitives import Circle


def particle(entropy: int, index: int, palette: Palette) -> Circle:
    p = sample_all(PARTICLE_DRAWS, PARTICLE_WINDOW.seed(entropy, index))
    return Circle(
        cx=p["x"],
        cy=p["y"],
        r=p["r"],
        fill=palette.primary if index % 2 == 0 else palette.secondary,
        opacity=p["opacity"],
        filter=GLOW_FILTER_ID,
    )


@generator(id="particles", layer=Layer.PARTICLES, description="Scatter glowing particles")
def particle_field(entropy: int, palette: Palette, config: RenderConfig) -> list[Circle]:
    return [particle(entropy, i, palette) for i in range(config.particle_count)]
