"""Reusable definitions shared by every layer: two gradients and the glow filter."""

from __future__ import annotations

from aurasvg.engine.config import RenderConfig
from aurasvg.engine.palette import Palette
from aurasvg.svg.primitives import (
    Definition,
    GlowFilter,
    GradientStop,
    LinearGradient,
    RadialGradient,
)

CORE_GLOW_ID = "coreGlow"
BREATH_ID = "breath"
GLOW_FILTER_ID = "glow"


def core_glow_gradient(palette: Palette) -> RadialGradient:
    """Primary at the centre, secondary mid-way, fading to transparent primary."""
    return RadialGradient(
        id=CORE_GLOW_ID,
        stops=(
            GradientStop(offset=0, color=palette.primary),
            GradientStop(offset=50, color=palette.secondary),
            GradientStop(offset=100, color=palette.primary, opacity=0),
        ),
    )


def breath_gradient(palette: Palette) -> LinearGradient:
    """Horizontal primary -> secondary sweep used by the flow curves."""
    return LinearGradient(
        id=BREATH_ID,
        stops=(
            GradientStop(offset=0, color=palette.primary),
            GradientStop(offset=100, color=palette.secondary),
        ),
        x2=100,
        y2=0,
    )


def glow_filter(palette: Palette, config: RenderConfig) -> GlowFilter:
    return GlowFilter(
        id=GLOW_FILTER_ID,
        color=palette.glow,
        blur=config.glow_blur,
        flood_opacity=config.glow_flood_opacity,
    )


def build_defs(palette: Palette, config: RenderConfig) -> list[Definition]:
    return [core_glow_gradient(palette), breath_gradient(palette), glow_filter(palette, config)]
