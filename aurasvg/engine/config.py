"""Render constants. The default instance defines the canonical artwork."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Fixed composition parameters. Changing any of them changes every document."""

    # Square canvas, viewBox 0 0 N N
    canvas_size: int = 400

    # Element counts per layer
    curve_count: int = 5
    particle_count: int = 20

    # Flow curves all start at this x
    flow_origin_x: int = 50

    # Glow filter
    glow_blur: int = 4
    glow_flood_opacity: int = 60  # percent

    # Inner core disc
    core_inner_opacity: int = 90  # percent


DEFAULT_RENDER_CONFIG = RenderConfig()
