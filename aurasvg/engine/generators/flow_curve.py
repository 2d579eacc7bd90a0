"""Flow curves — five cubic Béziers sweeping left to right.

Curve i reads a 40-bit window at bit 40*i, so the five curves consume the
low 200 bits of entropy. Stroke width grows with the index: 3, 5, 7, 9, 11.
"""

from __future__ import annotations

from aurasvg.engine.config import RenderConfig
from aurasvg.engine.defs import BREATH_ID, GLOW_FILTER_ID
from aurasvg.engine.entropy import FLOW_CURVE_DRAWS, FLOW_WINDOW, sample_all
from aurasvg.engine.palette import Palette
from aurasvg.engine.registry import Layer, generator
from aurasvg.svg.primitives import CubicCurve, ref


def flow_curve(entropy: int, index: int, config: RenderConfig) -> CubicCurve:
    p = sample_all(FLOW_CURVE_DRAWS, FLOW_WINDOW.seed(entropy, index))
    return CubicCurve(
        start=(config.flow_origin_x, p["start_y"]),
        ctrl1=(p["ctrl1_x"], p["ctrl1_y"]),
        ctrl2=(p["ctrl2_x"], p["ctrl2_y"]),
        end=(p["end_x"], p["end_y"]),
        stroke=ref(BREATH_ID),
        stroke_width=3 + 2 * index,
        opacity=p["opacity"],
        filter=GLOW_FILTER_ID,
    )


@generator(id="flow", layer=Layer.FLOW, description="Cubic flow curves stroked with the breath gradient")
def flow_curves(entropy: int, palette: Palette, config: RenderConfig) -> list[CubicCurve]:
    return [flow_curve(entropy, i, config) for i in range(config.curve_count)]
