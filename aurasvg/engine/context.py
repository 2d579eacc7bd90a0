"""RenderContext — structured state for a single render call.

Definitions → RenderContext.defs
Paint layers → RenderContext.layers, keyed by Layer (paint order)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from aurasvg.engine.config import DEFAULT_RENDER_CONFIG, RenderConfig
from aurasvg.engine.palette import Palette
from aurasvg.engine.registry import Layer
from aurasvg.models.record import ArtRecord
from aurasvg.svg.primitives import Definition, Shape


@dataclass
class RenderContext:
    """Everything a render produces before serialization. Discarded after the call."""

    record: ArtRecord
    palette: Palette
    config: RenderConfig = DEFAULT_RENDER_CONFIG
    defs: list[Definition] = field(default_factory=list)
    layers: dict[Layer, list[Shape]] = field(default_factory=dict)
    # Generator ID -> elapsed milliseconds
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def entropy(self) -> int:
        return self.record.entropy

    def shapes(self) -> list[Shape]:
        """All shapes in paint order (lowest layer first)."""
        ordered: list[Shape] = []
        for layer in sorted(self.layers):
            ordered.extend(self.layers[layer])
        return ordered

    def get_layer(self, layer: Layer) -> list[Shape]:
        return self.layers.get(layer, [])

    @property
    def num_shapes(self) -> int:
        return sum(len(shapes) for shapes in self.layers.values())
