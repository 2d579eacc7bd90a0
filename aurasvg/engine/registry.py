"""Generator registry — every layer generator is a standalone function registered via decorator.

Usage:
    @generator(id="particles", layer=Layer.PARTICLES, description="...")
    def particle_field(entropy: int, palette: Palette, config: RenderConfig) -> list[Shape]:
        ...

Adding a new layer = creating one module in ``aurasvg.engine.generators`` with the decorator.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from aurasvg.engine.config import RenderConfig
    from aurasvg.engine.palette import Palette
    from aurasvg.svg.primitives import Shape

logger = logging.getLogger(__name__)

GeneratorFn = Callable[[int, "Palette", "RenderConfig"], "list[Shape]"]


class Layer(enum.IntEnum):
    """Paint order. Higher layers paint over lower ones."""

    BACKGROUND = 0
    FLOW = 1
    PARTICLES = 2
    CORE = 3


@dataclass
class GeneratorSpec:
    id: str
    layer: Layer
    fn: GeneratorFn
    description: str = ""


class GeneratorRegistry:
    """Registry of layer generators, one per layer."""

    def __init__(self) -> None:
        self._generators: dict[str, GeneratorSpec] = {}

    def register(self, spec: GeneratorSpec) -> None:
        if spec.id in self._generators:
            raise ValueError(f"Duplicate generator ID: {spec.id}")
        for existing in self._generators.values():
            if existing.layer == spec.layer:
                raise ValueError(
                    f"Layer {spec.layer.name} already drawn by {existing.id}, cannot add {spec.id}"
                )
        self._generators[spec.id] = spec
        logger.debug("Registered generator %s (%s)", spec.id, spec.layer.name)

    def get(self, generator_id: str) -> GeneratorSpec:
        return self._generators[generator_id]

    def get_layer(self, layer: Layer) -> GeneratorSpec | None:
        for spec in self._generators.values():
            if spec.layer == layer:
                return spec
        return None

    def all(self) -> list[GeneratorSpec]:
        """Generators in paint order."""
        return sorted(self._generators.values(), key=lambda s: (s.layer, s.id))

    @property
    def count(self) -> int:
        return len(self._generators)


# Module-level singleton
_registry = GeneratorRegistry()


def get_registry() -> GeneratorRegistry:
    return _registry


def generator(*, id: str, layer: Layer, description: str = ""):
    """Decorator to register a layer generator."""

    def decorator(fn: GeneratorFn) -> GeneratorFn:
        _registry.register(GeneratorSpec(id=id, layer=layer, fn=fn, description=description))
        return fn

    return decorator
