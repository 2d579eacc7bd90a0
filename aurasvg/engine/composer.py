"""Composition engine — runs layer generators in paint order and serializes the result."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from aurasvg.engine.config import DEFAULT_RENDER_CONFIG, RenderConfig
from aurasvg.engine.context import RenderContext
from aurasvg.engine.defs import build_defs
from aurasvg.engine.palette import palette_for
from aurasvg.engine.registry import GeneratorRegistry, get_registry
from aurasvg.models.record import ArtRecord
from aurasvg.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

_GENERATOR_PACKAGE = "aurasvg.engine.generators"


def register_generators() -> None:
    """Import all generator modules so @generator decorators fire."""
    package = importlib.import_module(_GENERATOR_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_GENERATOR_PACKAGE}.{module_name}")


class Composer:
    """Assembles defs and layers for a record into one vector document."""

    def __init__(
        self,
        registry: GeneratorRegistry | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        if registry is None:
            register_generators()
            registry = get_registry()
        self.registry = registry
        self.config = config or DEFAULT_RENDER_CONFIG

    def build(self, record: ArtRecord) -> RenderContext:
        """Run every generator and collect the structured result."""
        palette = palette_for(record.category)
        ctx = RenderContext(record=record, palette=palette, config=self.config)
        ctx.defs = build_defs(palette, self.config)

        for spec in self.registry.all():
            t0 = time.perf_counter()
            try:
                ctx.layers[spec.layer] = list(spec.fn(record.entropy, palette, self.config))
            except Exception:
                logger.error("Generator %s failed for %s", spec.id, record.identity_hex)
                raise
            ctx.timings[spec.id] = (time.perf_counter() - t0) * 1000
            logger.debug("  %s: %d shapes in %.2fms", spec.id, len(ctx.layers[spec.layer]), ctx.timings[spec.id])

        return ctx

    def render(self, record: ArtRecord) -> str:
        start = time.perf_counter()
        ctx = self.build(record)
        svg = serialize_svg(
            ctx.defs,
            ctx.shapes(),
            canvas_w=self.config.canvas_size,
            canvas_h=self.config.canvas_size,
        )
        logger.info(
            "Composed %s aura for %s: %d shapes, %d chars in %.1fms",
            record.category.display_name,
            record.identity_hex,
            ctx.num_shapes,
            len(svg),
            (time.perf_counter() - start) * 1000,
        )
        return svg


_default_composer: Composer | None = None


def _composer() -> Composer:
    global _default_composer
    if _default_composer is None:
        _default_composer = Composer()
    return _default_composer


def compose_context(record: ArtRecord) -> RenderContext:
    """Structured defs and layers for ``record``, before any markup is written."""
    return _composer().build(record)


def compose(record: ArtRecord) -> str:
    """The canonical vector document for ``record``."""
    return _composer().render(record)


def render_svg(record: ArtRecord) -> str:
    """Preview entry point: the raw, unencoded vector document."""
    return compose(record)
