"""Tests for the generator registry."""

import pytest

from aurasvg.engine.composer import register_generators
from aurasvg.engine.registry import GeneratorRegistry, GeneratorSpec, Layer, get_registry


def _noop(entropy, palette, config):
    return []


def test_register_and_get():
    reg = GeneratorRegistry()
    spec = GeneratorSpec(id="flow", layer=Layer.FLOW, fn=_noop)
    reg.register(spec)
    assert reg.get("flow") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = GeneratorRegistry()
    reg.register(GeneratorSpec(id="a", layer=Layer.FLOW, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(GeneratorSpec(id="a", layer=Layer.CORE, fn=_noop))


def test_one_generator_per_layer():
    reg = GeneratorRegistry()
    reg.register(GeneratorSpec(id="a", layer=Layer.FLOW, fn=_noop))
    with pytest.raises(ValueError, match="FLOW"):
        reg.register(GeneratorSpec(id="b", layer=Layer.FLOW, fn=_noop))


def test_all_in_paint_order():
    reg = GeneratorRegistry()
    reg.register(GeneratorSpec(id="z_core", layer=Layer.CORE, fn=_noop))
    reg.register(GeneratorSpec(id="a_background", layer=Layer.BACKGROUND, fn=_noop))
    reg.register(GeneratorSpec(id="m_particles", layer=Layer.PARTICLES, fn=_noop))
    assert [s.layer for s in reg.all()] == [Layer.BACKGROUND, Layer.PARTICLES, Layer.CORE]


def test_get_layer():
    reg = GeneratorRegistry()
    reg.register(GeneratorSpec(id="core", layer=Layer.CORE, fn=_noop))
    assert reg.get_layer(Layer.CORE).id == "core"
    assert reg.get_layer(Layer.FLOW) is None


def test_builtin_generators_registered():
    register_generators()
    reg = get_registry()
    assert [s.id for s in reg.all()] == ["background", "flow", "particles", "core"]
    # Importing again must not double-register
    register_generators()
    assert reg.count == 4
