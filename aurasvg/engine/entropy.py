"""Entropy Bit-Slicer — derives many small draws from one large integer.

Each shape generator reads a fixed window of the entropy per element index,
then takes sub-slices of that window. The tables below are part of the
artwork's identity: changing any shift, modulus or offset changes every
rendered document.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


def slice_bits(entropy: int, shift: int, mask_bits: int) -> int:
    """Return ``(entropy >> shift) & ((1 << mask_bits) - 1)``."""
    if isinstance(entropy, bool) or not isinstance(entropy, int):
        raise TypeError(f"Entropy must be int, got {type(entropy).__name__}")
    if entropy < 0 or shift < 0 or mask_bits < 0:
        raise ValueError(
            f"slice_bits takes unsigned arguments (entropy={entropy}, shift={shift}, mask_bits={mask_bits})"
        )
    return (entropy >> shift) & ((1 << mask_bits) - 1)


@dataclass(frozen=True)
class Window:
    """Per-index window: element i reads ``bits`` bits starting at ``i * stride``."""

    stride: int
    bits: int

    def seed(self, entropy: int, index: int) -> int:
        return slice_bits(entropy, index * self.stride, self.bits)


@dataclass(frozen=True)
class Draw:
    """One parameter: ``offset + (seed >> shift) % modulus``."""

    shift: int
    modulus: int
    offset: int = 0

    def sample(self, seed: int) -> int:
        return self.offset + (seed >> self.shift) % self.modulus


FLOW_WINDOW = Window(stride=40, bits=40)
PARTICLE_WINDOW = Window(stride=12, bits=12)

FLOW_CURVE_DRAWS: Mapping[str, Draw] = MappingProxyType({
    "start_y": Draw(shift=0, modulus=40, offset=180),
    "ctrl1_x": Draw(shift=8, modulus=80, offset=100),
    "ctrl1_y": Draw(shift=16, modulus=100, offset=150),
    "ctrl2_x": Draw(shift=24, modulus=80, offset=250),
    "ctrl2_y": Draw(shift=32, modulus=100, offset=150),
    "end_x": Draw(shift=24, modulus=30, offset=350),
    "end_y": Draw(shift=32, modulus=40, offset=180),
    "opacity": Draw(shift=16, modulus=40, offset=30),
})

PARTICLE_DRAWS: Mapping[str, Draw] = MappingProxyType({
    "x": Draw(shift=0, modulus=300, offset=50),
    "y": Draw(shift=4, modulus=300, offset=50),
    "r": Draw(shift=8, modulus=6, offset=2),
    "opacity": Draw(shift=4, modulus=50, offset=40),
})

# Core-orb draws read the entropy directly, no window.
CORE_ORB_DRAWS: Mapping[str, Draw] = MappingProxyType({
    "x": Draw(shift=0, modulus=15, offset=45),
    "y": Draw(shift=8, modulus=20, offset=190),
    "r": Draw(shift=16, modulus=15, offset=25),
})


def sample_all(draws: Mapping[str, Draw], seed: int) -> dict[str, int]:
    return {name: draw.sample(seed) for name, draw in draws.items()}
