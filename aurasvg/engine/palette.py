"""Palette Table — one fixed four-colour palette per category."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from aurasvg.models.record import Category


@dataclass(frozen=True)
class Palette:
    background: str
    primary: str
    secondary: str
    glow: str


PALETTES: Mapping[Category, Palette] = MappingProxyType({
    Category.EMBER: Palette(background="#1a0b05", primary="#ff6b35", secondary="#f7c59f", glow="#ffd23f"),
    Category.TIDE: Palette(background="#03141f", primary="#00b4d8", secondary="#90e0ef", glow="#caf0f8"),
    Category.VERDANT: Palette(background="#07170d", primary="#2d6a4f", secondary="#95d5b2", glow="#d8f3dc"),
    Category.NEBULA: Palette(background="#0d0221", primary="#7b2cbf", secondary="#e0aaff", glow="#ff9ef5"),
    Category.AURORA: Palette(background="#020c1b", primary="#38ef7d", secondary="#11998e", glow="#f9f871"),
})


def palette_for(category: Category | int) -> Palette:
    """Look up a palette. Anything outside the five categories is a caller bug."""
    if isinstance(category, bool) or not isinstance(category, int):
        raise ValueError(f"Unknown category: {category!r}")
    try:
        return PALETTES[Category(category)]
    except ValueError as e:
        raise ValueError(f"Unknown category: {category!r}") from e
