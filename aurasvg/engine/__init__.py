"""Aura rendering engine."""

from aurasvg.engine.category import issue_record, select_category
from aurasvg.engine.composer import Composer, compose, compose_context, render_svg
from aurasvg.engine.context import RenderContext
from aurasvg.engine.registry import Layer, generator, get_registry

__all__ = [
    "select_category",
    "issue_record",
    "Composer",
    "compose",
    "compose_context",
    "render_svg",
    "RenderContext",
    "Layer",
    "generator",
    "get_registry",
]
