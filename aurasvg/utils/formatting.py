"""Number formatting for markup attributes."""

from __future__ import annotations


def format_opacity(percent: int) -> str:
    """Render an integer percentage as a two-decimal fraction: 5 -> "0.05", 30 -> "0.30"."""
    if percent < 0:
        raise ValueError(f"Opacity percentage must be non-negative, got {percent}")
    return f"{percent / 100:.2f}"
