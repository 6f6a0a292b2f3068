"""Generator configuration — grid size and color collision constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorConfig:
    """Controls the icon grid and how low contrast color pairs are resolved."""

    # Cells along each side of the icon grid
    cell_count: int = 4

    # Palette indices that must never appear together (low contrast pairs):
    # dark gray + dark color, light gray + light color
    conflicting_colors: tuple[tuple[int, int], ...] = ((0, 4), (2, 3))

    # Palette index used instead of a conflicting one (mid color)
    fallback_color: int = 1
