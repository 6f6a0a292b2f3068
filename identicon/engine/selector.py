"""Shape selection: turns hash octets into colored, rotated shape instances."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from identicon.engine.categories import DEFAULT_CATEGORIES, Position, ShapeCategory
from identicon.engine.config import GeneratorConfig
from identicon.engine.octets import get_octet
from identicon.rendering.color import Color
from identicon.shapes import ShapeFn

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedShape:
    """One category, fully decided for a specific hash."""

    shape: ShapeFn
    color: Color
    positions: tuple[Position, ...]
    # Quarter turns for the first position, 0-3
    start_rotation: int
    # Palette index behind ``color``, after the collision rule
    color_index: int


class ShapeSelector:
    """Resolves the shapes of an icon from an injected category table."""

    def __init__(
        self,
        categories: Sequence[ShapeCategory] | None = None,
        config: GeneratorConfig | None = None,
    ) -> None:
        self.categories = tuple(categories) if categories is not None else DEFAULT_CATEGORIES
        self.config = config or GeneratorConfig()

    def _is_conflict(self, candidate: int, chosen: Sequence[int | None]) -> bool:
        for pair in self.config.conflicting_colors:
            if candidate in pair:
                other = pair[1] if candidate == pair[0] else pair[0]
                if other in chosen:
                    return True
        return False

    def select(self, hash: bytes, palette: Sequence[Color]) -> Iterator[ResolvedShape]:
        """Yield one :class:`ResolvedShape` per category, in table order."""
        chosen: list[int | None] = [None] * len(self.categories)

        for i, category in enumerate(self.categories):
            color_index = get_octet(hash, category.color_index) % len(palette)

            # Avoid low contrast pairs such as dark gray next to dark color
            if self._is_conflict(color_index, chosen[:i]):
                logger.debug(
                    "Category %s: palette index %d conflicts with %s, using %d",
                    category.name,
                    color_index,
                    chosen[:i],
                    self.config.fallback_color,
                )
                color_index = self.config.fallback_color

            chosen[i] = color_index

            shape = category.shapes[get_octet(hash, category.shape_index) % len(category.shapes)]
            if category.rotation_index is None:
                start_rotation = 0
            else:
                start_rotation = get_octet(hash, category.rotation_index) % 4

            yield ResolvedShape(
                shape=shape,
                color=palette[color_index],
                positions=category.positions,
                start_rotation=start_rotation,
                color_index=color_index,
            )
