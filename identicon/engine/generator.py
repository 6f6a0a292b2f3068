"""Icon generator — drives a renderer through background and every resolved shape."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from identicon.engine.categories import ShapeCategory
from identicon.engine.config import GeneratorConfig
from identicon.engine.octets import get_hue
from identicon.engine.selector import ResolvedShape, ShapeSelector
from identicon.engine.theme import ColorTheme
from identicon.geometry import Rectangle, Transform
from identicon.models.style import IdenticonStyle
from identicon.rendering.graphics import Graphics
from identicon.rendering.renderer import Renderer

logger = logging.getLogger(__name__)

# Hue is read from the last 4 bytes regardless of hash length
_HUE_BYTES = 4


class IconGenerator:
    """Generates identicons onto a :class:`Renderer`.

    Which shapes appear is decided by the category table; pass a custom one to
    change the look of generated icons.
    """

    def __init__(
        self,
        categories: Sequence[ShapeCategory] | None = None,
        config: GeneratorConfig | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.selector = ShapeSelector(categories, self.config)

    @property
    def cell_count(self) -> int:
        return self.config.cell_count

    @property
    def min_hash_bytes(self) -> int:
        """Shortest hash every category octet and the hue can be read from."""
        highest = max((c.max_octet_index for c in self.selector.categories), default=0)
        return max(highest // 2 + 1, _HUE_BYTES)

    def normalize_rectangle(self, rect: Rectangle) -> Rectangle:
        """Largest centered square inside ``rect`` whose side is a multiple of the cell count."""
        size = min(rect.width, rect.height)
        size -= size % self.cell_count

        return Rectangle(
            x=rect.x + (rect.width - size) // 2,
            y=rect.y + (rect.height - size) // 2,
            width=size,
            height=size,
        )

    def resolve_shapes(self, hash: bytes, style: IdenticonStyle) -> list[ResolvedShape]:
        """Shapes an icon for ``hash`` consists of, without drawing anything."""
        palette = ColorTheme(get_hue(hash), style)
        return list(self.selector.select(hash, palette))

    def render_background(self, renderer: Renderer, style: IdenticonStyle) -> None:
        renderer.set_background(style.back_color)

    def render_foreground(self, renderer: Renderer, rect: Rectangle, palette: ColorTheme, hash: bytes) -> None:
        area = self.normalize_rectangle(rect)
        cell = area.width // self.cell_count

        for resolved in self.selector.select(hash, palette):
            with renderer.begin_shape(resolved.color):
                for i, (cx, cy) in enumerate(resolved.positions):
                    transform = Transform(
                        area.x + cx * cell,
                        area.y + cy * cell,
                        cell,
                        (resolved.start_rotation + i) % 4,
                    )
                    resolved.shape(Graphics(renderer, transform), cell, i)

    def generate(self, renderer: Renderer, rect: Rectangle, style: IdenticonStyle, hash: bytes) -> None:
        """Draw the identicon for ``hash`` into ``rect`` on ``renderer``."""
        hue = get_hue(hash)
        palette = ColorTheme(hue, style)
        logger.debug("Generating icon: hue=%.4f rect=%s", hue, rect)

        self.render_background(renderer, style)
        self.render_foreground(renderer, rect, palette, hash)
