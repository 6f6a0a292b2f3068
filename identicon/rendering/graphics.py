"""Drawing session handed to shape functions: one renderer, one cell transform."""

from __future__ import annotations

from collections.abc import Sequence

from identicon.geometry import Transform
from identicon.rendering.renderer import Renderer


class Graphics:
    """Cell-local drawing primitives.

    Shape functions draw in a coordinate space where the cell spans
    (0, 0)-(cell, cell); the transform places and rotates the cell.
    """

    def __init__(self, renderer: Renderer, transform: Transform) -> None:
        self.renderer = renderer
        self.transform = transform

    def add_polygon(self, points: Sequence[tuple[float, float]], invert: bool = False) -> None:
        """Add a polygon. Inverted polygons are wound the other way so they
        cut holes under the nonzero fill rule.
        """
        pts = self.transform.transform_points(points)
        if invert:
            pts = pts[::-1]
        self.renderer.add_polygon(pts, invert)

    def add_circle(self, x: float, y: float, size: float, invert: bool = False) -> None:
        px, py = self.transform.transform_point(x, y, size, size)
        self.renderer.add_circle(px, py, size, invert)

    def add_rectangle(self, x: float, y: float, w: float, h: float, invert: bool = False) -> None:
        self.add_polygon([(x, y), (x + w, y), (x + w, y + h), (x, y + h)], invert)

    def add_triangle(
        self, x: float, y: float, w: float, h: float, r: int, invert: bool = False
    ) -> None:
        """Right triangle filling half of the box; ``r`` picks the corner to drop."""
        points = [(x + w, y), (x + w, y + h), (x, y + h), (x, y)]
        del points[r % 4]
        self.add_polygon(points, invert)

    def add_rhombus(self, x: float, y: float, w: float, h: float, invert: bool = False) -> None:
        self.add_polygon(
            [(x + w / 2, y), (x + w, y + h / 2), (x + w / 2, y + h), (x, y + h / 2)],
            invert,
        )
