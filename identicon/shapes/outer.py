"""Outer shape variants — drawn in the side and corner cells."""

from __future__ import annotations

from identicon.rendering.graphics import Graphics
from identicon.shapes.registry import ShapeKind, shape


@shape(id="O.00", kind=ShapeKind.OUTER, description="Half-cell triangle")
def triangle(g: Graphics, cell: int, index: int) -> None:
    g.add_triangle(0, 0, cell, cell, 0)


@shape(id="O.01", kind=ShapeKind.OUTER, description="Flat triangle")
def flat_triangle(g: Graphics, cell: int, index: int) -> None:
    g.add_triangle(0, cell / 2, cell, cell / 2, 0)


@shape(id="O.02", kind=ShapeKind.OUTER, description="Rhombus")
def rhombus(g: Graphics, cell: int, index: int) -> None:
    g.add_rhombus(0, 0, cell, cell)


@shape(id="O.03", kind=ShapeKind.OUTER, description="Circle")
def circle(g: Graphics, cell: int, index: int) -> None:
    m = cell / 6
    g.add_circle(m, m, cell - 2 * m)
