"""Center shape variants — drawn in the four middle cells.

Several variants snap their insets to whole pixels for large cells and use
fixed widths for tiny ones so borders stay visible.
"""

from __future__ import annotations

from identicon.rendering.graphics import Graphics
from identicon.shapes.registry import ShapeKind, shape


@shape(id="C.00", kind=ShapeKind.CENTER, description="Square with a cut corner")
def cut_corner(g: Graphics, cell: int, index: int) -> None:
    k = cell * 0.42
    g.add_polygon([(0, 0), (cell, 0), (cell, cell - k * 2), (cell - k, cell), (0, cell)])


@shape(id="C.01", kind=ShapeKind.CENTER, description="Narrow triangle")
def narrow_triangle(g: Graphics, cell: int, index: int) -> None:
    w = int(cell * 0.5)
    h = int(cell * 0.8)
    g.add_triangle(cell - w, 0, w, h, 2)


@shape(id="C.02", kind=ShapeKind.CENTER, description="Inset square")
def inset_square(g: Graphics, cell: int, index: int) -> None:
    s = int(cell / 3)
    g.add_rectangle(s, s, cell - s, cell - s)


@shape(id="C.03", kind=ShapeKind.CENTER, description="Square with uneven margins")
def margin_square(g: Graphics, cell: int, index: int) -> None:
    inner = cell * 0.1
    if cell < 6:
        outer = 1
    elif cell < 8:
        outer = 2
    else:
        outer = int(cell * 0.25)

    if inner > 1:
        inner = int(inner)
    elif inner > 0.5:
        inner = 1

    g.add_rectangle(outer, outer, cell - inner - outer, cell - inner - outer)


@shape(id="C.04", kind=ShapeKind.CENTER, description="Small circle")
def small_circle(g: Graphics, cell: int, index: int) -> None:
    m = int(cell * 0.15)
    s = int(cell * 0.5)
    g.add_circle(cell - s - m, cell - s - m, s)


@shape(id="C.05", kind=ShapeKind.CENTER, description="Square with triangular hole")
def triangle_hole(g: Graphics, cell: int, index: int) -> None:
    inner = cell * 0.1
    outer = inner * 4
    if outer > 3:
        outer = int(outer)

    g.add_rectangle(0, 0, cell, cell)
    g.add_polygon(
        [(outer, outer), (cell - inner, outer), (outer + (cell - outer - inner) / 2, cell - inner)],
        True,
    )


@shape(id="C.06", kind=ShapeKind.CENTER, description="Square with notch")
def notched_square(g: Graphics, cell: int, index: int) -> None:
    g.add_polygon(
        [
            (0, 0),
            (cell, 0),
            (cell, cell * 0.7),
            (cell * 0.4, cell * 0.4),
            (cell * 0.7, cell),
            (0, cell),
        ]
    )


@shape(id="C.07", kind=ShapeKind.CENTER, description="Quarter triangle")
def quarter_triangle(g: Graphics, cell: int, index: int) -> None:
    g.add_triangle(cell / 2, cell / 2, cell / 2, cell / 2, 3)


@shape(id="C.08", kind=ShapeKind.CENTER, description="Three quarters with diagonal")
def stepped_block(g: Graphics, cell: int, index: int) -> None:
    g.add_rectangle(0, 0, cell, cell / 2)
    g.add_rectangle(0, cell / 2, cell / 2, cell / 2)
    g.add_triangle(cell / 2, cell / 2, cell / 2, cell / 2, 1)


@shape(id="C.09", kind=ShapeKind.CENTER, description="Frame")
def frame(g: Graphics, cell: int, index: int) -> None:
    inner = cell * 0.14
    if cell < 4:
        outer = 1
    elif cell < 6:
        outer = 2
    else:
        outer = int(cell * 0.35)

    if cell >= 8:
        inner = int(inner)

    g.add_rectangle(0, 0, cell, cell)
    g.add_rectangle(outer, outer, cell - outer - inner, cell - outer - inner, True)


@shape(id="C.10", kind=ShapeKind.CENTER, description="Square with round hole")
def round_hole(g: Graphics, cell: int, index: int) -> None:
    inner = cell * 0.12
    outer = inner * 3

    g.add_rectangle(0, 0, cell, cell)
    g.add_circle(outer, outer, cell - inner - outer, True)


@shape(id="C.11", kind=ShapeKind.CENTER, description="Quarter square")
def quarter_square(g: Graphics, cell: int, index: int) -> None:
    g.add_rectangle(0, 0, cell / 2, cell / 2)


@shape(id="C.12", kind=ShapeKind.CENTER, description="Square with rhombus hole")
def rhombus_hole(g: Graphics, cell: int, index: int) -> None:
    m = cell * 0.25
    g.add_rectangle(0, 0, cell, cell)
    g.add_rhombus(m, m, cell - m, cell - m, True)


@shape(id="C.13", kind=ShapeKind.CENTER, description="Large circle spanning the center")
def center_circle(g: Graphics, cell: int, index: int) -> None:
    # Drawn once, from the first center cell, across all four
    if index == 0:
        m = cell * 0.4
        s = cell * 1.2
        g.add_circle(m, m, s)
