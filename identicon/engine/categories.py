"""Shape categories — which hash octets drive each group of grid cells."""

from __future__ import annotations

from dataclasses import dataclass

from identicon.shapes import ShapeFn, center_shapes, outer_shapes

Position = tuple[int, int]


@dataclass(frozen=True)
class ShapeCategory:
    """A group of cells that share one color, one shape variant and one
    starting rotation. All ``*_index`` fields are octet indices into the hash.
    """

    name: str
    color_index: int
    shape_index: int
    # None -> every icon starts this category at rotation 0
    rotation_index: int | None
    shapes: tuple[ShapeFn, ...]
    positions: tuple[Position, ...]

    @property
    def max_octet_index(self) -> int:
        indices = [self.color_index, self.shape_index]
        if self.rotation_index is not None:
            indices.append(self.rotation_index)
        return max(indices)


def default_categories() -> tuple[ShapeCategory, ...]:
    """Sides, corners, center — in this order. Later categories see the colors
    chosen by earlier ones when the collision rule is applied.
    """
    outer = outer_shapes()
    center = center_shapes()
    return (
        ShapeCategory(
            name="sides",
            color_index=8,
            shape_index=2,
            rotation_index=3,
            shapes=outer,
            positions=((1, 0), (2, 0), (2, 3), (1, 3), (0, 1), (3, 1), (3, 2), (0, 2)),
        ),
        ShapeCategory(
            name="corners",
            color_index=9,
            shape_index=4,
            rotation_index=5,
            shapes=outer,
            positions=((0, 0), (3, 0), (3, 3), (0, 3)),
        ),
        ShapeCategory(
            name="center",
            color_index=10,
            shape_index=1,
            rotation_index=None,
            shapes=center,
            positions=((1, 1), (2, 1), (2, 2), (1, 2)),
        ),
    )


DEFAULT_CATEGORIES = default_categories()
