"""Shape variant library. Importing this package registers every variant."""

from identicon.shapes import center, outer  # noqa: F401
from identicon.shapes.registry import ShapeFn, ShapeKind, get_registry, shape


def center_shapes() -> tuple[ShapeFn, ...]:
    return get_registry().get_kind(ShapeKind.CENTER)


def outer_shapes() -> tuple[ShapeFn, ...]:
    return get_registry().get_kind(ShapeKind.OUTER)


__all__ = [
    "ShapeFn",
    "ShapeKind",
    "center_shapes",
    "get_registry",
    "outer_shapes",
    "shape",
]
