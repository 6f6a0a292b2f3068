"""Shape registry — every shape variant is a plain function registered via decorator.

Usage:
    @shape(id="C.02", kind=ShapeKind.CENTER, description="Inset square")
    def inset_square(g: Graphics, cell: int, index: int) -> None:
        s = int(cell / 3)
        g.add_rectangle(s, s, cell - s, cell - s)

Variants of one kind are ordered by id, and a hash octet picks among them by
position, so ids must stay stable once icons have been published.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from identicon.rendering.graphics import Graphics

logger = logging.getLogger(__name__)

ShapeFn = Callable[["Graphics", int, int], None]


class ShapeKind(enum.Enum):
    OUTER = "outer"
    CENTER = "center"


@dataclass(frozen=True)
class ShapeSpec:
    id: str
    kind: ShapeKind
    fn: ShapeFn
    description: str = ""


class ShapeRegistry:
    """Registry of shape variants, grouped by kind."""

    def __init__(self) -> None:
        self._shapes: dict[str, ShapeSpec] = {}

    def register(self, spec: ShapeSpec) -> None:
        if spec.id in self._shapes:
            raise ValueError(f"Duplicate shape ID: {spec.id}")
        self._shapes[spec.id] = spec
        logger.debug("Registered shape %s (%s)", spec.id, spec.kind.value)

    def get(self, shape_id: str) -> ShapeSpec:
        return self._shapes[shape_id]

    def get_kind(self, kind: ShapeKind) -> tuple[ShapeFn, ...]:
        specs = sorted((s for s in self._shapes.values() if s.kind == kind), key=lambda s: s.id)
        return tuple(s.fn for s in specs)

    def all(self) -> list[ShapeSpec]:
        return sorted(self._shapes.values(), key=lambda s: (s.kind.value, s.id))

    @property
    def count(self) -> int:
        return len(self._shapes)


# Module-level singleton
_registry = ShapeRegistry()


def get_registry() -> ShapeRegistry:
    return _registry


def shape(*, id: str, kind: ShapeKind, description: str = ""):
    """Decorator to register a shape function."""

    def decorator(fn: ShapeFn) -> ShapeFn:
        _registry.register(ShapeSpec(id=id, kind=kind, fn=fn, description=description))
        return fn

    return decorator
