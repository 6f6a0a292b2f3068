"""In-memory renderer that keeps every drawn primitive as geometry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Point, Polygon
from shapely.geometry.base import BaseGeometry

from identicon.rendering.color import Color
from identicon.rendering.renderer import Renderer

logger = logging.getLogger(__name__)

# Segments per quarter circle when approximating circles as polygons.
_CIRCLE_QUAD_SEGS = 16


@dataclass
class PolygonPrimitive:
    points: NDArray[np.float64]
    invert: bool = False

    def to_shapely(self) -> BaseGeometry:
        # buffer(0) repairs the zero-area slivers some shapes emit at small sizes
        return Polygon(self.points).buffer(0)


@dataclass
class CirclePrimitive:
    x: float
    y: float
    diameter: float
    invert: bool = False

    @property
    def center(self) -> tuple[float, float]:
        r = self.diameter / 2
        return (self.x + r, self.y + r)

    def to_shapely(self) -> BaseGeometry:
        return Point(self.center).buffer(self.diameter / 2, quad_segs=_CIRCLE_QUAD_SEGS)


@dataclass
class ShapeGroup:
    """All primitives drawn inside one ``begin_shape`` scope."""

    color: Color
    primitives: list[PolygonPrimitive | CirclePrimitive] = field(default_factory=list)

    def geometry(self) -> BaseGeometry:
        """Filled area of the group. Inverted primitives cut holes, in draw order."""
        geom: BaseGeometry = Polygon()
        for prim in self.primitives:
            piece = prim.to_shapely()
            geom = geom.difference(piece) if prim.invert else geom.union(piece)
        return geom


class RecordingRenderer(Renderer):
    """Records background, shape groups and primitives in draw order."""

    def __init__(self) -> None:
        self.background: Color | None = None
        self.groups: list[ShapeGroup] = []
        self._current: ShapeGroup | None = None

    @property
    def is_shape_open(self) -> bool:
        return self._current is not None

    def set_background(self, color: Color) -> None:
        self.background = color

    def _start_shape(self, color: Color) -> None:
        if self._current is not None:
            raise RuntimeError("Cannot begin a shape while another shape is open")
        self._current = ShapeGroup(color=color)
        self.groups.append(self._current)

    def _end_shape(self) -> None:
        if self._current is None:
            raise RuntimeError("No open shape to end")
        logger.debug(
            "Shape %s closed with %d primitives", self._current.color, len(self._current.primitives)
        )
        self._current = None

    def _open_group(self) -> ShapeGroup:
        if self._current is None:
            raise RuntimeError("Primitives must be added inside begin_shape()")
        return self._current

    def add_polygon(self, points: NDArray[np.float64], invert: bool = False) -> None:
        self._open_group().primitives.append(
            PolygonPrimitive(np.asarray(points, dtype=np.float64), invert)
        )

    def add_circle(self, x: float, y: float, diameter: float, invert: bool = False) -> None:
        self._open_group().primitives.append(CirclePrimitive(x, y, diameter, invert))
