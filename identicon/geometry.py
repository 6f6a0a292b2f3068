"""Leaf-node geometry: icon rectangles and cell transforms. No engine imports."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned integer rectangle in icon coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inset(self, amount: int) -> Rectangle:
        """Shrink by ``amount`` on every side."""
        return Rectangle(
            self.x + amount,
            self.y + amount,
            self.width - 2 * amount,
            self.height - 2 * amount,
        )


@dataclass(frozen=True)
class Transform:
    """Maps cell-local coordinates to icon coordinates.

    The cell is the square at (x, y) with side ``size``; ``rotation`` is the
    number of clockwise quarter turns, 0-3.
    """

    x: float
    y: float
    size: float
    rotation: int = 0

    def transform_point(self, x: float, y: float, w: float = 0, h: float = 0) -> tuple[float, float]:
        """Transform the top-left corner of a (w, h) box at local (x, y).

        Passing the box size keeps the transformed box's top-left corner on
        the top-left after rotation, which circles rely on.
        """
        right = self.x + self.size
        bottom = self.y + self.size
        if self.rotation == 1:
            return (right - y - h, self.y + x)
        if self.rotation == 2:
            return (right - x - w, bottom - y - h)
        if self.rotation == 3:
            return (self.x + y, bottom - x - w)
        return (self.x + x, self.y + y)

    def transform_points(self, points: ArrayLike) -> NDArray[np.float64]:
        """Vectorised :meth:`transform_point` for an (N, 2) array of points."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        lx = pts[:, 0]
        ly = pts[:, 1]
        right = self.x + self.size
        bottom = self.y + self.size

        if self.rotation == 1:
            out = np.column_stack((right - ly, self.y + lx))
        elif self.rotation == 2:
            out = np.column_stack((right - lx, bottom - ly))
        elif self.rotation == 3:
            out = np.column_stack((self.x + ly, bottom - lx))
        else:
            out = np.column_stack((self.x + lx, self.y + ly))
        return out
