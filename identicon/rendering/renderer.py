"""Renderer contract — the surface an icon is drawn onto."""

from __future__ import annotations

import abc
from collections.abc import Iterator
from contextlib import contextmanager

import numpy as np
from numpy.typing import NDArray

from identicon.rendering.color import Color


class Renderer(abc.ABC):
    """Base class for icon renderers.

    Coordinates passed to ``add_polygon`` and ``add_circle`` are absolute
    icon coordinates; cell transforms are applied by
    :class:`identicon.rendering.graphics.Graphics` before they get here.
    """

    @abc.abstractmethod
    def set_background(self, color: Color) -> None:
        """Fill the whole surface with ``color``."""

    @contextmanager
    def begin_shape(self, color: Color) -> Iterator[None]:
        """Scope in which all added primitives form one shape tinted ``color``.

        The shape is finalized exactly once, also when drawing raises.
        """
        self._start_shape(color)
        try:
            yield
        finally:
            self._end_shape()

    @abc.abstractmethod
    def _start_shape(self, color: Color) -> None: ...

    @abc.abstractmethod
    def _end_shape(self) -> None: ...

    @abc.abstractmethod
    def add_polygon(self, points: NDArray[np.float64], invert: bool = False) -> None:
        """Add a polygon given as an (N, 2) array of points."""

    @abc.abstractmethod
    def add_circle(self, x: float, y: float, diameter: float, invert: bool = False) -> None:
        """Add a circle whose bounding box has its top-left corner at (x, y)."""
