"""Rendering primitives: color model, renderer contract and drawing session."""

from identicon.rendering.color import TRANSPARENT, WHITE, Color
from identicon.rendering.graphics import Graphics
from identicon.rendering.recorder import CirclePrimitive, PolygonPrimitive, RecordingRenderer, ShapeGroup
from identicon.rendering.renderer import Renderer

__all__ = [
    "TRANSPARENT",
    "WHITE",
    "CirclePrimitive",
    "Color",
    "Graphics",
    "PolygonPrimitive",
    "RecordingRenderer",
    "Renderer",
    "ShapeGroup",
]
