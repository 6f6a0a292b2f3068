"""Deterministic identicons from hashes."""

from identicon.engine import IconGenerator, ShapeCategory, default_categories
from identicon.geometry import Rectangle, Transform
from identicon.identicon import Identicon, hash_value, parse_hash
from identicon.models import IdenticonStyle, LightnessRange
from identicon.rendering import Color, RecordingRenderer, Renderer

__version__ = "0.1.0"

__all__ = [
    "Color",
    "IconGenerator",
    "Identicon",
    "IdenticonStyle",
    "LightnessRange",
    "RecordingRenderer",
    "Rectangle",
    "Renderer",
    "ShapeCategory",
    "Transform",
    "default_categories",
    "hash_value",
    "parse_hash",
]
