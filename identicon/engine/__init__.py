"""Identicon engine — hash decoding, shape selection and icon generation."""

from identicon.engine.categories import DEFAULT_CATEGORIES, ShapeCategory, default_categories
from identicon.engine.config import GeneratorConfig
from identicon.engine.generator import IconGenerator
from identicon.engine.octets import get_hue, get_octet
from identicon.engine.selector import ResolvedShape, ShapeSelector
from identicon.engine.theme import ColorTheme

__all__ = [
    "DEFAULT_CATEGORIES",
    "ColorTheme",
    "GeneratorConfig",
    "IconGenerator",
    "ResolvedShape",
    "ShapeCategory",
    "ShapeSelector",
    "default_categories",
    "get_hue",
    "get_octet",
]
