"""Identicon facade — hash a value and draw its icon at a given size."""

from __future__ import annotations

import hashlib
import logging
import re

from identicon.config import settings
from identicon.engine.generator import IconGenerator
from identicon.engine.selector import ResolvedShape
from identicon.geometry import Rectangle
from identicon.models.style import IdenticonStyle
from identicon.rendering.renderer import Renderer

logger = logging.getLogger(__name__)

# 12 hex digits = 6 bytes, enough for every default category octet
_HEX_HASH_RE = re.compile(r"^[0-9a-fA-F]{12,}$")


def hash_value(value: object, algorithm: str | None = None) -> bytes:
    """Digest of ``str(value)`` encoded as UTF-8."""
    digest = hashlib.new(algorithm or settings.identicon_hash_algorithm)
    digest.update(str(value).encode("utf-8"))
    return digest.digest()


def parse_hash(text: str) -> bytes:
    """Bytes of a hexadecimal hash string of at least 12 digits."""
    text = text.strip()
    if not _HEX_HASH_RE.match(text) or len(text) % 2:
        raise ValueError(f"Not a hexadecimal hash of at least 12 digits: {text!r}")
    return bytes.fromhex(text)


class Identicon:
    """An icon for one hash at one size."""

    def __init__(
        self,
        hash: bytes,
        size: int | None = None,
        style: IdenticonStyle | None = None,
        generator: IconGenerator | None = None,
    ) -> None:
        self.generator = generator or IconGenerator()
        if len(hash) < self.generator.min_hash_bytes:
            raise ValueError(
                f"Hash must be at least {self.generator.min_hash_bytes} bytes, got {len(hash)}"
            )
        self.hash = bytes(hash)
        self.size = size if size is not None else settings.identicon_default_size
        if self.size <= 0:
            raise ValueError(f"Icon size must be positive, got {self.size}")
        self.style = style or IdenticonStyle()

    @classmethod
    def from_value(cls, value: object, size: int | None = None, style: IdenticonStyle | None = None) -> Identicon:
        """Icon for an arbitrary value, hashed with the configured algorithm."""
        return cls(hash_value(value), size, style)

    @classmethod
    def from_hash(cls, hash_hex: str, size: int | None = None, style: IdenticonStyle | None = None) -> Identicon:
        return cls(parse_hash(hash_hex), size, style)

    @property
    def icon_rect(self) -> Rectangle:
        """Area shapes are drawn in: the full icon minus padding on every side."""
        padding = int(self.style.padding * self.size)
        return Rectangle(0, 0, self.size, self.size).inset(padding)

    def shapes(self) -> list[ResolvedShape]:
        return self.generator.resolve_shapes(self.hash, self.style)

    def draw(self, renderer: Renderer, rect: Rectangle | None = None) -> None:
        """Draw onto ``renderer``; ``rect`` overrides the padded icon area."""
        target = rect or self.icon_rect
        logger.info("Drawing identicon %s at %dpx", self.hash.hex(), self.size)
        self.generator.generate(renderer, target, self.style, self.hash)
