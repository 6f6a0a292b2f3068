"""Shared test fixtures."""

from __future__ import annotations

import hashlib

import pytest

from identicon.models.style import IdenticonStyle
from identicon.rendering.color import Color
from identicon.rendering.recorder import RecordingRenderer

# 16-byte literal hash. Octets 0-10: 0 1 2 3 4 5 6 7 8 9 a
SAMPLE_HASH = bytes.fromhex("0123456789abcdef0123456789abcdef")

# Five distinguishable colors standing in for a theme
PALETTE = [Color.from_argb(255, i * 10, i * 10, i * 10) for i in range(5)]


def hash_with_colors(sides: int, corners: int, center: int) -> bytes:
    """16-byte hash whose color octets (8, 9, 10) are the given values."""
    buf = bytearray(16)
    buf[4] = (sides << 4) | corners
    buf[5] = center << 4
    return bytes(buf)


def digest_hashes(count: int) -> list[bytes]:
    """Deterministic spread of realistic hashes."""
    return [hashlib.sha1(f"user-{i}".encode()).digest() for i in range(count)]


@pytest.fixture
def sample_hash() -> bytes:
    return SAMPLE_HASH


@pytest.fixture
def palette() -> list[Color]:
    return PALETTE


@pytest.fixture
def style() -> IdenticonStyle:
    return IdenticonStyle()


@pytest.fixture
def recorder() -> RecordingRenderer:
    return RecordingRenderer()
