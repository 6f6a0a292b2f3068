"""Hash byte helpers for nibble extraction and hue. No engine imports."""

from __future__ import annotations

# Hue uses the low 28 bits of the last 4 hash bytes.
_HUE_BYTES = 4
_HUE_MASK = 0xFFFFFFF


def get_octet(source: bytes, index: int) -> int:
    """4-bit value at half-byte ``index``: even = high nibble, odd = low nibble.

    get_octet(b"\\xab\\xcd", 0) == 0xa, get_octet(b"\\xab\\xcd", 3) == 0xd
    """
    byte_index = index // 2
    if index < 0 or byte_index >= len(source):
        raise IndexError(f"Octet index {index} out of range for {len(source)}-byte hash")

    value = source[byte_index]
    if index % 2 == 0:
        return value >> 4
    return value & 0xF


def get_hue(source: bytes) -> float:
    """Hue in [0, 1) from the last 4 bytes, read big-endian on every host."""
    if len(source) < _HUE_BYTES:
        raise IndexError(f"Hue needs at least {_HUE_BYTES} hash bytes, got {len(source)}")

    value = int.from_bytes(source[-_HUE_BYTES:], "big") & _HUE_MASK
    hue = value / _HUE_MASK
    # 0xFFFFFFF divides to exactly 1.0, the same wheel position as 0.0
    return hue if hue < 1.0 else 0.0
