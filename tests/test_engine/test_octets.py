"""Tests for nibble and hue extraction."""

import pytest

from identicon.engine.octets import get_hue, get_octet
from tests.conftest import SAMPLE_HASH, digest_hashes


def test_octet_nibble_order():
    buf = bytes([0xAB, 0xCD])
    assert [get_octet(buf, i) for i in range(4)] == [0xA, 0xB, 0xC, 0xD]


def test_octet_exhaustive_small_buffer():
    for value in range(256):
        buf = bytes([0x00, value])
        assert get_octet(buf, 2) == value >> 4
        assert get_octet(buf, 3) == value & 0x0F


def test_octet_sample_hash():
    assert [get_octet(SAMPLE_HASH, i) for i in range(11)] == list(range(11))


def test_octet_out_of_range():
    with pytest.raises(IndexError):
        get_octet(bytes(5), 10)
    with pytest.raises(IndexError):
        get_octet(bytes(5), -1)


def test_hue_sample_hash():
    assert get_hue(SAMPLE_HASH) == 0x9ABCDEF / 0xFFFFFFF


def test_hue_uses_last_four_bytes_only():
    a = bytes.fromhex("00000000" + "12345678")
    b = bytes.fromhex("ffffffffffff" + "12345678")
    assert get_hue(a) == get_hue(b)


def test_hue_masks_high_nibble():
    assert get_hue(bytes.fromhex("f2345678")) == get_hue(bytes.fromhex("02345678"))


def test_hue_bounds():
    assert get_hue(bytes(4)) == 0.0
    assert get_hue(bytes.fromhex("0fffffff")) == 0.0
    assert get_hue(bytes.fromhex("0ffffffe")) < 1.0
    for h in digest_hashes(200):
        assert 0.0 <= get_hue(h) < 1.0


def test_hue_too_short():
    with pytest.raises(IndexError):
        get_hue(b"\x01\x02\x03")
