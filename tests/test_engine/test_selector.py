"""Tests for shape selection and the color collision rule."""

import pytest

from identicon.engine.categories import DEFAULT_CATEGORIES, ShapeCategory
from identicon.engine.config import GeneratorConfig
from identicon.engine.selector import ShapeSelector
from identicon.shapes import center, outer
from tests.conftest import PALETTE, SAMPLE_HASH, digest_hashes, hash_with_colors


def _indices(hash: bytes) -> list[int]:
    return [s.color_index for s in ShapeSelector().select(hash, PALETTE)]


def test_default_table_order():
    assert [c.name for c in DEFAULT_CATEGORIES] == ["sides", "corners", "center"]
    assert [len(c.positions) for c in DEFAULT_CATEGORIES] == [8, 4, 4]


def test_sample_hash_resolution():
    shapes = list(ShapeSelector().select(SAMPLE_HASH, PALETTE))
    assert len(shapes) == 3
    # octets 8, 9, 10 = 8, 9, 10 -> 3, 4, 0; 0 clashes with 4
    assert [s.color_index for s in shapes] == [3, 4, 1]
    assert [s.color for s in shapes] == [PALETTE[3], PALETTE[4], PALETTE[1]]
    assert [s.shape for s in shapes] == [outer.rhombus, outer.triangle, center.narrow_triangle]
    assert [s.start_rotation for s in shapes] == [3, 1, 0]


def test_positions_shared_with_category():
    shapes = list(ShapeSelector().select(SAMPLE_HASH, PALETTE))
    for shape, category in zip(shapes, DEFAULT_CATEGORIES):
        assert shape.positions is category.positions


@pytest.mark.parametrize(
    "octets, expected",
    [
        ((0, 4, 3), [0, 1, 3]),
        ((2, 3, 4), [2, 1, 4]),
        ((3, 2, 0), [3, 1, 0]),
        ((4, 0, 2), [4, 1, 2]),
        # fallback index counts for later categories: 4 still clashes with 0
        ((0, 4, 4), [0, 1, 1]),
        # octets wrap modulo palette size: 5 -> 0, 9 -> 4
        ((5, 9, 1), [0, 1, 1]),
        # repeating the same index is allowed
        ((0, 0, 0), [0, 0, 0]),
        ((1, 1, 1), [1, 1, 1]),
    ],
)
def test_collision_rule(octets, expected):
    assert _indices(hash_with_colors(*octets)) == expected


def test_collision_invariant_over_many_hashes():
    for h in digest_hashes(500):
        chosen = set(_indices(h))
        assert not {0, 4} <= chosen
        assert not {2, 3} <= chosen
        assert all(0 <= i < len(PALETTE) for i in chosen)


def test_start_rotation_is_quarter_turns():
    buf = bytearray(16)
    buf[1] = 0x0F  # octet 3 (sides rotation) = 15
    buf[2] = 0x06  # octet 5 (corners rotation) = 6
    shapes = list(ShapeSelector().select(bytes(buf), PALETTE))
    assert [s.start_rotation for s in shapes] == [3, 2, 0]


def _draw_nothing(g, cell, index):
    pass


def test_injected_categories():
    categories = [
        ShapeCategory("a", color_index=0, shape_index=1, rotation_index=None, shapes=(_draw_nothing,), positions=((0, 0),)),
        ShapeCategory("b", color_index=1, shape_index=0, rotation_index=2, shapes=(_draw_nothing,), positions=((1, 1),)),
    ]
    selector = ShapeSelector(categories)
    # octet 0 = 0, octet 1 = 4
    shapes = list(selector.select(bytes([0x04, 0x20]), PALETTE))
    assert [s.color_index for s in shapes] == [0, 1]
    assert [s.start_rotation for s in shapes] == [0, 2]


def test_custom_conflict_pairs():
    config = GeneratorConfig(conflicting_colors=((1, 2),), fallback_color=0)
    selector = ShapeSelector(config=config)
    indices = [s.color_index for s in selector.select(hash_with_colors(1, 2, 4), PALETTE)]
    assert indices == [1, 0, 4]


def test_short_hash_fails():
    with pytest.raises(IndexError):
        list(ShapeSelector().select(bytes(5), PALETTE))
