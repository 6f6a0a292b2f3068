"""Color theme — the five-entry palette an icon picks its shape colors from."""

from __future__ import annotations

from collections.abc import Sequence
from typing import overload

from identicon.models.style import IdenticonStyle
from identicon.rendering.color import Color

DARK_GRAY = 0
MID_COLOR = 1
LIGHT_GRAY = 2
LIGHT_COLOR = 3
DARK_COLOR = 4


class ColorTheme(Sequence[Color]):
    """Palette for one hue. Index order is fixed; the collision rule in
    :mod:`identicon.engine.selector` depends on it.
    """

    def __init__(self, hue: float, style: IdenticonStyle) -> None:
        if style.hues:
            hue = style.hues[int(0.999 * hue * len(style.hues))]
        self.hue = hue

        gray_sat = style.grayscale_saturation
        color_sat = style.color_saturation
        self._colors = (
            Color.from_hsl(hue, gray_sat, style.grayscale_lightness.get(0)),
            Color.from_hsl_compensated(hue, color_sat, style.color_lightness.get(0.5)),
            Color.from_hsl(hue, gray_sat, style.grayscale_lightness.get(1)),
            Color.from_hsl_compensated(hue, color_sat, style.color_lightness.get(1)),
            Color.from_hsl_compensated(hue, color_sat, style.color_lightness.get(0)),
        )

    @overload
    def __getitem__(self, index: int) -> Color: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Color]: ...

    def __getitem__(self, index: int | slice) -> Color | Sequence[Color]:
        return self._colors[index]

    def __len__(self) -> int:
        return len(self._colors)

    def __repr__(self) -> str:
        return f"ColorTheme(hue={self.hue:.4f}, colors=[{', '.join(map(str, self._colors))}])"
