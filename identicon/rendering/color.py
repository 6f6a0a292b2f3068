"""Packed RGBA color value with HSL construction and over blending."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MASK_32 = 0xFFFFFFFF

# Bit offset of each channel inside the packed RGBA value.
_CHANNEL_SHIFTS = {"R": 24, "G": 16, "B": 8, "A": 0}

# Perceived middle lightness per hue sextant (red, yellow, green, cyan, blue,
# magenta, red again). Indexed by round(hue * 6).
_LIGHTNESS_CORRECTORS = (0.55, 0.5, 0.5, 0.46, 0.6, 0.55, 0.55)

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in the range [0, 1], got {value!r}")


def _hue_to_channel(m1: float, m2: float, h: float) -> int:
    """CSS3 hue helper, h in sextants. Returns a channel value in [0, 255]."""
    if h < 0:
        h += 6
    elif h > 6:
        h -= 6

    if h < 1:
        level = m1 + (m2 - m1) * h
    elif h < 3:
        level = m2
    elif h < 4:
        level = m1 + (m2 - m1) * (4 - h)
    else:
        level = m1
    return int(255 * level)


@dataclass(frozen=True)
class Color:
    """A 24-bit color with an 8-bit alpha channel, stored as one RGBA integer.

    Use the ``from_*`` factories or :meth:`parse` rather than the constructor.
    """

    value: int = 0

    # -- construction -----------------------------------------------------

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> Color:
        """Pack four channels. Channels are not range checked: anything outside
        [0, 255] is truncated by 32-bit packing exactly as an unsigned shift would.
        """
        return cls(((r << 24) | (g << 16) | (b << 8) | a) & _MASK_32)

    @classmethod
    def from_rgba(cls, rgba: int) -> Color:
        """Wrap an already packed 0xRRGGBBAA value."""
        return cls(rgba & _MASK_32)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> Color:
        """Opaque color from HSL parameters, each in [0, 1].

        Follows http://www.w3.org/TR/2011/REC-css3-color-20110607/#hsl-color
        """
        _check_unit("hue", hue)
        _check_unit("saturation", saturation)
        _check_unit("lightness", lightness)

        if saturation == 0:
            gray = round(lightness * 255)
            return cls.from_argb(255, gray, gray, gray)

        if lightness <= 0.5:
            m2 = lightness * (saturation + 1)
        else:
            m2 = lightness + saturation - lightness * saturation
        m1 = lightness * 2 - m2

        return cls.from_argb(
            255,
            _hue_to_channel(m1, m2, hue * 6 + 2),
            _hue_to_channel(m1, m2, hue * 6),
            _hue_to_channel(m1, m2, hue * 6 - 2),
        )

    @classmethod
    def from_hsl_compensated(cls, hue: float, saturation: float, lightness: float) -> Color:
        """Like :meth:`from_hsl`, with lightness adjusted to the perceived
        middle lightness of the hue, so yellow and blue look equally bright.
        """
        _check_unit("hue", hue)
        _check_unit("lightness", lightness)

        corrector = _LIGHTNESS_CORRECTORS[int(hue * 6 + 0.5)]
        if lightness < 0.5:
            lightness = lightness * corrector * 2
        else:
            lightness = corrector + (lightness - 0.5) * (1 - corrector) * 2

        return cls.from_hsl(hue, saturation, min(lightness, 1.0))

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``."""
        m = _HEX_RE.match(text.strip())
        if not m:
            raise ValueError(f"Invalid color: {text!r}")
        digits = m.group(1)
        if len(digits) <= 4:
            digits = "".join(c * 2 for c in digits)
        if len(digits) == 6:
            digits += "ff"
        return cls(int(digits, 16))

    # -- channels ---------------------------------------------------------

    @property
    def r(self) -> int:
        return self.value >> 24

    @property
    def g(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def b(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def a(self) -> int:
        """Alpha, 0 is fully transparent."""
        return self.value & 0xFF

    def to_rgba(self) -> int:
        return self.value

    # -- blending ---------------------------------------------------------

    def over(self, background: Color) -> Color:
        """Blend this color on top of ``background`` (Porter-Duff over).

        Integer arithmetic only, so results are identical on every platform.
        """
        fore_a = self.a
        if fore_a < 1:
            return background
        if fore_a > 254 or background.a < 1:
            return self

        # https://en.wikipedia.org/wiki/Alpha_compositing#Description
        fore_pa = fore_a * 255
        back_pa = background.a * (255 - fore_a)
        alpha = fore_pa + back_pa

        r = (fore_pa * self.r + back_pa * background.r) // alpha
        g = (fore_pa * self.g + back_pa * background.g) // alpha
        b = (fore_pa * self.b + back_pa * background.b) // alpha

        return Color.from_argb(alpha // 255, r, g, b)

    # -- formatting -------------------------------------------------------

    def format(self, template: str) -> str:
        """Render ``template`` with channel placeholders.

        ``R G B A`` give decimal values. A doubled letter (``RR``, ``gg``, ...)
        gives two hex digits in the case of the letter. A single lowercase
        letter is not a placeholder and is copied as is, like any other text.
        """
        out: list[str] = []
        i = 0
        n = len(template)

        while i < n:
            ch = template[i]
            shift = _CHANNEL_SHIFTS.get(ch.upper()) if ch in "RGBArgba" else None
            if shift is None:
                out.append(ch)
                i += 1
                continue

            channel = (self.value >> shift) & 0xFF
            if i + 1 < n and template[i + 1] == ch:
                out.append(f"{channel:02X}" if ch.isupper() else f"{channel:02x}")
                i += 2
            elif ch.isupper():
                out.append(str(channel))
                i += 1
            else:
                out.append(ch)
                i += 1

        return "".join(out)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return self.format(format_spec)

    def __str__(self) -> str:
        return f"#{self.value:08x}"


TRANSPARENT = Color.from_rgba(0x00000000)
WHITE = Color.from_rgba(0xFFFFFFFF)
