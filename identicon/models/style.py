"""Identicon style model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from identicon.rendering.color import WHITE, Color


class LightnessRange(BaseModel):
    """Lightness interval; ``get(0)`` is the darkest and ``get(1)`` the lightest value."""

    model_config = ConfigDict(frozen=True)

    start: float = Field(ge=0.0, le=1.0)
    end: float = Field(ge=0.0, le=1.0)

    def get(self, value: float) -> float:
        return self.start + value * (self.end - self.start)


class IdenticonStyle(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    back_color: Color = WHITE
    # Fraction of the icon size left empty on each side
    padding: float = Field(default=0.08, ge=0.0, le=0.5)
    color_saturation: float = Field(default=0.5, ge=0.0, le=1.0)
    grayscale_saturation: float = Field(default=0.0, ge=0.0, le=1.0)
    color_lightness: LightnessRange = LightnessRange(start=0.4, end=0.8)
    grayscale_lightness: LightnessRange = LightnessRange(start=0.3, end=0.9)
    # Allowed hues in degrees; stored normalized to [0, 1)
    hues: tuple[float, ...] | None = None

    @field_validator("back_color", mode="before")
    @classmethod
    def _parse_back_color(cls, value: object) -> object:
        if isinstance(value, str):
            return Color.parse(value)
        return value

    @field_validator("hues")
    @classmethod
    def _normalize_hues(cls, value: tuple[float, ...] | None) -> tuple[float, ...] | None:
        if not value:
            return None
        return tuple((h / 360.0) % 1.0 for h in value)
