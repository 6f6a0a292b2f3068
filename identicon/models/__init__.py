from identicon.models.style import IdenticonStyle, LightnessRange

__all__ = ["IdenticonStyle", "LightnessRange"]
