"""Binds the analysis and adjustment functions onto ``ColorUnitRGBA``."""
from __future__ import annotations

from ..analysis import (
    is_black_or_white,
    is_contrasting,
    is_dark,
    is_distinct,
    is_gray,
    luma,
)
from .adjust import darken, inverse, lighten
from .hex_codec import to_hex
from .rgba import ColorUnitRGBA


def color_to_hex(self: ColorUnitRGBA, prefix: str = "#", upper: bool = False) -> str:
    return to_hex(self, prefix=prefix, upper=upper)


def color_inverse(self: ColorUnitRGBA) -> ColorUnitRGBA:
    return inverse(self)


ColorUnitRGBA.is_dark = property(is_dark)  # type: ignore[assignment]
ColorUnitRGBA.is_gray = property(is_gray)  # type: ignore[assignment]
ColorUnitRGBA.is_black_or_white = property(is_black_or_white)  # type: ignore[assignment]
ColorUnitRGBA.luma = property(luma)  # type: ignore[attr-defined]
ColorUnitRGBA.inverse = property(color_inverse)  # type: ignore[attr-defined]
ColorUnitRGBA.is_distinct = is_distinct  # type: ignore[assignment]
ColorUnitRGBA.is_contrasting = is_contrasting  # type: ignore[assignment]
ColorUnitRGBA.lighten = lighten  # type: ignore[attr-defined]
ColorUnitRGBA.darken = darken  # type: ignore[attr-defined]
ColorUnitRGBA.to_hex = color_to_hex  # type: ignore[attr-defined]
