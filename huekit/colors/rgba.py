from __future__ import annotations
from typing import ClassVar, Optional, Tuple

from ..conversions import hsb_to_unit_rgb, unit_rgb_to_hsb
from ..types.color_types import ColorSpace, HSBTuple, RGBTuple
from ..types.constants import DEFAULT_ALPHA
from ..types.format_type import FormatType, max_non_hue
from .color_base import ColorBase, WithAlpha


class ColorUnitRGBA(ColorBase, WithAlpha):
    """
    Immutable RGBA color with unit float channels.

    A 3-tuple value gets an alpha of 1.0. Channels outside ``[0, 1]`` are
    kept as given; only non-finite values are rejected.

    >>> ColorUnitRGBA((1.0, 0.5, 0.0))
    ColorUnitRGBA((1.0, 0.5, 0.0, 1.0))
    """

    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    defaults: ClassVar[Tuple[float, ...]] = (DEFAULT_ALPHA,)

    @property
    def red(self) -> float:
        return self.value[0]

    @property
    def green(self) -> float:
        return self.value[1]

    @property
    def blue(self) -> float:
        return self.value[2]

    @property
    def rgb(self) -> RGBTuple:
        r, g, b, _ = self.value
        return r, g, b

    @property
    def hsb(self) -> HSBTuple:
        """Hue in degrees, saturation and brightness in ``[0, 1]``."""
        return unit_rgb_to_hsb(*self.rgb)

    @classmethod
    def from_hsb(cls, hue: float, saturation: float, brightness: float,
                 alpha: float = DEFAULT_ALPHA) -> ColorUnitRGBA:
        return cls(hsb_to_unit_rgb(hue, saturation, brightness) + (alpha,))

    @classmethod
    def from_int(cls, value: Tuple[int, ...]) -> ColorUnitRGBA:
        """Build from 0-255 channels; alpha (if present) is 0-255 as well."""
        maxval = max_non_hue[FormatType.INT]
        return cls(tuple(v / maxval for v in value))

    @classmethod
    def from_hex(cls, hex_string: str, alpha: float = DEFAULT_ALPHA) -> Optional[ColorUnitRGBA]:
        from .hex_codec import parse_hex  # local import to avoid cycles
        return parse_hex(hex_string, alpha)

    def to_int(self) -> Tuple[int, int, int, int]:
        """Round every channel to 0-255, clipping out-of-range values."""
        maxval = max_non_hue[FormatType.INT]
        r, g, b, a = (max(0, min(maxval, round(v * maxval))) for v in self.value)
        return r, g, b, a


RGBA = ColorUnitRGBA

BLACK = ColorUnitRGBA((0.0, 0.0, 0.0))
WHITE = ColorUnitRGBA((1.0, 1.0, 1.0))
CLEAR = ColorUnitRGBA((0.0, 0.0, 0.0, 0.0))
