"""
huekit Color Classes
====================

Immutable RGBA color values with unit float channels, plus the hex codec and
the brightness/inversion adjusters.

Usage
-----
>>> from huekit.colors import ColorUnitRGBA, parse_hex
>>> color = parse_hex("#a1f")
>>> color.to_hex()
'#aa11ff'
>>> color.is_dark
True
>>> color.lighten(0.2).value == color.value
True

Notes
-----
- Instances are frozen after ``__init__``; every transform returns a new one
- A 3-channel value gets alpha 1.0
- Channels are not clamped; non-finite channels raise ``ValueError``
- Classifier and comparator functions are bound as properties/methods by
  ``huekit.colors.color``
"""

from .rgba import ColorUnitRGBA, RGBA, BLACK, WHITE, CLEAR
from .color_base import ColorBase
from .hex_codec import parse_hex, to_hex
from .adjust import inverse, lighten, darken
from . import color  # noqa: F401  binds methods onto ColorUnitRGBA


__all__ = [
    'ColorBase',
    'ColorUnitRGBA',
    'RGBA',
    'BLACK',
    'WHITE',
    'CLEAR',
    'parse_hex',
    'to_hex',
    'inverse',
    'lighten',
    'darken',
]
