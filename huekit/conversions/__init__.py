"""
huekit Color Space Conversions
==============================

RGB <-> HSB (hue, saturation, brightness) conversions used by the color
model and the brightness adjusters.

Hue is expressed in degrees ``[0, 360)``; saturation and brightness are unit
floats. HSB is the same space often called HSV.

Conversion Functions
--------------------
    unit_rgb_to_hsb(r, g, b)
        Scalar RGB to HSB conversion
    hsb_to_unit_rgb(h, s, v)
        Scalar HSB to RGB conversion
    np_unit_rgb_to_hsb(r, g, b)
        Vectorized RGB to HSB conversion
    np_hsb_to_unit_rgb(h, s, v)
        Vectorized HSB to RGB conversion

Examples
--------
>>> from huekit.conversions import unit_rgb_to_hsb, hsb_to_unit_rgb
>>> unit_rgb_to_hsb(1.0, 0.5, 0.0)
(30.0, 1.0, 1.0)
>>> hsb_to_unit_rgb(30.0, 1.0, 1.0)
(1.0, 0.5, 0.0)
"""

from .hsv import (
    unit_rgb_to_hsb,
    hsb_to_unit_rgb,
    np_unit_rgb_to_hsb,
    np_hsb_to_unit_rgb,
)

__all__ = [
    'unit_rgb_to_hsb',
    'hsb_to_unit_rgb',
    'np_unit_rgb_to_hsb',
    'np_hsb_to_unit_rgb',
]
