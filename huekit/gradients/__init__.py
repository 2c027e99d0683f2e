"""
Gradient Rendering
==================

Linear and radial gradient fills rendered into Pillow RGBA images.

>>> from huekit.gradients import GradientSpec, linear_gradient
>>> spec = GradientSpec(colors=["#f00", "#00f"], size=(64, 32),
...                     start_point=(0.0, 0.5), end_point=(1.0, 0.5))
>>> linear_gradient(spec).size
(64, 32)
"""

from .gradient_spec import GradientSpec, DEFAULT_START_POINT, DEFAULT_END_POINT
from .linear import linear_gradient
from .radial import radial_gradient
from .surface import OffscreenSurface, offscreen_surface

__all__ = [
    "GradientSpec",
    "DEFAULT_START_POINT",
    "DEFAULT_END_POINT",
    "linear_gradient",
    "radial_gradient",
    "OffscreenSurface",
    "offscreen_surface",
]
