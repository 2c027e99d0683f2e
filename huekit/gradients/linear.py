from __future__ import annotations
import logging
import warnings
from typing import Optional

import numpy as np
from PIL import Image

from .gradient_spec import GradientSpec
from .stops import resolve_stops, sample_stops
from .surface import offscreen_surface

logger = logging.getLogger(__name__)


def linear_gradient(spec: GradientSpec) -> Optional[Image.Image]:
    """
    Render an axial gradient from ``spec.start_point`` to ``spec.end_point``.

    Both points are unit coordinates scaled onto the pixel frame. Every pixel
    center is projected onto the start->end axis; pixels before the start or
    past the end take the first or last stop.

    Returns:
        RGBA image of ``spec.pixel_size``, or None for no colors or an empty
        frame.
    """
    if spec.is_empty:
        logger.debug("linear gradient skipped: %d colors, pixel size %s",
                     len(spec.colors), spec.pixel_size)
        return None

    positions, channels = resolve_stops(spec.colors, spec.locations)
    width, height = spec.pixel_size

    with offscreen_surface(width, height) as surface:
        x, y = surface.pixel_centers()

        sx, sy = spec.start_point[0] * width, spec.start_point[1] * height
        ex, ey = spec.end_point[0] * width, spec.end_point[1] * height
        ax, ay = ex - sx, ey - sy
        axis_length_sq = ax * ax + ay * ay

        if axis_length_sq == 0:
            warnings.warn(
                "linear gradient start and end points coincide; filling with the first stop",
                RuntimeWarning,
                stacklevel=2,
            )
            t = np.zeros_like(x)
        else:
            t = ((x - sx) * ax + (y - sy) * ay) / axis_length_sq

        surface.draw(sample_stops(t, positions, channels))
        return surface.to_image()
