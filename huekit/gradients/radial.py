from __future__ import annotations
import logging
from typing import Optional

import numpy as np
from PIL import Image

from .gradient_spec import GradientSpec
from .stops import resolve_stops, sample_stops
from .surface import offscreen_surface

logger = logging.getLogger(__name__)


def radial_gradient(spec: GradientSpec) -> Optional[Image.Image]:
    """
    Render a radial gradient centered on the frame.

    The radius is half the larger frame side. Stops sweep outward from the
    center, and pixels beyond the radius keep the last stop's color instead
    of staying transparent.

    Returns:
        RGBA image of ``spec.pixel_size``, or None for no colors or an empty
        frame.
    """
    if spec.is_empty:
        logger.debug("radial gradient skipped: %d colors, pixel size %s",
                     len(spec.colors), spec.pixel_size)
        return None

    positions, channels = resolve_stops(spec.colors, spec.locations)
    width, height = spec.pixel_size
    cx, cy = width / 2.0, height / 2.0
    radius = max(width, height) / 2.0

    with offscreen_surface(width, height) as surface:
        x, y = surface.pixel_centers()
        distance = np.sqrt((x - cx) ** 2 + (y - cy) ** 2)

        # sample_stops holds the last stop past 1.0
        surface.draw(sample_stops(distance / radius, positions, channels))
        return surface.to_image()
