from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, Optional

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from ..types.format_type import FormatType, max_non_hue


class OffscreenSurface:
    """
    Float RGBA raster, transparent until drawn on.

    Only usable inside ``offscreen_surface``; the buffer is dropped when the
    block exits.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._buffer: Optional[NDArray] = np.zeros((height, width, 4), dtype=np.float32)

    @property
    def buffer(self) -> NDArray:
        if self._buffer is None:
            raise RuntimeError("surface has been released")
        return self._buffer

    @property
    def released(self) -> bool:
        return self._buffer is None

    def pixel_centers(self):
        """Return (x, y) grids of pixel-center coordinates."""
        y, x = np.indices((self.height, self.width), dtype=np.float64)
        return x + 0.5, y + 0.5

    def draw(self, pixels: NDArray) -> None:
        """Replace the buffer contents with an (height, width, 4) unit array."""
        self.buffer[...] = pixels

    def to_image(self) -> Image.Image:
        maxval = max_non_hue[FormatType.INT]
        arr = np.clip(np.round(self.buffer * maxval), 0, maxval).astype(np.uint8)
        return Image.fromarray(arr)

    def release(self) -> None:
        self._buffer = None


@contextmanager
def offscreen_surface(width: int, height: int) -> Iterator[OffscreenSurface]:
    surface = OffscreenSurface(width, height)
    try:
        yield surface
    finally:
        surface.release()
