from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..normalizers.color_normalizer import ColorInput
from ..types.color_types import Point, Size

# Top-to-bottom sweep, the usual default for axial gradient layers
DEFAULT_START_POINT: Point = (0.5, 0.0)
DEFAULT_END_POINT: Point = (0.5, 1.0)


@dataclass(frozen=True)
class GradientSpec:
    """
    Everything a gradient render needs.

    Attributes:
        colors: Ordered color stops (colors, channel tuples or hex strings).
            Copied into a tuple, so the caller's sequence is never touched.
        size: Frame (width, height) in points.
        start_point: Linear start in unit coordinates, (0, 0) is top-left.
        end_point: Linear end in unit coordinates, (1, 1) is bottom-right.
        scale: Device pixel density; the image is ``size * scale`` pixels.
        locations: Optional stop positions in ``[0, 1]``, one per color.
            None spaces the stops evenly.

    The radial renderer ignores ``start_point`` and ``end_point``.
    """

    colors: Sequence[ColorInput]
    size: Size
    start_point: Point = DEFAULT_START_POINT
    end_point: Point = DEFAULT_END_POINT
    scale: float = 1.0
    locations: Optional[Sequence[float]] = None

    def __post_init__(self) -> None:
        if isinstance(self.colors, str):
            raise TypeError("colors must be a sequence of stops, not a single string")
        object.__setattr__(self, "colors", tuple(self.colors))
        if self.locations is not None:
            object.__setattr__(self, "locations", tuple(float(x) for x in self.locations))
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")

    @property
    def pixel_size(self) -> Tuple[int, int]:
        """(width, height) of the rendered image in device pixels."""
        width, height = self.size
        return int(round(width * self.scale)), int(round(height * self.scale))

    @property
    def is_empty(self) -> bool:
        width, height = self.pixel_size
        return not self.colors or width <= 0 or height <= 0
