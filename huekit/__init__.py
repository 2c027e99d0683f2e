"""huekit: color analysis, adjustment and gradient utilities."""

from .colors.rgba import ColorUnitRGBA, RGBA, BLACK, WHITE, CLEAR
from .colors.color_base import ColorBase
from .colors.hex_codec import parse_hex, to_hex
from .colors.adjust import inverse, lighten, darken
from .colors import color as _color  # noqa: F401  binds predicates onto ColorUnitRGBA

from .analysis import (
    luma,
    chrominance,
    is_dark,
    is_gray,
    is_black_or_white,
    np_luma,
    np_is_dark,
    np_is_gray,
    is_distinct,
    contrast_ratio,
    is_contrasting,
)
from .conversions import (
    unit_rgb_to_hsb,
    hsb_to_unit_rgb,
    np_unit_rgb_to_hsb,
    np_hsb_to_unit_rgb,
)
from .gradients import GradientSpec, linear_gradient, radial_gradient
from .types.format_type import FormatType

__version__ = "1.0.0"

__all__ = [
    # core color type
    "ColorBase",
    "ColorUnitRGBA",
    "RGBA",
    "BLACK",
    "WHITE",
    "CLEAR",
    # hex codec
    "parse_hex",
    "to_hex",
    # adjusters
    "inverse",
    "lighten",
    "darken",
    # classifiers and comparators
    "luma",
    "chrominance",
    "is_dark",
    "is_gray",
    "is_black_or_white",
    "np_luma",
    "np_is_dark",
    "np_is_gray",
    "is_distinct",
    "contrast_ratio",
    "is_contrasting",
    # conversions
    "unit_rgb_to_hsb",
    "hsb_to_unit_rgb",
    "np_unit_rgb_to_hsb",
    "np_hsb_to_unit_rgb",
    # gradients
    "GradientSpec",
    "linear_gradient",
    "radial_gradient",
    "FormatType",
    "__version__",
]
