"""Perceptual predicates over single colors and color pairs."""

from .classify import (
    luma,
    chrominance,
    is_dark,
    is_gray,
    is_black_or_white,
    np_luma,
    np_is_dark,
    np_is_gray,
)
from .compare import is_distinct, contrast_ratio, is_contrasting

__all__ = [
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
]
