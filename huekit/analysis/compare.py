"""Pairwise color comparisons."""
from __future__ import annotations

from ..colors.rgba import ColorUnitRGBA
from ..types.constants import (
    CONTRAST_OFFSET,
    CONTRAST_THRESHOLD,
    DISTINCT_CHANNEL_THRESHOLD,
)
from .classify import is_gray, luma


def is_distinct(color: ColorUnitRGBA, other: ColorUnitRGBA) -> bool:
    """
    Check whether two colors differ noticeably.

    Colors are distinct when any of the r, g, b deltas exceeds 0.25, except
    that two grays are never distinct, however far apart they are.
    """
    far_apart = any(
        abs(a - b) > DISTINCT_CHANNEL_THRESHOLD
        for a, b in zip(color.rgb, other.rgb)
    )
    if far_apart:
        return not (is_gray(color) and is_gray(other))
    return False


def contrast_ratio(color: ColorUnitRGBA, other: ColorUnitRGBA) -> float:
    """
    Simplified contrast ratio on NTSC luma (no gamma correction).

    Returns:
        (lighter luma + 0.05) / (darker luma + 0.05), always >= 1 for
        colors with non-negative luma.
    """
    luma_a = luma(color)
    luma_b = luma(other)
    lighter, darker = (luma_a, luma_b) if luma_a > luma_b else (luma_b, luma_a)
    return (lighter + CONTRAST_OFFSET) / (darker + CONTRAST_OFFSET)


def is_contrasting(color: ColorUnitRGBA, other: ColorUnitRGBA) -> bool:
    return contrast_ratio(color, other) > CONTRAST_THRESHOLD
