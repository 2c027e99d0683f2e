"""
Single-color classifiers.

The formulas come from the NTSC YUV transform::

    Y =  0.299R + 0.587G + 0.114B
    U = -0.147R - 0.289G + 0.436B
    V =  0.615R - 0.515G - 0.100B

Scalar functions take a ``ColorUnitRGBA``; the ``np_`` variants take arrays
whose last axis holds (r, g, b) or (r, g, b, a). Alpha is ignored throughout.
"""
from __future__ import annotations
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgba import ColorUnitRGBA
from ..types.constants import (
    LUMA_R, LUMA_G, LUMA_B,
    U_WEIGHTS, V_WEIGHTS,
    DARK_LUMA_THRESHOLD,
    GRAY_CHROMA_TOLERANCE,
    NEAR_WHITE_THRESHOLD,
    NEAR_BLACK_THRESHOLD,
)

_LUMA_WEIGHTS = np.array([LUMA_R, LUMA_G, LUMA_B])
_CHROMA_MATRIX = np.array([U_WEIGHTS, V_WEIGHTS]).T


def luma(color: ColorUnitRGBA) -> float:
    r, g, b = color.rgb
    return LUMA_R * r + LUMA_G * g + LUMA_B * b


def chrominance(color: ColorUnitRGBA) -> Tuple[float, float]:
    """Return the (U, V) color-difference components."""
    r, g, b = color.rgb
    u = U_WEIGHTS[0] * r + U_WEIGHTS[1] * g + U_WEIGHTS[2] * b
    v = V_WEIGHTS[0] * r + V_WEIGHTS[1] * g + V_WEIGHTS[2] * b
    return u, v


def is_dark(color: ColorUnitRGBA) -> bool:
    return luma(color) < DARK_LUMA_THRESHOLD


def is_gray(color: ColorUnitRGBA) -> bool:
    """True only for near-zero chrominance."""
    u, v = chrominance(color)
    return abs(u) <= GRAY_CHROMA_TOLERANCE and abs(v) <= GRAY_CHROMA_TOLERANCE


def is_black_or_white(color: ColorUnitRGBA) -> bool:
    rgb = color.rgb
    return (
        all(c > NEAR_WHITE_THRESHOLD for c in rgb)
        or all(c < NEAR_BLACK_THRESHOLD for c in rgb)
    )


def _rgb_channels(arr: NDArray) -> NDArray:
    arr = np.asarray(arr, dtype=float)
    if arr.shape[-1] not in (3, 4):
        raise ValueError(f"expected a trailing axis of 3 or 4 channels, got shape {arr.shape}")
    return arr[..., :3]


def np_luma(arr: NDArray) -> NDArray:
    """Vectorized luma over the last axis."""
    return _rgb_channels(arr) @ _LUMA_WEIGHTS


def np_is_dark(arr: NDArray) -> NDArray:
    return np_luma(arr) < DARK_LUMA_THRESHOLD


def np_is_gray(arr: NDArray) -> NDArray:
    uv = _rgb_channels(arr) @ _CHROMA_MATRIX
    return np.all(np.abs(uv) <= GRAY_CHROMA_TOLERANCE, axis=-1)
