from __future__ import annotations
from typing import Optional, Sequence, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..normalizers.color_normalizer import ColorInput, normalize_color_input


def evenly_spaced(count: int) -> NDArray:
    """Stop positions 0..1 for ``count`` stops; a single stop sits at 0."""
    if count == 1:
        return np.zeros(1)
    return np.linspace(0.0, 1.0, count)


def resolve_stops(
    colors: Sequence[ColorInput],
    locations: Optional[Sequence[float]] = None,
) -> Tuple[NDArray, NDArray]:
    """
    Normalize gradient stops.

    Returns:
        (positions, channels) with shapes (n,) and (n, 4)
    """
    channels = np.array([normalize_color_input(c) for c in colors], dtype=float)

    if locations is None:
        return evenly_spaced(len(channels)), channels

    positions = np.asarray(locations, dtype=float)
    if positions.shape != (len(channels),):
        raise ValueError(
            f"locations must have one entry per color ({len(channels)}), got {len(positions)}"
        )
    if np.any(np.diff(positions) < 0):
        raise ValueError("locations must be non-decreasing")
    return positions, channels


def sample_stops(t: NDArray, positions: NDArray, channels: NDArray) -> NDArray:
    """
    Interpolate stop colors at gradient parameters ``t``.

    Parameters before the first stop take its color and those after the last
    stop take the last color.

    Returns:
        Array of shape ``t.shape + (4,)``
    """
    return np.stack(
        [np.interp(t, positions, channels[:, ch]) for ch in range(channels.shape[1])],
        axis=-1,
    )
