import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..types.format_type import HUE_360


def unit_rgb_to_hsb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    HSB from unit RGB.

    Input:
        r, g, b in [0, 1]

    Output:
        h in [0, 360)
        s in [0, 1]
        v in [0, 1]   (brightness, the largest channel)
    """
    v = max(r, g, b)
    delta = v - min(r, g, b)

    if delta == 0:
        h = 0.0
    elif v == r:
        h = 60.0 * (((g - b) / delta) % 6)
    elif v == g:
        h = 60.0 * ((b - r) / delta + 2)
    else:
        h = 60.0 * ((r - g) / delta + 4)

    s = 0.0 if v == 0 else delta / v
    return h % HUE_360, s, v


def hsb_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Unit RGB from HSB using the six-sector algorithm.

    Hue is wrapped into [0, 360) first, so 360 and 0 are the same red.
    """
    h = (h % HUE_360) / 60.0
    sector = int(h) % 6
    f = h - int(h)

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def np_unit_rgb_to_hsb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: HSB from unit RGB. Returns an array with a trailing axis of 3."""
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    v = np.maximum(np.maximum(r, g), b)
    delta = v - np.minimum(np.minimum(r, g), b)
    safe_delta = np.where(delta == 0, 1.0, delta)

    h = np.where(
        v == r,
        60.0 * (((g - b) / safe_delta) % 6),
        np.where(
            v == g,
            60.0 * ((b - r) / safe_delta + 2),
            60.0 * ((r - g) / safe_delta + 4),
        ),
    )
    h = np.where(delta == 0, 0.0, h) % HUE_360
    s = np.where(v == 0, 0.0, delta / np.where(v == 0, 1.0, v))
    return np.stack([h, s, v], axis=-1)


def np_hsb_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: unit RGB from HSB. Returns an array with a trailing axis of 3."""
    h = (np.asarray(h, dtype=float) % HUE_360) / 60.0
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    sector = np.floor(h).astype(int) % 6
    f = h - np.floor(h)

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    r = np.choose(sector, [v, q, p, p, t, v])
    g = np.choose(sector, [t, v, v, q, p, p])
    b = np.choose(sector, [p, p, t, v, v, q])
    return np.stack([r, g, b], axis=-1)
