from typing import Union

import numpy as np

from ..colors import ColorBase, ColorUnitRGBA, parse_hex
from ..types.color_types import ColorElement, RGBATuple


ColorInput = Union[ColorElement, ColorBase, np.ndarray, str]


def validate_and_return_1d_array(arr: np.ndarray) -> np.ndarray:
    if arr.ndim != 1:
        raise ValueError("Input array must be 1-dimensional.")
    return arr


def normalize_color_input(color_input: ColorInput) -> RGBATuple:  # type: ignore
    """Turn any accepted color input into an (r, g, b, a) unit tuple."""
    if isinstance(color_input, ColorUnitRGBA):
        return color_input.value  # type: ignore[return-value]
    elif isinstance(color_input, str):
        parsed = parse_hex(color_input)
        if parsed is None:
            raise ValueError(f"Invalid hex color {color_input!r}.")
        return parsed.value  # type: ignore[return-value]
    elif isinstance(color_input, np.ndarray):
        return ColorUnitRGBA(validate_and_return_1d_array(color_input)).value  # type: ignore[return-value]
    elif isinstance(color_input, (tuple, list)):
        return ColorUnitRGBA(tuple(color_input)).value  # type: ignore[return-value]
    else:
        raise TypeError("Unsupported color input type.")
