from __future__ import annotations
from typing import Any, Callable, ClassVar, Sequence, Tuple
import math

import numpy as np
from numpy import ndarray

from ..types.color_types import ColorSpace, ScalarVector
from ..types.format_type import FormatType, format_classes


def channel_values(value: Any) -> Tuple[Any, ...]:
    """
    Flatten a color input into a tuple of raw channels.

    Accepts another color, a 1-D numpy array or a tuple/list. A bare number
    is a single channel. Strings are rejected: hex text goes through
    ``parse_hex``.
    """
    if isinstance(value, ColorBase):
        return value.value
    if isinstance(value, ndarray):
        if value.ndim != 1:
            raise ValueError(
                f"expected a 1-dimensional channel array, got shape {value.shape}"
            )
        return tuple(value.tolist())
    if isinstance(value, (str, bytes)):
        raise TypeError("hex strings must be parsed with parse_hex")
    if isinstance(value, Sequence):
        return tuple(value)
    return (value,)


class ColorBase:
    __slots__ = ('_value',)  # no other attributes, instances stay immutable

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace]
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    # Channels a shorter input is padded with, e.g. alpha for an RGB triple
    defaults:   ClassVar[ScalarVector] = ()
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    is_dark: bool
    is_gray: bool
    is_black_or_white: bool
    is_distinct: Callable[[ColorBase, ColorBase], bool]
    is_contrasting: Callable[[ColorBase, ColorBase], bool]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any) -> None:
        raw = channel_values(value)
        missing = self.num_channels - len(raw)
        if not raw or missing < 0 or missing > len(self.defaults):
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels, got {len(raw)}"
            )

        # type enforcement
        cast_to = format_classes[self.format_type]
        channels = tuple(cast_to(v) for v in raw)
        if missing:
            channels += tuple(self.defaults[-missing:])

        for v in channels:
            if not math.isfinite(v):
                raise ValueError(f"{self.mode} channels must be finite, got {channels!r}")

        # safe assignment; __setattr__ still allows it during init
        self._value = channels

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    def as_array(self) -> ndarray:
        """Return the channels as a fresh float array."""
        return np.array(self._value, dtype=float)

    def isclose(self, other: ColorBase, tol: float = 1e-9) -> bool:
        """Channel-wise comparison within an absolute tolerance."""
        if not isinstance(other, ColorBase):
            return False
        return all(abs(a - b) <= tol for a, b in zip(self._value, other.value))

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other.value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __iter__(self):
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class WithAlpha:
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    mode: ClassVar[ColorSpace]
    value: ScalarVector

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> float:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: float):
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value. Not clamped.

        Returns:
            New color instance with updated alpha.
        """
        values = self.value
        return self.__class__(values[:-1] + (alpha,))  # type: ignore
