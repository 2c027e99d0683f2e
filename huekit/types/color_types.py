from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
RGBTuple = Tuple[float, float, float]
RGBATuple = Tuple[float, float, float, float]
HSBTuple = Tuple[float, float, float]
ColorElement = Union[RGBTuple, RGBATuple]
ColorSpace = Literal["rgba"]
Point = Tuple[float, float]
Size = Tuple[float, float]
