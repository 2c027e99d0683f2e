"""
Hex color strings.

Accepted forms are ``RGB`` and ``RRGGBB``, each optionally prefixed with a
single ``#``, case-insensitive. Anything else parses to ``None``.
"""
from __future__ import annotations
import logging
import string
from typing import Optional

from ..types.constants import DEFAULT_ALPHA
from ..types.format_type import FormatType, max_non_hue
from .rgba import ColorUnitRGBA

logger = logging.getLogger(__name__)

HEX_PREFIX = "#"
SHORT_LENGTH = 3
FULL_LENGTH = 6
_HEX_DIGITS = frozenset(string.hexdigits)


def expand_shorthand(digits: str) -> str:
    """Double each character in place: ``a1f`` -> ``aa11ff``."""
    return "".join(ch * 2 for ch in digits)


def parse_hex(hex_string: str, alpha: float = DEFAULT_ALPHA) -> Optional[ColorUnitRGBA]:
    """
    Parse a hex color string.

    Args:
        hex_string: ``"a1f"``, ``"#a1f"``, ``"aa11ff"`` or ``"#aa11ff"``
        alpha: Alpha of the resulting color

    Returns:
        The color, or None if the string is empty, has the wrong length or
        contains a non-hex character.
    """
    if not isinstance(hex_string, str):
        raise TypeError(f"hex color must be a str, got {type(hex_string).__name__}")
    if not hex_string:
        logger.debug("rejected hex color: empty string")
        return None

    digits = hex_string[1:] if hex_string.startswith(HEX_PREFIX) else hex_string

    if len(digits) not in (SHORT_LENGTH, FULL_LENGTH):
        logger.debug("rejected hex color %r: length %d", hex_string, len(digits))
        return None
    # int(..., 16) alone would let through signs, "0x" and underscores
    if not _HEX_DIGITS.issuperset(digits):
        logger.debug("rejected hex color %r: non-hex digit", hex_string)
        return None

    if len(digits) == SHORT_LENGTH:
        digits = expand_shorthand(digits)

    packed = int(digits, 16)
    maxval = max_non_hue[FormatType.INT]
    red = ((packed >> 16) & 0xFF) / maxval
    green = ((packed >> 8) & 0xFF) / maxval
    blue = (packed & 0xFF) / maxval
    return ColorUnitRGBA((red, green, blue, alpha))


def to_hex(color: ColorUnitRGBA, prefix: str = HEX_PREFIX, upper: bool = False) -> str:
    """Encode the RGB channels as ``RRGGBB``; alpha is dropped."""
    r, g, b, _ = color.to_int()
    encoded = f"{r:02x}{g:02x}{b:02x}"
    return prefix + (encoded.upper() if upper else encoded)
