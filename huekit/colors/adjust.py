from __future__ import annotations

from boundednumbers import clamp

from .rgba import ColorUnitRGBA


def inverse(color: ColorUnitRGBA) -> ColorUnitRGBA:
    """Invert r, g and b; alpha is kept."""
    r, g, b, a = color.value
    return ColorUnitRGBA((1.0 - r, 1.0 - g, 1.0 - b, a))


def lighten(color: ColorUnitRGBA, percentage: float) -> ColorUnitRGBA:
    """
    Raise the HSB brightness by ``percentage`` (a unit amount, 0.1 = 10%).

    Brightness is clamped to ``[0, 1]``; hue, saturation and alpha are kept.
    A change that leaves brightness where it was returns an equal color
    instead of a round-tripped one. Out-of-range channels can still move:
    a brightness above 1 is clamped down even for ``percentage == 0``.
    """
    hue, saturation, brightness = color.hsb
    new_brightness = float(clamp(brightness + percentage, 0.0, 1.0))
    if new_brightness == brightness:
        return ColorUnitRGBA(color.value)
    return ColorUnitRGBA.from_hsb(hue, saturation, new_brightness, color.alpha)


def darken(color: ColorUnitRGBA, percentage: float) -> ColorUnitRGBA:
    return lighten(color, -percentage)
