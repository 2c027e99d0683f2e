import pytest

from huekit import ColorUnitRGBA


@pytest.fixture
def black():
    return ColorUnitRGBA((0.0, 0.0, 0.0))


@pytest.fixture
def white():
    return ColorUnitRGBA((1.0, 1.0, 1.0))


@pytest.fixture
def red():
    return ColorUnitRGBA((1.0, 0.0, 0.0))


@pytest.fixture
def mid_gray():
    return ColorUnitRGBA((0.5, 0.5, 0.5))
