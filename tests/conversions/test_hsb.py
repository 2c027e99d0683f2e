import numpy as np

from huekit.conversions import (
    unit_rgb_to_hsb,
    hsb_to_unit_rgb,
    np_unit_rgb_to_hsb,
    np_hsb_to_unit_rgb,
)

samples_rgb_hsb = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (0.0, 1.0, 1.0): (180.0, 1.0, 1.0),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (0.2, 0.4, 0.8): (220.0, 0.75, 0.8),
}


def test_unit_rgb_to_hsb():
    for rgb, (h_exp, s_exp, v_exp) in samples_rgb_hsb.items():
        h, s, v = unit_rgb_to_hsb(*rgb)
        assert abs(h - h_exp) < 1e-9
        assert abs(s - s_exp) < 1e-9
        assert abs(v - v_exp) < 1e-9


def test_hsb_to_unit_rgb():
    for (r_exp, g_exp, b_exp), hsb in samples_rgb_hsb.items():
        r, g, b = hsb_to_unit_rgb(*hsb)
        assert abs(r - r_exp) < 1e-9
        assert abs(g - g_exp) < 1e-9
        assert abs(b - b_exp) < 1e-9


def test_hue_wraps():
    assert np.allclose(hsb_to_unit_rgb(360.0, 1.0, 1.0), (1.0, 0.0, 0.0))
    assert np.allclose(hsb_to_unit_rgb(-120.0, 1.0, 1.0), (0.0, 0.0, 1.0))


def test_np_unit_rgb_to_hsb():
    rgb = np.array(list(samples_rgb_hsb.keys()))
    expected = np.array(list(samples_rgb_hsb.values()))
    result = np_unit_rgb_to_hsb(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert result.shape == (len(samples_rgb_hsb), 3)
    assert np.allclose(result, expected)


def test_np_hsb_to_unit_rgb():
    hsb = np.array(list(samples_rgb_hsb.values()))
    expected = np.array(list(samples_rgb_hsb.keys()))
    result = np_hsb_to_unit_rgb(hsb[..., 0], hsb[..., 1], hsb[..., 2])
    assert np.allclose(result, expected)
