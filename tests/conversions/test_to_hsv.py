from chromalite.conversions.to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
import numpy as np
import pytest
from tests.samples import samples_rgb_hsv, unit


def test_unit_rgb_to_hsv():
    for rgb, (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = unit_rgb_to_hsv(*unit(rgb))

        assert h_out == pytest.approx(h_exp, abs=1e-9)
        assert s_out == pytest.approx(s_exp, abs=1e-9)
        assert v_out == pytest.approx(v_exp, abs=1e-9)


def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array([unit(rgb) for rgb in samples_rgb_hsv])
    expected = np.array(list(samples_rgb_hsv.values()))
    result = np_unit_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert np.allclose(result, expected, atol=1e-9)


def test_green_is_a_third_of_a_turn():
    assert unit_rgb_to_hsv(0.0, 1.0, 0.0) == pytest.approx((1 / 3, 1.0, 1.0))


def test_black_and_gray_are_achromatic():
    assert unit_rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    h, s, v = unit_rgb_to_hsv(0.5, 0.5, 0.5)
    assert (h, s) == (0.0, 0.0)
    assert v == 0.5


def test_numpy_keeps_leading_shape():
    rgb = np.zeros((2, 4, 3))
    rgb[0, :, 0] = 1.0
    result = np_unit_rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2])

    assert result.shape == (2, 4, 3)
    assert np.allclose(result[0], [0.0, 1.0, 1.0])
    assert np.allclose(result[1], [0.0, 0.0, 0.0])
