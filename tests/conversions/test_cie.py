from imagebuffer.conversions import (
    RGB_TO_XYZ,
    XYZ_TO_RGB,
    rgb_to_x,
    rgb_to_y,
    rgb_to_z,
    xyz_to_r,
    xyz_to_g,
    xyz_to_b,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
)
import numpy as np

samples_linear_rgb = [
    (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0),
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
    (0.2, 0.5, 0.8),
    (0.9, 0.1, 0.4),
]


def test_white_point():
    assert np.isclose(rgb_to_x(1.0, 1.0, 1.0), 0.9505)
    assert np.isclose(rgb_to_y(1.0, 1.0, 1.0), 1.0)
    assert np.isclose(rgb_to_z(1.0, 1.0, 1.0), 1.089)


def test_luminance_weights():
    assert np.isclose(rgb_to_y(1.0, 0.0, 0.0), 0.2126)
    assert np.isclose(rgb_to_y(0.0, 1.0, 0.0), 0.7152)
    assert np.isclose(rgb_to_y(0.0, 0.0, 1.0), 0.0722)


def test_scalar_functions_match_matrices():
    for rgb in samples_linear_rgb:
        xyz = (rgb_to_x(*rgb), rgb_to_y(*rgb), rgb_to_z(*rgb))
        assert np.allclose(xyz, RGB_TO_XYZ @ np.array(rgb))
        back = (xyz_to_r(*xyz), xyz_to_g(*xyz), xyz_to_b(*xyz))
        assert np.allclose(back, XYZ_TO_RGB @ np.array(xyz))


def test_round_trip_is_close_to_identity():
    for rgb in samples_linear_rgb:
        back = np_xyz_to_rgb(np_rgb_to_xyz(np.array(rgb)))
        assert np.allclose(back, rgb, atol=2e-3)


def test_vectorized_shapes():
    rgb = np.random.default_rng(3).random((4, 5, 3))
    xyz = np_rgb_to_xyz(rgb)
    assert xyz.shape == (4, 5, 3)
    assert np.allclose(xyz, rgb @ RGB_TO_XYZ.T)
    assert np_xyz_to_rgb(xyz).shape == (4, 5, 3)


def test_xyz_to_rgb_is_not_clipped():
    # pure X lies outside the sRGB gamut
    rgb = np_xyz_to_rgb(np.array([1.0, 0.0, 0.0]))
    assert rgb[1] < 0.0
