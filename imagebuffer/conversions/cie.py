"""Linear sRGB <-> CIE 1931 XYZ (D65) matrices."""
import numpy as np
from numpy import ndarray as NDArray

RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
])

XYZ_TO_RGB = np.array([
    [ 3.2406, -1.5372, -0.4986],
    [-0.9689,  1.8758,  0.0415],
    [ 0.0557, -0.2040,  1.0570],
])


def rgb_to_x(r: float, g: float, b: float) -> float:
    """Converts linear sRGB to the X component of CIE 1931."""
    return 0.4124 * r + 0.3576 * g + 0.1805 * b


def rgb_to_y(r: float, g: float, b: float) -> float:
    """Converts linear sRGB to the Y (luminance) component of CIE 1931."""
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def rgb_to_z(r: float, g: float, b: float) -> float:
    """Converts linear sRGB to the Z component of CIE 1931."""
    return 0.0193 * r + 0.1192 * g + 0.9505 * b


def xyz_to_r(x: float, y: float, z: float) -> float:
    """Converts CIE 1931 XYZ to the R component of linear sRGB."""
    return 3.2406 * x - 1.5372 * y - 0.4986 * z


def xyz_to_g(x: float, y: float, z: float) -> float:
    """Converts CIE 1931 XYZ to the G component of linear sRGB."""
    return -0.9689 * x + 1.8758 * y + 0.0415 * z


def xyz_to_b(x: float, y: float, z: float) -> float:
    """Converts CIE 1931 XYZ to the B component of linear sRGB."""
    return 0.0557 * x - 0.2040 * y + 1.0570 * z


def np_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """
    Vectorized: linear sRGB to XYZ.

    Args:
        rgb: array of shape (..., 3), linear light

    Returns:
        xyz: array of shape (..., 3), float64
    """
    rgb = np.asarray(rgb, dtype=float)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    return np.stack([rgb_to_x(r, g, b), rgb_to_y(r, g, b), rgb_to_z(r, g, b)], axis=-1)


def np_xyz_to_rgb(xyz: NDArray) -> NDArray:
    """
    Vectorized: XYZ to linear sRGB. Out-of-gamut results are not clipped.

    Args:
        xyz: array of shape (..., 3)

    Returns:
        rgb: array of shape (..., 3), float64, linear light
    """
    xyz = np.asarray(xyz, dtype=float)
    x, y, z = xyz[..., 0], xyz[..., 1], xyz[..., 2]
    return np.stack([xyz_to_r(x, y, z), xyz_to_g(x, y, z), xyz_to_b(x, y, z)], axis=-1)
