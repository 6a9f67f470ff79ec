import numpy as np
from numpy import ndarray as NDArray

from ..types.primitive import DTypeLike
from .cie import rgb_to_y
from .gamma import np_encode, np_linearize, np_recode


def np_srgb_to_luminance(rgb: NDArray, from_dtype: DTypeLike, to_dtype: DTypeLike) -> NDArray:
    """
    Vectorized: RGB to a single luminance channel.

    The RGB values are taken to linear light, weighted into CIE Y and stored
    back as ``to_dtype`` (gamma compressed for integer types). A neutral gray
    keeps its value since the weights sum to one.

    Args:
        rgb: array of shape (..., 3) stored as ``from_dtype``
        from_dtype: storage type of ``rgb``
        to_dtype: storage type of the result

    Returns:
        gray: array of shape (..., 1) of ``to_dtype``
    """
    linear = np_linearize(rgb, from_dtype)
    y = rgb_to_y(linear[..., 0], linear[..., 1], linear[..., 2])
    return np_encode(y, to_dtype)[..., np.newaxis]


def np_gray_to_rgb(gray: NDArray, from_dtype: DTypeLike, to_dtype: DTypeLike) -> NDArray:
    """
    Vectorized: replicate a luminance channel into R, G and B.

    This is lossy in the sense that it cannot recover the original hue; it is
    the exact inverse of ``np_srgb_to_luminance`` only for neutral grays.

    Args:
        gray: array of shape (..., 1) stored as ``from_dtype``

    Returns:
        rgb: array of shape (..., 3) of ``to_dtype``
    """
    luma = np_recode(gray, from_dtype, to_dtype)
    return np.repeat(luma, 3, axis=-1)
