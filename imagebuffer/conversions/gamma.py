import numpy as np
from numpy import ndarray as NDArray

from ..types.primitive import DTypeLike, WORKING_DTYPE, as_primitive, is_integer
from .rescale import np_rescale

SRGB_EXPAND_THRESHOLD = 0.04045
SRGB_COMPRESS_THRESHOLD = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_GAMMA = 2.4


def np_srgb_expand_gamma(c: NDArray, dtype: DTypeLike) -> NDArray:
    """
    Vectorized: sRGB gamma expansion (encoded -> linear light).

    Args:
        c: array-like of discretized channel values stored as ``dtype``
        dtype: storage type of ``c``; values are first rescaled to [0, 1]

    Returns:
        Linear-light values as ``WORKING_DTYPE``.
    """
    c = np_rescale(c, dtype, WORKING_DTYPE)
    # maximum() keeps the unused branch away from negative bases
    curve = ((np.maximum(c, SRGB_EXPAND_THRESHOLD) + SRGB_OFFSET) / (1.0 + SRGB_OFFSET)) ** SRGB_GAMMA
    return np.where(c < SRGB_EXPAND_THRESHOLD, c / SRGB_LINEAR_SLOPE, curve)


def np_srgb_compress_gamma(c: NDArray, dtype: DTypeLike) -> NDArray:
    """
    Vectorized: sRGB gamma compression (linear light -> encoded).

    Args:
        c: array-like of linear values scaled to 1.0
        dtype: storage type of the result

    Returns:
        Encoded values as ``dtype``, rounded and clamped for integer types.
    """
    c = np.asarray(c, dtype=WORKING_DTYPE)
    curve = (1.0 + SRGB_OFFSET) * np.maximum(c, SRGB_COMPRESS_THRESHOLD) ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET
    return np_rescale(np.where(c < SRGB_COMPRESS_THRESHOLD, c * SRGB_LINEAR_SLOPE, curve), WORKING_DTYPE, dtype)


def srgb_expand_gamma(c, dtype: DTypeLike) -> np.float64:
    """Gamma expansion as defined for sRGB, for a single value stored as ``dtype``."""
    return np_srgb_expand_gamma(c, dtype)[()]


def srgb_compress_gamma(c: float, dtype: DTypeLike) -> np.generic:
    """Gamma compression as defined for sRGB; ``c`` is scaled to 1.0."""
    return np_srgb_compress_gamma(c, dtype)[()]


# Gamma-aware dtype changes. Integer storage is gamma encoded, float storage is linear.

def np_linearize(values: NDArray, dtype: DTypeLike) -> NDArray:
    """Linear-light ``WORKING_DTYPE`` values from encoded integers or linear floats."""
    if is_integer(dtype):
        return np_srgb_expand_gamma(values, dtype)
    return np.asarray(values, dtype=as_primitive(dtype)).astype(WORKING_DTYPE)


def np_encode(linear: NDArray, dtype: DTypeLike) -> NDArray:
    """Store linear-light values as ``dtype`` (compressing for integer types)."""
    dtype = as_primitive(dtype)
    if is_integer(dtype):
        return np_srgb_compress_gamma(linear, dtype)
    return np.asarray(linear).astype(dtype)


def np_recode(values: NDArray, from_dtype: DTypeLike, to_dtype: DTypeLike) -> NDArray:
    """
    Change the storage type of gamma-encoded/linear values.

    int -> int keeps the encoding and only rescales; every other pair goes
    through linear light.
    """
    if is_integer(from_dtype) and is_integer(to_dtype):
        return np_rescale(values, from_dtype, to_dtype)
    return np_encode(np_linearize(values, from_dtype), to_dtype)
