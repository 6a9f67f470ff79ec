from typing import Union
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from ..types.primitive import DTypeLike, WORKING_DTYPE, as_primitive, channel_max, is_integer

np_clamp = bound_type_to_np_function[BoundType.CLAMP]


def saturate_cast(x: NDArray, dtype: DTypeLike) -> NDArray:
    """
    Cast already-rounded floats into the integer ``dtype``, clamping to ``[0, max]``.

    NaN maps to 0. Values at or above the maximum are written as the exact
    integer maximum, since ``float(max)`` of a 64-bit type is not representable.
    """
    dtype = as_primitive(dtype)
    top = channel_max(dtype)
    x = np_clamp(np.nan_to_num(np.asarray(x, dtype=WORKING_DTYPE), nan=0.0), 0.0, float(top))
    saturated = x >= float(top)
    out = np.where(saturated, 0.0, x).astype(dtype)
    return np.where(saturated, dtype.type(top), out).astype(dtype, copy=False)


def np_rescale(a: Union[NDArray, float, int], from_dtype: DTypeLike, to_dtype: DTypeLike) -> NDArray:
    """
    Vectorized: convert channel values between storage types, preserving relative intensity.

    Integer targets are scaled, rounded to nearest and clamped into range.
    Float targets are divided by the source's full intensity.

    Args:
        a: array-like or scalar of channel values stored as ``from_dtype``
        from_dtype: storage type of ``a``
        to_dtype: storage type of the result

    Returns:
        Array of ``to_dtype`` with the shape of ``a``.
    """
    from_dtype = as_primitive(from_dtype)
    to_dtype = as_primitive(to_dtype)
    max_from = channel_max(from_dtype)
    a = np.asarray(a, dtype=from_dtype).astype(WORKING_DTYPE)

    if is_integer(to_dtype):
        scaled = a / max_from * channel_max(to_dtype)
        return saturate_cast(np.floor(scaled + 0.5), to_dtype)
    return (a / max_from).astype(to_dtype)


def rescale(a: Union[float, int], from_dtype: DTypeLike, to_dtype: DTypeLike) -> np.generic:
    """
    Convert a single channel value from ``from_dtype`` to ``to_dtype``.

    >>> rescale(255, np.uint8, np.float32)
    np.float32(1.0)
    >>> rescale(1.0, np.float32, np.uint16)
    np.uint16(65535)
    """
    return np_rescale(a, from_dtype, to_dtype)[()]
