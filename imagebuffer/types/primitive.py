# No dependencies
from typing import Tuple, Union
import numpy as np

DTypeLike = Union[np.dtype, type, str]

PRIMITIVE_DTYPES: Tuple[np.dtype, ...] = tuple(np.dtype(t) for t in (
    np.uint8, np.uint16, np.uint32, np.uint64,
    np.int8, np.int16, np.int32, np.int64,
    np.float32, np.float64,
))

# Gamma and matrix math run at this precision before casting to the target dtype
WORKING_DTYPE = np.dtype(np.float64)


def as_primitive(dtype: DTypeLike) -> np.dtype:
    """
    Normalize ``dtype`` and check that it can hold channel values.

    Args:
        dtype: anything ``np.dtype`` accepts (``np.uint8``, ``"float32"``, ...)

    Returns:
        The normalized ``np.dtype``.

    Raises:
        TypeError: if the dtype is not one of ``PRIMITIVE_DTYPES``.
    """
    try:
        normalized = np.dtype(dtype)
    except TypeError:
        raise TypeError(f"{dtype!r} is not a numeric dtype") from None
    if normalized not in PRIMITIVE_DTYPES:
        raise TypeError(
            f"{normalized} cannot hold channel values; expected one of "
            f"{', '.join(d.name for d in PRIMITIVE_DTYPES)}"
        )
    return normalized


def is_integer(dtype: DTypeLike) -> bool:
    return np.issubdtype(np.dtype(dtype), np.integer)


def channel_max(dtype: DTypeLike) -> Union[int, float]:
    """Full intensity of ``dtype``: the largest integer, or 1.0 for floats."""
    dtype = as_primitive(dtype)
    if is_integer(dtype):
        return int(np.iinfo(dtype).max)
    return 1.0


def channel_range(dtype: DTypeLike) -> Tuple[Union[int, float], Union[int, float]]:
    """Representable range of ``dtype`` (unbounded for floats)."""
    dtype = as_primitive(dtype)
    if is_integer(dtype):
        info = np.iinfo(dtype)
        return int(info.min), int(info.max)
    return -np.inf, np.inf
