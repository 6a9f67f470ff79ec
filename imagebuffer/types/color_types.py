from __future__ import annotations
from enum import Enum
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ChannelValues = Union[Sequence[Scalar], ndarray]


class ColorModel(str, Enum):
    """Interpretation of a color's channels (see gimp babl)."""
    RGB = "RGB"
    XYZ = "XYZ"
    LAB = "CIE Lab"
    Y = "Y"
    INDEXED = "Idx"



def element_to_array(element: Union[Scalar, ChannelValues]) -> np.ndarray:
    """
    Convert a channel value or sequence of channel values to a numpy array.

    Args:
        element: Scalar, sequence, or already an ndarray

    Returns:
        numpy array representation (never copies an ndarray)
    """
    if isinstance(element, ndarray):
        return element
    if isinstance(element, (int, float, np.generic)):
        return np.array([element])
    return np.array(element)
