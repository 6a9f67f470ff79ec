"""
ImageBuffer Color Space Conversions
===================================

Pure numeric functions behind every color conversion. They work on numpy
scalars and arrays of any shape and never touch color classes, so the same
code converts one pixel or a whole buffer.

Storage convention
------------------
Integer ``Rgb``/``Gray`` channels hold sRGB gamma-encoded values, float
channels hold linear light. ``Xyz`` is always floating point.

Conversion Functions
--------------------

Rescaling:
    rescale(a, from_dtype, to_dtype)
        Single value between storage types, preserving relative intensity
    np_rescale(a, from_dtype, to_dtype)
        Vectorized rescale (round + clamp for integer targets)

sRGB gamma:
    srgb_expand_gamma(c, dtype) / np_srgb_expand_gamma
        Encoded -> linear light
    srgb_compress_gamma(c, dtype) / np_srgb_compress_gamma
        Linear light -> encoded, stored as ``dtype``

CIE XYZ:
    rgb_to_x, rgb_to_y, rgb_to_z, xyz_to_r, xyz_to_g, xyz_to_b
    np_rgb_to_xyz, np_xyz_to_rgb

Luminance:
    np_srgb_to_luminance(rgb, from_dtype, to_dtype)
    np_gray_to_rgb(gray, from_dtype, to_dtype)

High-Level API
--------------
    convert(color, from_space, to_space, input_dtype, output_dtype, input_alpha, output_alpha)
    np_convert(...)

Examples
--------
>>> import numpy as np
>>> from imagebuffer.conversions import convert
>>> convert((255, 23, 42), "RGB", "Y", np.uint8, np.uint8)
(129,)
"""

from .rescale import rescale, np_rescale, saturate_cast
from .gamma import (
    srgb_expand_gamma,
    srgb_compress_gamma,
    np_srgb_expand_gamma,
    np_srgb_compress_gamma,
    np_linearize,
    np_encode,
    np_recode,
)
from .cie import (
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
from .luminance import np_srgb_to_luminance, np_gray_to_rgb
from .wrapper import convert, np_convert, is_convertible, CONVERT_NUMPY

__all__ = [
    # rescaling
    'rescale',
    'np_rescale',
    'saturate_cast',

    # gamma
    'srgb_expand_gamma',
    'srgb_compress_gamma',
    'np_srgb_expand_gamma',
    'np_srgb_compress_gamma',
    'np_linearize',
    'np_encode',
    'np_recode',

    # CIE XYZ
    'RGB_TO_XYZ',
    'XYZ_TO_RGB',
    'rgb_to_x',
    'rgb_to_y',
    'rgb_to_z',
    'xyz_to_r',
    'xyz_to_g',
    'xyz_to_b',
    'np_rgb_to_xyz',
    'np_xyz_to_rgb',

    # luminance
    'np_srgb_to_luminance',
    'np_gray_to_rgb',

    # high-level API
    'convert',
    'np_convert',
    'is_convertible',
    'CONVERT_NUMPY',
]
