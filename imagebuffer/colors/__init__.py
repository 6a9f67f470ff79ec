"""
ImageBuffer Color Classes
=========================

Fixed-size pixel types with uniform channel access.

Features
--------
- One template per color model, specialized by channel dtype (``Rgb[np.uint8]``)
- Zero-copy views over foreign storage (``from_slice``/``from_slice_mut``)
- Channel transforms (``map``, ``apply``, ``map2``, ``map_with_alpha``, ...)
- Elementwise arithmetic with a configurable integer overflow policy
- Alpha composition for any color via ``Alpha[C]``
- Conversion between color models and dtypes via ``convert``

Usage
-----
>>> import numpy as np
>>> from imagebuffer.colors import Rgb, Rgba, Gray
>>>
>>> orange = Rgb[np.uint8]((255, 128, 0))
>>> orange.color_model()
'RGB'
>>> opaque = orange.with_alpha()
>>> opaque.alpha
255
>>> isinstance(opaque, Rgba)
True
>>> orange.convert(Gray[np.uint8])
Gray[uint8](163)

Color Classes
-------------
    - Rgb: sRGB, 3 channels ("RGB")
    - Xyz: CIE 1931 XYZ, 3 channels ("XYZ")
    - Lab: CIE L*a*b*, 3 channels ("CIE Lab")
    - Gray: luminance, 1 channel ("Y")
    - Indexed: palette index, 1 channel ("Idx")
    - Alpha[C]: C plus an opacity channel; Rgba, Xyza, LabA, GrayA aliases

Notes
-----
- Integer Rgb/Gray channels are sRGB gamma encoded, float channels are linear.
- Colors are mutable views and therefore unhashable; use ``copy()`` to detach.
"""

from .color_base import ColorBase
from .color_type import ColorType
from .alpha import Alpha
from .rgb import Rgb, Rgba
from .cie import Xyz, Xyza, Lab, LabA
from .gray import Gray, GrayA
from .indexed import Indexed
from .arithmetic import operate
from .color import color_convert, get_color_class

__all__ = [
    'ColorBase',
    'ColorType',
    'Alpha',
    'Rgb',
    'Rgba',
    'Xyz',
    'Xyza',
    'Lab',
    'LabA',
    'Gray',
    'GrayA',
    'Indexed',
    'operate',
    'color_convert',
    'get_color_class',
]
