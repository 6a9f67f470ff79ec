"""ImageBuffer: typed pixels and flat-storage image buffers."""

from .colors import (
    ColorBase,
    ColorType,
    Alpha,
    Rgb,
    Rgba,
    Xyz,
    Xyza,
    Lab,
    LabA,
    Gray,
    GrayA,
    Indexed,
    color_convert,
    get_color_class,
)
from .types.color_types import ColorModel
from .buffer import (
    ImageBuffer,
    RgbImage,
    RgbaImage,
    GrayImage,
    GrayAlphaImage,
)
from .iterators import Pixels, PixelsMut, EnumeratePixels, EnumeratePixelsMut
from .conversions import (
    rescale,
    np_rescale,
    srgb_expand_gamma,
    srgb_compress_gamma,
    convert,
    np_convert,
)

__all__ = [
    # pixel types
    "ColorBase",
    "ColorType",
    "ColorModel",
    "Alpha",
    "Rgb",
    "Rgba",
    "Xyz",
    "Xyza",
    "Lab",
    "LabA",
    "Gray",
    "GrayA",
    "Indexed",
    "color_convert",
    "get_color_class",
    # buffers
    "ImageBuffer",
    "RgbImage",
    "RgbaImage",
    "GrayImage",
    "GrayAlphaImage",
    "Pixels",
    "PixelsMut",
    "EnumeratePixels",
    "EnumeratePixelsMut",
    # conversions
    "rescale",
    "np_rescale",
    "srgb_expand_gamma",
    "srgb_compress_gamma",
    "convert",
    "np_convert",
]
