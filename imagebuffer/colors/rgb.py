from typing import ClassVar
from ..types.color_types import ColorModel
from .color_base import ColorBase
from .alpha import Alpha


class Rgb(ColorBase):
    """sRGB. Integer channels are gamma encoded, float channels are linear light."""
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorModel] = ColorModel.RGB


Rgba = Alpha[Rgb]
