from typing import ClassVar
from ..types.color_types import ColorModel
from .color_base import ColorBase
from .alpha import Alpha


class Xyz(ColorBase):
    """CIE 1931 XYZ (D65). Only meaningful with floating point channels."""
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorModel] = ColorModel.XYZ


class Lab(ColorBase):
    """CIE L*a*b*."""
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorModel] = ColorModel.LAB


Xyza = Alpha[Xyz]
LabA = Alpha[Lab]
