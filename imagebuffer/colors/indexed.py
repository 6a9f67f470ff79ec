from typing import ClassVar
from ..types.color_types import ColorModel
from .color_base import ColorBase


class Indexed(ColorBase):
    """
    Indexed colors.

    No specific color model is assumed; the single channel is a palette index.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 1
    mode: ClassVar[ColorModel] = ColorModel.INDEXED
