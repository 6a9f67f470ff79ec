from typing import ClassVar
from ..types.color_types import ColorModel
from .color_base import ColorBase
from .alpha import Alpha


class Gray(ColorBase):
    """Grayscale luminance."""
    __slots__ = ()

    num_channels: ClassVar[int] = 1
    mode: ClassVar[ColorModel] = ColorModel.Y


GrayA = Alpha[Gray]
