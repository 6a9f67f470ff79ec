from __future__ import annotations
from typing import NamedTuple, TYPE_CHECKING

from ..types.color_types import ColorModel

if TYPE_CHECKING:
    from .color_base import ColorBase


class ColorType(NamedTuple):
    """Layout summary of a pixel class: model, channel count and bit depth per channel."""
    model: ColorModel
    channels: int
    bits: int
    has_alpha: bool = False

    @classmethod
    def of(cls, color_cls: type[ColorBase]) -> ColorType:
        color_cls._check_specialized()
        return cls(
            model=color_cls.mode,
            channels=color_cls.num_channels,
            bits=color_cls.dtype.itemsize * 8,
            has_alpha=color_cls.has_alpha,
        )

    def bits_per_pixel(self) -> int:
        """Returns the number of bits contained in a pixel of this color type."""
        return self.channels * self.bits

    def num_components(self) -> int:
        """Returns the number of channels in a pixel of this color type."""
        return self.channels
