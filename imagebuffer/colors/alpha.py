from __future__ import annotations
from typing import ClassVar, Dict, Optional

from ..types.color_types import Scalar
from ..types.primitive import channel_max
from .color_base import ColorBase

# base color class -> alpha composed class
_COMPOSITIONS: Dict[type, type] = {}


class Alpha(ColorBase):
    """
    A color with an associated alpha value.

    ``Alpha[C]`` stores the channels of ``C`` followed by one opacity channel.
    It keeps ``C``'s color model: alpha does not change how the other
    channels are interpreted.

    ``Alpha[Rgb]`` is a template like ``Rgb`` itself, so
    ``Alpha[Rgb][np.uint8] is Alpha[Rgb[np.uint8]]``.

    Operations that must treat opacity differently from color (gamma
    correction, premultiplication) use ``map_with_alpha``/``apply_with_alpha``;
    everything else runs over all ``N + 1`` channels.
    """
    __slots__ = ()

    has_alpha = True
    alpha_index: ClassVar[int] = -1
    base: ClassVar[Optional[type]] = None

    def __class_getitem__(cls, param):
        if cls.base is None:
            return _compose(param)
        if cls.dtype is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        return _compose(cls.base[param])

    @classmethod
    def from_color(cls, color: ColorBase) -> Alpha:
        """Copy ``color`` and append a fully opaque alpha channel."""
        cls._check_specialized()
        if type(color) is not cls.base:
            raise TypeError(f"{cls.__name__} is built from {cls.base.__name__}, got {type(color).__name__}")
        return cls(color._value.tolist() + [channel_max(cls.dtype)])

    def without_alpha(self) -> ColorBase:
        """Copy of the base color; the alpha channel is discarded."""
        return self.base(self._value[:self.alpha_index])

    @property
    def alpha(self) -> Scalar:
        return self._value[self.alpha_index].item()

    def with_alpha(self, alpha: Optional[Scalar] = None) -> Alpha:
        """New color with the same base channels and ``alpha`` as opacity; a plain copy if None."""
        new = self.copy()
        if alpha is None:
            return new
        new[self.alpha_index] = alpha
        return new


def _compose(color_cls: type) -> type:
    if not (isinstance(color_cls, type) and issubclass(color_cls, ColorBase)):
        raise TypeError(f"Alpha expects a color class, got {color_cls!r}")
    if color_cls.has_alpha:
        raise TypeError(f"{color_cls.__name__} already has an alpha channel")

    composed = _COMPOSITIONS.get(color_cls)
    if composed is None:
        # Alpha[Rgb[uint8]] derives from Alpha[Rgb] so isinstance works against the template
        parent = Alpha if color_cls.template is None else _compose(color_cls.template)
        composed = type(
            f"Alpha[{color_cls.__name__}]",
            (parent,),
            {
                '__slots__': (),
                '__module__': Alpha.__module__,
                '__doc__': Alpha.__doc__,
                'num_channels': color_cls.num_channels + 1,
                'mode': color_cls.mode,
                'dtype': color_cls.dtype,
                'base': color_cls,
                'template': None if color_cls.template is None else parent,
            },
        )
        _COMPOSITIONS[color_cls] = composed
    return composed


def color_with_alpha(self: ColorBase, alpha: Optional[Scalar] = None) -> Alpha:
    """
    Return this color with an alpha channel appended.

    Args:
        alpha: opacity to use. If None, uses full intensity for the dtype.
    """
    composed = Alpha[type(self)]
    if alpha is None:
        return composed.from_color(self)
    return composed(self._value.tolist() + [alpha])


ColorBase.with_alpha = color_with_alpha
