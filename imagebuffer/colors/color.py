from __future__ import annotations
from typing import Union

from ..conversions import np_convert
from ..types.color_types import ColorModel
from ..types.primitive import DTypeLike
from .color_base import ColorBase
from .alpha import Alpha
from .rgb import Rgb
from .cie import Xyz, Lab
from .gray import Gray
from .indexed import Indexed

model_to_template: dict[ColorModel, type[ColorBase]] = {
    ColorModel.RGB: Rgb,
    ColorModel.XYZ: Xyz,
    ColorModel.LAB: Lab,
    ColorModel.Y: Gray,
    ColorModel.INDEXED: Indexed,
}


def color_convert(self: ColorBase, to_cls: type[ColorBase]) -> ColorBase:
    """
    Convert this color to another specialized color class.

    Gamma expansion/compression, CIE matrices and luminance are applied as the
    pair of color models requires; alpha is carried, appended at full
    intensity, or dropped.

    Args:
        to_cls: target class, e.g. ``Gray[np.uint8]`` or ``Alpha[Xyz[np.float32]]``

    Returns:
        New, owned instance of ``to_cls``.

    Raises:
        ValueError: if no conversion exists between the two color models.
    """
    if not (isinstance(to_cls, type) and issubclass(to_cls, ColorBase)):
        raise TypeError(f"expected a color class, got {to_cls!r}")
    to_cls._check_specialized()
    result = np_convert(
        self._value,
        from_space=self.mode,
        to_space=to_cls.mode,
        input_dtype=self.dtype,
        output_dtype=to_cls.dtype,
        input_alpha=self.has_alpha,
        output_alpha=to_cls.has_alpha,
    )
    return to_cls._from_view(result)


ColorBase.convert = color_convert


def get_color_class(color_model: Union[ColorModel, str], dtype: DTypeLike, alpha: bool = False) -> type[ColorBase]:
    """Look up the specialized class for a color model label and dtype."""
    try:
        template = model_to_template[ColorModel(color_model)]
    except ValueError:
        raise ValueError(f"Unsupported color model: {color_model!r}") from None
    color_cls = template[dtype]
    return Alpha[color_cls] if alpha else color_cls
