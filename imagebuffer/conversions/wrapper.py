import numpy as np
from typing import Callable, Tuple, Union

from ..types.color_types import ColorModel, ChannelValues, element_to_array
from ..types.primitive import DTypeLike, WORKING_DTYPE, as_primitive, channel_max, channel_range, is_integer
from .cie import np_rgb_to_xyz, np_xyz_to_rgb
from .gamma import np_encode, np_linearize, np_recode
from .luminance import np_gray_to_rgb, np_srgb_to_luminance
from .rescale import np_clamp, np_rescale

ConvertFn = Callable[[np.ndarray, np.dtype, np.dtype], np.ndarray]


def _require_float(dtype: np.dtype, space: ColorModel) -> None:
    if is_integer(dtype):
        raise ValueError(f"{space.value} channels must be floating point, got {dtype}")


def _rgb_to_xyz(rgb: np.ndarray, input_dtype: np.dtype, output_dtype: np.dtype) -> np.ndarray:
    _require_float(output_dtype, ColorModel.XYZ)
    return np_rgb_to_xyz(np_linearize(rgb, input_dtype)).astype(output_dtype)


def _xyz_to_rgb(xyz: np.ndarray, input_dtype: np.dtype, output_dtype: np.dtype) -> np.ndarray:
    _require_float(input_dtype, ColorModel.XYZ)
    return np_encode(np_xyz_to_rgb(xyz), output_dtype)


def _xyz_to_gray(xyz: np.ndarray, input_dtype: np.dtype, output_dtype: np.dtype) -> np.ndarray:
    _require_float(input_dtype, ColorModel.XYZ)
    # Y is the luminance channel
    return np_encode(np.asarray(xyz, dtype=float)[..., 1:2], output_dtype)


def _xyz_to_xyz(xyz: np.ndarray, input_dtype: np.dtype, output_dtype: np.dtype) -> np.ndarray:
    _require_float(input_dtype, ColorModel.XYZ)
    _require_float(output_dtype, ColorModel.XYZ)
    return xyz.astype(output_dtype)


def _cast(values: np.ndarray, input_dtype: np.dtype, output_dtype: np.dtype) -> np.ndarray:
    """
    Keep values as plain numbers in the new dtype (Lab and palette indices carry no intensity).

    Integer targets round half up and saturate to the target range, so narrowing never wraps.
    """
    if not is_integer(output_dtype):
        return values.astype(output_dtype)
    lo, hi = channel_range(output_dtype)
    if is_integer(input_dtype):
        in_lo, in_hi = channel_range(input_dtype)
        return np_clamp(values, max(lo, in_lo), min(hi, in_hi)).astype(output_dtype)

    rounded = np.nan_to_num(np.floor(values.astype(WORKING_DTYPE) + 0.5), nan=0.0)
    inside = (rounded > lo) & (rounded < float(hi))
    out = np.where(inside, rounded, 0.0).astype(output_dtype)
    out = np.where(rounded <= lo, output_dtype.type(lo), out)
    # float(hi) of a 64-bit type is not representable, the exact maximum is written instead
    return np.where(rounded >= float(hi), output_dtype.type(hi), out).astype(output_dtype, copy=False)


CONVERT_NUMPY: dict[Tuple[ColorModel, ColorModel], ConvertFn] = {
    (ColorModel.RGB, ColorModel.RGB): np_recode,
    (ColorModel.Y, ColorModel.Y): np_recode,
    (ColorModel.RGB, ColorModel.Y): np_srgb_to_luminance,
    (ColorModel.Y, ColorModel.RGB): np_gray_to_rgb,
    (ColorModel.RGB, ColorModel.XYZ): _rgb_to_xyz,
    (ColorModel.XYZ, ColorModel.RGB): _xyz_to_rgb,
    (ColorModel.XYZ, ColorModel.Y): _xyz_to_gray,
    (ColorModel.XYZ, ColorModel.XYZ): _xyz_to_xyz,
    (ColorModel.LAB, ColorModel.LAB): _cast,
    (ColorModel.INDEXED, ColorModel.INDEXED): _cast,
}


def is_convertible(from_space: ColorModel, to_space: ColorModel) -> bool:
    return (ColorModel(from_space), ColorModel(to_space)) in CONVERT_NUMPY


def np_convert(
    color: np.ndarray,
    from_space: Union[ColorModel, str],
    to_space: Union[ColorModel, str],
    input_dtype: DTypeLike,
    output_dtype: DTypeLike,
    input_alpha: bool = False,
    output_alpha: bool = False,
) -> np.ndarray:
    """
    Vectorized universal converter.

    Args:
        color: array of shape (..., channels) stored as ``input_dtype``
        from_space, to_space: color models of the source and target
        input_dtype, output_dtype: channel storage types
        input_alpha, output_alpha: whether the last channel is an alpha channel

    Returns:
        Array of shape (..., target channels) of ``output_dtype``. A new array
        is always returned, even when nothing needs converting.

    Alpha is rescaled (never gamma corrected) when both sides carry it,
    appended at full intensity when only the target does, and dropped when
    only the source does.
    """
    from_space = ColorModel(from_space)
    to_space = ColorModel(to_space)
    input_dtype = as_primitive(input_dtype)
    output_dtype = as_primitive(output_dtype)
    color = np.asarray(color, dtype=input_dtype)

    if from_space == to_space and input_dtype == output_dtype and input_alpha == output_alpha:
        return color.copy()

    if input_alpha:
        base, alpha = color[..., :-1], color[..., -1:]
    else:
        base, alpha = color, None

    try:
        convert_fn = CONVERT_NUMPY[(from_space, to_space)]
    except KeyError:
        raise ValueError(
            f"Unsupported conversion: {from_space.value} -> {to_space.value}"
        ) from None

    out = convert_fn(base, input_dtype, output_dtype)

    if not output_alpha:
        return out
    if alpha is None:
        new_alpha = np.full(out.shape[:-1] + (1,), channel_max(output_dtype), dtype=output_dtype)
    else:
        new_alpha = np_rescale(alpha, input_dtype, output_dtype)
    return np.concatenate([out, new_alpha], axis=-1)


def convert(
    color: ChannelValues,
    from_space: Union[ColorModel, str],
    to_space: Union[ColorModel, str],
    input_dtype: DTypeLike,
    output_dtype: DTypeLike,
    input_alpha: bool = False,
    output_alpha: bool = False,
) -> tuple:
    """Scalar front-end of ``np_convert``: one color in, a tuple of Python scalars out."""
    result = np_convert(
        element_to_array(color),
        from_space,
        to_space,
        input_dtype,
        output_dtype,
        input_alpha,
        output_alpha,
    )
    return tuple(result.tolist())
