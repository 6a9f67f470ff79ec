from __future__ import annotations
from numbers import Number
from typing import Callable, Optional, Union
import math
import operator

from boundednumbers import BoundType, boundtype_to_function
import numpy as np

from ..types.primitive import channel_range, is_integer
from .color_base import ColorBase


def _trunc_div(a, b):
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer channel division by zero")
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return q if (a >= 0) == (b >= 0) else -q
    return a / b


_INT_OPS = {
    'add': operator.add,
    'sub': operator.sub,
    'mul': operator.mul,
    'div': _trunc_div,
}

_FLOAT_OPS = {
    'add': np.add,
    'sub': np.subtract,
    'mul': np.multiply,
    'div': np.divide,
}


def _bound_int(value, overflow: BoundType, lo: int, hi: int) -> int:
    if not isinstance(value, int):
        value = math.trunc(value)
    if overflow is BoundType.IGNORE:
        if not lo <= value <= hi:
            raise OverflowError(f"channel value {value} does not fit in [{lo}, {hi}]")
        return value
    if overflow is BoundType.CYCLIC:
        # integer channels wrap over hi - lo + 1 values
        overflow = BoundType.MODULO
    return boundtype_to_function[overflow](value, lo, hi)


def _operands(color: ColorBase, other) -> Optional[list]:
    """Channel values of ``other`` broadcast to ``color``'s shape, or None if unsupported."""
    if isinstance(other, ColorBase):
        color._check_same_type(other)
        return other._value.tolist()
    if isinstance(other, (Number, np.number)) and not isinstance(other, (bool, np.bool_)):
        value = other.item() if isinstance(other, np.generic) else other
        return [value] * color.num_channels
    return None


def compute(
    color: ColorBase,
    other: Union[ColorBase, int, float],
    op: str,
    overflow: Optional[BoundType] = None,
    reflected: bool = False,
) -> Optional[np.ndarray]:
    """
    Elementwise ``color <op> other`` as a new channel array.

    Float channels use IEEE arithmetic in the channel dtype. Integer channels
    are computed exactly on Python ints, ``div`` truncates toward zero, and
    the result is bounded by ``overflow`` (default: ``color.overflow``).

    Returns None when ``other`` is neither a color nor a number.
    """
    rhs = _operands(color, other)
    if rhs is None:
        return None
    lhs = color._value.tolist()
    if reflected:
        lhs, rhs = rhs, lhs

    dtype = color.dtype
    if not is_integer(dtype):
        result = _FLOAT_OPS[op](np.array(lhs, dtype=dtype), np.array(rhs, dtype=dtype))
        return result.astype(dtype, copy=False)

    overflow = overflow or color.overflow
    lo, hi = channel_range(dtype)
    fn = _INT_OPS[op]
    return np.array(
        [_bound_int(fn(a, b), overflow, lo, hi) for a, b in zip(lhs, rhs)],
        dtype=dtype,
    )


def operate(
    color: ColorBase,
    other: Union[ColorBase, int, float],
    op: str,
    overflow: Optional[BoundType] = None,
) -> ColorBase:
    """
    ``color <op> other`` with a one-off overflow policy.

    Args:
        color: left operand
        other: a color of the same class, or a scalar broadcast to every channel
        op: one of ``'add'``, ``'sub'``, ``'mul'``, ``'div'``
        overflow: bounding applied to integer channels; defaults to ``color.overflow``

    Returns:
        A new color of ``type(color)``.
    """
    result = compute(color, other, op, overflow)
    if result is None:
        raise TypeError(f"cannot combine {type(color).__name__} with {type(other).__name__}")
    return type(color)._from_view(result)


def _binary(op: str, reflected: bool = False) -> Callable:
    def operation(self: ColorBase, other):
        result = compute(self, other, op, reflected=reflected)
        if result is None:
            return NotImplemented
        return type(self)._from_view(result)
    return operation


def _inplace(op: str) -> Callable:
    def operation(self: ColorBase, other):
        result = compute(self, other, op)
        if result is None:
            return NotImplemented
        self._value[:] = result
        return self
    return operation


# Inject arithmetic operators into ColorBase
ColorBase.__add__ = _binary('add')
ColorBase.__sub__ = _binary('sub')
ColorBase.__mul__ = _binary('mul')
ColorBase.__truediv__ = _binary('div')
ColorBase.__radd__ = _binary('add', reflected=True)
ColorBase.__rsub__ = _binary('sub', reflected=True)
ColorBase.__rmul__ = _binary('mul', reflected=True)
ColorBase.__rtruediv__ = _binary('div', reflected=True)
ColorBase.__iadd__ = _inplace('add')
ColorBase.__isub__ = _inplace('sub')
ColorBase.__imul__ = _inplace('mul')
ColorBase.__itruediv__ = _inplace('div')
