from __future__ import annotations
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, Union
from boundednumbers import BoundType
from numpy import ndarray
import numpy as np

from ..types.color_types import ChannelValues, ColorModel, Scalar
from ..types.primitive import DTypeLike, as_primitive
from .color_type import ColorType

ChannelFn = Callable[[Scalar], Scalar]
ChannelFn2 = Callable[[Scalar, Scalar], Scalar]

# (template, dtype) -> specialized class
_SPECIALIZATIONS: Dict[Tuple[type, np.dtype], type] = {}


class ColorBase:
    """
    A fixed number of channel values of one dtype.

    Concrete colors are templates (``Rgb``, ``Gray``, ...) that become usable
    classes once specialized with a dtype: ``Rgb[np.uint8]``. An instance
    either owns its channel array or is a view into foreign storage, in which
    case writes go straight through to that storage.
    """
    __slots__ = ('_value',)

    num_channels: ClassVar[int] = 0
    mode:         ClassVar[ColorModel]
    dtype:        ClassVar[Optional[np.dtype]] = None
    has_alpha:    ClassVar[bool] = False
    overflow:     ClassVar[BoundType] = BoundType.CLAMP
    template:     ClassVar[Optional[type]] = None

    convert: Callable[..., ColorBase]
    with_alpha: Callable[..., ColorBase]

    # ------------------ SPECIALIZATION ------------------
    def __class_getitem__(cls, dtype: DTypeLike) -> type:
        return cls._specialize(dtype)

    @classmethod
    def _specialize(cls, dtype: DTypeLike) -> type:
        if cls.dtype is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        dtype = as_primitive(dtype)
        key = (cls, dtype)
        specialized = _SPECIALIZATIONS.get(key)
        if specialized is None:
            specialized = type(
                f"{cls.__name__}[{dtype.name}]",
                (cls,),
                {
                    '__slots__': (),
                    '__module__': cls.__module__,
                    '__doc__': cls.__doc__,
                    'dtype': dtype,
                    'template': cls,
                },
            )
            _SPECIALIZATIONS[key] = specialized
        return specialized

    @classmethod
    def _check_specialized(cls) -> None:
        if cls.dtype is None:
            raise TypeError(
                f"{cls.__name__} has no channel dtype; specialize it first, e.g. {cls.__name__}[np.uint8]"
            )

    # ------------------ CLASS-LEVEL PROPERTIES ------------------
    @classmethod
    def channel_count(cls) -> int:
        return cls.num_channels

    @classmethod
    def color_model(cls) -> str:
        """Label that helps to interpret the meaning of each channel."""
        return cls.mode.value

    @classmethod
    def color_type(cls) -> ColorType:
        return ColorType.of(cls)

    # ------------------ CONSTRUCTION ------------------
    def __init__(self, values: ChannelValues) -> None:
        cls = type(self)
        cls._check_specialized()
        arr = np.array(values, dtype=cls.dtype)
        if arr.shape != (cls.num_channels,):
            raise ValueError(
                f"{cls.__name__} expects {cls.num_channels} channel values, got shape {arr.shape}"
            )
        self._value = arr

    @classmethod
    def from_channels(cls, values: ChannelValues) -> ColorBase:
        return cls(values)

    @classmethod
    def _from_view(cls, view: ndarray) -> ColorBase:
        obj = cls.__new__(cls)
        obj._value = view
        return obj

    @classmethod
    def _channel_array(cls, storage: Any, writable: bool) -> ndarray:
        cls._check_specialized()
        if isinstance(storage, ndarray):
            if storage.dtype != cls.dtype:
                raise TypeError(f"{cls.__name__} expects {cls.dtype} storage, got {storage.dtype}")
            arr = storage
        else:
            try:
                arr = np.frombuffer(storage, dtype=cls.dtype)
            except TypeError:
                if writable:
                    raise TypeError(
                        f"cannot alias a {type(storage).__name__}; pass an ndarray or a writable buffer"
                    ) from None
                arr = np.array(storage, dtype=cls.dtype)

        if arr.ndim != 1 or arr.shape[0] != cls.num_channels:
            raise ValueError(
                f"{cls.__name__} expects a slice of exactly {cls.num_channels} elements, got shape {arr.shape}"
            )
        return arr

    @classmethod
    def from_slice(cls, storage: Any) -> ColorBase:
        """
        Read-only view of ``storage`` as this color, without copying.

        Args:
            storage: 1-D ndarray of ``cls.dtype`` or a buffer-protocol object.
                Plain sequences cannot be aliased and are copied.

        Raises:
            ValueError: if ``storage`` does not hold exactly ``num_channels`` elements.
            TypeError: if an ndarray of another dtype is given.
        """
        view = cls._channel_array(storage, writable=False).view()
        view.flags.writeable = False
        return cls._from_view(view)

    @classmethod
    def from_slice_mut(cls, storage: Any) -> ColorBase:
        """Writable view of ``storage`` as this color; see ``from_slice``."""
        arr = cls._channel_array(storage, writable=True)
        if not arr.flags.writeable:
            raise ValueError(f"{cls.__name__}.from_slice_mut needs writable storage")
        return cls._from_view(arr)

    # ------------------ CHANNEL ACCESS ------------------
    def channels(self) -> ndarray:
        view = self._value.view()
        view.flags.writeable = False
        return view

    def channels_mut(self) -> ndarray:
        if not self._value.flags.writeable:
            raise ValueError(f"this {type(self).__name__} is a read-only view")
        return self._value

    def copy(self) -> ColorBase:
        return type(self)(self._value)

    __copy__ = copy

    def __array__(self, dtype=None, copy=None) -> ndarray:
        if copy:
            return np.array(self._value, dtype=dtype)
        return self._value if dtype is None else self._value.astype(dtype)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: Union[int, slice]):
        return self._value[index].tolist()

    def __setitem__(self, index: Union[int, slice], value) -> None:
        self._value[index] = value

    def __iter__(self):
        return iter(self._value.tolist())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._value, other._value))

    # mutable views cannot be hashed
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._value.tolist()))})"

    # ------------------ CHANNEL TRANSFORMS ------------------
    def _check_same_type(self, other: ColorBase) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"expected another {type(self).__name__}, got {type(other).__name__}"
            )

    def map(self, f: ChannelFn) -> ColorBase:
        """New color with ``f`` applied to each channel."""
        return type(self)([f(v) for v in self._value.tolist()])

    def apply(self, f: ChannelFn) -> None:
        """Apply ``f`` to each channel in place."""
        self._value[:] = [f(v) for v in self._value.tolist()]

    def _with_alpha_values(self, f: ChannelFn, g: ChannelFn) -> list:
        values = self._value.tolist()
        return [f(v) for v in values[:-1]] + [g(values[-1])]

    def map_with_alpha(self, f: ChannelFn, g: ChannelFn) -> ColorBase:
        """
        New color with ``f`` applied to every channel but the last and ``g`` to the last.

        Only meaningful for alpha colors; other colors get ``g`` on their final
        channel all the same.
        """
        return type(self)(self._with_alpha_values(f, g))

    def apply_with_alpha(self, f: ChannelFn, g: ChannelFn) -> None:
        """In-place version of ``map_with_alpha``."""
        self._value[:] = self._with_alpha_values(f, g)

    def map2(self, other: ColorBase, f: ChannelFn2) -> ColorBase:
        """New color from ``f`` applied pairwise to the channels of ``self`` and ``other``."""
        self._check_same_type(other)
        return type(self)([f(a, b) for a, b in zip(self._value.tolist(), other._value.tolist())])

    def apply2(self, other: ColorBase, f: ChannelFn2) -> None:
        """In-place version of ``map2``."""
        self._check_same_type(other)
        self._value[:] = [f(a, b) for a, b in zip(self._value.tolist(), other._value.tolist())]
