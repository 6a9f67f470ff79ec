"""
Image Buffer
============

A 2-D grid of pixels over flat, row-major numpy storage.

The pixel at ``(x, y)`` occupies
``storage[c * (y * width + x) : c * (y * width + x) + c]`` where ``c`` is the
pixel type's channel count. ``(0, 0)`` is the top-left pixel.

Classes
-------
ImageBuffer: generic buffer, specialized by pixel type (``ImageBuffer[Rgb[np.uint8]]``)
RgbImage, RgbaImage, GrayImage, GrayAlphaImage: 8-bit specializations
"""
from __future__ import annotations
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple
import operator
import warnings

import numpy as np
from numpy import ndarray

from .colors import ColorBase, ColorType, Gray, GrayA, Rgb, Rgba
from .conversions import np_convert
from .iterators import EnumeratePixels, EnumeratePixelsMut, Pixels, PixelsMut

# pixel class -> buffer class
_BUFFER_SPECIALIZATIONS: Dict[type, type] = {}


class ImageBuffer:
    """
    Generic image buffer.

    Wraps (or allocates) a flat numpy array of the pixel type's dtype and
    hands out pixel views into it. Views from ``get_pixel``/``pixels`` are
    read-only; those from ``get_pixel_mut``/``pixels_mut`` write straight to
    the storage. A writable view must not be kept alive alongside another
    view of the same pixel if both are written to.
    """
    __slots__ = ('_width', '_height', '_data')

    pixel_type: ClassVar[Optional[type[ColorBase]]] = None

    def __class_getitem__(cls, pixel_type: type[ColorBase]) -> type:
        if cls.pixel_type is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not (isinstance(pixel_type, type) and issubclass(pixel_type, ColorBase)):
            raise TypeError(f"ImageBuffer expects a color class, got {pixel_type!r}")
        pixel_type._check_specialized()

        specialized = _BUFFER_SPECIALIZATIONS.get(pixel_type)
        if specialized is None:
            specialized = type(
                f"{cls.__name__}[{pixel_type.__name__}]",
                (cls,),
                {'__slots__': (), '__module__': cls.__module__, 'pixel_type': pixel_type},
            )
            _BUFFER_SPECIALIZATIONS[pixel_type] = specialized
        return specialized

    @classmethod
    def _check_specialized(cls) -> None:
        if cls.pixel_type is None:
            raise TypeError("ImageBuffer has no pixel type; use e.g. ImageBuffer[Rgb[np.uint8]]")

    # ------------------ CONSTRUCTION ------------------
    def __init__(self, width: int, height: int, storage: Any) -> None:
        """
        Wrap ``storage`` as a ``width`` x ``height`` image.

        Raises:
            ValueError: if the storage is too small for the dimensions.
            TypeError: if an ndarray of the wrong dtype is given.
        """
        cls = type(self)
        cls._check_specialized()
        required = cls._required_length(width, height)
        data = cls._storage_array(storage)
        if data.shape[0] < required:
            raise ValueError(
                f"{width}x{height} {cls.pixel_type.__name__} image needs {required} elements, "
                f"storage has {data.shape[0]}"
            )
        self._width = operator.index(width)
        self._height = operator.index(height)
        self._data = data

    @classmethod
    def _required_length(cls, width: int, height: int) -> int:
        try:
            width, height = operator.index(width), operator.index(height)
        except TypeError:
            raise TypeError(f"image dimensions must be integers, got {width!r}x{height!r}") from None
        if width < 0 or height < 0:
            raise ValueError(f"image dimensions must be non-negative, got {width}x{height}")
        return width * height * cls.pixel_type.num_channels

    @classmethod
    def _storage_array(cls, storage: Any) -> ndarray:
        dtype = cls.pixel_type.dtype
        if isinstance(storage, ndarray):
            if storage.dtype != dtype:
                raise TypeError(f"{cls.__name__} expects {dtype} storage, got {storage.dtype}")
            if storage.ndim == 1:
                return storage
            if not storage.flags.c_contiguous:
                warnings.warn(
                    "non-contiguous storage is copied; pixel views will not alias it",
                    stacklevel=3,
                )
            return storage.reshape(-1)
        try:
            return np.frombuffer(storage, dtype=dtype)
        except TypeError:
            warnings.warn(
                f"{type(storage).__name__} does not expose a buffer and is copied; "
                "pixel views will not alias it",
                stacklevel=3,
            )
            return np.array(storage, dtype=dtype).reshape(-1)

    @classmethod
    def from_raw(cls, width: int, height: int, storage: Any) -> Optional[ImageBuffer]:
        """
        Constructs a buffer from caller-provided storage without copying it.

        Args:
            width, height: image dimensions in pixels
            storage: ndarray of the pixel dtype, or any buffer-protocol object
                (``bytearray``, ``memoryview``, ``array.array``). Read-only
                buffers give a buffer whose pixels cannot be written.

        Returns:
            The buffer, or None if ``storage`` holds fewer than
            ``width * height * channels`` elements.
        """
        cls._check_specialized()
        data = cls._storage_array(storage)
        if data.shape[0] < cls._required_length(width, height):
            return None
        return cls(width, height, data)

    @classmethod
    def new(cls, width: int, height: int) -> ImageBuffer:
        """Creates a zero-filled buffer."""
        cls._check_specialized()
        return cls(width, height, np.zeros(cls._required_length(width, height), dtype=cls.pixel_type.dtype))

    @classmethod
    def from_pixel(cls, width: int, height: int, pixel: ColorBase) -> ImageBuffer:
        """Constructs a buffer with every pixel set to a copy of ``pixel``."""
        buffer = cls.new(width, height)
        buffer._check_pixel(pixel)
        buffer._pixel_rows()[:] = pixel.channels()
        return buffer

    @classmethod
    def from_fn(cls, width: int, height: int, f: Callable[[int, int], ColorBase]) -> ImageBuffer:
        """
        Constructs a buffer by calling ``f(x, y)`` for every pixel in row-major order.

        >>> img = ImageBuffer[Gray[np.uint8]].from_fn(4, 4, lambda x, y: Gray[np.uint8]((x * y,)))
        >>> img.get_pixel(3, 2)
        Gray[uint8](6)
        """
        buffer = cls.new(width, height)
        for x, y, pixel in buffer.enumerate_pixels_mut():
            value = f(x, y)
            buffer._check_pixel(value)
            pixel.channels_mut()[:] = value.channels()
        return buffer

    # ------------------ PROPERTIES ------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def dimensions(self) -> Tuple[int, int]:
        """The width and height of this image."""
        return self._width, self._height

    @property
    def color_type(self) -> ColorType:
        return self.pixel_type.color_type()

    @property
    def writable(self) -> bool:
        return bool(self._data.flags.writeable)

    def as_raw(self) -> ndarray:
        """Read-only view of the whole flat storage, trailing elements included."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def into_raw(self) -> ndarray:
        """The underlying flat storage (the same array, not a copy)."""
        return self._data

    def as_array(self) -> ndarray:
        """
        A ``(height, width, channels)`` view of the pixel storage.

        Writes to the result reach the storage only while it is a view. If
        numpy cannot reshape the storage without copying, a copy is returned
        and a ``UserWarning`` is issued.
        """
        rows = self._pixel_rows()
        array = rows.reshape(self._height, self._width, self.pixel_type.num_channels)
        if array.size and not np.shares_memory(array, self._data):
            warnings.warn("pixel storage could not be reshaped in place; as_array returned a copy", stacklevel=2)
        return array

    def _pixel_rows(self) -> ndarray:
        channels = self.pixel_type.num_channels
        count = self._width * self._height
        return self._data[:count * channels].reshape(count, channels)

    # ------------------ PIXEL ACCESS ------------------
    def _check_pixel(self, pixel: Any) -> None:
        if type(pixel) is not self.pixel_type:
            raise TypeError(f"expected a {self.pixel_type.__name__} pixel, got {type(pixel).__name__}")

    def _pixel_slice(self, x: int, y: int) -> slice:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"pixel ({x}, {y}) is out of bounds for a {self._width}x{self._height} image"
            )
        channels = self.pixel_type.num_channels
        index = channels * (y * self._width + x)
        return slice(index, index + channels)

    def get_pixel(self, x: int, y: int) -> ColorBase:
        """
        Read-only view of the pixel at ``(x, y)``.

        Raises:
            IndexError: if ``(x, y)`` is outside ``(width, height)``.
        """
        return self.pixel_type.from_slice(self._data[self._pixel_slice(x, y)])

    def get_pixel_mut(self, x: int, y: int) -> ColorBase:
        """Writable view of the pixel at ``(x, y)``; see ``get_pixel``."""
        return self.pixel_type.from_slice_mut(self._data[self._pixel_slice(x, y)])

    def put_pixel(self, x: int, y: int, pixel: ColorBase) -> None:
        self._check_pixel(pixel)
        self._data[self._pixel_slice(x, y)] = pixel.channels()

    def __getitem__(self, xy: Tuple[int, int]) -> ColorBase:
        x, y = xy
        if self.writable:
            return self.get_pixel_mut(x, y)
        return self.get_pixel(x, y)

    def __setitem__(self, xy: Tuple[int, int], pixel: ColorBase) -> None:
        x, y = xy
        self.put_pixel(x, y, pixel)

    # ------------------ ITERATION ------------------
    def pixels(self) -> Pixels:
        """
        Returns an iterator over the pixels of this image.

        >>> buffer = GrayImage.new(100, 100)
        >>> sum(pixel[0] for pixel in buffer.pixels())
        0
        """
        return Pixels(self._data, self.pixel_type, self._width * self._height)

    def pixels_mut(self) -> PixelsMut:
        """
        Returns an iterator over writable pixel views.

        >>> buffer = ImageBuffer[Gray[np.uint16]].new(100, 100)
        >>> for i, pixel in enumerate(buffer.pixels_mut()):
        ...     pixel[0] = i
        """
        return PixelsMut(self._data, self.pixel_type, self._width * self._height)

    def enumerate_pixels(self) -> EnumeratePixels:
        """
        Enumerates over the pixels of the image, yielding ``(x, y, pixel)``.

        >>> buffer = GrayImage.new(100, 100)
        >>> column_sum = [0] * 100
        >>> for _, y, pixel in buffer.enumerate_pixels():
        ...     column_sum[y] += pixel[0]
        """
        return EnumeratePixels(self.pixels(), self._width)

    def enumerate_pixels_mut(self) -> EnumeratePixelsMut:
        return EnumeratePixelsMut(self.pixels_mut(), self._width)

    # ------------------ CONVERSION ------------------
    def convert_buffer(self, to_cls: type[ColorBase]) -> ImageBuffer:
        """
        Performs a color conversion of the image buffer into a new buffer.

        Every pixel is converted on its own, with the same rules as
        ``ColorBase.convert``; the work is done in one vectorized pass.

        >>> rgb = RgbImage.new(100, 100)
        >>> gray = rgb.convert_buffer(Gray[np.uint8])
        """
        target = ImageBuffer[to_cls]
        converted = np_convert(
            self._pixel_rows(),
            from_space=self.pixel_type.mode,
            to_space=to_cls.mode,
            input_dtype=self.pixel_type.dtype,
            output_dtype=to_cls.dtype,
            input_alpha=self.pixel_type.has_alpha,
            output_alpha=to_cls.has_alpha,
        )
        return target(self._width, self._height, converted.reshape(-1))

    # ------------------ MISC ------------------
    def copy(self) -> ImageBuffer:
        return type(self)(self._width, self._height, self._data.copy())

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.dimensions == other.dimensions and bool(
            np.array_equal(self._pixel_rows(), other._pixel_rows())
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}x{self._height})"


RgbImage = ImageBuffer[Rgb[np.uint8]]
RgbaImage = ImageBuffer[Rgba[np.uint8]]
GrayImage = ImageBuffer[Gray[np.uint8]]
GrayAlphaImage = ImageBuffer[GrayA[np.uint8]]
