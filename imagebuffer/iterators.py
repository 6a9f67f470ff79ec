"""Pixel iterators over the flat storage of an ``ImageBuffer``."""
from __future__ import annotations
from typing import Iterator, Tuple

from numpy import ndarray

from .colors.color_base import ColorBase


class Pixels:
    """
    Iterator over read-only pixel views, in row-major storage order.

    Double ended: ``next_back()`` (or ``reversed(...)``) consumes from the end
    of the same range that ``next()`` consumes from the front.
    """
    __slots__ = ('_data', '_pixel_type', '_channels', '_front', '_back')

    def __init__(self, data: ndarray, pixel_type: type[ColorBase], count: int) -> None:
        self._data = data
        self._pixel_type = pixel_type
        self._channels = pixel_type.num_channels
        self._front = 0
        self._back = count

    def _view(self, index: int) -> ColorBase:
        start = index * self._channels
        return self._pixel_type.from_slice(self._data[start:start + self._channels])

    def __iter__(self) -> Pixels:
        return self

    def __next__(self) -> ColorBase:
        if self._front >= self._back:
            raise StopIteration
        index = self._front
        self._front += 1
        return self._view(index)

    def next_back(self) -> ColorBase:
        """Take the last remaining pixel. Raises StopIteration when exhausted."""
        if self._front >= self._back:
            raise StopIteration
        self._back -= 1
        return self._view(self._back)

    def __reversed__(self) -> Iterator[ColorBase]:
        while self._front < self._back:
            yield self.next_back()

    def __len__(self) -> int:
        return self._back - self._front


class PixelsMut(Pixels):
    """Iterator over writable pixel views; writes go to the buffer's storage."""
    __slots__ = ()

    def _view(self, index: int) -> ColorBase:
        start = index * self._channels
        return self._pixel_type.from_slice_mut(self._data[start:start + self._channels])


class EnumeratePixels:
    """
    Yields ``(x, y, pixel)`` for each pixel of a ``Pixels`` iterator.

    Coordinates come from a running counter that wraps every ``width`` pixels,
    not from the storage offset.
    """
    __slots__ = ('_pixels', '_x', '_y', '_width')

    def __init__(self, pixels: Pixels, width: int) -> None:
        self._pixels = pixels
        self._x = 0
        self._y = 0
        self._width = width

    def __iter__(self) -> EnumeratePixels:
        return self

    def __next__(self) -> Tuple[int, int, ColorBase]:
        pixel = next(self._pixels)
        if self._x >= self._width:
            self._x = 0
            self._y += 1
        x, y = self._x, self._y
        self._x += 1
        return x, y, pixel

    def __len__(self) -> int:
        return len(self._pixels)


class EnumeratePixelsMut(EnumeratePixels):
    """``EnumeratePixels`` over writable pixel views."""
    __slots__ = ()
