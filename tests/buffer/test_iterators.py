from imagebuffer import GrayImage, RgbImage, ImageBuffer, Gray, Rgb
from imagebuffer.iterators import Pixels, PixelsMut, EnumeratePixels, EnumeratePixelsMut
import numpy as np
import pytest


def make_gray(width, height):
    return GrayImage.from_raw(width, height, np.arange(width * height, dtype=np.uint8))


def test_pixels_in_storage_order():
    image = make_gray(3, 2)
    pixels = image.pixels()
    assert isinstance(pixels, Pixels)
    assert len(pixels) == 6
    assert [p[0] for p in pixels] == [0, 1, 2, 3, 4, 5]
    assert len(pixels) == 0


def test_pixels_stop_at_width_times_height():
    image = GrayImage.from_raw(2, 2, np.arange(10, dtype=np.uint8))
    assert [p[0] for p in image.pixels()] == [0, 1, 2, 3]


def test_pixels_are_read_only_views():
    image = make_gray(2, 2)
    pixel = next(image.pixels())
    with pytest.raises(ValueError):
        pixel[0] = 9
    image.put_pixel(0, 0, Gray[np.uint8]((42,)))
    assert pixel[0] == 42


def test_pixels_are_double_ended():
    pixels = make_gray(3, 2).pixels()
    assert next(pixels)[0] == 0
    assert pixels.next_back()[0] == 5
    assert len(pixels) == 4
    assert pixels.next_back()[0] == 4
    assert [p[0] for p in pixels] == [1, 2, 3]
    with pytest.raises(StopIteration):
        pixels.next_back()
    with pytest.raises(StopIteration):
        next(pixels)


def test_reversed_pixels():
    image = make_gray(3, 2)
    assert [p[0] for p in reversed(image.pixels())] == [5, 4, 3, 2, 1, 0]


def test_reversed_shares_range_with_front():
    pixels = make_gray(2, 2).pixels()
    next(pixels)
    assert [p[0] for p in reversed(pixels)] == [3, 2, 1]
    assert list(pixels) == []


def test_pixels_mut_writes_through():
    image = ImageBuffer[Gray[np.uint16]].new(10, 10)
    pixels = image.pixels_mut()
    assert isinstance(pixels, PixelsMut)
    for i, pixel in enumerate(pixels):
        pixel[0] = i
    assert image.into_raw().tolist() == list(range(100))


def test_pixels_mut_backwards():
    image = GrayImage.new(3, 1)
    for i, pixel in enumerate(reversed(image.pixels_mut())):
        pixel[0] = i + 1
    assert image.into_raw().tolist() == [3, 2, 1]


def test_pixels_mut_on_read_only_storage():
    image = GrayImage.from_raw(2, 1, bytes(2))
    with pytest.raises(ValueError):
        next(image.pixels_mut())


def test_enumerate_pixels_coordinates():
    image = make_gray(3, 2)
    enumerated = image.enumerate_pixels()
    assert isinstance(enumerated, EnumeratePixels)
    assert len(enumerated) == 6
    coords = [(x, y, p[0]) for x, y, p in enumerated]
    assert coords == [
        (0, 0, 0), (1, 0, 1), (2, 0, 2),
        (0, 1, 3), (1, 1, 4), (2, 1, 5),
    ]


def test_enumerate_pixels_matches_get_pixel():
    image = RgbImage.from_raw(4, 3, np.arange(36, dtype=np.uint8))
    for x, y, pixel in image.enumerate_pixels():
        assert pixel == image.get_pixel(x, y)


def test_enumerate_pixels_mut_writes_through():
    image = GrayImage.new(4, 3)
    enumerated = image.enumerate_pixels_mut()
    assert isinstance(enumerated, EnumeratePixelsMut)
    for x, y, pixel in enumerated:
        pixel[0] = 10 * y + x
    assert image.get_pixel(3, 2) == Gray[np.uint8]((23,))
    assert image.get_pixel(0, 1) == Gray[np.uint8]((10,))


def test_enumerate_column_sums():
    image = GrayImage.from_fn(5, 4, lambda x, y: Gray[np.uint8]((y,)))
    row_sum = [0] * 4
    for _, y, pixel in image.enumerate_pixels():
        row_sum[y] += pixel[0]
    assert row_sum == [0, 5, 10, 15]


def test_empty_images_yield_nothing():
    assert list(GrayImage.new(0, 3).enumerate_pixels()) == []
    assert list(GrayImage.new(3, 0).pixels_mut()) == []
    assert list(reversed(GrayImage.new(0, 0).pixels())) == []
