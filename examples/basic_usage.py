"""Basic ImageBuffer usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from imagebuffer import (
    Gray,
    GrayImage,
    ImageBuffer,
    Rgb,
    RgbImage,
    Rgba,
    Xyz,
)


def demonstrate_colors() -> None:
    # Typed pixels and conversions between models and dtypes.
    accent = Rgb[np.uint8]((255, 128, 64))
    print("RGB:", accent)
    print("RGB -> Gray:", accent.convert(Gray[np.uint8]))
    print("RGB -> linear float:", accent.convert(Rgb[np.float32]))
    print("RGB -> XYZ:", accent.convert(Xyz[np.float64]))

    translucent = accent.with_alpha(128)
    print("RGBA:", translucent, "alpha:", translucent.alpha)
    print("RGBA -> 16 bit:", translucent.convert(Rgba[np.uint16]))

    # Integer channels saturate by default.
    print("Saturating add:", accent + Rgb[np.uint8]((10, 200, 10)))


def demonstrate_buffers() -> None:
    # A gradient built pixel by pixel, then converted in one pass.
    image = RgbImage.from_fn(64, 32, lambda x, y: Rgb[np.uint8]((x * 4, y * 8, 128)))
    print(image, "color type:", image.color_type)

    gray = image.convert_buffer(Gray[np.uint8])
    print("Gray pixel at (10, 10):", gray.get_pixel(10, 10))

    # Wrap caller-owned storage without copying and write through views.
    storage = np.zeros(4 * 4, dtype=np.uint16)
    deep = ImageBuffer[Gray[np.uint16]].from_raw(4, 4, storage)
    for x, y, pixel in deep.enumerate_pixels_mut():
        pixel[0] = 1000 * y + x
    print("Storage after writes:", storage.reshape(4, 4))

    if GrayImage.from_raw(4, 4, bytearray(10)) is None:
        print("Storage too small for 4x4 gray image")


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_buffers()
