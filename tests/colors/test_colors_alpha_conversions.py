from imagebuffer.colors import Alpha, Rgb, Rgba, Xyz, Xyza, Lab, LabA, Gray, GrayA, Indexed
import numpy as np
import pytest


def test_alpha_template_and_specialization_agree():
    assert Alpha[Rgb][np.uint8] is Alpha[Rgb[np.uint8]]
    assert Rgba[np.uint8] is Alpha[Rgb[np.uint8]]
    assert Alpha[Rgb] is Rgba
    assert issubclass(Rgba[np.uint8], Rgba)
    assert issubclass(Rgba[np.uint8], Alpha)


def test_alpha_class_attributes():
    color_cls = Rgba[np.uint16]
    assert color_cls.base is Rgb[np.uint16]
    assert color_cls.has_alpha
    assert color_cls.num_channels == 4
    assert color_cls.color_model() == "RGB"
    assert color_cls.dtype == np.uint16
    assert not Rgb[np.uint16].has_alpha


def test_alpha_of_alpha_is_rejected():
    with pytest.raises(TypeError):
        Alpha[Rgba]
    with pytest.raises(TypeError):
        Alpha[int]


def test_aliases():
    assert Xyza is Alpha[Xyz]
    assert LabA is Alpha[Lab]
    assert GrayA is Alpha[Gray]


def test_with_alpha_defaults_to_full_intensity():
    assert Rgb[np.uint8]((1, 2, 3)).with_alpha() == Rgba[np.uint8]((1, 2, 3, 255))
    assert Gray[np.uint16]((5,)).with_alpha().alpha == 65535
    assert Rgb[np.float32]((0.1, 0.2, 0.3)).with_alpha().alpha == 1.0


def test_with_alpha_explicit_value():
    color = Rgb[np.uint8]((1, 2, 3)).with_alpha(7)
    assert isinstance(color, Rgba)
    assert color.alpha == 7
    assert color.with_alpha(9) == Rgba[np.uint8]((1, 2, 3, 9))
    assert color.alpha == 7


def test_without_alpha():
    color = Rgba[np.uint8]((1, 2, 3, 4))
    assert color.without_alpha() == Rgb[np.uint8]((1, 2, 3))


def test_from_color_checks_base_class():
    assert Rgba[np.uint8].from_color(Rgb[np.uint8]((9, 8, 7))) == Rgba[np.uint8]((9, 8, 7, 255))
    with pytest.raises(TypeError):
        Rgba[np.uint8].from_color(Rgb[np.uint16]((9, 8, 7)))


def test_rgb_to_gray():
    gray = Rgb[np.uint8]((255, 23, 42)).convert(Gray[np.uint8])
    assert gray == Gray[np.uint8]((129,))
    assert Rgb[np.uint8]((255, 128, 0)).convert(Gray[np.uint8]) == Gray[np.uint8]((163,))


def test_rgba_to_gray_alpha_keeps_alpha():
    result = Rgba[np.uint8]((255, 23, 42, 128)).convert(GrayA[np.uint8])
    assert result == GrayA[np.uint8]((129, 128))


def test_rgb_to_rgba_appends_opaque_alpha():
    result = Rgb[np.uint8]((255, 0, 0)).convert(Rgba[np.uint16])
    assert result == Rgba[np.uint16]((65535, 0, 0, 65535))


def test_rgba_to_rgb_drops_alpha():
    result = Rgba[np.uint8]((255, 0, 0, 3)).convert(Rgb[np.float32])
    assert isinstance(result, Rgb)
    assert np.allclose(result.channels(), (1.0, 0.0, 0.0))


def test_integer_rgb_survives_float_round_trip():
    for channels in [(0, 0, 0), (255, 255, 255), (12, 200, 77), (128, 128, 1)]:
        color = Rgb[np.uint8](channels)
        assert color.convert(Rgb[np.float32]).convert(Rgb[np.uint8]) == color


def test_float_rgb_is_linear():
    # 128 encoded is about 0.2158 in linear light
    linear = Rgb[np.uint8]((128, 128, 128)).convert(Rgb[np.float64])
    assert np.allclose(linear.channels(), ((128 / 255 + 0.055) / 1.055) ** 2.4)


def test_gray_to_rgb():
    assert Gray[np.uint8]((77,)).convert(Rgb[np.uint8]) == Rgb[np.uint8]((77, 77, 77))
    assert GrayA[np.uint8]((77, 10)).convert(Rgba[np.uint8]) == Rgba[np.uint8]((77, 77, 77, 10))


def test_rgb_to_xyz_and_back():
    white = Rgb[np.uint8]((255, 255, 255)).convert(Xyz[np.float32])
    assert np.allclose(white.channels(), (0.9505, 1.0, 1.089), atol=1e-6)

    color = Rgb[np.uint8]((12, 200, 77))
    assert color.convert(Xyz[np.float64]).convert(Rgb[np.uint8]) == color


def test_xyz_to_gray():
    assert Xyz[np.float64]((0.9505, 1.0, 1.089)).convert(Gray[np.uint8]) == Gray[np.uint8]((255,))
    assert Xyza[np.float32]((0.1, 0.0, 0.2, 0.5)).convert(GrayA[np.uint8]) == GrayA[np.uint8]((0, 128))


def test_integer_xyz_is_rejected():
    with pytest.raises(ValueError):
        Rgb[np.uint8]((1, 2, 3)).convert(Xyz[np.uint8])


def test_lab_only_converts_to_lab():
    lab = Lab[np.float32]((50.0, -20.0, 10.0))
    assert lab.convert(LabA[np.float32]) == LabA[np.float32]((50.0, -20.0, 10.0, 1.0))
    with pytest.raises(ValueError):
        lab.convert(Rgb[np.float32])
    with pytest.raises(ValueError):
        Rgb[np.float32]((0.1, 0.2, 0.3)).convert(Lab[np.float32])


def test_indexed_only_converts_to_indexed():
    assert Indexed[np.uint8]((3,)).convert(Indexed[np.uint16]) == Indexed[np.uint16]((3,))
    with pytest.raises(ValueError):
        Indexed[np.uint8]((3,)).convert(Rgb[np.uint8])


def test_convert_returns_an_owned_copy():
    storage = np.array([10, 20, 30], dtype=np.uint8)
    view = Rgb[np.uint8].from_slice(storage)
    same = view.convert(Rgb[np.uint8])
    same[0] = 99
    assert storage[0] == 10
    assert same == Rgb[np.uint8]((99, 20, 30))


def test_convert_requires_specialized_target():
    with pytest.raises(TypeError):
        Rgb[np.uint8]((1, 2, 3)).convert(Gray)
    with pytest.raises(TypeError):
        Rgb[np.uint8]((1, 2, 3)).convert(int)


def test_lab_narrowing_rounds_and_saturates():
    lab = Lab[np.float32]((50.7, -20.0, 300.0))
    assert lab.convert(Lab[np.uint8]) == Lab[np.uint8]((51, 0, 255))
    assert Lab[np.float32]((50.7, -200.0, 300.0)).convert(Lab[np.int8]) == Lab[np.int8]((51, -128, 127))
    assert Lab[np.float64]((np.nan, 0.4, 0.5)).convert(Lab[np.uint8]) == Lab[np.uint8]((0, 0, 1))


def test_indexed_narrowing_saturates():
    assert Indexed[np.uint16]((300,)).convert(Indexed[np.uint8]) == Indexed[np.uint8]((255,))
    assert Indexed[np.int16]((-5,)).convert(Indexed[np.uint8]) == Indexed[np.uint8]((0,))
    assert Indexed[np.uint8]((200,)).convert(Indexed[np.int8]) == Indexed[np.int8]((127,))
    assert Indexed[np.uint64]((2**64 - 1,)).convert(Indexed[np.uint8]) == Indexed[np.uint8]((255,))


def test_alpha_color_with_alpha_defaults_to_copy():
    color = Rgba[np.uint8]((1, 2, 3, 4))
    same = color.with_alpha()
    assert same == color
    assert same is not color
    same[3] = 9
    assert color.alpha == 4
