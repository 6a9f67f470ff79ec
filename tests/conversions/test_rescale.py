from imagebuffer.conversions import rescale, np_rescale, saturate_cast
import numpy as np
import pytest


def test_rescale_integer_to_float():
    result = rescale(255, np.uint8, np.float32)
    assert result == 1.0
    assert result.dtype == np.float32
    assert rescale(0, np.uint8, np.float64) == 0.0


def test_rescale_float_to_integer():
    assert rescale(1.0, np.float32, np.uint8) == 255
    assert rescale(1.0, np.float32, np.uint16) == 65535
    assert rescale(0.0, np.float32, np.uint16) == 0


def test_rescale_between_bit_depths():
    assert rescale(128, np.uint8, np.uint16) == 32896
    assert rescale(255, np.uint8, np.uint16) == 65535
    assert rescale(65535, np.uint16, np.uint8) == 255
    assert rescale(257, np.uint16, np.uint8) == 1
    # 128 * 255 / 65535 = 0.498 rounds down
    assert rescale(128, np.uint16, np.uint8) == 0


def test_rescale_rounds_to_nearest():
    # 0.5 * 255 = 127.5 rounds half up
    assert rescale(0.5, np.float64, np.uint8) == 128
    assert rescale(0.2, np.float64, np.uint8) == 51


def test_rescale_saturates_out_of_range_floats():
    assert rescale(1.5, np.float32, np.uint8) == 255
    assert rescale(-0.2, np.float32, np.uint8) == 0
    assert rescale(np.nan, np.float64, np.uint8) == 0


def test_rescale_float_to_float_keeps_value():
    assert rescale(0.25, np.float64, np.float32) == np.float32(0.25)
    # floats are not clamped
    assert rescale(1.5, np.float64, np.float32) == np.float32(1.5)


def test_rescale_full_intensity_64_bit():
    result = rescale(1.0, np.float64, np.uint64)
    assert result.dtype == np.uint64
    assert int(result) == 2**64 - 1
    assert int(rescale(255, np.uint8, np.uint64)) == 2**64 - 1


def test_np_rescale_keeps_shape():
    values = np.arange(12, dtype=np.uint8).reshape(3, 4)
    result = np_rescale(values, np.uint8, np.float64)
    assert result.shape == (3, 4)
    assert np.allclose(result, values / 255.0)


def test_np_rescale_u8_identity_through_float():
    values = np.arange(256, dtype=np.uint8)
    as_float = np_rescale(values, np.uint8, np.float32)
    assert np.array_equal(np_rescale(as_float, np.float32, np.uint8), values)


def test_saturate_cast_clamps():
    result = saturate_cast(np.array([-3.0, 12.0, 300.0]), np.uint8)
    assert result.dtype == np.uint8
    assert result.tolist() == [0, 12, 255]


@pytest.mark.parametrize("dtype", [np.bool_, np.complex64, "U4"])
def test_rescale_rejects_non_channel_dtypes(dtype):
    with pytest.raises(TypeError):
        rescale(1, dtype, np.uint8)
