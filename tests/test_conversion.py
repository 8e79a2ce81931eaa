import math

import numpy as np
import pytest

from titanint import (BigInteger, from_bytes, to_bytes, from_int, to_int, from_float, as_bigint,
                      InvalidEncodingError, ConversionOverflowError)
from titanint.titanic import conversion


def test_zero_is_single_byte():
    assert to_bytes(BigInteger()) == b'\x00'
    assert to_bytes(0) == b'\x00'
    assert to_bytes(0, byteorder='big') == b'\x00'


@pytest.mark.parametrize('data, expected', [
    (b'\x00', b'\x00'),
    (b'\x00\x00\x00', b'\x00'),
    (b'\xff', b'\xff'),
    (b'\xff\xff\xff\xff\xff', b'\xff'),
    (b'\x7f', b'\x7f'),
    (b'\x80', b'\x80'),
    (b'\x80\x00', b'\x80\x00'),
    (b'\x80\xff', b'\x80'),
    (b'\x7f\xff', b'\x7f\xff'),
    (b'\x01\x00\x00\x00\x00\x00', b'\x01'),
    (b'\x00\x00\x00\x80', b'\x00\x00\x00\x80'),
    (b'\x00\x00\x00\x00\xff', b'\x00\x00\x00\x00\xff'),
    (b'\x00\x00\x00\x00\xff\xff', b'\x00\x00\x00\x00\xff'),
])
def test_byte_arrays_are_compressed(data, expected):
    assert to_bytes(from_bytes(data)) == expected


@pytest.mark.parametrize('data, value', [
    (b'\x80', -128),
    (b'\x7f\xff', -129),
    (b'\x00\x80', -32768),
    (b'\xff\x00', 255),
    (b'\x00\x00\x00\x80', -2**31),
    (b'\xff\xff\xff\x7f', 2**31 - 1),
    (b'\xfe\xff\xff\xff\x00', 2**32 - 2),
])
def test_from_bytes_values(data, value):
    assert from_bytes(data) == value


@pytest.mark.parametrize('value', [
    0, 1, -1, 127, 128, -128, -129, 255, 256, -256, -257,
    -2**31, 2**31 - 1, 2**31, -2**31 - 1,
    -2**63, 2**63 - 1, 2**63, 2**64 - 1, 2**64, -2**64, -2**64 + 1,
    2**32 - 1, -(2**32 - 1), -2**32, 3**200, -3**200,
])
def test_to_bytes_is_minimal(value, twos):
    assert to_bytes(from_int(value)) == twos(value)
    assert to_bytes(from_int(value), byteorder='big') == twos(value, 'big')


def test_random_round_trip(rng, twos):
    for _ in range(50):
        data = bytes(rng.getrandbits(8) for _ in range(rng.randint(1, 300)))
        i = int.from_bytes(data, 'little', signed=True)
        x = from_bytes(data)
        assert int(x) == i
        assert to_bytes(x) == twos(i)
        assert from_bytes(to_bytes(x)).is_identical_to(x)
        assert from_bytes(data[::-1], byteorder='big').is_identical_to(x)


def test_byte_sequence_types():
    expected = from_int(-129)
    assert from_bytes(bytearray(b'\x7f\xff')) == expected
    assert from_bytes(memoryview(b'\x7f\xff')) == expected
    assert from_bytes([0x7f, 0xff]) == expected
    assert from_bytes(np.array([0x7f, 0xff], dtype=np.uint8)) == expected
    assert from_bytes((0xff, 0x7f), byteorder='big') == expected


@pytest.mark.parametrize('data', [b'', bytearray(), [], np.zeros(0, dtype=np.uint8)])
def test_empty_encoding(data):
    with pytest.raises(InvalidEncodingError):
        from_bytes(data)


@pytest.mark.parametrize('data', [[256], [-1], [0.5], [[1, 2]]])
def test_bad_byte_values(data):
    with pytest.raises(InvalidEncodingError):
        from_bytes(data)


def test_invalid_encoding_is_value_error():
    with pytest.raises(ValueError):
        from_bytes(b'')


def test_bad_byteorder():
    with pytest.raises(ValueError):
        from_bytes(b'\x00', byteorder='native')
    with pytest.raises(ValueError):
        to_bytes(from_int(1), byteorder='network')


def test_int_interop():
    assert to_int(from_int(-2**100)) == -2**100
    assert to_int(42) == 42
    with pytest.raises(TypeError):
        from_int(1.5)


@pytest.mark.parametrize('f, expected', [
    (0.0, 0),
    (-0.0, 0),
    (1.0, 1),
    (-1.0, -1),
    (1.5, 1),
    (-1.5, -1),
    (0.999, 0),
    (-0.999, 0),
    (5e-324, 0),
    (2.0**31, 2**31),
    (-2.0**31 - 0.5, -2**31),
    (2.0**64, 2**64),
    (123456789.987, 123456789),
    (1e300, int(1e300)),
    (-1.7976931348623157e308, -int(1.7976931348623157e308)),
])
def test_from_float(f, expected):
    x = from_float(f)
    assert x == expected
    assert x == int(f)


def test_from_numpy_floats(rng):
    assert from_float(np.float16(65504.0)) == 65504
    assert from_float(np.float16(-2.5)) == -2
    assert from_float(np.float32(16777216.0)) == 16777216
    assert from_float(np.float32(-3.4028235e38)) == int(np.float32(-3.4028235e38))
    for _ in range(100):
        f = rng.uniform(-1e20, 1e20)
        assert from_float(np.float64(f)) == int(f)
        assert from_float(np.float32(f)) == int(np.float32(f))


@pytest.mark.parametrize('f', [math.inf, -math.inf, math.nan,
                               np.float32('inf'), np.float16('nan'), np.float64('-inf')])
def test_from_float_nonfinite(f):
    with pytest.raises(ConversionOverflowError):
        from_float(f)
    with pytest.raises(OverflowError):
        from_float(f)


def test_from_float_rejects_other_types():
    with pytest.raises(TypeError):
        from_float(1)
    with pytest.raises(TypeError):
        from_float('1.0')


def test_float_to_mantissa_exp():
    assert conversion.float_to_mantissa_exp(1.0) == (1 << 52, -52)
    assert conversion.float_to_mantissa_exp(-0.75) == (-(3 << 51), -53)
    assert conversion.float_to_mantissa_exp(np.float16(1.0)) == (1 << 10, -10)
    assert conversion.float_to_mantissa_exp(5e-324) == (1, -1074)


def test_as_bigint():
    x = from_int(-7)
    assert as_bigint(x) is x
    assert as_bigint(-7) == x
    assert as_bigint(np.int64(-7)) == x
    assert as_bigint(-7.9) == x
    assert as_bigint(np.float32(-7.25)) == x
    assert as_bigint(b'\xf9') == x
    assert as_bigint(True) == 1
    with pytest.raises(TypeError):
        as_bigint('-7')
