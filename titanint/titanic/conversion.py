"""Conversions between big integers and some common external types:
two's-complement byte strings, python ints, and python or numpy floats.
"""


import sys

import numpy as np

from .utils import bitmask, check_byteorder, InvalidEncodingError, ConversionOverflowError
from . import words as wordbuf
from . import shift
from .bigint import BigInteger, coerce


# Two's-complement byte strings.
# The default byteorder is little-endian (least significant byte first),
# and encodings are always minimal: zero is a single 0x00 byte, and
# exactly one sign byte is added when the top bit would otherwise be
# read with the wrong sign.


def _byte_array(data):
    """Coerce bytes-like objects and integer sequences to a numpy uint8 array."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(data), dtype=np.uint8)

    a = np.asarray(data)
    if a.ndim != 1:
        raise InvalidEncodingError('byte sequence must be one-dimensional, got shape {}'
                                   .format(repr(a.shape)))
    if a.size > 0:
        if not np.issubdtype(a.dtype, np.integer):
            raise InvalidEncodingError('byte values must be integers, got dtype {}'.format(repr(a.dtype)))
        lo, hi = a.min(), a.max()
        if lo < 0 or hi > 0xff:
            raise InvalidEncodingError('byte values must be in [0, 255], got range [{}, {}]'
                                       .format(repr(lo), repr(hi)))
    return a.astype(np.uint8)


def from_bytes(data, byteorder='little'):
    """Interpret a two's-complement byte sequence as a BigInteger.

    The sign comes from the top bit of the most significant byte. Negative
    values are converted to sign-magnitude form by computing ~data + 1.
    At least one byte is required, even for zero.
    """
    check_byteorder(byteorder)
    a = _byte_array(data)
    if len(a) == 0:
        raise InvalidEncodingError('cannot decode an empty byte sequence; zero is encoded as 0x00')

    if byteorder == 'big':
        a = a[::-1]

    negative = bool(a[-1] & 0x80)
    if negative:
        raw = wordbuf.from_bytes_le(a.tobytes(), fill=0xff)
        c = wordbuf.increment(wordbuf.normalize(~raw))
    else:
        c = wordbuf.normalize(wordbuf.from_bytes_le(a.tobytes()))

    return BigInteger(words=c, negative=negative)


def to_bytes(x, byteorder='little'):
    """Minimal two's-complement encoding of x, as bytes."""
    check_byteorder(byteorder)
    x = coerce(x)
    c = x.words

    if not x.negative:
        data = wordbuf.to_bytes_le(c).rstrip(b'\x00')
        # zero, or a top bit that would read as a sign bit
        if len(data) == 0 or data[-1] & 0x80:
            data += b'\x00'
    else:
        # -c == ~(c - 1)
        raw = wordbuf.to_bytes_le(wordbuf.complement(wordbuf.decrement(c), len(c)))
        end = len(raw)
        while end > 1 and raw[end - 1] == 0xff and raw[end - 2] & 0x80:
            end -= 1
        data = raw[:end]
        if not data[-1] & 0x80:
            data += b'\xff'

    if byteorder == 'big':
        return data[::-1]
    else:
        return data


# Python ints.

def from_int(i):
    return BigInteger(m=i)


def to_int(x):
    return int(coerce(x))


# Binary conversions are relatively simple for numpy's floating point types.
# float16 : w = 5,  p = 11
# float32 : w = 8,  p = 24
# float64 : w = 11, p = 53


def np_byteorder(ftype):
    """Converts from numpy byteorder conventions for a floating point datatype
    to sys.byteorder 'big' or 'little'.
    """
    bo = np.dtype(ftype).byteorder
    if bo == '=':
        return sys.byteorder
    elif bo == '<':
        return 'little'
    elif bo == '>':
        return 'big'
    else:
        raise ValueError('unknown numpy byteorder {} for dtype {}'.format(repr(bo), repr(ftype)))


def float_to_mantissa_exp(f):
    """Converts a python or numpy float into universal m, exp representation:
    f = m * 2**exp. If the float does not represent a real number (i.e. it is inf
    or NaN) this will raise a ConversionOverflowError.
    """
    if isinstance(f, float):
        f = np.float64(f)
        w = 11
        pbits = 52
    elif isinstance(f, np.float16):
        w = 5
        pbits = 10
    elif isinstance(f, np.float32):
        w = 8
        pbits = 23
    elif isinstance(f, np.float64):
        w = 11
        pbits = 52
    else:
        raise TypeError('expected float or np.float{{16,32,64}}, got {}'.format(repr(type(f))))

    emax = (1 << (w - 1)) - 1

    bits = int.from_bytes(f.tobytes(), np_byteorder(type(f)))

    S = bits >> (w + pbits) & bitmask(1)
    E = bits >> (pbits) & bitmask(w)
    C = bits & bitmask(pbits)

    e = E - emax

    if E == 0:
        # subnormal
        if S == 0:
            m = C
        else:
            m = -C
        exp = -emax - pbits + 1
    elif e <= emax:
        # normal
        if S == 0:
             m = C | (1 << pbits)
        else:
            m = -(C | (1 << pbits))
        exp = e - pbits
    else:
        # nonreal
        raise ConversionOverflowError('cannot convert nonfinite value {} to an integer'.format(repr(f)))

    return m, exp


def from_float(f):
    """Convert a python or numpy float to a BigInteger, truncating toward zero."""
    m, exp = float_to_mantissa_exp(f)
    c = BigInteger(m=abs(m))
    # c is non-negative, so a right shift here truncates
    c = shift.shift_left(c, exp)
    if m < 0:
        return c.negate()
    else:
        return c


def as_bigint(value):
    """Convert a BigInteger, integer, float, or two's-complement byte string
    (little-endian) to a BigInteger.
    """
    if isinstance(value, BigInteger):
        return value
    elif isinstance(value, (float, np.floating)):
        return from_float(value)
    elif isinstance(value, (bytes, bytearray, memoryview)):
        return from_bytes(value)
    else:
        return coerce(value)
