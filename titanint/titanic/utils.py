"""General utilities, such as exception classes."""

import typing

# Titanint-specific exceptions

class TitanintError(Exception):
    """Base Titanint error."""

class InvalidEncodingError(TitanintError, ValueError):
    """Malformed two's-complement encoding, such as an empty byte sequence."""

class ShiftOverflowError(TitanintError, OverflowError):
    """Shift amount that cannot be represented, such as a word offset past sys.maxsize."""

class ConversionOverflowError(TitanintError, OverflowError):
    """Value with no integer equivalent, such as an infinite or NaN float."""


# Useful things

def bitmask(n: int) -> int:
    """Produces a bitmask of n 1s if n is positive, or n 0s if n is negative.

    >>> bin(bitmask(5))
    '0b11111'
    >>> bitmask(0)
    0
    >>> bitmask(-3) & 0xff
    248
    """
    if n >= 0:
        return (1 << n) - 1
    else:
        return -1 << -n

def maskbits(x: int, n:int) -> int:
    """Mask x & bitmask(n)

    >>> maskbits(0b110110, 3)
    6
    >>> maskbits(0b110110, -3)
    48
    """
    if n >= 0:
        return x & ((1 << n) - 1)
    else:
        return x & (-1 << -n)

def check_byteorder(byteorder: str) -> str:
    """Validate a byteorder argument, as accepted by int.to_bytes.

    >>> check_byteorder('big')
    'big'
    >>> check_byteorder('middle')
    Traceback (most recent call last):
        ...
    ValueError: byteorder must be 'little' or 'big', got 'middle'
    """
    if byteorder not in ('little', 'big'):
        raise ValueError("byteorder must be 'little' or 'big', got {}".format(repr(byteorder)))
    return byteorder

def hexbytes(data: typing.Iterable[int]) -> str:
    """Render a byte sequence as space-separated hex, in the given order.

    >>> hexbytes(b'\\x00\\x7f\\xff')
    '00 7f ff'
    """
    return ' '.join('{:02x}'.format(b) for b in data)
