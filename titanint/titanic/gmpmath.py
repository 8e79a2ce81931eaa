"""Common integer operations implemented with GMP as a backend.

This is the reference implementation used to check the word-based engine:
values are moved into gmpy2.mpz through their two's-complement encoding,
computed by GMP, and moved back.
"""


import operator

import gmpy2 as gmp

from . import conversion
from .ops import OP, shift_ops


def to_mpz(x):
    """Convert a BigInteger (or anything with __index__) to a gmpy2 mpz."""
    data = conversion.to_bytes(x, byteorder='big')
    z = gmp.mpz(data.hex(), 16)
    if data[0] & 0x80:
        z -= gmp.mpz(1) << (8 * len(data))
    return z


def from_mpz(z):
    """Convert a gmpy2 mpz back to a BigInteger."""
    z = gmp.mpz(z)
    nbytes = z.bit_length() // 8 + 1
    if z < 0:
        z += gmp.mpz(1) << (8 * nbytes)
    digits = z.digits(16)
    data = bytes.fromhex(digits.rjust(2 * nbytes, '0'))
    return conversion.from_bytes(data, byteorder='big')


def _shift(z, amount, left):
    # mpz shifts reject negative counts, so flip direction here
    if amount < 0:
        amount = -amount
        left = not left
    if left:
        return z << amount
    else:
        return z >> amount


def compute(op, x, amount=None):
    """Compute op on x with GMP, returning a BigInteger.

    Shift operations (OP.lshift, OP.rshift) require an amount, which may be
    negative. GMP's right shift floors, which matches two's-complement
    arithmetic shift.
    """
    z = to_mpz(x)

    if op in shift_ops:
        if amount is None:
            raise ValueError('{} requires a shift amount'.format(op.name))
        amount = operator.index(amount)
        result = _shift(z, amount, left=(op == OP.lshift))
    elif amount is not None:
        raise ValueError('{} does not take a shift amount, got {}'.format(op.name, repr(amount)))
    elif op == OP.neg:
        result = -z
    elif op == OP.abs:
        result = abs(z)
    else:
        raise ValueError('unknown operation: {}'.format(repr(op)))

    return from_mpz(result)
