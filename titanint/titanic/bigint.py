"""Arbitrary-precision signed integers, in sign-magnitude form."""

import operator

import numpy as np

from . import words as wordbuf
from .ops import Sign


class BigInteger(object):

    # the magnitude is exactly sum(_words[i] * 2**(WORD_BITS * i))
    _words : np.ndarray = wordbuf.EMPTY

    # the sign is stored separately
    _negative : bool = False

    # the internal state is not directly visible: expose it with properties

    @property
    def words(self):
        """Canonical magnitude, as a read-only little-endian array of uint32 words.
        Zero has no words at all.
        """
        return self._words

    @property
    def negative(self):
        """The sign bit - is this value negative?"""
        return self._negative

    @property
    def sign(self):
        """Sign of the value: NEGATIVE, ZERO or POSITIVE."""
        if self._negative:
            return Sign.NEGATIVE
        elif len(self._words) == 0:
            return Sign.ZERO
        else:
            return Sign.POSITIVE

    @property
    def magnitude(self):
        """Absolute value, as a non-negative BigInteger."""
        return self.abs()

    def is_zero(self):
        """Is this value zero?"""
        return len(self._words) == 0

    def is_negative(self):
        """Is this value strictly less than zero?"""
        return self._negative

    def bit_length(self):
        """Number of bits in the magnitude, as for int.bit_length(); 0 for zero."""
        return wordbuf.bit_length(self._words)

    def is_identical_to(self, other):
        """Is this value encoded identically to some other value?"""
        return (
            isinstance(other, BigInteger)
            and self._negative == other._negative
            and np.array_equal(self._words, other._words)
        )

    def __init__(self, x=None, m=None, negative=None, words=None):
        """Create a new big integer. The first argument, "x", is a base number
        to clone and update, otherwise the default values will be used.
        The value can be given as a signed integer m (anything with __index__),
        or as a magnitude of words plus a sign. If m is specified, neither
        words nor negative can be provided.
        The magnitude is always normalized, and zero is never negative.
        """
        if x is not None and not isinstance(x, BigInteger):
            raise TypeError('can only clone a BigInteger, got {}; use m= for integers'.format(repr(type(x))))

        if m is not None:
            if words is not None:
                raise ValueError('cannot specify both m={} and words={}'.format(repr(m), repr(words)))
            if negative is not None:
                raise ValueError('cannot specify both m={} and negative={}'.format(repr(m), repr(negative)))
            m = operator.index(m)
            self._negative = m < 0
            c = abs(m)
            self._words = wordbuf.normalize(
                wordbuf.from_bytes_le(c.to_bytes((c.bit_length() + 7) // 8, 'little'))
            )
        else:
            if words is not None:
                self._words = wordbuf.normalize(words)
            elif x is not None:
                self._words = x._words
            else:
                self._words = type(self)._words

            if negative is not None:
                self._negative = bool(negative)
            elif x is not None:
                self._negative = x._negative
            else:
                self._negative = type(self)._negative

        # there is exactly one zero
        if len(self._words) == 0:
            self._negative = False

    def __repr__(self):
        return '{}(negative={}, words={})'.format(
            type(self).__name__, repr(self._negative), repr(self._words.tolist()),
        )

    def __str__(self):
        digits = ''.join('{:08x}'.format(int(w)) for w in reversed(self._words)).lstrip('0')
        return '{:s} 0x{:s}'.format(
            '-' if self._negative else '+',
            digits or '0',
        )

    def __int__(self):
        c = int.from_bytes(wordbuf.to_bytes_le(self._words), 'little')
        if self._negative:
            return -c
        else:
            return c

    __index__ = __int__

    def __bool__(self):
        return len(self._words) != 0

    def __hash__(self):
        # agrees with int, so that x == int(x) keys are interchangeable
        return hash(int(self))

    # sign manipulation

    def negate(self):
        """Flip the sign. Zero stays non-negative."""
        return type(self)(self, negative=not self._negative)

    def abs(self):
        if self._negative:
            return type(self)(self, negative=False)
        else:
            return self

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    # shifts are implemented by the shift engine

    def __lshift__(self, amount):
        from .shift import shift_left
        return shift_left(self, amount)

    def __rshift__(self, amount):
        from .shift import shift_right
        return shift_right(self, amount)

    # ordering

    def compareto(self, other):
        """Compare to another big integer, or anything with __index__.
        The ordering returned is:
            -1 iff self < other
             0 iff self = other
             1 iff self > other
        """
        other = coerce(other)
        if self._negative != other._negative:
            if self._negative:
                return -1
            else:
                return 1

        order = wordbuf.compare(self._words, other._words)
        if self._negative:
            return -order
        else:
            return order

    def __lt__(self, other):
        if not _comparable(other):
            return NotImplemented
        return self.compareto(other) < 0

    def __le__(self, other):
        if not _comparable(other):
            return NotImplemented
        return self.compareto(other) <= 0

    def __eq__(self, other):
        if not _comparable(other):
            return NotImplemented
        return self.compareto(other) == 0

    def __ne__(self, other):
        if not _comparable(other):
            return NotImplemented
        return self.compareto(other) != 0

    def __ge__(self, other):
        if not _comparable(other):
            return NotImplemented
        return self.compareto(other) >= 0

    def __gt__(self, other):
        if not _comparable(other):
            return NotImplemented
        return self.compareto(other) > 0


def _comparable(other):
    if isinstance(other, BigInteger):
        return True
    # numpy arrays define __index__ but only accept it for a single element
    try:
        operator.index(other)
    except TypeError:
        return False
    return True


def coerce(x):
    """Return x as a BigInteger. Accepts BigIntegers and anything with __index__."""
    if isinstance(x, BigInteger):
        return x
    try:
        i = operator.index(x)
    except TypeError:
        raise TypeError('expected BigInteger or integer, got {}'.format(repr(type(x))))
    return BigInteger(m=i)


ZERO = BigInteger()
ONE = BigInteger(m=1)
MINUS_ONE = BigInteger(m=-1)


# functional interface

def is_zero(x):
    return coerce(x).is_zero()

def bit_length(x):
    return coerce(x).bit_length()

def sign(x):
    return coerce(x).sign
