"""Bit shifts of sign-magnitude big integers, with two's-complement semantics.

Left shifts multiply by a power of two. Right shifts are arithmetic: they
divide by a power of two and round toward negative infinity, exactly as
shifting an infinitely sign-extended two's-complement bit pattern would.
For non-negative values that is plain truncation of the magnitude, but
for negative values any 1 bit shifted out pushes the magnitude up by one:

    -M >> k == -ceil(M / 2**k)

so that shifting a negative value right past all of its bits converges
to -1, while a non-negative value converges to 0.

A negative shift amount shifts the other way. Amounts are widened to
Python ints before they are negated, so the most negative value of a
fixed-width integer type (numpy.int32(-2**31), for example) cannot wrap.
"""

import operator

from . import utils
from . import words as wordbuf
from .bigint import BigInteger, ZERO, MINUS_ONE, coerce


def _widen_amount(amount) -> int:
    try:
        return operator.index(amount)
    except TypeError:
        raise TypeError('shift amount must be an integer, got {}'.format(repr(amount)))


def _shift_left(x: BigInteger, amount: int) -> BigInteger:
    if amount == 0:
        return x
    elif amount < 0:
        return _shift_right(x, -amount)
    elif x.is_zero():
        return ZERO

    word_shift, bit_shift = divmod(amount, wordbuf.WORD_BITS)
    if word_shift > wordbuf.MAX_WORD_SHIFT - len(x.words) - 1:
        raise utils.ShiftOverflowError('cannot shift {} words left by {} bits: result is too large to index'
                                       .format(len(x.words), repr(amount)))

    return BigInteger(x, words=wordbuf.shift_words_and_bits(x.words, word_shift, bit_shift))


def _shift_right(x: BigInteger, amount: int) -> BigInteger:
    if amount == 0:
        return x
    elif amount < 0:
        return _shift_left(x, -amount)
    elif x.is_zero():
        return ZERO

    c = x.words
    if not x.negative:
        # truncation; the constructor canonicalizes a zero result
        return BigInteger(words=wordbuf.drop_low_bits(c, amount), negative=False)

    # Negative: round toward negative infinity.
    if amount >= wordbuf.bit_length(c):
        return MINUS_ONE

    kept = wordbuf.drop_low_bits(c, amount)
    if wordbuf.any_low_bits(c, amount):
        kept = wordbuf.increment(kept)

    return BigInteger(words=kept, negative=True)


def shift_left(x, amount):
    """Shift x left by amount bits, i.e. multiply by 2**amount.

    Args:
        x: A BigInteger, or anything with __index__.
        amount: Signed shift count. A negative count shifts right by -amount.

    Returns:
        The shifted value as a BigInteger. A zero amount returns x itself.

    Raises:
        TypeError: if x or amount is not an integer.
        ShiftOverflowError: if the result would need more words than
            numpy can index.
    """
    return _shift_left(coerce(x), _widen_amount(amount))


def shift_right(x, amount):
    """Arithmetic shift of x right by amount bits, i.e. floor(x / 2**amount).

    Args:
        x: A BigInteger, or anything with __index__.
        amount: Signed shift count. A negative count shifts left by -amount.

    Returns:
        The shifted value as a BigInteger. Non-negative values saturate
        at 0 and negative values saturate at -1.

    Raises:
        TypeError: if x or amount is not an integer.
        ShiftOverflowError: if a negative amount asks for a left shift
            whose result would need more words than numpy can index.
    """
    return _shift_right(coerce(x), _widen_amount(amount))
