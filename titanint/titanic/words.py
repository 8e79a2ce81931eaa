"""Word buffers: unsigned magnitudes stored as little-endian numpy arrays.

This file is part of Titanint, available under the MIT license.

A word buffer is a one-dimensional numpy array of WORD_DTYPE, least
significant word first, so that the magnitude it represents is exactly
sum(buf[i] * 2**(WORD_BITS * i)). Buffers handed out by this module are
canonical and read-only:
  - no high-order zero words; zero is the empty buffer
  - flags.writeable is False, so operations always build new buffers

The operations here know nothing about sign. Rounding direction for
negative values is decided by the shift engine; drop_low_bits always
truncates the magnitude.
"""

import sys
import typing

import numpy as np

from .utils import bitmask, maskbits


WORD_BITS: int = 32
WORD_BYTES: int = WORD_BITS // 8
WORD_DTYPE = np.uint32
WORD_MASK: int = bitmask(WORD_BITS)

# Largest word offset a shift may produce; numpy cannot index past this.
MAX_WORD_SHIFT: int = sys.maxsize

# Words are widened to this type to carry bits across word boundaries.
_WIDE_DTYPE = np.uint64
_WIDE_MASK = _WIDE_DTYPE(WORD_MASK)
_WIDE_BITS = _WIDE_DTYPE(WORD_BITS)

# explicit little-endian view, independent of sys.byteorder
_LE_DTYPE = np.dtype('<u4')


def _freeze(a: np.ndarray) -> np.ndarray:
    a.flags.writeable = False
    return a


EMPTY: np.ndarray = _freeze(np.zeros(0, dtype=WORD_DTYPE))


def _trim(a: np.ndarray) -> np.ndarray:
    """Canonicalize a freshly built WORD_DTYPE array that nobody else holds."""
    nonzero = np.flatnonzero(a)
    if nonzero.size == 0:
        return EMPTY
    top = int(nonzero[-1]) + 1
    if top < len(a):
        a = a[:top].copy()
    return _freeze(a)


def normalize(words: typing.Union[np.ndarray, typing.Sequence[int]]) -> np.ndarray:
    """Strip high-order zero words.

    Args:
        words: A one-dimensional array or sequence of ints in [0, 2**WORD_BITS).

    Returns:
        A canonical, read-only buffer. Canonical buffers are returned as-is,
        so normalize is idempotent.

    >>> normalize([5, 0, 0]).tolist()
    [5]
    >>> normalize([0, 0]).tolist()
    []
    >>> b = normalize([1, 2])
    >>> normalize(b) is b
    True
    """
    a = np.asarray(words)
    if a.ndim != 1:
        raise ValueError('word buffer must be one-dimensional, got shape {}'.format(repr(a.shape)))

    if a.dtype == WORD_DTYPE:
        if a.size > 0 and a[-1] != 0 and not a.flags.writeable:
            return a
    elif a.size > 0:
        if not (np.issubdtype(a.dtype, np.integer) or a.dtype == object):
            raise ValueError('word buffer must hold integers, got dtype {}'.format(repr(a.dtype)))
        lo, hi = a.min(), a.max()
        if lo < 0 or hi > WORD_MASK:
            raise ValueError('word values must be in [0, {:#x}], got range [{}, {}]'
                             .format(WORD_MASK, repr(lo), repr(hi)))

    return _trim(a.astype(WORD_DTYPE, copy=True))


def bit_length(buf: np.ndarray) -> int:
    """Number of bits needed to represent the magnitude; 0 for zero.

    >>> bit_length(EMPTY)
    0
    >>> bit_length(normalize([1]))
    1
    >>> bit_length(normalize([0, 1]))
    33
    >>> bit_length(normalize([0xffffffff]))
    32
    """
    if len(buf) == 0:
        return 0
    return (len(buf) - 1) * WORD_BITS + int(buf[-1]).bit_length()


def shift_words_and_bits(buf: np.ndarray, word_shift: int, bit_shift: int) -> np.ndarray:
    """Multiply a magnitude by 2**(word_shift * WORD_BITS + bit_shift).

    Bits pushed out of the top of each word are carried into the next one.

    >>> shift_words_and_bits(normalize([0x80000000]), 0, 1).tolist()
    [0, 1]
    >>> shift_words_and_bits(normalize([3]), 2, 4).tolist()
    [0, 0, 48]
    >>> shift_words_and_bits(EMPTY, 10, 3).tolist()
    []
    """
    if word_shift < 0:
        raise ValueError('word shift must be non-negative, got {}'.format(repr(word_shift)))
    if not 0 <= bit_shift < WORD_BITS:
        raise ValueError('bit shift must be in [0, {}), got {}'.format(WORD_BITS, repr(bit_shift)))

    n = len(buf)
    if n == 0:
        return EMPTY

    result = np.zeros(word_shift + n + 1, dtype=WORD_DTYPE)
    if bit_shift == 0:
        result[word_shift:word_shift + n] = buf
    else:
        wide = buf.astype(_WIDE_DTYPE) << _WIDE_DTYPE(bit_shift)
        result[word_shift:word_shift + n] = (wide & _WIDE_MASK).astype(WORD_DTYPE)
        result[word_shift + 1:] |= (wide >> _WIDE_BITS).astype(WORD_DTYPE)

    return _trim(result)


def drop_low_bits(buf: np.ndarray, nbits: int) -> np.ndarray:
    """Floor division of a magnitude by 2**nbits.

    The dropped bits are simply discarded; no rounding is done.

    >>> drop_low_bits(normalize([0, 1]), 1).tolist()
    [2147483648]
    >>> drop_low_bits(normalize([7, 5]), 32).tolist()
    [5]
    >>> drop_low_bits(normalize([7, 5]), 99).tolist()
    []
    """
    if nbits < 0:
        raise ValueError('cannot drop a negative number of bits: {}'.format(repr(nbits)))

    word_shift, bit_shift = divmod(nbits, WORD_BITS)
    if word_shift >= len(buf):
        return EMPTY

    kept = buf[word_shift:]
    if bit_shift == 0:
        return _trim(kept.copy())

    wide = kept.astype(_WIDE_DTYPE)
    result = wide >> _WIDE_DTYPE(bit_shift)
    result[:-1] |= (wide[1:] << _WIDE_DTYPE(WORD_BITS - bit_shift)) & _WIDE_MASK
    return _trim(result.astype(WORD_DTYPE))


def any_low_bits(buf: np.ndarray, nbits: int) -> bool:
    """Is any of the nbits lowest bits of the magnitude set?

    >>> any_low_bits(normalize([0b1000]), 3)
    False
    >>> any_low_bits(normalize([0b1000]), 4)
    True
    >>> any_low_bits(normalize([0, 1]), 32)
    False
    >>> any_low_bits(normalize([1, 1]), 1000)
    True
    """
    if nbits < 0:
        raise ValueError('cannot test a negative number of bits: {}'.format(repr(nbits)))

    word_shift, bit_shift = divmod(nbits, WORD_BITS)
    if word_shift >= len(buf):
        return len(buf) > 0
    if buf[:word_shift].any():
        return True
    return maskbits(int(buf[word_shift]), bit_shift) != 0


def increment(buf: np.ndarray) -> np.ndarray:
    """Add one to a magnitude, carrying through runs of all-ones words.

    >>> increment(EMPTY).tolist()
    [1]
    >>> increment(normalize([0xffffffff, 0xffffffff])).tolist()
    [0, 0, 1]
    >>> increment(normalize([0xffffffff, 4])).tolist()
    [0, 5]
    """
    not_full = np.flatnonzero(buf != WORD_MASK)
    if not_full.size == 0:
        result = np.zeros(len(buf) + 1, dtype=WORD_DTYPE)
        result[-1] = 1
    else:
        i = int(not_full[0])
        result = buf.copy()
        result[:i] = 0
        result[i] += 1
    return _trim(result)


def decrement(buf: np.ndarray) -> np.ndarray:
    """Subtract one from a nonzero magnitude, borrowing through zero words.

    >>> decrement(normalize([0, 0, 1])).tolist()
    [4294967295, 4294967295]
    >>> decrement(normalize([1])).tolist()
    []
    """
    nonzero = np.flatnonzero(buf)
    if nonzero.size == 0:
        raise ValueError('cannot decrement a zero magnitude')
    i = int(nonzero[0])
    result = buf.copy()
    result[:i] = WORD_MASK
    result[i] -= 1
    return _trim(result)


def compare(a: np.ndarray, b: np.ndarray) -> int:
    """Compare two canonical magnitudes, returning -1, 0 or 1.

    >>> compare(normalize([5]), normalize([0, 1]))
    -1
    >>> compare(normalize([9, 3]), normalize([8, 3]))
    1
    >>> compare(EMPTY, normalize([]))
    0
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    diff = np.flatnonzero(a != b)
    if diff.size == 0:
        return 0
    i = diff[-1]
    return -1 if a[i] < b[i] else 1


def complement(buf: np.ndarray, nwords: int) -> np.ndarray:
    """Bitwise NOT of a magnitude zero-extended to nwords words.

    The result is a raw writeable array of exactly nwords words; it is not
    normalized, since its high words are usually all ones.

    >>> [hex(w) for w in complement(normalize([1]), 2)]
    ['0xfffffffe', '0xffffffff']
    """
    if len(buf) > nwords:
        raise ValueError('cannot complement {} words into {}'.format(len(buf), nwords))
    padded = np.zeros(nwords, dtype=WORD_DTYPE)
    padded[:len(buf)] = buf
    return ~padded


def from_bytes_le(data: bytes, fill: int = 0) -> np.ndarray:
    """Pack little-endian bytes into a raw writeable array of words.

    The input is extended to a whole number of words with the fill byte
    (0x00 for zero extension, 0xff for sign extension of negative values).

    >>> [hex(w) for w in from_bytes_le(b'\\x01\\x02\\x03\\x04\\x05')]
    ['0x4030201', '0x5']
    >>> [hex(w) for w in from_bytes_le(b'\\x80', fill=0xff)]
    ['0xffffff80']
    """
    pad = -len(data) % WORD_BYTES
    raw = bytes(data) + bytes([fill]) * pad
    return np.frombuffer(raw, dtype=_LE_DTYPE).astype(WORD_DTYPE)


def to_bytes_le(buf: np.ndarray) -> bytes:
    """Unpack words into little-endian bytes, WORD_BYTES per word, untrimmed.

    >>> to_bytes_le(normalize([0x01020304]))
    b'\\x04\\x03\\x02\\x01'
    """
    return np.asarray(buf, dtype=WORD_DTYPE).astype(_LE_DTYPE).tobytes()
