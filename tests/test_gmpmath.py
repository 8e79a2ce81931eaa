import gmpy2 as gmp
import pytest

from titanint import OP, from_int, from_bytes, shift_left, shift_right
from titanint.titanic import gmpmath


EDGE_VALUES = [0, 1, -1, 127, 128, -128, -129, 255, 256, -256,
               2**31 - 1, -2**31, 2**32, -2**32, 2**63, -2**63 - 1, 3**100, -3**100]


@pytest.mark.parametrize('i', EDGE_VALUES)
def test_to_mpz(i):
    z = gmpmath.to_mpz(from_int(i))
    assert isinstance(z, type(gmp.mpz(0)))
    assert z == i


@pytest.mark.parametrize('i', EDGE_VALUES)
def test_from_mpz(i):
    x = gmpmath.from_mpz(gmp.mpz(i))
    assert x.is_identical_to(from_int(i))


def test_to_mpz_accepts_ints():
    assert gmpmath.to_mpz(-12345) == -12345


def _samples(rng, n=40):
    for _ in range(n):
        data = bytes(rng.getrandbits(8) for _ in range(rng.randint(1, 64)))
        yield from_bytes(data), rng.randint(-600, 600)


def test_shifts_match_gmp(rng):
    for x, amount in _samples(rng):
        assert shift_left(x, amount).is_identical_to(gmpmath.compute(OP.lshift, x, amount))
        assert shift_right(x, amount).is_identical_to(gmpmath.compute(OP.rshift, x, amount))


def test_shift_saturation_matches_gmp():
    for i in (5, -5, 2**40, -2**40, -(2**64) - 1):
        x = from_int(i)
        k = x.bit_length() + 3
        assert shift_right(x, k).is_identical_to(gmpmath.compute(OP.rshift, x, k))
        assert shift_left(x, -k).is_identical_to(gmpmath.compute(OP.lshift, x, -k))


def test_sign_ops_match_gmp(rng):
    for x, _ in _samples(rng, n=20):
        assert (-x).is_identical_to(gmpmath.compute(OP.neg, x))
        assert abs(x).is_identical_to(gmpmath.compute(OP.abs, x))


def test_compute_argument_errors():
    x = from_int(3)
    with pytest.raises(ValueError):
        gmpmath.compute(OP.lshift, x)
    with pytest.raises(ValueError):
        gmpmath.compute(OP.rshift, x, None)
    with pytest.raises(ValueError):
        gmpmath.compute(OP.neg, x, 1)
    with pytest.raises(ValueError):
        gmpmath.compute('sqrt', x)
