"""Describe two's-complement byte strings, and what shifting them does.

    python -m titanint.tools.describe 7fffffff -b -l 1
    python -m titanint.tools.describe "00 80" -r 4 --check

Input is a string of hex bytes (whitespace is ignored), interpreted as a
two's-complement encoding in little-endian byte order unless -b is given.
"""

import sys

from ..titanic import utils
from ..titanic import conversion
from ..titanic import shift
from ..titanic import gmpmath
from ..titanic.ops import OP


def parse_hexbytes(s, byteorder='little'):
    digits = ''.join(s.split())
    if digits.lower().startswith('0x'):
        digits = digits[2:]
    if len(digits) % 2 != 0:
        raise ValueError('odd number of hex digits in {}'.format(repr(s)))
    return conversion.from_bytes(bytes.fromhex(digits), byteorder=byteorder)


def describe(x, byteorder='little'):
    """One-line description of a value: encoding, sign and bit length."""
    return '{:s} ({:s}-endian)  sign {:s}  bits {:d}  {!s}'.format(
        utils.hexbytes(conversion.to_bytes(x, byteorder=byteorder)),
        byteorder,
        x.sign.name,
        x.bit_length(),
        x,
    )


def explain_all(x, lshift=None, rshift=None, byteorder='little', check=False):
    """Describe x, and each requested shift of it.

    Returns the report text and the number of shifts that disagreed with
    the GMP reference (always 0 unless check is set).
    """
    lines = ['input : ' + describe(x, byteorder)]
    mismatches = 0

    requests = []
    if lshift is not None:
        requests.append((OP.lshift, '<<', lshift))
    if rshift is not None:
        requests.append((OP.rshift, '>>', rshift))

    for op, symbol, amount in requests:
        if op == OP.lshift:
            result = shift.shift_left(x, amount)
        else:
            result = shift.shift_right(x, amount)
        lines.append('{:s} {:<4d}: {:s}'.format(symbol, amount, describe(result, byteorder)))

        if check:
            expected = gmpmath.compute(op, x, amount)
            if result.is_identical_to(expected):
                lines.append('        ok (gmpy2)')
            else:
                mismatches += 1
                lines.append('        MISMATCH, gmpy2 gives ' + describe(expected, byteorder))

    return '\n'.join(lines), mismatches


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('x',
                        help='hex bytes of a two\'s-complement encoding')
    parser.add_argument('-b', '--big-endian', action='store_true',
                        help='bytes are given most significant first')
    parser.add_argument('-l', type=int, default=None, metavar='N',
                        help='shift left by N bits (negative N shifts right)')
    parser.add_argument('-r', type=int, default=None, metavar='N',
                        help='shift right by N bits (negative N shifts left)')
    parser.add_argument('--check', action='store_true',
                        help='check results against gmpy2')
    args = parser.parse_args(argv)

    byteorder = 'big' if args.big_endian else 'little'

    try:
        x = parse_hexbytes(args.x, byteorder=byteorder)
    except ValueError as exn:
        parser.error(str(exn))

    report, mismatches = explain_all(x, lshift=args.l, rshift=args.r,
                                     byteorder=byteorder, check=args.check)
    print(report)

    if mismatches:
        print('{:d} result(s) disagree with gmpy2'.format(mismatches),
              file=sys.stderr, flush=True)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
