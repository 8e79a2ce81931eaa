"""Standard operation codes, for the engine and the reference backend."""

from enum import IntEnum, unique

@unique
class Sign(IntEnum):
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

@unique
class OP(IntEnum):
    lshift = 0
    rshift = 1
    neg = 2
    abs = 3

# operations that take a shift amount as their second argument
shift_ops = {OP.lshift, OP.rshift}
