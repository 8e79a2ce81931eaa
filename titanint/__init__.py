from .titanic import utils, ops, words, bigint, shift, conversion, gmpmath

BigInteger = bigint.BigInteger
Sign = ops.Sign
OP = ops.OP

shift_left = shift.shift_left
shift_right = shift.shift_right

from_bytes = conversion.from_bytes
to_bytes = conversion.to_bytes
from_int = conversion.from_int
to_int = conversion.to_int
from_float = conversion.from_float
as_bigint = conversion.as_bigint

bit_length = bigint.bit_length
is_zero = bigint.is_zero
sign = bigint.sign

TitanintError = utils.TitanintError
InvalidEncodingError = utils.InvalidEncodingError
ShiftOverflowError = utils.ShiftOverflowError
ConversionOverflowError = utils.ConversionOverflowError
