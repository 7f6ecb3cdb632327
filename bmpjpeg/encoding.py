"""Huffman coding of DC differences and AC run/value pairs."""

from .consts import AC_EOB, AC_TABLE, AC_ZRL, DC_TABLE
from .util import bit_length, ones_complement, shift_in

_MAX_CATEGORY = 10
_DC_CODE_LENGTHS = (3, 3, 3, 2, 3, 3, 4, 5, 6, 7, 8)
_ZRL_LENGTH = 12
_EOB_LENGTH = 4
_MAX_RUN = 15


def category(value: int) -> int:
    """Size category of ``value``: the bit length of its magnitude, capped at 10."""
    return min(abs(value).bit_length(), _MAX_CATEGORY)


def encode_dc(value: int) -> tuple[int, int]:
    """Code a DC difference; return ``(code, nbits)``."""
    cat = category(value)
    code = shift_in(0, DC_TABLE[cat], _DC_CODE_LENGTHS[cat])
    mantissa, count = ones_complement(value)
    return shift_in(code, mantissa, count), _DC_CODE_LENGTHS[cat] + count


def ac_prefix(zeros: int, cat: int) -> tuple[int, int]:
    """Huffman prefix for a run of ``zeros`` followed by a value of category ``cat``."""
    if not 0 <= zeros <= _MAX_RUN:
        raise ValueError(f"run of zeros out of range: {zeros}")
    if not 0 <= cat <= _MAX_CATEGORY:
        raise ValueError(f"category out of range: {cat}")
    if cat == 0:
        if zeros == _MAX_RUN:
            return AC_ZRL, _ZRL_LENGTH
        if zeros == 0:
            return AC_EOB, _EOB_LENGTH
        raise ValueError(f"no code for a run of {zeros} zeros without a value")
    code = AC_TABLE[zeros][cat - 1]
    nbits = bit_length(code)
    # The two shortest codes begin with zero bits that bit_length cannot see.
    if zeros == 0 and cat == 1:
        nbits += 2
    elif zeros == 0 and cat == 2:
        nbits += 1
    return code, nbits


def encode_ac(zeros: int, value: int) -> tuple[int, int]:
    """Code an AC ``(zeros, value)`` pair; return ``(code, nbits)``."""
    prefix, prefix_bits = ac_prefix(zeros, category(value))
    mantissa, count = ones_complement(value)
    return shift_in(prefix, mantissa, count), prefix_bits + count