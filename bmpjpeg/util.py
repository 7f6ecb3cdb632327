"""Bit and matrix helpers shared by the encoder and decoder."""

from collections.abc import Sequence

_MASK32 = 0xFFFFFFFF
_MANTISSA_LIMIT = 1 << 20


def bit_length(value: int) -> int:
    """Number of low bits up to and including the highest set bit of a 32-bit value."""
    return (value & _MASK32).bit_length()


def shift_in(a: int, b: int, count: int) -> int:
    """Shift ``a`` left by ``count`` bits and put the low ``count`` bits of ``b`` there."""
    return ((a << count) | (b & ((1 << count) - 1))) & _MASK32


def ones_complement(value: int) -> tuple[int, int]:
    """Return ``(bits, count)``: the ones' complement mantissa of ``value`` and its width.

    Positive values are stored as-is; negative ones have the bits of their
    magnitude inverted. Zero has no bits.
    """
    magnitude = abs(value)
    if magnitude >= _MANTISSA_LIMIT:
        raise ValueError(f"value {value} does not fit in 20 bits")
    count = magnitude.bit_length()
    if value < 0:
        return magnitude ^ ((1 << count) - 1), count
    return magnitude, count


def matmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> list[list[float]]:
    """Matrix product of ``a`` and ``b``."""
    if a and len(a[0]) != len(b):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def transpose(a: Sequence[Sequence[float]]) -> list[list[float]]:
    """Transpose of ``a``."""
    return [list(col) for col in zip(*a)]