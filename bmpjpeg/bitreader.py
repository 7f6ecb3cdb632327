"""Bit-level reader matching the word layout produced by the bit writer."""

from typing import BinaryIO


class BitReader:
    """Reads bits most-significant first from 32-bit little-endian words."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._count = 0

    def _load(self) -> None:
        data = self._stream.read(4)
        if not data:
            raise EOFError("no more bits to read")
        self._buffer = int.from_bytes(data, "little")
        self._count = 8 * len(data)

    def read_bit(self) -> int:
        """Return the next bit."""
        if self._count == 0:
            self._load()
        self._count -= 1
        return (self._buffer >> self._count) & 1

    def read_value(self, nbits: int) -> int:
        """Read an ``nbits``-wide ones' complement value; a leading 0 marks a negative."""
        if nbits < 0:
            raise ValueError(f"negative bit count: {nbits}")
        if nbits == 0:
            return 0
        value = 0
        for _ in range(nbits):
            value = (value << 1) | self.read_bit()
        if not value & (1 << (nbits - 1)):
            return -(~value & ((1 << nbits) - 1))
        return value