"""Bit-level writer that packs codes into 32-bit little-endian words."""

from types import TracebackType
from typing import BinaryIO, Optional

from .util import shift_in

_WORD_BITS = 32
_MASK32 = 0xFFFFFFFF


class BitWriter:
    """Accumulates bits most-significant first and writes them out a word at a time."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._count = 0

    def write(self, value: int, nbits: int) -> None:
        """Append the low ``nbits`` bits of ``value``."""
        if not 0 <= nbits <= _WORD_BITS:
            raise ValueError(f"cannot write {nbits} bits at once")
        value &= _MASK32
        if self._count + nbits > _WORD_BITS:
            head = _WORD_BITS - self._count
            tail = nbits - head
            self._buffer = shift_in(self._buffer, value >> tail, head)
            self._count = _WORD_BITS
            self._emit()
            self._buffer = value & ((1 << tail) - 1)
            self._count = tail
        else:
            self._buffer = shift_in(self._buffer, value, nbits)
            self._count += nbits

    def flush(self) -> None:
        """Write any pending bits, left-aligned and zero-padded to a full word."""
        if self._count > 0:
            self._emit()

    def _emit(self) -> None:
        word = (self._buffer << (_WORD_BITS - self._count)) & _MASK32
        self._stream.write(word.to_bytes(4, "little"))
        self._buffer = 0
        self._count = 0

    def __enter__(self) -> "BitWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.flush()