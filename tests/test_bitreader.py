import io

import pytest

from bmpjpeg.bitreader import BitReader
from bmpjpeg.bitwriter import BitWriter
from bmpjpeg.util import ones_complement


def test_reads_most_significant_bit_of_little_endian_word_first():
    reader = BitReader(io.BytesIO(b"\x00\x00\x00\x80"))
    bits = [reader.read_bit() for _ in range(32)]
    assert bits[0] == 1
    assert sum(bits) == 1


def test_empty_stream_raises_eof():
    reader = BitReader(io.BytesIO(b""))
    with pytest.raises(EOFError):
        reader.read_bit()


def test_exhausted_stream_raises_eof():
    reader = BitReader(io.BytesIO(b"\xff\xff\xff\xff"))
    assert [reader.read_bit() for _ in range(32)] == [1] * 32
    with pytest.raises(EOFError):
        reader.read_bit()


def test_partial_word_reads_available_bytes():
    reader = BitReader(io.BytesIO(b"\x80"))
    bits = [reader.read_bit() for _ in range(8)]
    assert bits[0] == 1
    assert sum(bits) == 1
    with pytest.raises(EOFError):
        reader.read_bit()


def test_read_value_zero_width():
    reader = BitReader(io.BytesIO(b""))
    assert reader.read_value(0) == 0


def test_read_value_rejects_negative_width():
    reader = BitReader(io.BytesIO(b"\x00\x00\x00\x00"))
    with pytest.raises(ValueError):
        reader.read_value(-1)


@pytest.mark.parametrize("value", [1, -1, 2, -2, 3, -3, 7, -8, 100, -100, 1023, -1023, 524287, -524287])
def test_read_value_round_trip(value):
    mantissa, count = ones_complement(value)
    out = io.BytesIO()
    with BitWriter(out) as writer:
        writer.write(mantissa, count)
    reader = BitReader(io.BytesIO(out.getvalue()))
    assert reader.read_value(count) == value


def test_sequence_of_values_round_trip():
    values = [5, -5, 0, 300, -1, 12, -700]
    out = io.BytesIO()
    with BitWriter(out) as writer:
        for value in values:
            writer.write(*ones_complement(value))
    reader = BitReader(io.BytesIO(out.getvalue()))
    decoded = [reader.read_value(ones_complement(v)[1]) for v in values]
    assert decoded == values