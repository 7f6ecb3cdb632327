import io

import pytest

from bmpjpeg.bitreader import BitReader
from bmpjpeg.bitwriter import BitWriter
from bmpjpeg.consts import AC_EOB, AC_TABLE, AC_ZRL, DC_TABLE
from bmpjpeg.prefix_tree import (
    PrefixTree,
    ac_code_length,
    ac_tree,
    dc_code_length,
    dc_tree,
)


def _reader(codes):
    buf = io.BytesIO()
    with BitWriter(buf) as writer:
        for code, nbits in codes:
            writer.write(code, nbits)
    buf.seek(0)
    return BitReader(buf)


def test_dc_code_lengths_of_short_codes():
    assert dc_code_length(3) == 2
    assert dc_code_length(0) == 3
    assert dc_code_length(1) == 3


def test_ac_code_lengths_with_leading_zeros():
    assert ac_code_length(0, 1) == 2
    assert ac_code_length(0, 2) == 2


def test_dc_code_length_rejects_bad_index():
    with pytest.raises(ValueError):
        dc_code_length(len(DC_TABLE))


def test_ac_code_length_rejects_bad_size():
    with pytest.raises(ValueError):
        ac_code_length(0, 0)
    with pytest.raises(ValueError):
        ac_code_length(16, 1)


def test_dc_tree_decodes_every_category():
    codes = [(DC_TABLE[cat], dc_code_length(cat)) for cat in range(len(DC_TABLE))]
    reader = _reader(codes)
    tree = dc_tree()
    assert [tree.decode(reader) for _ in codes] == list(range(len(DC_TABLE)))


def test_ac_tree_decodes_every_symbol():
    symbols = [(run, size) for run in range(len(AC_TABLE)) for size in range(1, 11)]
    codes = [(AC_TABLE[run][size - 1], ac_code_length(run, size)) for run, size in symbols]
    reader = _reader(codes)
    tree = ac_tree()
    assert [tree.decode(reader) for _ in symbols] == symbols


def test_ac_tree_special_codes():
    reader = _reader([(AC_EOB, 4), (AC_ZRL, 12)])
    tree = ac_tree()
    assert tree.decode(reader) == (0, 0)
    assert tree.decode(reader) == (15, 0)


def test_custom_tree_round_trip():
    tree = PrefixTree()
    tree.insert(0b0, 1, "a")
    tree.insert(0b10, 2, "b")
    tree.insert(0b11, 2, "c")
    reader = _reader([(0b11, 2), (0b0, 1), (0b10, 2), (0b0, 1)])
    assert [tree.decode(reader) for _ in range(4)] == ["c", "a", "b", "a"]


def test_insert_rejects_code_extending_a_leaf():
    tree = PrefixTree()
    tree.insert(0b1, 1, "a")
    with pytest.raises(ValueError):
        tree.insert(0b10, 2, "b")


def test_insert_rejects_duplicate_code():
    tree = PrefixTree()
    tree.insert(0b1, 1, "a")
    with pytest.raises(ValueError):
        tree.insert(0b1, 1, "b")


def test_insert_rejects_prefix_of_existing_code():
    tree = PrefixTree()
    tree.insert(0b10, 2, "a")
    with pytest.raises(ValueError):
        tree.insert(0b1, 1, "b")


def test_insert_rejects_bad_lengths():
    tree = PrefixTree()
    with pytest.raises(ValueError):
        tree.insert(0, 0, "a")
    with pytest.raises(ValueError):
        tree.insert(0b100, 2, "a")


def test_failed_insert_leaves_tree_usable():
    tree = PrefixTree()
    tree.insert(0b1, 1, "a")
    with pytest.raises(ValueError):
        tree.insert(0b11, 2, "b")
    tree.insert(0b0, 1, "z")
    reader = _reader([(0b0, 1), (0b1, 1)])
    assert tree.decode(reader) == "z"
    assert tree.decode(reader) == "a"


def test_decode_unknown_code_raises():
    tree = PrefixTree()
    tree.insert(0b1, 1, "a")
    reader = _reader([(0b0, 1)])
    with pytest.raises(ValueError):
        tree.decode(reader)


def test_decode_past_end_of_stream_raises():
    tree = dc_tree()
    with pytest.raises(EOFError):
        tree.decode(BitReader(io.BytesIO(b"")))