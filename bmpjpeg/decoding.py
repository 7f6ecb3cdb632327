"""Decoding of Huffman-coded DC differences and AC run-length pairs."""

from .bitreader import BitReader
from .prefix_tree import ac_tree, dc_tree

COEFFICIENTS = 64
_AC_COUNT = COEFFICIENTS - 1
_ZRL_RUN = 15

_DC_TREE = dc_tree()
_AC_TREE = ac_tree()


def decode_dc(reader: BitReader, previous: int) -> int:
    """Read a DC difference and add it to the ``previous`` DC coefficient."""
    cat = _DC_TREE.decode(reader)
    return previous + reader.read_value(cat)


def decode_ac(reader: BitReader) -> list[int]:
    """Read the 63 AC coefficients of a block in zig-zag order."""
    ac: list[int] = []
    while len(ac) < _AC_COUNT:
        run, size = _AC_TREE.decode(reader)
        if run == 0 and size == 0:
            ac.extend([0] * (_AC_COUNT - len(ac)))
            break
        if size == 0:
            if len(ac) + _ZRL_RUN > _AC_COUNT:
                raise ValueError("run of zeros overflows the block")
            ac.extend([0] * _ZRL_RUN)
            continue
        if len(ac) + run >= _AC_COUNT:
            raise ValueError("run of zeros overflows the block")
        ac.extend([0] * run)
        ac.append(reader.read_value(size))
    return ac


def decode_block(reader: BitReader, previous_dc: int) -> list[int]:
    """Read one block's 64-entry zig-zag coefficient vector."""
    dc = decode_dc(reader, previous_dc)
    return [dc, *decode_ac(reader)]