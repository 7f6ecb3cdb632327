"""Binary prefix trees for decoding the Huffman-coded DC and AC symbols."""

from typing import Generic, Optional, TypeVar

from .bitreader import BitReader
from .consts import AC_EOB, AC_TABLE, AC_ZRL, DC_TABLE
from .util import bit_length

T = TypeVar("T")

_MAX_RUN = 15
_MAX_CATEGORY = 10
_EOB_LENGTH = 4
_ZRL_LENGTH = 12


class _Node(Generic[T]):
    __slots__ = ("children", "leaf", "symbol")

    def __init__(self) -> None:
        self.children: list[Optional["_Node[T]"]] = [None, None]
        self.leaf = False
        self.symbol: Optional[T] = None


class PrefixTree(Generic[T]):
    """Maps prefix-free bit codes to symbols, walked one bit at a time."""

    def __init__(self) -> None:
        self._root: _Node[T] = _Node()

    def insert(self, code: int, length: int, symbol: T) -> None:
        """Add the ``length``-bit ``code`` (most significant bit first) for ``symbol``."""
        if length < 1:
            raise ValueError(f"code length must be positive, got {length}")
        if code < 0 or code >> length:
            raise ValueError(f"code {code:#b} does not fit in {length} bits")
        bits = [(code >> shift) & 1 for shift in range(length - 1, -1, -1)]

        node = self._root
        depth = 0
        for bit in bits:
            if node.leaf:
                raise ValueError(f"code {code:#b} extends an existing code")
            child = node.children[bit]
            if child is None:
                break
            node = child
            depth += 1
        else:
            if node.leaf or any(node.children):
                raise ValueError(f"code {code:#b} conflicts with an existing code")

        if node.leaf:
            raise ValueError(f"code {code:#b} extends an existing code")
        for bit in bits[depth:]:
            child = _Node()
            node.children[bit] = child
            node = child
        node.leaf = True
        node.symbol = symbol

    def decode(self, reader: BitReader) -> T:
        """Read bits from ``reader`` until a complete code is seen; return its symbol."""
        node = self._root
        while not node.leaf:
            child = node.children[reader.read_bit()]
            if child is None:
                raise ValueError("invalid prefix code in bit stream")
            node = child
        return node.symbol  # type: ignore[return-value]


def dc_code_length(index: int) -> int:
    """Length in bits of the DC code for size category ``index``."""
    if not 0 <= index < len(DC_TABLE):
        raise ValueError(f"DC category out of range: {index}")
    if index == 3:
        return 2
    if index in (0, 1):
        return 3
    return bit_length(DC_TABLE[index])


def ac_code_length(run: int, size: int) -> int:
    """Length in bits of the AC code for ``run`` zeros followed by a value of category ``size``."""
    if not 0 <= run <= _MAX_RUN:
        raise ValueError(f"run of zeros out of range: {run}")
    if not 1 <= size <= _MAX_CATEGORY:
        raise ValueError(f"AC category out of range: {size}")
    if run == 0 and size in (1, 2):
        return 2
    return bit_length(AC_TABLE[run][size - 1])


def dc_tree() -> PrefixTree[int]:
    """Tree decoding DC codes to their size category."""
    tree: PrefixTree[int] = PrefixTree()
    for cat, code in enumerate(DC_TABLE):
        tree.insert(code, dc_code_length(cat), cat)
    return tree


def ac_tree() -> PrefixTree[tuple[int, int]]:
    """Tree decoding AC codes to ``(run, size)``; EOB is ``(0, 0)`` and ZRL ``(15, 0)``."""
    tree: PrefixTree[tuple[int, int]] = PrefixTree()
    for run, row in enumerate(AC_TABLE):
        for size, code in enumerate(row, start=1):
            tree.insert(code, ac_code_length(run, size), (run, size))
    tree.insert(AC_EOB, _EOB_LENGTH, (0, 0))
    tree.insert(AC_ZRL, _ZRL_LENGTH, (_MAX_RUN, 0))
    return tree