"""8x8 block operations: DCT, quantisation and zig-zag ordering."""

from collections.abc import MutableSequence, Sequence
from enum import Enum

from .consts import DCT, DCT_T, QUANT_CHROMINANCE, QUANT_LUMINANCE
from .util import matmul

BLOCK_SIZE = 8
_LEVEL_SHIFT = 128.0

Block = list[list[float]]


class Component(Enum):
    """Colour plane a block belongs to."""

    LUMINANCE = "L"
    BLUE = "B"
    RED = "R"

    @property
    def quant_table(self) -> tuple[tuple[int, ...], ...]:
        """Quantisation table used for this plane."""
        if self is Component.LUMINANCE:
            return QUANT_LUMINANCE
        return QUANT_CHROMINANCE


def _zigzag_order() -> tuple[tuple[int, int], ...]:
    order: list[tuple[int, int]] = []
    upward = True
    for k in range(BLOCK_SIZE):
        diagonal = [(k - j, j) for j in range(k + 1)]
        order.extend(diagonal if upward else [(c, r) for r, c in diagonal])
        upward = not upward
    last = BLOCK_SIZE - 1
    for k in range(1, BLOCK_SIZE):
        diagonal = [(last - j, k + j) for j in range(BLOCK_SIZE - k)]
        order.extend(diagonal if upward else [(c, r) for r, c in diagonal])
        upward = not upward
    return tuple(order)


ZIGZAG_ORDER = _zigzag_order()


def _check_region(matrix: Sequence[Sequence[float]], row: int, col: int) -> None:
    if row < 0 or col < 0 or row + BLOCK_SIZE > len(matrix):
        raise ValueError(f"block at ({row}, {col}) lies outside the matrix")
    if any(len(matrix[row + i]) < col + BLOCK_SIZE for i in range(BLOCK_SIZE)):
        raise ValueError(f"block at ({row}, {col}) lies outside the matrix")


def extract_block(matrix: Sequence[Sequence[float]], row: int, col: int) -> Block:
    """Copy the 8x8 sub-block whose top-left corner is ``(row, col)``."""
    _check_region(matrix, row, col)
    return [
        [float(v) for v in matrix[row + i][col:col + BLOCK_SIZE]]
        for i in range(BLOCK_SIZE)
    ]


def place_block(
    matrix: Sequence[MutableSequence[float]], row: int, col: int, block: Sequence[Sequence[float]]
) -> None:
    """Write ``block`` into ``matrix`` with its top-left corner at ``(row, col)``."""
    _check_region(matrix, row, col)
    for offset, values in enumerate(block):
        target = matrix[row + offset]
        for j, value in enumerate(values):
            target[col + j] = value


def forward_dct(block: Sequence[Sequence[float]]) -> Block:
    """Level-shift by -128 and apply the 2-D DCT."""
    shifted = [[v - _LEVEL_SHIFT for v in row] for row in block]
    return matmul(matmul(DCT, shifted), DCT_T)


def inverse_dct(block: Sequence[Sequence[float]]) -> Block:
    """Apply the inverse 2-D DCT and undo the level shift."""
    restored = matmul(matmul(DCT_T, block), DCT)
    return [[v + _LEVEL_SHIFT for v in row] for row in restored]


def quantize(block: Sequence[Sequence[float]], component: Component) -> Block:
    """Divide each coefficient by the plane's quantisation table."""
    return [
        [v / q for v, q in zip(row, qrow)]
        for row, qrow in zip(block, component.quant_table)
    ]


def dequantize(block: Sequence[Sequence[float]], component: Component) -> Block:
    """Multiply each coefficient by the plane's quantisation table."""
    return [
        [v * q for v, q in zip(row, qrow)]
        for row, qrow in zip(block, component.quant_table)
    ]


def zigzag(block: Sequence[Sequence[float]]) -> list[int]:
    """Read the block in zig-zag order, truncating each value toward zero."""
    return [int(block[i][j]) for i, j in ZIGZAG_ORDER]


def unzigzag(vector: Sequence[int]) -> Block:
    """Rebuild an 8x8 block from a 64-entry zig-zag vector."""
    if len(vector) != BLOCK_SIZE * BLOCK_SIZE:
        raise ValueError(f"expected 64 values, got {len(vector)}")
    block = [[0.0] * BLOCK_SIZE for _ in range(BLOCK_SIZE)]
    for (i, j), value in zip(ZIGZAG_ORDER, vector):
        block[i][j] = float(value)
    return block


def encode_block(block: Sequence[Sequence[float]], component: Component) -> list[int]:
    """DCT, quantise and zig-zag a block into its 64-entry coefficient vector."""
    return zigzag(quantize(forward_dct(block), component))