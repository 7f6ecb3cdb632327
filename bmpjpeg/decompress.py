"""Decompression of the block-coded binary format back into a BMP image."""

import getopt
import sys
from typing import BinaryIO, Optional

from .bitreader import BitReader
from .block import BLOCK_SIZE, Component, dequantize, inverse_dct, place_block, unzigzag
from .decoding import decode_block
from .header import HeaderError, read_headers
from .image import Image, chroma_dimension

_USAGE = (
    "Uso: descompressor -i <input.bin> -o <output.bmp>\n"
    "Opções:\n"
    "  -i    Caminho do arquivo .bin de entrada\n"
    "  -o    Caminho do arquivo .bmp de saída\n"
    "  -h    Mostrar esta ajuda"
)


def _read_vectors(reader: BitReader, count: int) -> list[list[int]]:
    vectors: list[list[int]] = []
    previous = 0
    for _ in range(count):
        vector = decode_block(reader, previous)
        previous = vector[0]
        vectors.append(vector)
    return vectors


def _rebuild_plane(
    vectors: list[list[int]], width: int, height: int, component: Component
) -> list[list[float]]:
    plane = [[0.0] * width for _ in range(height)]
    for index, vector in enumerate(vectors):
        offset = index * BLOCK_SIZE
        block = inverse_dct(dequantize(unzigzag(vector), component))
        place_block(plane, BLOCK_SIZE * (offset // width), offset % width, block)
    return plane


def _to_byte(value: float) -> int:
    return int(max(0.0, min(255.0, value)))


def decompress_image(stream: BinaryIO) -> Image:
    """Read a compressed stream and rebuild the image with its RGB pixels."""
    file_header, info_header = read_headers(stream)
    width, height = info_header.width, info_header.height
    if width < 0 or height < 0:
        raise HeaderError("negative image dimensions are not supported")

    chroma_w, chroma_h = chroma_dimension(width), chroma_dimension(height)
    luma_blocks = (height // BLOCK_SIZE) * (width // BLOCK_SIZE)
    chroma_blocks = (chroma_h // BLOCK_SIZE) * (chroma_w // BLOCK_SIZE)

    reader = BitReader(stream)
    luma_vectors = _read_vectors(reader, luma_blocks)
    cb_vectors = _read_vectors(reader, chroma_blocks)
    cr_vectors = _read_vectors(reader, chroma_blocks)

    y = _rebuild_plane(luma_vectors, width, height, Component.LUMINANCE)
    cb = _rebuild_plane(cb_vectors, chroma_w, chroma_h, Component.BLUE)
    cr = _rebuild_plane(cr_vectors, chroma_w, chroma_h, Component.RED)

    red: list[list[int]] = []
    green: list[list[int]] = []
    blue: list[list[int]] = []
    for i, luma_row in enumerate(y):
        cb_row, cr_row = cb[i // 2], cr[i // 2]
        reds, greens, blues = [], [], []
        for j, luma in enumerate(luma_row):
            cr_value = cr_row[j // 2] - 128.0
            cb_value = cb_row[j // 2] - 128.0
            reds.append(_to_byte(luma + 1.402 * cr_value))
            greens.append(_to_byte(luma - 0.344 * cb_value - 0.714 * cr_value))
            blues.append(_to_byte(luma + 1.772 * cb_value))
        red.append(reds)
        green.append(greens)
        blue.append(blues)

    return Image(file_header, info_header, red, green, blue, y, cb, cr)


def main(argv: Optional[list[str]] = None) -> int:
    """Command line entry point: ``-i input.bin -o output.bmp``."""
    args = sys.argv[1:] if argv is None else argv
    try:
        options, _ = getopt.gnu_getopt(args, "i:o:h")
    except getopt.GetoptError:
        print("Argumento inválido.", file=sys.stderr)
        print(_USAGE)
        return 1

    input_path: Optional[str] = None
    output_path: Optional[str] = None
    for flag, value in options:
        if flag == "-i":
            input_path = value
        elif flag == "-o":
            output_path = value
        elif flag == "-h":
            print(_USAGE)
            return 0

    if not input_path or not output_path:
        print("Erro: entrada (-i) e saída (-o) são obrigatórias.", file=sys.stderr)
        print(_USAGE)
        return 1

    try:
        source = open(input_path, "rb")
    except OSError as exc:
        print(f"Erro ao abrir arquivo de entrada: {exc.strerror}", file=sys.stderr)
        return 1

    with source:
        try:
            target = open(output_path, "wb")
        except OSError as exc:
            print(f"Erro ao abrir arquivo de saída: {exc.strerror}", file=sys.stderr)
            return 1
        with target:
            try:
                image = decompress_image(source)
            except (ValueError, EOFError) as exc:
                print(f"Erro: {exc}", file=sys.stderr)
                return 1
            image.write_bmp(target)

    print("Descompressão finalizada com sucesso!")
    return 0