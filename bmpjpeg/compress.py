"""Compression of a 24-bit BMP image into the block-coded binary format."""

import getopt
import sys
from collections.abc import Sequence
from typing import BinaryIO, Optional

from .bitwriter import BitWriter
from .block import BLOCK_SIZE, Component, encode_block, extract_block
from .encoding import encode_ac, encode_dc
from .header import HeaderError, write_headers
from .image import Image

_COEFFICIENTS = BLOCK_SIZE * BLOCK_SIZE
_ZRL_RUN = 15

_USAGE = (
    "Uso: compressor -i <input.bmp> -o <output.bin>\n"
    "Opções:\n"
    "  -i    Caminho da imagem BMP de entrada\n"
    "  -o    Caminho do arquivo .bin de saída\n"
    "  -h    Mostrar esta ajuda"
)


def encode_vector(writer: BitWriter, vector: Sequence[int], dc_diff: int) -> None:
    """Write one block: the DC difference, the AC run/value pairs and an end-of-block code."""
    if len(vector) != _COEFFICIENTS:
        raise ValueError(f"expected {_COEFFICIENTS} coefficients, got {len(vector)}")
    writer.write(*encode_dc(dc_diff))

    zeros = 0
    for value in vector[1:]:
        if value == 0:
            zeros += 1
            continue
        while zeros >= _ZRL_RUN:
            writer.write(*encode_ac(_ZRL_RUN, 0))
            zeros -= _ZRL_RUN
        writer.write(*encode_ac(zeros, value))
        zeros = 0

    writer.write(*encode_ac(0, 0))


def compress_plane(
    writer: BitWriter, plane: Sequence[Sequence[float]], component: Component
) -> None:
    """Encode every 8x8 block of ``plane`` in row-major order, DC coded by difference."""
    height = len(plane)
    width = len(plane[0]) if plane else 0
    last_dc = 0
    for row in range(0, height, BLOCK_SIZE):
        for col in range(0, width, BLOCK_SIZE):
            vector = encode_block(extract_block(plane, row, col), component)
            encode_vector(writer, vector, vector[0] - last_dc)
            last_dc = vector[0]


def compress_image(image: Image, stream: BinaryIO) -> None:
    """Write the BMP headers followed by the coded Y, Cb and Cr planes."""
    write_headers(stream, image.file_header, image.info_header)
    with BitWriter(stream) as writer:
        compress_plane(writer, image.y, Component.LUMINANCE)
        compress_plane(writer, image.cb, Component.BLUE)
        compress_plane(writer, image.cr, Component.RED)


def main(argv: Optional[list[str]] = None) -> int:
    """Command line entry point: ``-i input.bmp -o output.bin``."""
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
        print("Erro: é necessário informar entrada (-i) e saída (-o).", file=sys.stderr)
        print(_USAGE)
        return 1

    try:
        source = open(input_path, "rb")
    except OSError as exc:
        print(f"Erro ao abrir imagem de entrada: {exc.strerror}", file=sys.stderr)
        return 1

    with source:
        try:
            image = Image.from_bmp(source)
        except HeaderError as exc:
            print(f"ERRO: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            print(f"Erro: {exc}", file=sys.stderr)
            return 1

    try:
        target = open(output_path, "wb")
    except OSError as exc:
        print(f"Erro ao abrir arquivo de saída: {exc.strerror}", file=sys.stderr)
        return 1

    with target:
        compress_image(image, target)

    print("Compressão finalizada com sucesso!")
    return 0