import io

import pytest

from bmpjpeg.bitreader import BitReader
from bmpjpeg.bitwriter import BitWriter
from bmpjpeg.block import Component, encode_block, extract_block
from bmpjpeg.compress import compress_image, compress_plane, encode_vector, main
from bmpjpeg.decoding import decode_block
from bmpjpeg.header import FileHeader, InfoHeader
from bmpjpeg.image import Image


def make_bmp(width, height, pixel, bit_count=24):
    size = 3 * width * height
    file_header = FileHeader(0x4D42, 54 + size, 0, 0, 54)
    info_header = InfoHeader(40, width, height, 1, bit_count, 0, size, 0, 0, 0, 0)
    data = bytearray(file_header.pack() + info_header.pack())
    for i in range(height):
        for j in range(width):
            r, g, b = pixel(i, j)
            data += bytes((b, g, r))
    return bytes(data)


def encode_to_bytes(*vectors_and_diffs):
    out = io.BytesIO()
    with BitWriter(out) as writer:
        for vector, diff in vectors_and_diffs:
            encode_vector(writer, vector, diff)
    return out.getvalue()


def test_zero_vector_bytes():
    data = encode_to_bytes(([0] * 64, 0))
    assert data == b"\x00\x00\x00\x54"


def test_vector_round_trip_with_long_zero_runs():
    vector = [5] + [0] * 39 + [-3] + [0] * 10 + [300] + [0] * 12
    assert len(vector) == 64
    data = encode_to_bytes((vector, 5))
    assert decode_block(BitReader(io.BytesIO(data)), 0) == vector


def test_vectors_chain_dc_differences():
    first = [40, 3, -2] + [0] * 61
    second = [-7, 0, 0, 1] + [0] * 60
    data = encode_to_bytes((first, first[0]), (second, second[0] - first[0]))
    reader = BitReader(io.BytesIO(data))
    decoded_first = decode_block(reader, 0)
    decoded_second = decode_block(reader, decoded_first[0])
    assert decoded_first == first
    assert decoded_second == second


def test_encode_vector_rejects_wrong_length():
    with pytest.raises(ValueError):
        encode_to_bytes(([0] * 10, 0))


def test_compress_plane_matches_block_encoding():
    plane = [[float(60 + 3 * i + 2 * j) for j in range(16)] for i in range(16)]
    out = io.BytesIO()
    with BitWriter(out) as writer:
        compress_plane(writer, plane, Component.LUMINANCE)
    reader = BitReader(io.BytesIO(out.getvalue()))
    previous = 0
    for row in (0, 8):
        for col in (0, 8):
            decoded = decode_block(reader, previous)
            previous = decoded[0]
            assert decoded == encode_block(extract_block(plane, row, col), Component.LUMINANCE)


def test_compress_image_keeps_headers_and_word_alignment():
    bmp = make_bmp(8, 8, lambda i, j: (128, 128, 128))
    image = Image.from_bmp(io.BytesIO(bmp))
    out = io.BytesIO()
    compress_image(image, out)
    data = out.getvalue()
    assert data[:54] == bmp[:54]
    assert (len(data) - 54) % 4 == 0


def test_compress_image_uniform_gray_has_zero_blocks():
    bmp = make_bmp(8, 8, lambda i, j: (128, 128, 128))
    image = Image.from_bmp(io.BytesIO(bmp))
    out = io.BytesIO()
    compress_image(image, out)
    reader = BitReader(io.BytesIO(out.getvalue()[54:]))
    for _ in range(3):
        assert decode_block(reader, 0) == [0] * 64


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert "compressor -i" in capsys.readouterr().out


def test_main_missing_arguments(capsys):
    assert main(["-i", "only.bmp"]) == 1
    assert "Erro" in capsys.readouterr().err


def test_main_invalid_option():
    assert main(["-x"]) == 1


def test_main_missing_input_file(tmp_path):
    assert main(["-i", str(tmp_path / "missing.bmp"), "-o", str(tmp_path / "out.bin")]) == 1


def test_main_rejects_wrong_bit_count(tmp_path, capsys):
    source = tmp_path / "in.bmp"
    source.write_bytes(make_bmp(8, 8, lambda i, j: (1, 2, 3), bit_count=32))
    target = tmp_path / "out.bin"
    assert main(["-i", str(source), "-o", str(target)]) == 1
    assert "ERRO" in capsys.readouterr().err
    assert not target.exists()


def test_main_writes_compressed_file(tmp_path, capsys):
    bmp = make_bmp(16, 8, lambda i, j: (100 + i, 90 + j, 80))
    source = tmp_path / "in.bmp"
    source.write_bytes(bmp)
    target = tmp_path / "out.bin"
    assert main(["-i", str(source), "-o", str(target)]) == 0
    assert "sucesso" in capsys.readouterr().out
    assert target.read_bytes()[:54] == bmp[:54]