"""24-bit BMP images with their YCbCr planes (chroma downsampled 2x2)."""

from dataclasses import dataclass
from typing import BinaryIO

from .header import FileHeader, HeaderError, InfoHeader, read_headers, validate_headers, write_headers

_BLOCK = 8
_CB_SCALE = 0.564
_CR_SCALE = 0.713
_CHROMA_OFFSET = 128.0
# Pixels of each 2x2 neighbourhood, in the order they are summed.
_NEIGHBOURHOOD = ((0, 0), (1, 0), (1, 1), (0, 1))


def chroma_dimension(size: int) -> int:
    """Size of a chroma plane for a luma size: half of it, rounded up to a multiple of 8."""
    half = size // 2
    remainder = half % _BLOCK
    return half + (_BLOCK - remainder if remainder else 0)


def _clamp(value: float) -> float:
    return max(0.0, min(255.0, value))


def _downsample(
    channel: list[list[int]], luma: list[list[float]], width: int, height: int, scale: float
) -> list[list[float]]:
    half_w, half_h = width // 2, height // 2
    chroma_w, chroma_h = chroma_dimension(width), chroma_dimension(height)

    plane: list[list[float]] = []
    for i in range(0, height, 2):
        row = []
        for j in range(0, width, 2):
            total = sum(channel[i + di][j + dj] - luma[i + di][j + dj] for di, dj in _NEIGHBOURHOOD)
            row.append((scale * total) / 4.0 + _CHROMA_OFFSET)
        if row:
            row.extend([row[-1]] * (chroma_w - half_w))
        plane.append(row)
    if plane:
        plane.extend(list(plane[-1]) for _ in range(chroma_h - half_h))
    return [[_clamp(v) for v in row] for row in plane]


@dataclass
class Image:
    """An RGB image together with its luma and downsampled chroma planes."""

    file_header: FileHeader
    info_header: InfoHeader
    r: list[list[int]]
    g: list[list[int]]
    b: list[list[int]]
    y: list[list[float]]
    cb: list[list[float]]
    cr: list[list[float]]

    @property
    def width(self) -> int:
        return self.info_header.width

    @property
    def height(self) -> int:
        return self.info_header.height

    @property
    def chroma_width(self) -> int:
        return chroma_dimension(self.width)

    @property
    def chroma_height(self) -> int:
        return chroma_dimension(self.height)

    @classmethod
    def from_bmp(cls, stream: BinaryIO) -> "Image":
        """Read a 24-bit BMP and compute its Y, Cb and Cr planes."""
        file_header, info_header = read_headers(stream)
        validate_headers(file_header, info_header)
        width, height = info_header.width, info_header.height
        if width < 0 or height < 0:
            raise HeaderError("negative image dimensions are not supported")

        row_size = 3 * width
        red: list[list[int]] = []
        green: list[list[int]] = []
        blue: list[list[int]] = []
        luma: list[list[float]] = []
        for i in range(height):
            data = stream.read(row_size)
            if len(data) < row_size:
                raise ValueError(f"truncated pixel data in row {i}")
            blues, greens, reds = list(data[0::3]), list(data[1::3]), list(data[2::3])
            blue.append(blues)
            green.append(greens)
            red.append(reds)
            luma.append([
                0.299 * rv + 0.587 * gv + 0.114 * bv
                for rv, gv, bv in zip(reds, greens, blues)
            ])

        cb = _downsample(blue, luma, width, height, _CB_SCALE)
        cr = _downsample(red, luma, width, height, _CR_SCALE)
        y = [[_clamp(v) for v in row] for row in luma]
        return cls(file_header, info_header, red, green, blue, y, cb, cr)

    def write_bmp(self, stream: BinaryIO) -> None:
        """Write the headers and the RGB pixels as a 24-bit BMP."""
        write_headers(stream, self.file_header, self.info_header)
        for reds, greens, blues in zip(self.r, self.g, self.b):
            row = bytearray()
            for rv, gv, bv in zip(reds, greens, blues):
                row += bytes((bv, gv, rv))
            stream.write(bytes(row))