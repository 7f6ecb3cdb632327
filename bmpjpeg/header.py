"""BMP file and info headers: parsing, serialising and validation."""

import struct
from dataclasses import astuple, dataclass
from typing import BinaryIO, ClassVar


class HeaderError(ValueError):
    """Raised when a BMP header is truncated or unsupported."""


@dataclass(frozen=True)
class FileHeader:
    """The 14-byte BMP file header."""

    file_type: int
    file_size: int
    reserved1: int
    reserved2: int
    offset_bits: int

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<HIHHI")
    SIZE: ClassVar[int] = FORMAT.size

    @classmethod
    def unpack(cls, data: bytes) -> "FileHeader":
        if len(data) < cls.SIZE:
            raise HeaderError("truncated BMP file header")
        return cls(*cls.FORMAT.unpack_from(data))

    def pack(self) -> bytes:
        return self.FORMAT.pack(*astuple(self))


@dataclass(frozen=True)
class InfoHeader:
    """The 40-byte BMP info header."""

    header_size: int
    width: int
    height: int
    planes: int
    bit_count: int
    compression: int
    image_size: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    colors_used: int
    colors_important: int

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<IiiHHIIiiII")
    SIZE: ClassVar[int] = FORMAT.size

    @classmethod
    def unpack(cls, data: bytes) -> "InfoHeader":
        if len(data) < cls.SIZE:
            raise HeaderError("truncated BMP info header")
        return cls(*cls.FORMAT.unpack_from(data))

    def pack(self) -> bytes:
        return self.FORMAT.pack(*astuple(self))


def read_headers(stream: BinaryIO) -> tuple[FileHeader, InfoHeader]:
    """Read the file header and the info header from ``stream``."""
    file_header = FileHeader.unpack(stream.read(FileHeader.SIZE))
    info_header = InfoHeader.unpack(stream.read(InfoHeader.SIZE))
    return file_header, info_header


def write_headers(stream: BinaryIO, file_header: FileHeader, info_header: InfoHeader) -> None:
    """Write both headers to ``stream``."""
    stream.write(file_header.pack())
    stream.write(info_header.pack())


def validate_headers(file_header: FileHeader, info_header: InfoHeader) -> None:
    """Check for a 54-byte header, 24 bits per pixel and dimensions divisible by 8."""
    if file_header.offset_bits != 54:
        raise HeaderError("invalid header size: must be 54 bytes")
    if info_header.bit_count != 24:
        raise HeaderError("invalid bits per pixel: must be 24")
    if info_header.width % 8 != 0 or info_header.height % 8 != 0:
        raise HeaderError("width and height must be multiples of 8")