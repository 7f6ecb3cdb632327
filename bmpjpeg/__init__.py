"""JPEG-style lossy compression and decompression of 24-bit BMP images."""

__version__ = "0.1.0"