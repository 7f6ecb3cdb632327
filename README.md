# bmpjpeg

A small lossy image codec for 24-bit BMP files, built on the JPEG
baseline pipeline:

1. RGB is converted to YCbCr; the Cb and Cr planes are downsampled 2×2
   and padded, by repeating their last row and column, to multiples of 8.
2. Each plane is split into 8×8 blocks, level-shifted by 128 and
   transformed with a DCT.
3. Coefficients are quantised with the standard luminance and
   chrominance tables.
4. Blocks are read in zig-zag order; DC values are coded as differences
   from the previous block and AC values as run-length pairs, both with
   fixed Huffman tables.

The compressed file holds the original 54 bytes of BMP headers followed
by the bit stream, packed into 32-bit little-endian words (the last word
zero-padded). Decompression reverses every step and writes a new BMP.

## Requirements on the input

* 24 bits per pixel
* a 54-byte header (pixel data starting at offset 54)
* width and height both multiples of 8 and not negative

Images that break these rules are rejected with `bmpjpeg.header.HeaderError`.

## Installation

```
pip install .
```

## Command line

Compress a BMP image:

```
bmpjpeg-compress -i photo.bmp -o photo.bin
```

Restore it:

```
bmpjpeg-decompress -i photo.bin -o restored.bmp
```

Both commands accept `-h` to show their usage. Each returns 0 on success
and 1 when an option is unknown, `-i` or `-o` is missing, a file cannot
be opened, or the input cannot be read.

## Library use

```python
from bmpjpeg.image import Image
from bmpjpeg.compress import compress_image
from bmpjpeg.decompress import decompress_image

with open("photo.bmp", "rb") as src, open("photo.bin", "wb") as dst:
    compress_image(Image.from_bmp(src), dst)

with open("photo.bin", "rb") as src, open("restored.bmp", "wb") as dst:
    decompress_image(src).write_bmp(dst)
```

`Image` keeps the headers, the `r`, `g`, `b` pixel planes and the `y`,
`cb`, `cr` planes; `chroma_dimension(size)` gives the padded size of a
chroma plane.

The lower-level pieces are available too:

* `bmpjpeg.header` – `FileHeader`, `InfoHeader`, `read_headers`,
  `write_headers`, `validate_headers`
* `bmpjpeg.block` – `Component`, `extract_block`, `place_block`,
  `forward_dct`, `inverse_dct`, `quantize`, `dequantize`, `zigzag`,
  `unzigzag`, `encode_block`
* `bmpjpeg.encoding` – `category`, `encode_dc`, `ac_prefix`, `encode_ac`
  (each coder returns `(code, nbits)`)
* `bmpjpeg.decoding` – `decode_dc`, `decode_ac`, `decode_block`
* `bmpjpeg.prefix_tree` – `PrefixTree`, `dc_tree`, `ac_tree`
* `bmpjpeg.bitwriter.BitWriter` and `bmpjpeg.bitreader.BitReader` –
  bit-level I/O; `BitWriter` is a context manager that flushes on exit
* `bmpjpeg.compress` – `encode_vector`, `compress_plane`, `compress_image`
* `bmpjpeg.util` – `bit_length`, `shift_in`, `ones_complement`,
  `matmul`, `transpose`

## Limitations

* The `.bin` format is specific to this package; it is not a JPEG/JFIF
  file and other image tools cannot open it.
* The quality is fixed: quantisation always uses the standard tables
  unscaled, and there is no option to change it.
* The decompressor does not check the headers it reads back, so it
  expects files written by this package.

## Running the tests

```
pip install .[test]
pytest
```