[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmpjpeg"
version = "0.1.0"
description = "Lossy JPEG-style compression of 24-bit BMP images using DCT, quantisation and Huffman coding"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "jpeg", "dct", "huffman", "compression", "image"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmpjpeg-compress = "bmpjpeg.compress:main"
bmpjpeg-decompress = "bmpjpeg.decompress:main"

[tool.hatch.build.targets.wheel]
packages = ["bmpjpeg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
