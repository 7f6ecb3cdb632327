"""Fixed tables used by the codec: DCT matrices, quantisation and Huffman codes."""

DCT = (
    (0.354, 0.354, 0.354, 0.354, 0.354, 0.354, 0.354, 0.354),
    (0.490, 0.416, 0.278, 0.098, -0.098, -0.278, -0.416, -0.490),
    (0.462, 0.191, -0.191, -0.462, -0.462, -0.191, 0.191, 0.462),
    (0.416, -0.098, -0.490, -0.278, 0.278, 0.490, 0.098, -0.416),
    (0.354, -0.354, -0.354, 0.354, 0.354, -0.354, -0.354, 0.354),
    (0.278, -0.490, 0.098, 0.416, -0.416, -0.098, 0.490, -0.278),
    (0.191, -0.462, 0.462, -0.191, -0.191, 0.462, -0.462, 0.191),
    (0.098, -0.278, 0.416, -0.490, 0.490, -0.416, 0.278, -0.098),
)

DCT_T = (
    (0.354, 0.490, 0.462, 0.416, 0.354, 0.278, 0.191, 0.098),
    (0.354, 0.416, 0.191, -0.098, -0.354, -0.490, -0.462, -0.278),
    (0.354, 0.278, -0.191, -0.490, -0.354, 0.098, 0.462, 0.416),
    (0.354, 0.098, -0.462, -0.278, 0.354, 0.416, -0.191, -0.490),
    (0.354, -0.098, -0.462, 0.278, 0.354, -0.416, -0.191, 0.490),
    (0.354, -0.278, -0.191, 0.490, -0.354, -0.098, 0.462, -0.416),
    (0.354, -0.416, 0.191, 0.098, -0.354, 0.490, -0.462, 0.278),
    (0.354, -0.490, 0.462, -0.416, 0.354, -0.278, 0.191, -0.098),
)

DCT_INV = (
    (0.35310734, 0.49006566, 0.46213864, 0.41627118, 0.35310734, 0.27751497, 0.19105732, 0.09744750),
    (0.35310734, 0.41627118, 0.19105732, -0.09744750, -0.35310734, -0.49006566, -0.46213864, -0.27751497),
    (0.35310734, 0.27751497, -0.19105732, -0.49006566, -0.35310734, 0.09744750, 0.46213864, 0.41627118),
    (0.35310734, 0.09744750, -0.46213864, -0.27751497, 0.35310734, 0.41627118, -0.19105732, -0.49006566),
    (0.35310734, -0.09744750, -0.46213864, 0.27751497, 0.35310734, -0.41627118, -0.19105732, 0.49006566),
    (0.35310734, -0.27751497, -0.19105732, 0.49006566, -0.35310734, -0.09744750, 0.46213864, -0.41627118),
    (0.35310734, -0.41627118, 0.19105732, 0.09744750, -0.35310734, 0.49006566, -0.46213864, 0.27751497),
    (0.35310734, -0.49006566, 0.46213864, -0.41627118, 0.35310734, -0.27751497, 0.19105732, -0.09744750),
)

DCT_T_INV = (
    (0.35310734, 0.35310734, 0.35310734, 0.35310734, 0.35310734, 0.35310734, 0.35310734, 0.35310734),
    (0.49006566, 0.41627118, 0.27751497, 0.09744750, -0.09744750, -0.27751497, -0.41627118, -0.49006566),
    (0.46213864, 0.19105732, -0.19105732, -0.46213864, -0.46213864, -0.19105732, 0.19105732, 0.46213864),
    (0.41627118, -0.09744750, -0.49006566, -0.27751497, 0.27751497, 0.49006566, 0.09744750, -0.41627118),
    (0.35310734, -0.35310734, -0.35310734, 0.35310734, 0.35310734, -0.35310734, -0.35310734, 0.35310734),
    (0.27751497, -0.49006566, 0.09744750, 0.41627118, -0.41627118, -0.09744750, 0.49006566, -0.27751497),
    (0.19105732, -0.46213864, 0.46213864, -0.19105732, -0.19105732, 0.46213864, -0.46213864, 0.19105732),
    (0.09744750, -0.27751497, 0.41627118, -0.49006566, 0.49006566, -0.41627118, 0.27751497, -0.09744750),
)

QUANT_LUMINANCE = (
    (16, 11, 10, 16, 24, 40, 51, 61),
    (12, 12, 14, 19, 26, 58, 60, 55),
    (14, 13, 16, 24, 40, 57, 69, 56),
    (14, 17, 22, 29, 51, 87, 80, 62),
    (18, 22, 37, 56, 68, 109, 103, 77),
    (24, 35, 55, 64, 81, 104, 113, 92),
    (79, 64, 78, 87, 103, 121, 120, 101),
    (72, 92, 95, 98, 112, 100, 103, 99),
)

QUANT_CHROMINANCE = (
    (17, 18, 24, 47, 99, 99, 99, 99),
    (18, 21, 26, 66, 99, 99, 99, 99),
    (24, 26, 56, 99, 99, 99, 99, 99),
    (47, 66, 99, 99, 99, 99, 99, 99),
    (99, 99, 99, 99, 99, 99, 99, 99),
    (99, 99, 99, 99, 99, 99, 99, 99),
    (99, 99, 99, 99, 99, 99, 99, 99),
    (99, 99, 99, 99, 99, 99, 99, 99),
)

# Code for a run of fifteen zeros (ZRL) in the AC stream.
AC_ZRL = 0b111111110111
# Code marking the end of a block (EOB) in the AC stream.
AC_EOB = 0b1010

# AC codes indexed by [run of zeros][size category - 1].
AC_TABLE = (
    (0b00, 0b01, 0b100, 0b1011, 0b11010, 0b111000, 0b1111000, 0b1111110110, 0xFF82, 0xFF83),
    (0b1100, 0b111001, 0b1111001, 0b111110110, 0b11111110110, 0xFF84, 0xFF85, 0xFF86, 0xFF87, 0xFF88),
    (0b11011, 0b11111000, 0b1111110111, 0xFF89, 0xFF8A, 0xFF8B, 0xFF8C, 0xFF8D, 0xFF8E, 0xFF8F),
    (0b111010, 0b111110111, 0b11111110111, 0xFF90, 0xFF91, 0xFF92, 0xFF93, 0xFF94, 0xFF95, 0xFF96),
    (0b111011, 0b1111111000, 0xFF97, 0xFF98, 0xFF99, 0xFF9A, 0xFF9B, 0xFF9C, 0xFF9D, 0xFF9E),
    (0b1111010, 0b1111111001, 0xFF9F, 0xFFA0, 0xFFA1, 0xFFA2, 0xFFA3, 0xFFA4, 0xFFA5, 0xFFA6),
    (0b1111011, 0b11111111000, 0xFFA7, 0xFFA8, 0xFFA9, 0xFFAA, 0xFFAB, 0xFFAC, 0xFFAD, 0xFFAE),
    (0b11111001, 0b11111111001, 0xFFAF, 0xFFB0, 0xFFB1, 0xFFB2, 0xFFB3, 0xFFB4, 0xFFB5, 0xFFB6),
    (0b11111010, 0b111111111000000, 0xFFB7, 0xFFB8, 0xFFB9, 0xFFBA, 0xFFBB, 0xFFBC, 0xFFBD, 0xFFBE),
    (0b111111000, 0xFFBF, 0xFFC0, 0xFFC1, 0xFFC2, 0xFFC3, 0xFFC4, 0xFFC5, 0xFFC6, 0xFFC7),
    (0b111111001, 0xFFC8, 0xFFC9, 0xFFCA, 0xFFCB, 0xFFCC, 0xFFCD, 0xFFCE, 0xFFCF, 0xFFD0),
    (0b111111010, 0xFFD1, 0xFFD2, 0xFFD3, 0xFFD4, 0xFFD5, 0xFFD6, 0xFFD7, 0xFFD8, 0xFFD9),
    (0b1111111010, 0xFFDA, 0xFFDB, 0xFFDC, 0xFFDD, 0xFFDE, 0xFFDF, 0xFFE0, 0xFFE1, 0xFFE2),
    (0b11111111010, 0xFFE3, 0xFFE4, 0xFFE5, 0xFFE6, 0xFFE7, 0xFFE8, 0xFFE9, 0xFFEA, 0xFFEB),
    (0b111111110110, 0xFFEC, 0xFFED, 0xFFEE, 0xFFEF, 0xFFF0, 0xFFF1, 0xFFF2, 0xFFF3, 0xFFF4),
    (0xFFF5, 0xFFF6, 0xFFF7, 0xFFF8, 0xFFF9, 0xFFFA, 0xFFFB, 0xFFFC, 0xFFFD, 0xFFFE),
)

# DC codes indexed by size category 0..10.
DC_TABLE = (
    0b010,
    0b011,
    0b100,
    0b00,
    0b101,
    0b110,
    0b1110,
    0b11110,
    0b111110,
    0b1111110,
    0b11111110,
)