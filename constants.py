# https://www.arscreatio.com/repositorio/images/n_23/SC031-N-1915-18004Text.pdf#page=41
# Each tuple is ordered (L, M, Q, H), see ErrorCorrection.index

# Total number of codewords (data + error correction) in a symbol of each version
total_codewords: dict[int, int] = {
    1: 26,
    2: 44,
    3: 70,
    4: 100,
    5: 134,
    6: 172,
    7: 196,
    8: 242,
    9: 292,
    10: 346,
    11: 404,
    12: 466,
    13: 532,
    14: 581,
    15: 655,
    16: 733,
    17: 815,
    18: 901,
    19: 991,
    20: 1085,
    21: 1156,
    22: 1258,
    23: 1364,
    24: 1474,
    25: 1588,
    26: 1706,
    27: 1828,
    28: 1921,
    29: 2051,
    30: 2185,
    31: 2323,
    32: 2465,
    33: 2611,
    34: 2761,
    35: 2876,
    36: 3034,
    37: 3196,
    38: 3362,
    39: 3532,
    40: 3706,
}

# Total number of error correction codewords per version and error correction level
ec_codewords: dict[int, tuple[int, int, int, int]] = {
    1: (7, 10, 13, 17),
    2: (10, 16, 22, 28),
    3: (15, 26, 36, 44),
    4: (20, 36, 52, 64),
    5: (26, 48, 72, 88),
    6: (36, 64, 96, 112),
    7: (40, 72, 108, 130),
    8: (48, 88, 132, 156),
    9: (60, 110, 160, 192),
    10: (72, 130, 192, 224),
    11: (80, 150, 224, 264),
    12: (96, 176, 260, 308),
    13: (104, 198, 288, 352),
    14: (120, 216, 320, 384),
    15: (132, 240, 360, 432),
    16: (144, 280, 408, 480),
    17: (168, 308, 448, 532),
    18: (180, 338, 504, 588),
    19: (196, 364, 546, 650),
    20: (224, 416, 600, 700),
    21: (224, 442, 644, 750),
    22: (252, 476, 690, 816),
    23: (270, 504, 750, 900),
    24: (300, 560, 810, 960),
    25: (312, 588, 870, 1050),
    26: (336, 644, 952, 1110),
    27: (360, 700, 1020, 1200),
    28: (390, 728, 1050, 1260),
    29: (420, 784, 1140, 1350),
    30: (450, 812, 1200, 1440),
    31: (480, 868, 1290, 1530),
    32: (510, 924, 1350, 1620),
    33: (540, 980, 1440, 1710),
    34: (570, 1036, 1530, 1800),
    35: (570, 1064, 1590, 1890),
    36: (600, 1120, 1680, 1980),
    37: (630, 1204, 1770, 2100),
    38: (660, 1260, 1860, 2220),
    39: (720, 1316, 1950, 2310),
    40: (750, 1372, 2040, 2430),
}

# Number of error correction blocks per version and error correction level
ec_blocks: dict[int, tuple[int, int, int, int]] = {
    1: (1, 1, 1, 1),
    2: (1, 1, 1, 1),
    3: (1, 1, 2, 2),
    4: (1, 2, 2, 4),
    5: (1, 2, 4, 4),
    6: (2, 4, 4, 4),
    7: (2, 4, 6, 5),
    8: (2, 4, 6, 6),
    9: (2, 5, 8, 8),
    10: (4, 5, 8, 8),
    11: (4, 5, 8, 11),
    12: (4, 8, 10, 11),
    13: (4, 9, 12, 16),
    14: (4, 9, 16, 16),
    15: (6, 10, 12, 18),
    16: (6, 10, 17, 16),
    17: (6, 11, 16, 19),
    18: (6, 13, 18, 21),
    19: (7, 14, 21, 25),
    20: (8, 16, 20, 25),
    21: (8, 17, 23, 25),
    22: (9, 17, 23, 34),
    23: (9, 18, 25, 30),
    24: (10, 20, 27, 32),
    25: (12, 21, 29, 35),
    26: (12, 23, 34, 37),
    27: (12, 25, 34, 40),
    28: (13, 26, 35, 42),
    29: (14, 28, 38, 45),
    30: (15, 29, 40, 48),
    31: (16, 31, 43, 51),
    32: (17, 33, 45, 54),
    33: (18, 35, 48, 57),
    34: (19, 37, 51, 60),
    35: (19, 38, 53, 63),
    36: (20, 40, 56, 66),
    37: (21, 43, 59, 70),
    38: (22, 45, 62, 74),
    39: (24, 47, 65, 77),
    40: (25, 49, 68, 81),
}
