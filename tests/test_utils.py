import unittest

from color import BLACK, WHITE
from utils import G15_MASK, bose_chaudhuri_hocquenghem, calculate_crc, golay, interleave, to_bits, to_color


class TestUtilsMethods(unittest.TestCase):
    def test_interleave(self):
        self.assertEqual([1, 4, 7, 2, 5, 8, 3, 6, 9], interleave([[1, 2, 3], [4, 5, 6]], [[7, 8, 9]]))
        # Shorter blocks stop contributing once exhausted
        self.assertEqual([1, 3, 6, 2, 4, 7, 5, 8], interleave([[1, 2]], [[3, 4, 5], [6, 7, 8]]))
        self.assertEqual([0, 0, 1], interleave([[0, 1], [0]], []))

    # https://www.thonky.com/qr-code-tutorial/format-version-tables
    def test_bose_chaudhuri_hocquenghem(self):
        # L, mask 4
        self.assertEqual("110011000101111", to_bits(bose_chaudhuri_hocquenghem(0b01100), 15))
        # M, mask 0 has an all zero code word, leaving only the mask
        self.assertEqual(G15_MASK, bose_chaudhuri_hocquenghem(0b00000))
        self.assertEqual("101010000010010", to_bits(bose_chaudhuri_hocquenghem(0b00000), 15))

    def test_golay(self):
        self.assertEqual("000111110010010100", to_bits(golay(7), 18))
        # The data bits are kept as the high bits
        for version in range(7, 41):
            self.assertEqual(version, golay(version) >> 12)

    def test_calculate_crc_remainder_divides(self):
        polynomial = 0b10100110111
        for value in range(32):
            code = calculate_crc(polynomial, value, 15, 5)
            remainder = code
            while remainder.bit_length() >= polynomial.bit_length():
                remainder ^= polynomial << (remainder.bit_length() - polynomial.bit_length())
            self.assertEqual(0, remainder)

    def test_calculate_crc_rejects_wide_values(self):
        self.assertRaises(ValueError, lambda: calculate_crc(0b1111100100101, 64, 18, 6))

    def test_to_color(self):
        self.assertEqual(BLACK, to_color(1))
        self.assertEqual(WHITE, to_color("0"))
        self.assertRaises(ValueError, lambda: to_color(2))
