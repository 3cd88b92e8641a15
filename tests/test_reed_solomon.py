import unittest

from reedsolo import RSCodec

from encoding import get_codeword_block_information
from error_correction import ErrorCorrection
from exceptions import UninitializedError
from gfpolynomial import mod
from polynomials import generate_error_correction_polynomial
from reed_solomon import ReedSolomonEncoder

HELLO_WORLD_1_M = bytes([32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17])


class TestReedSolomonMethods(unittest.TestCase):
    def test_encode_known_block(self):
        codeword_count = get_codeword_block_information(1, ErrorCorrection.MEDIUM).ec_codewords_per_block
        self.assertEqual(10, codeword_count)

        rs = ReedSolomonEncoder(codeword_count)
        self.assertEqual(
            [196, 35, 39, 119, 235, 215, 231, 226, 93, 23],
            list(rs.encode(HELLO_WORLD_1_M)),
        )

    def test_encode_matches_polynomial_division(self):
        degree = 13
        data = bytes(range(40, 60))
        remainder = mod([*data, *([0] * degree)], generate_error_correction_polynomial(degree).as_integers())
        expected = bytes(degree - len(remainder)) + bytes(remainder)
        self.assertEqual(expected, ReedSolomonEncoder(degree).encode(data))

    def test_encode_matches_reedsolo(self):
        for degree, data in [
            (7, b"\x40\xd4\x86\x56\xc6\xc6\xf2\xc2\x07\x76\xf7\x26\xc6\x42\x10\xec\x11\xec\x11"),
            (18, bytes(range(15))),
            (30, bytes((i * 37) % 256 for i in range(118))),
            (22, b"\x00\x00\x00\x01"),
        ]:
            expected = bytes(RSCodec(degree).encode(bytearray(data))[-degree:])
            self.assertEqual(expected, ReedSolomonEncoder(degree).encode(data), f"degree {degree}")

    def test_encode_pads_short_remainder(self):
        # An all zero block has an all zero remainder, which the division strips entirely
        self.assertEqual(bytes(10), ReedSolomonEncoder(10).encode(bytes(16)))

    def test_encode_length(self):
        for degree in (7, 10, 17, 30):
            self.assertEqual(degree, len(ReedSolomonEncoder(degree).encode(b"Hello, world!")))

    def test_uninitialized(self):
        rs = ReedSolomonEncoder()
        self.assertRaises(UninitializedError, lambda: rs.encode(b"\x01\x02"))

        rs.initialize(10)
        self.assertEqual(
            [196, 35, 39, 119, 235, 215, 231, 226, 93, 23],
            list(rs.encode(HELLO_WORLD_1_M)),
        )
