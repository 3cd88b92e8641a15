import unittest

from error_correction import ErrorCorrection


class TestErrorCorrectionMethods(unittest.TestCase):
    def test_format_bits(self):
        self.assertEqual([0b01, 0b00, 0b11, 0b10], [int(level) for level in ErrorCorrection])

    def test_index(self):
        self.assertEqual(0, ErrorCorrection.LOW.index)
        self.assertEqual(1, ErrorCorrection.MEDIUM.index)
        self.assertEqual(2, ErrorCorrection.QUARTILE.index)
        self.assertEqual(3, ErrorCorrection.HIGH.index)

    def test_from_letter(self):
        self.assertEqual(ErrorCorrection.QUARTILE, ErrorCorrection.from_letter("Q"))
        self.assertEqual(ErrorCorrection.HIGH, ErrorCorrection.from_letter("h"))
        self.assertRaises(ValueError, lambda: ErrorCorrection.from_letter("X"))
