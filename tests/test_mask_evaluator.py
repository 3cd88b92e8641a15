import unittest

from bit_matrix import BitMatrix
from mask_evaluator import (
    apply_mask,
    evaluation_condition_1,
    evaluation_condition_2,
    evaluation_condition_3,
    evaluation_condition_4,
    get_best_mask,
    get_penalty,
)
from mask_pattern import MaskPattern


def matrix_from_rows(*rows: str) -> BitMatrix:
    matrix = BitMatrix(len(rows))
    for row, values in enumerate(rows):
        for col, value in enumerate(values):
            matrix.set(row, col, value == "1")
    return matrix


class TestMaskPatternMethods(unittest.TestCase):
    def test_mask_patterns(self):
        self.assertTrue(MaskPattern.PATTERN_000.is_masked(0, 0))
        self.assertFalse(MaskPattern.PATTERN_000.is_masked(0, 1))
        self.assertTrue(MaskPattern.PATTERN_001.is_masked(2, 1))
        self.assertTrue(MaskPattern.PATTERN_010.is_masked(1, 3))
        self.assertFalse(MaskPattern.PATTERN_010.is_masked(3, 1))
        self.assertTrue(MaskPattern.PATTERN_011.is_masked(1, 2))

        self.assertTrue(MaskPattern.PATTERN_100.is_masked(0, 0))
        self.assertTrue(MaskPattern.PATTERN_100.is_masked(1, 2))
        self.assertFalse(MaskPattern.PATTERN_100.is_masked(0, 3))
        self.assertFalse(MaskPattern.PATTERN_100.is_masked(2, 0))
        self.assertTrue(MaskPattern.PATTERN_100.is_masked(2, 3))

        self.assertTrue(MaskPattern.PATTERN_101.is_masked(0, 5))
        self.assertFalse(MaskPattern.PATTERN_101.is_masked(1, 1))

        self.assertTrue(MaskPattern.PATTERN_110.is_masked(1, 1))
        self.assertFalse(MaskPattern.PATTERN_110.is_masked(1, 3))
        self.assertFalse(MaskPattern.PATTERN_111.is_masked(1, 1))
        self.assertTrue(MaskPattern.PATTERN_111.is_masked(1, 3))

    def test_mask_pattern_values(self):
        self.assertEqual(list(range(8)), [int(pattern) for pattern in MaskPattern])
        self.assertEqual(MaskPattern.PATTERN_101, MaskPattern(5))


class TestMaskEvaluatorMethods(unittest.TestCase):
    def test_apply_mask_is_its_own_inverse(self):
        matrix = BitMatrix(21)
        matrix.set(3, 4, 1)
        original = matrix.copy()

        for pattern in MaskPattern:
            apply_mask(pattern, matrix)
            self.assertNotEqual(original, matrix)
            apply_mask(pattern, matrix)
            self.assertEqual(original, matrix)

    def test_apply_mask_skips_reserved(self):
        matrix = BitMatrix(4)
        matrix.set(0, 0, 0, reserved=True)
        matrix.set(1, 1, 1, reserved=True)
        apply_mask(MaskPattern.PATTERN_000, matrix)
        self.assertEqual(0, matrix.get(0, 0))
        self.assertEqual(1, matrix.get(1, 1))
        self.assertEqual(1, matrix.get(0, 2))
        self.assertEqual(0, matrix.get(0, 1))

    def test_empty_matrix_penalties(self):
        matrix = BitMatrix(21)
        # 42 lines each with a run of 21: 3 + (21 - 5)
        self.assertEqual(42 * 19, evaluation_condition_1(matrix))
        self.assertEqual(20 * 20 * 3, evaluation_condition_2(matrix))
        self.assertEqual(0, evaluation_condition_3(matrix))
        self.assertEqual(100, evaluation_condition_4(matrix))
        self.assertEqual(798 + 1200 + 100, get_penalty(matrix))

    def test_condition_1_runs(self):
        matrix = matrix_from_rows(
            "1111110",
            "0101010",
            "1010101",
            "0101010",
            "1010101",
            "0101010",
            "1010101",
        )
        # Only the first row has a run, of 6
        self.assertEqual(4, evaluation_condition_1(matrix))

    def test_condition_2_overlapping_blocks(self):
        matrix = matrix_from_rows(
            "1110",
            "1110",
            "0101",
            "1010",
        )
        self.assertEqual(6, evaluation_condition_2(matrix))

    def test_condition_3_finder_like(self):
        matrix = BitMatrix(11)
        for col, value in enumerate("10111010000"):
            matrix.set(0, col, value == "1")
        self.assertEqual(40, evaluation_condition_3(matrix))

        for row, value in enumerate("00001011101"):
            matrix.set(row, 10, value == "1")
        self.assertEqual(80, evaluation_condition_3(matrix))

    def test_condition_4_balance(self):
        self.assertEqual(0, evaluation_condition_4(matrix_from_rows("10", "01")))
        self.assertEqual(50, evaluation_condition_4(matrix_from_rows("10", "00")))
        self.assertEqual(50, evaluation_condition_4(matrix_from_rows("11", "01")))
        self.assertEqual(100, evaluation_condition_4(matrix_from_rows("11", "11")))

    def test_get_best_mask(self):
        matrix = BitMatrix(21)
        written: list[MaskPattern] = []

        best = get_best_mask(matrix, written.append)

        # Every candidate gets its format information written before scoring
        self.assertEqual(list(MaskPattern), written)
        # The matrix is handed back unmasked
        self.assertEqual(BitMatrix(21), matrix)

        penalties = []
        for pattern in MaskPattern:
            candidate = matrix.copy()
            apply_mask(pattern, candidate)
            penalties.append(get_penalty(candidate))
        self.assertEqual(penalties.index(min(penalties)), best)

    def test_get_best_mask_ties_keep_first(self):
        # A fully reserved matrix scores the same under every mask
        matrix = BitMatrix(5)
        for row in range(5):
            for col in range(5):
                matrix.set(row, col, 0, reserved=True)
        self.assertEqual(MaskPattern.PATTERN_000, get_best_mask(matrix, lambda pattern: None))
