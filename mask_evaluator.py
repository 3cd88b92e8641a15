import logging
from collections.abc import Callable

from bit_matrix import BitMatrix
from mask_pattern import MaskPattern

logger = logging.getLogger(__name__)

# https://www.arscreatio.com/repositorio/images/n_23/SC031-N-1915-18004Text.pdf#page=62
PENALTY_N1: int = 3
PENALTY_N2: int = 3
PENALTY_N3: int = 40
PENALTY_N4: int = 10

# Light modules on both sides of a 1:1:3:1:1 finder-like sequence
FINDER_LIKE_PATTERNS: tuple[str, str] = ("10111010000", "00001011101")


def apply_mask(pattern: MaskPattern, matrix: BitMatrix) -> None:
    """Toggle every non-reserved module selected by the pattern. Applying twice undoes it"""
    for row in range(matrix.size):
        for col in range(matrix.size):
            if matrix.is_reserved(row, col):
                continue
            if pattern.is_masked(row, col):
                matrix.xor(row, col, 1)


def _rows_and_columns(matrix: BitMatrix) -> list[list[int]]:
    transpose_matrix = [list(values) for values in zip(*matrix.data)]
    return [*matrix.data, *transpose_matrix]


def evaluation_condition_1(matrix: BitMatrix) -> int:
    """Runs of five or more same colored modules in a row or column"""
    penalty = 0
    for line in _rows_and_columns(matrix):
        count = 0
        prev_cell: int | None = None
        for cell in line:
            if cell == prev_cell:
                count += 1
            else:
                count = 1
                prev_cell = cell

            if count == 5:
                penalty += PENALTY_N1
            elif count > 5:
                penalty += 1

    return penalty


def evaluation_condition_2(matrix: BitMatrix) -> int:
    """Every 2x2 block of same colored modules, overlapping blocks included"""
    penalty = 0
    data = matrix.data
    for row in range(matrix.size - 1):
        for col in range(matrix.size - 1):
            cell = data[row][col]
            if cell == data[row][col + 1] == data[row + 1][col] == data[row + 1][col + 1]:
                penalty += PENALTY_N2

    return penalty


def evaluation_condition_3(matrix: BitMatrix) -> int:
    window_size = 11
    penalty = 0
    for line in _rows_and_columns(matrix):
        text = "".join("1" if cell else "0" for cell in line)
        for col in range(len(text) + 1 - window_size):
            if text[col : col + window_size] in FINDER_LIKE_PATTERNS:
                penalty += PENALTY_N3

    return penalty


def evaluation_condition_4(matrix: BitMatrix) -> int:
    """Deviation of the dark module ratio from 50%, in steps of 5%"""
    total_cells = matrix.size * matrix.size
    dark_cell_count = sum(sum(row) for row in matrix.data)
    # ceil((100 * dark / total) / 5) in exact integer arithmetic
    next_multiple_of_5 = -(-dark_cell_count * 20 // total_cells)
    return PENALTY_N4 * abs(next_multiple_of_5 - 10)


def get_penalty(matrix: BitMatrix) -> int:
    penalty_1 = evaluation_condition_1(matrix)
    penalty_2 = evaluation_condition_2(matrix)
    penalty_3 = evaluation_condition_3(matrix)
    penalty_4 = evaluation_condition_4(matrix)
    total_penalty = penalty_1 + penalty_2 + penalty_3 + penalty_4

    logger.debug("Penalties N1=%d N2=%d N3=%d N4=%d total=%d", penalty_1, penalty_2, penalty_3, penalty_4, total_penalty)

    return total_penalty


def get_best_mask(matrix: BitMatrix, format_writer: Callable[[MaskPattern], None]) -> MaskPattern:
    """Score every mask on the matrix and return the first one with the lowest penalty

    The matrix is left unmasked, but its format information is the one of the
    last candidate tried. The caller is expected to write the winner's format
    information and apply it.
    """
    best_mask: MaskPattern = MaskPattern.PATTERN_000
    best_score: int | None = None
    for pattern in MaskPattern:
        format_writer(pattern)
        apply_mask(pattern, matrix)

        penalty = get_penalty(matrix)
        logger.debug("Mask %d scored %d", pattern, penalty)

        # Applying the mask again will "unapply" it
        apply_mask(pattern, matrix)

        if best_score is None or penalty < best_score:
            best_score = penalty
            best_mask = pattern

    logger.debug("Determined best mask was %d with a score of %s", best_mask, best_score)
    return best_mask
