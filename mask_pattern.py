from collections.abc import Callable
from enum import IntEnum


# https://www.arscreatio.com/repositorio/images/n_23/SC031-N-1915-18004Text.pdf#page=61
class MaskPattern(IntEnum):
    PATTERN_000 = 0b000
    PATTERN_001 = 0b001
    PATTERN_010 = 0b010
    PATTERN_011 = 0b011
    PATTERN_100 = 0b100
    PATTERN_101 = 0b101
    PATTERN_110 = 0b110
    PATTERN_111 = 0b111

    def is_masked(self, i: int, j: int) -> bool:
        """i is the row and j the column of the module"""
        return _MASK_FUNCTIONS[self](i, j)


_MASK_FUNCTIONS: dict[MaskPattern, Callable[[int, int], bool]] = {
    MaskPattern.PATTERN_000: lambda i, j: (i + j) % 2 == 0,
    MaskPattern.PATTERN_001: lambda i, j: i % 2 == 0,
    MaskPattern.PATTERN_010: lambda i, j: j % 3 == 0,
    MaskPattern.PATTERN_011: lambda i, j: (i + j) % 3 == 0,
    MaskPattern.PATTERN_100: lambda i, j: (i // 2 + j // 3) % 2 == 0,
    MaskPattern.PATTERN_101: lambda i, j: (i * j) % 2 + (i * j) % 3 == 0,
    MaskPattern.PATTERN_110: lambda i, j: ((i * j) % 2 + (i * j) % 3) % 2 == 0,
    MaskPattern.PATTERN_111: lambda i, j: ((i + j) % 2 + (i * j) % 3) % 2 == 0,
}
