from collections.abc import Iterator
from math import ceil

from anchor_position import AnchorPosition
from bit_matrix import BitMatrix
from error_correction import ErrorCorrection
from mask_pattern import MaskPattern
from utils import bose_chaudhuri_hocquenghem, golay, to_bits

# None leaves the module untouched
Artifact = list[list[int | None]]

FINDER_PATTERN: Artifact = [
    [1, 1, 1, 1, 1, 1, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1],
]

SEPARATOR_PATTERN: Artifact = [
    [None, None, None, None, None, None, None, 0],
    [None, None, None, None, None, None, None, 0],
    [None, None, None, None, None, None, None, 0],
    [None, None, None, None, None, None, None, 0],
    [None, None, None, None, None, None, None, 0],
    [None, None, None, None, None, None, None, 0],
    [None, None, None, None, None, None, None, 0],
    [0, 0, 0, 0, 0, 0, 0, 0],
]

ALIGNMENT_PATTERN: Artifact = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 1, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]


# From https://www.arscreatio.com/repositorio/images/n_23/SC031-N-1915-18004Text.pdf#page=87
def get_alignment_pattern_positions(version: int) -> list[int]:
    if version == 1:
        return []

    size = (4 * version) + 17
    count = version // 7 + 2
    # Version 32 is the one version whose spacing does not follow the formula
    intervals = 26 if size == 145 else ceil((size - 13) / (2 * count - 2)) * 2

    positions = [size - 7]
    for _ in range(count - 2):
        positions.append(positions[-1] - intervals)
    positions.append(6)

    return list(reversed(positions))


class QRCodeDrawer:
    """Writes structural patterns and data into a BitMatrix"""

    matrix: BitMatrix
    size: int

    def __init__(self, matrix: BitMatrix):
        self.matrix = matrix
        self.size = matrix.size

    def place_artifact(
        self,
        artifact: Artifact,
        anchorPosition: AnchorPosition,
        padding_row: int = 0,
        padding_column: int = 0,
    ) -> None:
        match anchorPosition:
            case AnchorPosition.TOP_LEFT:
                row_offset = padding_row
                column_offset = padding_column
            case AnchorPosition.TOP_RIGHT:
                row_offset = padding_row
                column_offset = self.size - len(artifact[0]) - padding_column
            case AnchorPosition.BOTTOM_LEFT:
                row_offset = self.size - len(artifact) - padding_row
                column_offset = padding_column
            case AnchorPosition.BOTTOM_RIGHT:
                row_offset = self.size - len(artifact) - padding_row
                column_offset = self.size - len(artifact[0]) - padding_column

        # Make artifact a clone, so we don't impact the original
        artifact = [row[:] for row in artifact]

        # Flip horizontally if position to the right
        if anchorPosition in [AnchorPosition.TOP_RIGHT, AnchorPosition.BOTTOM_RIGHT]:
            for row in range(len(artifact)):
                artifact[row] = list(reversed(artifact[row]))

        # Flip vertically if position to the bottom
        if anchorPosition in [AnchorPosition.BOTTOM_LEFT, AnchorPosition.BOTTOM_RIGHT]:
            artifact = list(reversed(artifact))

        for row in range(len(artifact)):
            for col in range(len(artifact[row])):
                value = artifact[row][col]
                if value is None:
                    continue
                self.matrix.set(row + row_offset, col + column_offset, value, reserved=True)

    def add_finder_patterns(self) -> None:
        self.place_artifact(FINDER_PATTERN, AnchorPosition.TOP_LEFT)
        self.place_artifact(FINDER_PATTERN, AnchorPosition.TOP_RIGHT)
        self.place_artifact(FINDER_PATTERN, AnchorPosition.BOTTOM_LEFT)

    def add_separators(self) -> None:
        self.place_artifact(SEPARATOR_PATTERN, AnchorPosition.TOP_LEFT)
        self.place_artifact(SEPARATOR_PATTERN, AnchorPosition.TOP_RIGHT)
        self.place_artifact(SEPARATOR_PATTERN, AnchorPosition.BOTTOM_LEFT)

    def add_timing_patterns(self) -> None:
        for i in range(8, self.size - 8):
            self.matrix.set(6, i, i % 2 == 0, reserved=True)
            self.matrix.set(i, 6, i % 2 == 0, reserved=True)

    def add_alignment_patterns(self, version: int) -> None:
        locations = get_alignment_pattern_positions(version)
        last = len(locations) - 1

        # Every cross of locations except the three finder pattern corners
        for i, row in enumerate(locations):
            for j, col in enumerate(locations):
                if (i, j) in [(0, 0), (0, last), (last, 0)]:
                    continue
                self.place_artifact(
                    ALIGNMENT_PATTERN,
                    AnchorPosition.TOP_LEFT,
                    padding_row=row - 2,
                    padding_column=col - 2,
                )

    def add_dark_module(self) -> None:
        self.matrix.set(self.size - 8, 8, 1, reserved=True)

    def reserve_format_information_area(self) -> None:
        for i in range(self.size - 8, self.size):
            self.matrix.set(8, i, 0, reserved=True)
            # Do not overwrite the dark module
            if i == self.size - 8:
                continue
            self.matrix.set(i, 8, 0, reserved=True)

        for i in range(6):
            self.matrix.set(i, 8, 0, reserved=True)
            self.matrix.set(8, i, 0, reserved=True)

        self.matrix.set(7, 8, 0, reserved=True)
        self.matrix.set(8, 7, 0, reserved=True)
        self.matrix.set(8, 8, 0, reserved=True)

    def add_format_information(self, error_correction_level: ErrorCorrection, mask_pattern: MaskPattern | int) -> None:
        format_data: int = (error_correction_level << 3) | mask_pattern
        format_string = to_bits(bose_chaudhuri_hocquenghem(format_data), 15)

        # Most significant bit first, around the top left finder then split between
        # the bottom left and top right finders
        paths: list[list[tuple[int, int]]] = [
            [(8, 0), (8, 1), (8, 2), (8, 3), (8, 4), (8, 5), (8, 7), (8, 8), (7, 8), (5, 8), (4, 8), (3, 8), (2, 8), (1, 8), (0, 8)],
            [(self.size - 1 - i, 8) for i in range(7)] + [(8, self.size - 8 + i) for i in range(8)],
        ]

        for path in paths:
            for (row, col), bit in zip(path, format_string):
                self.matrix.set(row, col, bit == "1", reserved=True)

    def add_version_information(self, version: int) -> None:
        # According to https://upload.wikimedia.org/wikipedia/commons/4/45/QRCode-2-Structure.png version info is only required when version >= 7
        if version < 7:
            return

        code = list(reversed(to_bits(golay(version), 18)))
        version_artifact: Artifact = [[int(c) for c in code[i : i + 3]] for i in range(0, 18, 3)]

        self.place_artifact(version_artifact, AnchorPosition.TOP_LEFT, padding_column=self.size - 11)

        # Rotate the array (modified from https://stackoverflow.com/a/8421412)
        version_artifact = [list(row) for row in zip(*version_artifact)]

        self.place_artifact(version_artifact, AnchorPosition.TOP_LEFT, padding_row=self.size - 11)

    def data_module_positions(self) -> Iterator[tuple[int, int]]:
        """Zigzag through every non-reserved module, starting bottom right and going up"""
        is_going_up = True
        col = self.size - 1
        while col > 0:
            # Column 6 is a special case with no usable space, so skip it
            # https://www.thonky.com/qr-code-tutorial/module-placement-matrix > "Exception: Vertical Timing Pattern"
            if col == 6:
                col -= 1

            rows = range(self.size - 1, -1, -1) if is_going_up else range(self.size)
            for row in rows:
                for current_col in (col, col - 1):
                    if not self.matrix.is_reserved(row, current_col):
                        yield row, current_col

            is_going_up = not is_going_up
            col -= 2

    def push_bytes(self, data: bytes) -> None:
        bits = ((byte >> (7 - i)) & 1 for byte in data for i in range(8))
        # Modules past the end of the data (remainder bits) stay light
        for row, col in self.data_module_positions():
            self.matrix.set(row, col, next(bits, 0))
