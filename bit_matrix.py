from typing import override


class BitMatrix:
    """Square grid of 0/1 modules with a parallel grid of reserved (structural) flags

    Reserving a cell does not lock it: structural writers may keep overwriting it
    (the format information is rewritten for every mask candidate), but data
    placement and masking skip reserved cells.
    """

    size: int
    data: list[list[int]]
    reserved: list[list[bool]]

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"BitMatrix size must be greater than 0, got {size}")

        self.size = size
        self.data = [[0 for _ in range(size)] for _ in range(size)]
        self.reserved = [[False for _ in range(size)] for _ in range(size)]

    def set(self, row: int, col: int, value: bool | int, reserved: bool = False) -> None:
        self.data[row][col] = 1 if value else 0
        if reserved:
            self.reserved[row][col] = True

    def get(self, row: int, col: int) -> int:
        return self.data[row][col]

    def xor(self, row: int, col: int, value: bool | int) -> None:
        self.data[row][col] ^= 1 if value else 0

    def is_reserved(self, row: int, col: int) -> bool:
        return self.reserved[row][col]

    def copy(self) -> "BitMatrix":
        clone = BitMatrix(self.size)
        clone.data = [row[:] for row in self.data]
        clone.reserved = [row[:] for row in self.reserved]
        return clone

    def as_rows(self) -> list[list[bool]]:
        return [[value == 1 for value in row] for row in self.data]

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitMatrix):
            return False
        return self.data == other.data

    @override
    def __str__(self) -> str:
        return "\n".join("".join(str(v) for v in row) for row in self.data)
