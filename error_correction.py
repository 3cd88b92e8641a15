from enum import IntEnum


# https://www.arscreatio.com/repositorio/images/n_23/SC031-N-1915-18004Text.pdf#page=61
class ErrorCorrection(IntEnum):
    LOW = 0b01
    MEDIUM = 0b00
    QUARTILE = 0b11
    HIGH = 0b10

    @property
    def index(self) -> int:
        """Column of this level in the capacity tables, weakest correction first"""
        return TABLE_INDEX[self]

    @classmethod
    def from_letter(cls, letter: str) -> "ErrorCorrection":
        try:
            return LETTERS[letter.upper()]
        except KeyError:
            raise ValueError(f"Unknown error correction level {letter!r}. Expected one of L, M, Q or H")


TABLE_INDEX: dict[ErrorCorrection, int] = {
    ErrorCorrection.LOW: 0,
    ErrorCorrection.MEDIUM: 1,
    ErrorCorrection.QUARTILE: 2,
    ErrorCorrection.HIGH: 3,
}

LETTERS: dict[str, ErrorCorrection] = {
    "L": ErrorCorrection.LOW,
    "M": ErrorCorrection.MEDIUM,
    "Q": ErrorCorrection.QUARTILE,
    "H": ErrorCorrection.HIGH,
}
