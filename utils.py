from itertools import zip_longest
from typing import TypeVar

from color import BLACK, WHITE

T = TypeVar("T")

# x^10 + x^8 + x^5 + x^4 + x^2 + x + 1
G15: int = 0b10100110111
G15_MASK: int = 0b101010000010010
# x^12 + x^11 + x^10 + x^9 + x^8 + x^5 + x^2 + 1
G18: int = 0b1111100100101


def interleave(g1: list[list[T]], g2: list[list[T]]) -> list[T]:
    """Take the first value of every block, then the second of every block, and so on"""
    interleaved_values: list[T] = []
    for values in zip_longest(*g1, *g2):
        for value in values:
            if value is None:
                continue
            interleaved_values.append(value)
    return interleaved_values


# https://www.arscreatio.com/repositorio/images/n_23/SC031-N-1915-18004Text.pdf#page=85
def golay(version: int) -> int:
    seq: int = 18
    data: int = 6

    return calculate_crc(G18, version, seq, data)


# https://www.arscreatio.com/repositorio/images/n_23/SC031-N-1915-18004Text.pdf#page=83
def bose_chaudhuri_hocquenghem(format: int) -> int:
    seq: int = 15
    data: int = 5

    return calculate_crc(G15, format, seq, data) ^ G15_MASK


def calculate_crc(polynomial: int, value: int, seq: int, data: int) -> int:
    """Append the remainder of value * x^(seq - data) divided by polynomial to value"""
    if value >= 1 << data:
        raise ValueError(f"Cannot fit {value} into {data} data bits")

    current: int = value << (seq - data)

    while current.bit_length() - polynomial.bit_length() >= 0:
        offset: int = current.bit_length() - polynomial.bit_length()

        current ^= polynomial << offset

    return (value << (seq - data)) | current


def to_bits(value: int, length: int) -> str:
    return bin(value)[2:].zfill(length)


def to_color(obj: object) -> tuple[int, int, int]:
    if obj == "1":
        return BLACK
    if obj == "0":
        return WHITE
    if obj == 1:
        return BLACK
    if obj == 0:
        return WHITE
    raise ValueError(f"Unable to convert {obj!r} to color")
