from collections.abc import Iterator
from typing import override

from gf256 import mul


class GFPolynomial:
    """Polynomial over GF(256), coefficients stored highest power first"""

    coefficients: list[int]

    def __init__(self, *coefficients: int):
        self.coefficients = [c for c in coefficients]

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GFPolynomial):
            raise ValueError(f"Cannot compare equality of GFPolynomial and {other.__class__.__name__}")
        return self.coefficients == other.coefficients

    def __iter__(self) -> Iterator[int]:
        return self.coefficients.__iter__()

    def __getitem__(self, i: int) -> int:
        return self.coefficients[i]

    def __len__(self) -> int:
        return len(self.coefficients)

    def __mul__(self, other: "GFPolynomial") -> "GFPolynomial":
        return GFPolynomial(*multiply(self.coefficients, other.coefficients))

    def __mod__(self, divisor: "GFPolynomial") -> "GFPolynomial":
        return GFPolynomial(*mod(self.coefficients, divisor.coefficients))

    def as_integers(self) -> list[int]:
        return list(self.coefficients)

    @override
    def __str__(self) -> str:
        degree = len(self) - 1
        return " + ".join(f"{c}x^({degree - i})" for i, c in enumerate(self))

    @override
    def __repr__(self) -> str:
        return f"<GFPolynomial coefficients={self.coefficients}>"


def multiply(p1: list[int] | tuple[int, ...], p2: list[int] | tuple[int, ...]) -> list[int]:
    coefficients: list[int] = [0] * (len(p1) + len(p2) - 1)
    for i, a in enumerate(p1):
        for j, b in enumerate(p2):
            # Addition in GF(256) is xor
            coefficients[i + j] ^= mul(a, b)
    return coefficients


def mod(dividend: list[int] | tuple[int, ...], divisor: list[int] | tuple[int, ...]) -> list[int]:
    # Divisor must be monic (lead coefficient 1), which every generator polynomial is.
    # The remainder has its leading zeros stripped, so it may be shorter than len(divisor) - 1
    result: list[int] = list(dividend)

    while len(result) >= len(divisor):
        # Scale the divisor so its lead term cancels the lead term of the dividend
        lead: int = result[0]
        for i, value in enumerate(divisor):
            result[i] ^= mul(value, lead)

        offset = 0
        while offset < len(result) and result[offset] == 0:
            offset += 1
        result = result[offset:]

    return result
