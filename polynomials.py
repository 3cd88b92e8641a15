from functools import cache

from gf256 import exp
from gfpolynomial import GFPolynomial, multiply


@cache
def _error_correction_coefficients(degree: int) -> tuple[int, ...]:
    coefficients: list[int] = [1]
    for i in range(degree):
        coefficients = multiply(coefficients, [1, exp(i)])
    return tuple(coefficients)


def generate_error_correction_polynomial(degree: int) -> GFPolynomial:
    """(x - a^0)(x - a^1)...(x - a^(degree - 1))"""
    if degree < 1:
        raise ValueError(f"Cannot generate an error correction polynomial of degree {degree}")
    return GFPolynomial(*_error_correction_coefficients(degree))


def generate_message_polynomial(message: bytes | bytearray | list[int]) -> GFPolynomial:
    return GFPolynomial(*message)
