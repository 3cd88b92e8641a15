from exceptions import UninitializedError
from gfpolynomial import GFPolynomial
from polynomials import generate_error_correction_polynomial, generate_message_polynomial


class ReedSolomonEncoder:
    """Systematic Reed-Solomon encoder producing the error correction codewords of one block"""

    degree: int | None = None
    generator_polynomial: GFPolynomial | None = None

    def __init__(self, degree: int | None = None):
        if degree:
            self.initialize(degree)

    def initialize(self, degree: int) -> None:
        self.degree = degree
        self.generator_polynomial = generate_error_correction_polynomial(degree)

    def encode(self, data: bytes | bytearray | list[int]) -> bytes:
        if self.generator_polynomial is None or self.degree is None:
            raise UninitializedError("Reed-Solomon encoder has not been initialized with a degree")

        # Multiply the message by x^degree so the remainder fits below it
        message_polynomial = generate_message_polynomial([*data, *([0] * self.degree)])
        remainder = (message_polynomial % self.generator_polynomial).as_integers()

        # Leading zero coefficients were stripped during the division
        return bytes(remainder).rjust(self.degree, b"\x00")
