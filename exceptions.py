class QRCodeError(Exception):
    """Base class for every error raised while building a symbol"""


class InputError(QRCodeError, ValueError):
    pass


class EmptyInputError(InputError):
    def __init__(self, message: str = "No input data to encode"):
        super().__init__(message)


class CapacityError(QRCodeError, ValueError):
    pass


class CapacityExceededError(CapacityError):
    def __init__(self, length: int, error_correction_level_name: str):
        self.length = length
        super().__init__(f"The amount of data ({length} bytes) is too big to be stored in a QR Code with error correction level {error_correction_level_name}")


class VersionConstraintError(QRCodeError, ValueError):
    pass


class VersionTooSmallError(VersionConstraintError):
    def __init__(self, version: int, minimum_version: int):
        self.version = version
        self.minimum_version = minimum_version
        super().__init__(f"The chosen QR Code version ({version}) cannot contain this amount of data. Minimum version required to store current data is {minimum_version}")


class DomainError(QRCodeError, ArithmeticError):
    pass


class UninitializedError(QRCodeError, RuntimeError):
    pass
