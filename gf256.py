from exceptions import DomainError

# x^8 + x^4 + x^3 + x^2 + 1
GENERATOR_POLYNOMIAL: int = 0b100011101


def generate_log_antilog_table() -> tuple[tuple[int, ...], tuple[int, ...]]:
    from_power: list[int] = [0] * 512
    to_power: list[int] = [0] * 256

    current: int = 1
    for i in range(255):
        from_power[i] = current
        to_power[current] = i
        current <<= 1
        if current >= 256:
            current ^= GENERATOR_POLYNOMIAL

    # Doubled so the sum of two logs never needs a modulo
    for i in range(255, 512):
        from_power[i] = from_power[i - 255]

    return tuple(from_power), tuple(to_power)


EXP_TABLE, LOG_TABLE = generate_log_antilog_table()


def exp(power: int) -> int:
    return EXP_TABLE[power]


def log(value: int) -> int:
    if value < 1:
        raise DomainError(f"Cannot take the logarithm of {value} in GF(256)")
    return LOG_TABLE[value]


def mul(x: int, y: int) -> int:
    if x == 0 or y == 0:
        return 0
    return EXP_TABLE[LOG_TABLE[x] + LOG_TABLE[y]]
