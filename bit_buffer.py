from typing import override


class BitBuffer:
    """Append-only sequence of bits, packed most significant bit first"""

    buffer: bytearray
    length: int

    def __init__(self):
        self.buffer = bytearray()
        self.length = 0

    def get(self, index: int) -> bool:
        if not 0 <= index < self.length:
            raise IndexError(f"Bit index {index} is out of range for a buffer of {self.length} bits")
        return ((self.buffer[index // 8] >> (7 - (index % 8))) & 1) == 1

    def put(self, value: int, length: int) -> None:
        for i in range(length):
            self.put_bit(((value >> (length - i - 1)) & 1) == 1)

    def put_bit(self, bit: bool | int) -> None:
        if len(self.buffer) <= self.length // 8:
            self.buffer.append(0)

        if bit:
            self.buffer[self.length // 8] |= 0x80 >> (self.length % 8)

        self.length += 1

    def get_length_in_bits(self) -> int:
        return self.length

    def to_bytes(self) -> bytes:
        return bytes(self.buffer)

    def __len__(self) -> int:
        return self.length

    @override
    def __str__(self) -> str:
        return "".join("1" if self.get(i) else "0" for i in range(self.length))
