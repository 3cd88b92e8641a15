from enum import StrEnum
from typing import override

from bit_buffer import BitBuffer
from constants import ec_blocks, ec_codewords, total_codewords
from error_correction import ErrorCorrection
from exceptions import CapacityExceededError
from reed_solomon import ReedSolomonEncoder
from utils import interleave

# https://www.arscreatio.com/repositorio/images/n_23/SC031-N-1915-18004Text.pdf#page=32
BYTE_MODE_INDICATOR: int = 0b0100
MODE_INDICATOR_LENGTH: int = 4
MAXIMUM_TERMINATOR_LENGTH: int = 4
PADDING_BYTES: tuple[int, int] = (0b11101100, 0b00010001)


class ENCODING(StrEnum):
    UTF8 = "utf-8"


class Segment:
    """Byte mode payload. Strings are stored as their UTF-8 bytes"""

    data: bytes

    def __init__(self, data: str | bytes | bytearray | list[int]):
        if isinstance(data, str):
            self.data = data.encode(ENCODING.UTF8.value)
        else:
            self.data = bytes(data)

    def get_length(self) -> int:
        return len(self.data)

    def get_bits_length(self) -> int:
        return len(self.data) * 8

    def write(self, bit_buffer: BitBuffer) -> None:
        for byte in self.data:
            bit_buffer.put(byte, 8)

    def __len__(self) -> int:
        return len(self.data)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return False
        return self.data == other.data

    @override
    def __repr__(self) -> str:
        return f"<Segment length={len(self.data)}>"


def check_version(version: int) -> None:
    if not 1 <= version <= 40:
        raise ValueError(f"{version} is an invalid version number. Expected an integer 1-40")


def get_character_count_indicator_length(version: int) -> int:
    # Byte mode only, other modes use different widths
    if 1 <= version <= 9:
        return 8
    elif 10 <= version <= 40:
        return 16

    raise ValueError(f"Unable to calculate character count indicator for version {version}")


def get_total_codewords(version: int) -> int:
    check_version(version)
    return total_codewords[version]


def get_ec_codewords(version: int, error_correction_level: ErrorCorrection) -> int:
    check_version(version)
    return ec_codewords[version][error_correction_level.index]


def get_ec_blocks(version: int, error_correction_level: ErrorCorrection) -> int:
    check_version(version)
    return ec_blocks[version][error_correction_level.index]


def get_data_codeword_capacity(version: int, error_correction_level: ErrorCorrection) -> int:
    return get_total_codewords(version) - get_ec_codewords(version, error_correction_level)


def get_data_bit_capacity(version: int, error_correction_level: ErrorCorrection) -> int:
    return get_data_codeword_capacity(version, error_correction_level) * 8


def get_byte_capacity(version: int, error_correction_level: ErrorCorrection) -> int:
    """Largest number of payload bytes a symbol of this version can hold"""
    usable_bits = get_data_bit_capacity(version, error_correction_level) - get_character_count_indicator_length(version) - MODE_INDICATOR_LENGTH
    return usable_bits // 8


def get_best_version_for_data(segment: Segment, error_correction_level: ErrorCorrection) -> int | None:
    for version in range(1, 41):
        if segment.get_length() <= get_byte_capacity(version, error_correction_level):
            return version

    return None


class Group:
    block_count: int
    codeword_count_per_block: int

    def __init__(self, block_count: int, codeword_count_per_block: int):
        self.block_count = block_count
        self.codeword_count_per_block = codeword_count_per_block

    def size(self) -> int:
        return self.block_count * self.codeword_count_per_block

    @override
    def __str__(self) -> str:
        return f"Group({self.block_count=}, {self.codeword_count_per_block=})"


class CodewordBlockInformation:
    """How the codewords of a (version, level) pair are split into error correction blocks

    Group 2 blocks hold one more data codeword than group 1 blocks. Every block
    carries the same number of error correction codewords.
    """

    version: int
    ec_level: ErrorCorrection
    total_codewords: int
    number_of_data_codewords: int
    ec_codewords_per_block: int
    group_1: Group
    group_2: Group

    def __init__(self, version: int, ec_level: ErrorCorrection):
        self.version = version
        self.ec_level = ec_level
        self.total_codewords = get_total_codewords(version)
        self.number_of_data_codewords = get_data_codeword_capacity(version, ec_level)

        total_blocks: int = get_ec_blocks(version, ec_level)
        blocks_in_group_2: int = self.total_codewords % total_blocks
        blocks_in_group_1: int = total_blocks - blocks_in_group_2

        total_codewords_in_group_1: int = self.total_codewords // total_blocks
        data_codewords_in_group_1: int = self.number_of_data_codewords // total_blocks

        self.ec_codewords_per_block = total_codewords_in_group_1 - data_codewords_in_group_1
        self.group_1 = Group(blocks_in_group_1, data_codewords_in_group_1)
        self.group_2 = Group(blocks_in_group_2, data_codewords_in_group_1 + 1)

    @property
    def total_blocks(self) -> int:
        return self.group_1.block_count + self.group_2.block_count

    @override
    def __str__(self) -> str:
        return "%s-%s\t%s\t%s\t%s\t%s\t%s\t%s" % (
            self.version,
            self.ec_level.name,
            self.number_of_data_codewords,
            self.ec_codewords_per_block,
            self.group_1.block_count,
            self.group_1.codeword_count_per_block,
            self.group_2.block_count,
            self.group_2.codeword_count_per_block,
        )

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodewordBlockInformation):
            raise ValueError(f"Cannot compare equality of CodewordBlockInformation and {other.__class__.__name__}")

        return self.version == other.version and self.ec_level == other.ec_level


def get_codeword_block_information(version: int, ec_level: ErrorCorrection) -> CodewordBlockInformation:
    return CodewordBlockInformation(version, ec_level)


def add_terminator(bit_buffer: BitBuffer, data_bit_capacity: int) -> None:
    # The terminator is dropped entirely when it would not fit
    if bit_buffer.get_length_in_bits() + MAXIMUM_TERMINATOR_LENGTH <= data_bit_capacity:
        bit_buffer.put(0, MAXIMUM_TERMINATOR_LENGTH)


def add_padding_bytes(bit_buffer: BitBuffer, data_bit_capacity: int) -> None:
    # Fill out to the next full byte
    while bit_buffer.get_length_in_bits() % 8 != 0:
        bit_buffer.put_bit(0)

    # Pad with alternating 0xEC and 0x11
    remaining_bytes = (data_bit_capacity - bit_buffer.get_length_in_bits()) // 8
    for i in range(remaining_bytes):
        bit_buffer.put(PADDING_BYTES[i % 2], 8)


def encode(version: int, error_correction_level: ErrorCorrection, segment: Segment) -> BitBuffer:
    """Build the full data codeword bit stream: header, payload, terminator and padding"""
    data_bit_capacity = get_data_bit_capacity(version, error_correction_level)

    header_length = MODE_INDICATOR_LENGTH + get_character_count_indicator_length(version)
    if header_length + segment.get_bits_length() > data_bit_capacity:
        raise CapacityExceededError(segment.get_length(), error_correction_level.name)

    bit_buffer = BitBuffer()
    bit_buffer.put(BYTE_MODE_INDICATOR, MODE_INDICATOR_LENGTH)
    bit_buffer.put(segment.get_length(), get_character_count_indicator_length(version))
    segment.write(bit_buffer)

    add_terminator(bit_buffer, data_bit_capacity)
    add_padding_bytes(bit_buffer, data_bit_capacity)

    return bit_buffer


def create_codewords(bit_buffer: BitBuffer, version: int, error_correction_level: ErrorCorrection) -> bytes:
    cwblock_info = get_codeword_block_information(version, error_correction_level)
    data: bytes = bit_buffer.to_bytes()

    if len(data) != cwblock_info.group_1.size() + cwblock_info.group_2.size():
        raise ValueError(f"Expected {cwblock_info.number_of_data_codewords} data codewords for {cwblock_info.version}-{cwblock_info.ec_level.name}, got {len(data)}")

    # One encoder serves every block since they share the same error correction length
    rs = ReedSolomonEncoder(cwblock_info.ec_codewords_per_block)

    group_1: list[list[int]] = []
    group_2: list[list[int]] = []
    ec_data: list[list[int]] = []
    offset = 0
    for group, blocks in ((cwblock_info.group_1, group_1), (cwblock_info.group_2, group_2)):
        for _ in range(group.block_count):
            block = data[offset : offset + group.codeword_count_per_block]
            blocks.append(list(block))
            ec_data.append(list(rs.encode(block)))
            offset += group.codeword_count_per_block

    interleaving_data: list[int] = interleave(group_1, group_2)
    interleaving_ec: list[int] = interleave(ec_data, [])

    return bytes(interleaving_data + interleaving_ec)


def create_data(version: int, error_correction_level: ErrorCorrection, segment: Segment) -> bytes:
    return create_codewords(encode(version, error_correction_level, segment), version, error_correction_level)
