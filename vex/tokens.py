"""
Single-value tokens.

A value in [0, 253] is written as one byte. Anything larger is written as
the WIDE sentinel followed by the big-endian 16-bit value. The ZERO_RUN
sentinel shares the same 3-byte shape but carries a run length, so it is
only understood by the vector decoder.
"""
import struct
from enum import Enum
from typing import Tuple

from .bitstream import ByteStream
from .errors import TruncatedStream

U16_MAX = 0xFFFF
SHORT_MAX = 253         # 0xFE and 0xFF are reserved lead bytes

WIDE = 0xFE
ZERO_RUN = 0xFF

# sentinel(u8) payload(u16), big-endian
TOKEN_FMT = ">BH"
U16_FMT = ">H"
WIDE_SIZE = struct.calcsize(TOKEN_FMT)


class TokenType(Enum):
    SHORT = "short"
    WIDE = "wide"
    ZERO_RUN = "zero_run"


def short_ceiling(value: int) -> int:
    """Clamp to the unsigned 16-bit range."""
    if value > U16_MAX:
        return U16_MAX
    if value < 0:
        return 0
    return value


def encode_token(value: int) -> bytes:
    value = short_ceiling(int(value))
    if value <= SHORT_MAX:
        return bytes((value,))
    return struct.pack(TOKEN_FMT, WIDE, value)


def read_u16(data: ByteStream, offset: int) -> int:
    """
    Read the big-endian payload that follows a sentinel at data[offset - 1].
    Raises TruncatedStream if fewer than two bytes remain.
    """
    available = len(data) - offset
    if available < 2:
        raise TruncatedStream(offset - 1, WIDE_SIZE, available + 1)
    return struct.unpack_from(U16_FMT, data, offset)[0]


def decode_token(data: ByteStream, offset: int = 0) -> Tuple[int, int]:
    """
    Returns:
      (value, bytes_consumed)
    """
    if offset >= len(data):
        raise TruncatedStream(offset, 1, 0)
    lead = data[offset]
    if lead == ZERO_RUN:
        raise ValueError(f"zero-run token at offset {offset} is not a single value")
    if lead == WIDE:
        return read_u16(data, offset + 1), WIDE_SIZE
    return lead, 1
