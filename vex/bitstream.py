from enum import IntEnum
from typing import Union

from .errors import UnrecognizedFormat

ByteStream = Union[bytes, bytearray, memoryview]

VERSION = 1


class FormatHeader(IntEnum):
    """Byte 0 of every stream."""
    PLAIN_V1 = 0x10
    COMPRESSED_V1 = 0x1C


# tag -> (version, compressed)
HEADERS = {
    FormatHeader.PLAIN_V1: (VERSION, False),
    FormatHeader.COMPRESSED_V1: (VERSION, True),
}
HEADER_SIZE = 1


def header_for(*, compressed: bool) -> FormatHeader:
    return FormatHeader.COMPRESSED_V1 if compressed else FormatHeader.PLAIN_V1


def write_header(buf: bytearray, *, compressed: bool):
    buf.append(header_for(compressed=compressed))


def read_header(data: ByteStream):
    if len(data) < HEADER_SIZE:
        raise UnrecognizedFormat(None)
    tag = data[0]
    if tag not in HEADERS:
        raise UnrecognizedFormat(tag)
    ver, compressed = HEADERS[tag]
    return dict(tag=FormatHeader(tag), version=ver, compressed=compressed)
