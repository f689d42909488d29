"""
Vex - compact byte encoding for vectors of small unsigned integers.
"""

__version__ = "1.0.0"

from .bitstream import FormatHeader, read_header
from .codec import (
    as_vector,
    decode,
    decode_array,
    decode_v1,
    encode,
    encode_compressed,
    encode_vector,
    iter_tokens,
)
from .errors import TruncatedStream, UnrecognizedFormat, ValueOutOfRange, VexError
from .tokens import TokenType, decode_token, encode_token, short_ceiling

__all__ = [
    "FormatHeader",
    "TokenType",
    "VexError",
    "UnrecognizedFormat",
    "TruncatedStream",
    "ValueOutOfRange",
    "as_vector",
    "encode",
    "encode_compressed",
    "encode_vector",
    "decode",
    "decode_v1",
    "decode_array",
    "iter_tokens",
    "read_header",
    "encode_token",
    "decode_token",
    "short_ceiling",
]
