import operator
from logging import getLogger
from typing import Iterator, List, Tuple

import numpy as np

from .bitstream import HEADER_SIZE, ByteStream, read_header, write_header
from .errors import ValueOutOfRange
from .rle import count_zero_run, encode_zero_run
from .tokens import (
    U16_MAX,
    WIDE,
    WIDE_SIZE,
    ZERO_RUN,
    TokenType,
    decode_token,
    encode_token,
    read_u16,
    short_ceiling,
)

logger = getLogger(__name__)


def as_vector(vector, *, strict: bool = False) -> np.ndarray:
    """
    Normalize an integer sequence to a 1D uint16 array.
    Out-of-range values are clamped to [0, 65535], or rejected when strict.
    """
    if isinstance(vector, (bytes, bytearray, memoryview, str)):
        raise TypeError(f"expected a sequence of integers, got {type(vector).__name__}")

    if isinstance(vector, np.ndarray):
        if vector.ndim != 1:
            raise ValueError(f"vector must be one-dimensional, got shape {vector.shape}")
        if vector.dtype == object:
            # may hold python ints beyond int64
            vector = vector.tolist()

    if isinstance(vector, np.ndarray):
        kind = vector.dtype.kind
        if kind == "u":
            x = vector.astype(np.uint64)
        elif kind in "ib":
            x = vector.astype(np.int64)
        else:
            raise TypeError(f"vector must hold integers, got dtype {vector.dtype}")
        if strict:
            _check_range(x.tolist())
        if kind == "u":
            clipped = np.minimum(x, np.uint64(U16_MAX))
        else:
            clipped = np.clip(x, 0, U16_MAX)
        n_clamped = int(np.count_nonzero(clipped != x))
        out = clipped.astype(np.uint16)
    else:
        items = [operator.index(v) for v in vector]
        if strict:
            _check_range(items)
        clamped = [short_ceiling(v) for v in items]
        n_clamped = sum(1 for a, b in zip(items, clamped) if a != b)
        out = np.array(clamped, dtype=np.uint16)

    if n_clamped:
        logger.warning("[encode] clamped %d value(s) to [0, %d]", n_clamped, U16_MAX)
    return out


def _check_range(values):
    for i, v in enumerate(values):
        if not (0 <= v <= U16_MAX):
            raise ValueOutOfRange(i, int(v))


def encode_vector(vector, *, compressed: bool = False, strict: bool = False) -> bytes:
    """
    Encode an integer sequence behind a 1-byte format header.

    Plain framing writes one token per element. Compressed framing replaces
    every run of 3 or more zeros with a ZERO_RUN token; runs longer than
    65535 are split across several tokens.
    """
    values = as_vector(vector, strict=strict).tolist()

    out = bytearray()
    write_header(out, compressed=compressed)

    if not compressed:
        for v in values:
            out += encode_token(v)
    else:
        i = 0
        n = len(values)
        while i < n:
            v = values[i]
            if v == 0:
                run = count_zero_run(values, i)
                out += encode_zero_run(run)
                i += run
            else:
                out += encode_token(v)
                i += 1

    logger.debug(
        "[encode] %s: %d values -> %d bytes",
        "compressed" if compressed else "plain", len(values), len(out),
    )
    return bytes(out)


def encode(vector, *, strict: bool = False) -> bytes:
    return encode_vector(vector, compressed=False, strict=strict)


def encode_compressed(vector, *, strict: bool = False) -> bytes:
    return encode_vector(vector, compressed=True, strict=strict)


def iter_tokens(data: ByteStream) -> Iterator[Tuple[TokenType, int]]:
    """
    Validate the header, then yield (TokenType, value) for each token.
    For ZERO_RUN the value is the run length.
    """
    read_header(data)
    i = HEADER_SIZE
    n = len(data)
    while i < n:
        lead = data[i]
        if lead == ZERO_RUN:
            yield TokenType.ZERO_RUN, read_u16(data, i + 1)
            i += WIDE_SIZE
        else:
            v, used = decode_token(data, i)
            yield (TokenType.WIDE if lead == WIDE else TokenType.SHORT), v
            i += used


def decode_v1(data: ByteStream) -> List[int]:
    """Decode either version-1 framing; tokens are self-describing."""
    out: List[int] = []
    for kind, v in iter_tokens(data):
        if kind is TokenType.ZERO_RUN:
            out.extend([0] * v)
        else:
            out.append(v)
    return out


_DECODERS = {1: decode_v1}


def decode(data: ByteStream) -> List[int]:
    h = read_header(data)
    out = _DECODERS[h["version"]](data)
    logger.debug(
        "[decode] %s v%d: %d bytes -> %d values",
        "compressed" if h["compressed"] else "plain", h["version"], len(data), len(out),
    )
    return out


def decode_array(data: ByteStream) -> np.ndarray:
    return np.array(decode(data), dtype=np.uint16)
