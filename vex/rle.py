import struct
from typing import Sequence

from .tokens import TOKEN_FMT, ZERO_RUN

# Longest run one ZERO_RUN token can carry; longer runs are split.
MAX_RUN = 0xFFFF

# Below this, literal zero bytes are no larger than a 3-byte token.
MIN_RUN = 3


def count_zero_run(values: Sequence[int], start: int, limit: int = MAX_RUN) -> int:
    """
    Number of consecutive zeros in values starting at start, at most limit.
    """
    n = len(values)
    end = start
    while end < n and end - start < limit and values[end] == 0:
        end += 1
    return end - start


def encode_zero_run(run: int) -> bytes:
    if not (0 <= run <= MAX_RUN):
        raise ValueError(f"run length {run} out of range (0..{MAX_RUN})")
    if run < MIN_RUN:
        return bytes(run)
    return struct.pack(TOKEN_FMT, ZERO_RUN, run)
