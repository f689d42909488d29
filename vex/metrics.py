from .bitstream import HEADER_SIZE


def bytes_per_value(stream: bytes, n_values: int) -> float:
    """Token bytes per element, header excluded."""
    if n_values == 0:
        return 0.0
    return float(len(stream) - HEADER_SIZE) / n_values


def compression_ratio(plain: bytes, compressed: bytes) -> float:
    return float(len(plain)) / float(len(compressed))


def space_saving(plain: bytes, compressed: bytes) -> float:
    """Fraction of the plain size removed by zero-run framing (negative if it grew)."""
    return 1.0 - float(len(compressed)) / float(len(plain))
