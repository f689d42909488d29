import pytest

from vex import encode, encode_compressed
from vex.metrics import bytes_per_value, compression_ratio, space_saving


def test_bytes_per_value():
    assert bytes_per_value(encode([1, 2, 3, 4]), 4) == 1.0
    assert bytes_per_value(encode([300, 1]), 2) == 2.0
    assert bytes_per_value(encode([]), 0) == 0.0


def test_zero_heavy_vector_compresses():
    vector = [0] * 90 + [7] * 10
    plain = encode(vector)
    packed = encode_compressed(vector)
    assert len(plain) == 101
    assert len(packed) == 14
    assert compression_ratio(plain, packed) == pytest.approx(101 / 14)
    assert space_saving(plain, packed) == pytest.approx(1 - 14 / 101)


def test_no_zeros_no_saving():
    vector = [5, 6, 700]
    assert space_saving(encode(vector), encode_compressed(vector)) == 0.0
