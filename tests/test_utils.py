import pytest
from sdes.utils import (
    from_bitstring,
    hamming_distance,
    random_8bit_string,
    random_bitstring,
    to_bitstring,
)


def test_random_bitstring_length():
    # random_bitstring returns correct length of chars '0'/'1'
    for length in [1, 5, 10]:
        bs = random_bitstring(length)
        assert isinstance(bs, str)
        assert len(bs) == length
        assert set(bs).issubset({'0', '1'})


def test_random_8bit():
    bs8 = random_8bit_string()
    assert isinstance(bs8, str) and len(bs8) == 8 and set(bs8) <= {'0', '1'}


def test_bitstring_conversions():
    assert to_bitstring(5, 4) == "0101"
    assert to_bitstring(813, 10) == "1100101101"
    # Only the low `width` bits are kept
    assert to_bitstring(0x1FF, 8) == "11111111"
    assert from_bitstring("1100101101") == 813
    assert from_bitstring("00000101", 8) == 5


def test_from_bitstring_rejects_bad_input():
    with pytest.raises(ValueError):
        from_bitstring("0101", 8)
    with pytest.raises(ValueError):
        from_bitstring("01201")
    with pytest.raises(ValueError):
        from_bitstring("")


def test_hamming_distance_basic():
    assert hamming_distance("0000", "0000") == 0
    assert hamming_distance("1010", "0101") == 4
    assert hamming_distance("1100", "1001") == 2

    with pytest.raises(ValueError):
        hamming_distance("101", "10")  # unequal lengths
