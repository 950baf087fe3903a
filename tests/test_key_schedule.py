import pytest
from sdes.key_schedule import circular_left_shift, generate_keys, left_rotate


def test_left_rotate_wraps_within_five_bits():
    assert left_rotate(0b10000, 1) == 0b00001
    assert left_rotate(0b10000, 3) == 0b00100
    assert left_rotate(0b10110, 5) == 0b10110
    assert left_rotate(0b11111, 2) == 0b11111


def test_circular_left_shift_keeps_halves_apart():
    assert circular_left_shift(0b1000010000, 1) == 0b0000100001
    assert circular_left_shift(0b1000010000, 3) == 0b0010000100
    # The top bit of the right half must not move into the left half
    assert circular_left_shift(0b0000010000, 1) == 0b0000000001


@pytest.mark.parametrize("key, expected", [
    (0b1010000010, (0b10100100, 0b01000011)),
    (0b1100101101, (202, 157)),
    (0, (0, 0)),
    (0b1111111111, (255, 255)),
])
def test_generate_keys_known_values(key, expected):
    assert generate_keys(key) == expected


def test_generate_keys_deterministic_and_masked():
    for key in range(1024):
        k1, k2 = generate_keys(key)
        assert 0 <= k1 <= 0xFF and 0 <= k2 <= 0xFF
        assert generate_keys(key) == (k1, k2)
    # Bits above the 10th are ignored
    assert generate_keys(0b111_1010000010) == generate_keys(0b1010000010)
