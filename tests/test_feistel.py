from sdes.feistel import S0, S1, f, fk, sbox_lookup, swap


def test_sbox_lookup_row_and_column():
    # row = bits 3 and 0, column = bits 2 and 1
    assert sbox_lookup(0b0000, S0) == 1
    assert sbox_lookup(0b1001, S0) == 3   # row 3, col 0
    assert sbox_lookup(0b0110, S1) == 3   # row 0, col 3
    assert sbox_lookup(0b1110, S1) == 0   # row 2, col 3


def test_sbox_outputs_are_two_bits():
    for nibble in range(16):
        assert 0 <= sbox_lookup(nibble, S0) <= 3
        assert 0 <= sbox_lookup(nibble, S1) <= 3


def test_round_function_known_value():
    # Right half of IP(0b11010111) under K1 of key 0b1010000010
    assert f(0b1101, 0b10100100) == 0b1111


def test_fk_known_value():
    assert fk(0b11011101, 0b10100100) == 0b00101101


def test_fk_keeps_right_half():
    for block in range(256):
        for subkey in (0x00, 0x5A, 0xFF):
            out = fk(block, subkey)
            assert out & 0xF == block & 0xF
            assert 0 <= out <= 0xFF


def test_fk_is_an_involution():
    for block in range(256):
        assert fk(fk(block, 0xA4), 0xA4) == block


def test_swap():
    assert swap(0b00101101) == 0b11010010
    for block in range(256):
        assert swap(swap(block)) == block
