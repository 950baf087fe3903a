from typing import List

from sdes.permutation import EP, P4, SWITCH

S0 = [
    [1, 0, 3, 2],
    [3, 2, 1, 0],
    [0, 2, 1, 3],
    [3, 1, 3, 2]
]

S1 = [
    [0, 1, 2, 3],
    [2, 0, 1, 3],
    [3, 0, 1, 0],
    [2, 1, 0, 3]
]


def sbox_lookup(nibble: int, sbox: List[List[int]]) -> int:
    """
    nibble: 4-bit value.
    sbox: 4×4 table.
    Row is formed by the outer bits (3, 0), column by the inner bits (2, 1).
    Returns the 2-bit table entry.
    """
    row = ((nibble >> 2) & 0b10) | (nibble & 1)
    col = (nibble >> 1) & 0b11
    return sbox[row][col]


def f(half_block: int, subkey: int) -> int:
    """
    The S-DES round function: maps a 4-bit half block and an 8-bit subkey to
    a 4-bit mixing value.
    """
    # Expand and permute the half block, XOR with subkey
    xored = EP(half_block) ^ (subkey & 0xFF)
    # Apply S-boxes to each 4-bit half
    s0_out = sbox_lookup(xored >> 4, S0)
    s1_out = sbox_lookup(xored & 0xF, S1)
    # Combine and apply P4
    return P4((s0_out << 2) | s1_out)


def fk(block: int, subkey: int) -> int:
    """
    One Feistel round. The right half passes through unchanged; the left half
    is XORed with f(right, subkey).
    """
    left = (block >> 4) & 0xF
    right = block & 0xF
    return ((left ^ f(right, subkey)) << 4) | right


def swap(block: int) -> int:
    return SWITCH(block)
