import logging
from typing import Tuple

from sdes.permutation import P10, P8

logger = logging.getLogger(__name__)

KEY_WIDTH = 10
KEY_MASK = (1 << KEY_WIDTH) - 1
HALF_WIDTH = 5
HALF_MASK = (1 << HALF_WIDTH) - 1


def left_rotate(half: int, n: int) -> int:
    """
    Circular left rotation by n positions inside a fixed 5-bit field.
    """
    half &= HALF_MASK
    n %= HALF_WIDTH
    return ((half << n) | (half >> (HALF_WIDTH - n))) & HALF_MASK


def circular_left_shift(key: int, n: int) -> int:
    """
    Rotate both 5-bit halves of a 10-bit value left by n, independently.
    """
    left = (key >> HALF_WIDTH) & HALF_MASK
    right = key & HALF_MASK
    return (left_rotate(left, n) << HALF_WIDTH) | left_rotate(right, n)


def generate_keys(master_key: int) -> Tuple[int, int]:
    """
    Given a 10-bit key, generate the two 8-bit subkeys (K1, K2).
    """
    # Apply P10 permutation
    permuted = P10(master_key & KEY_MASK)

    # Both rotations start from the P10 output: 1 position for K1, 3 for K2
    k1 = P8(circular_left_shift(permuted, 1))
    k2 = P8(circular_left_shift(permuted, 3))

    logger.debug("key %d -> K1=%d K2=%d", master_key & KEY_MASK, k1, k2)
    return k1, k2
