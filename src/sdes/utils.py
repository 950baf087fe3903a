from typing import Optional

import numpy as np


def to_bitstring(value: int, width: int) -> str:
    """
    Format the low `width` bits of value as a '0'/'1' string, MSB first.
    Example: to_bitstring(5, 4) → '0101'.
    """
    return format(value & ((1 << width) - 1), f"0{width}b")


def from_bitstring(bits: str, width: Optional[int] = None) -> int:
    """
    Parse a '0'/'1' string into an integer.
    Args:
        bits: the bit string, MSB first.
        width: if given, the exact length `bits` must have.
    Returns:
        The integer value of the bit string.
    """
    if width is not None and len(bits) != width:
        raise ValueError(f"expected a {width}-bit string, got {len(bits)} bits: {bits!r}")
    if not bits or set(bits) - {"0", "1"}:
        raise ValueError(f"not a bit string: {bits!r}")
    return int(bits, 2)


def hamming_distance(a: str, b: str) -> int:
    """
    Compute the Hamming distance between two bit strings of equal length.
    Args:
        a: First bit string (e.g., '0101')
        b: Second bit string (e.g., '1101')
    Returns:
        Number of positions at which the corresponding bits are different.
    """
    if len(a) != len(b):
        raise ValueError("Bit strings must be of equal length.")
    return sum(x != y for x, y in zip(a, b))


def random_bitstring(length: int) -> str:
    """
    Return a random bitstring of given length (characters '0' or '1').
    """
    return "".join(np.random.choice(['0', '1'], size=length))


def random_8bit_string() -> str:
    """Return a random 8-bit string."""
    return random_bitstring(8)
