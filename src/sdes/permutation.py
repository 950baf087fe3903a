from typing import NamedTuple, Sequence, Tuple

from sdes.errors import MalformedPermutationTable


class PermutationTable(NamedTuple):
    """
    A fixed bit reordering.

    order:  source bit positions, 0-indexed from the most significant bit of
            the `length`-wide source field. Entries may repeat or be skipped.
    length: width of the source field in bits.
    """
    order: Tuple[int, ...]
    length: int

    def __call__(self, value: int) -> int:
        return permute(value, self.order, self.length)


def permute(value: int, order: Sequence[int], length: int) -> int:
    """
    Output bit i (counting from the MSB) is source bit order[i] (counting from
    the MSB of the `length`-wide field). Bits above `length` are ignored.
    """
    width = len(order)
    result = 0
    for i, position in enumerate(order):
        bit = (value >> (length - position - 1)) & 1
        result |= bit << (width - i - 1)
    return result & ((1 << width) - 1)


def make_table(order: Sequence[int], length: int) -> PermutationTable:
    """
    Validate a permutation table and freeze it.
    Raises MalformedPermutationTable for an empty order or an index outside
    [0, length).
    """
    if length <= 0:
        raise MalformedPermutationTable(f"source width must be positive, got {length}")
    if not order:
        raise MalformedPermutationTable("permutation order is empty")
    for i, position in enumerate(order):
        if not isinstance(position, int) or not 0 <= position < length:
            raise MalformedPermutationTable(
                f"entry {i} of {list(order)} is {position!r}, expected 0 <= index < {length}"
            )
    return PermutationTable(tuple(order), length)


# Permutation tables (0-based indexing from the most significant bit)
P10    = make_table([2, 4, 1, 6, 3, 9, 0, 8, 7, 5], 10)
P8     = make_table([5, 2, 6, 3, 7, 4, 9, 8], 10)
IP     = make_table([1, 5, 2, 0, 3, 7, 4, 6], 8)
IP_INV = make_table([3, 0, 2, 4, 6, 1, 7, 5], 8)
EP     = make_table([3, 0, 1, 2, 1, 2, 3, 0], 4)
P4     = make_table([1, 3, 2, 0], 4)
SWITCH = make_table([4, 5, 6, 7, 0, 1, 2, 3], 8)
