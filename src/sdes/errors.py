from typing import Optional


class SDESError(Exception):
    """Base class for every error raised by the sdes package."""


class InvalidKeyWidth(SDESError, ValueError):
    """
    The master key does not fit in 10 bits (or is negative).
    """

    def __init__(self, key: int, width: int = 10) -> None:
        self.key = key
        self.width = width
        super().__init__(f"master key {key!r} is not a {width}-bit unsigned value")


class InvalidCharacterWidth(SDESError, ValueError):
    """
    A character's code point does not fit in one 8-bit block.
    """

    def __init__(self, code_point: int, position: Optional[int] = None) -> None:
        self.code_point = code_point
        self.position = position
        where = "" if position is None else f" at position {position}"
        super().__init__(f"code point {code_point}{where} does not fit in an 8-bit block (0-255)")


class MalformedPermutationTable(SDESError):
    pass


class KeySearchError(SDESError):
    pass
