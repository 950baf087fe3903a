"""
The S-DES block pipeline and the text, byte and bit-string front ends built
on it.

Every character of a message is one independent 8-bit block:

    IP -> fk(K1) -> swap -> fk(K2) -> IP_INV      (encryption)
    IP -> fk(K2) -> swap -> fk(K1) -> IP_INV      (decryption)
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

from sdes import config
from sdes.errors import InvalidCharacterWidth, InvalidKeyWidth
from sdes.feistel import fk, swap
from sdes.key_schedule import KEY_MASK, KEY_WIDTH, generate_keys
from sdes.permutation import IP, IP_INV
from sdes.utils import from_bitstring, to_bitstring

logger = logging.getLogger(__name__)

BLOCK_MAX = 0xFF


@dataclass(frozen=True)
class CipherEngine:
    """
    A 10-bit master key together with its round subkeys. Immutable, so one
    engine can be shared by any number of threads.
    """
    master_key: int
    k1: int
    k2: int


def construct(master_key: int, strict: Optional[bool] = None) -> CipherEngine:
    """
    Build a cipher engine for a 10-bit master key.

    Args:
        master_key: the key; only the low 10 bits are used.
        strict: if True, keys wider than 10 bits raise InvalidKeyWidth instead
            of being masked. Defaults to config.STRICT_KEY_WIDTH.

    Raises:
        TypeError: if master_key is not an int.
        InvalidKeyWidth: for a negative key, or a wide key in strict mode.
    """
    if not isinstance(master_key, int) or isinstance(master_key, bool):
        raise TypeError(f"master key must be an int, got {type(master_key).__name__}")
    if strict is None:
        strict = config.STRICT_KEY_WIDTH
    if master_key < 0 or (strict and master_key > KEY_MASK):
        raise InvalidKeyWidth(master_key, KEY_WIDTH)

    key = master_key & KEY_MASK
    if key != master_key:
        logger.debug("master key %d masked to %d bits: %d", master_key, KEY_WIDTH, key)
    k1, k2 = generate_keys(key)
    return CipherEngine(key, k1, k2)


def _run_block(block: int, first: int, second: int) -> int:
    state = IP(block)
    state = fk(state, first)
    state = swap(state)
    state = fk(state, second)
    return IP_INV(state)


def _check_block(block: int) -> None:
    if not 0 <= block <= BLOCK_MAX:
        raise InvalidCharacterWidth(block)


def encrypt_block(engine: CipherEngine, block: int) -> int:
    """Encrypt one 8-bit block."""
    _check_block(block)
    return _run_block(block, engine.k1, engine.k2)


def decrypt_block(engine: CipherEngine, block: int) -> int:
    """Decrypt one 8-bit block."""
    _check_block(block)
    return _run_block(block, engine.k2, engine.k1)


def code_points(text: str) -> List[int]:
    # Reject the whole message before any block is touched
    codes = []
    for position, char in enumerate(text):
        code = ord(char)
        if code > BLOCK_MAX:
            raise InvalidCharacterWidth(code, position)
        codes.append(code)
    return codes


def _map_blocks(func: Callable[[int], int], codes: List[int], workers: Optional[int]) -> Iterable[int]:
    if workers is None:
        workers = config.NUM_WORKERS
    if workers <= 1 or len(codes) <= 1:
        return map(func, codes)
    logger.debug("processing %d blocks on %d threads", len(codes), workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(func, codes))


def encrypt(engine: CipherEngine, message: str, workers: Optional[int] = None) -> str:
    """
    Encrypt a message character by character.
    Every character must have a code point in [0, 255]; the ciphertext has the
    same length as the message and may contain non-printable characters.
    """
    codes = code_points(message)
    blocks = _map_blocks(lambda b: _run_block(b, engine.k1, engine.k2), codes, workers)
    return "".join(chr(b) for b in blocks)


def decrypt(engine: CipherEngine, ciphertext: str, workers: Optional[int] = None) -> str:
    """
    Decrypt a ciphertext produced by encrypt() with the same key.
    """
    codes = code_points(ciphertext)
    blocks = _map_blocks(lambda b: _run_block(b, engine.k2, engine.k1), codes, workers)
    return "".join(chr(b) for b in blocks)


@lru_cache(maxsize=64)
def codebook(engine: CipherEngine, inverse: bool = False) -> np.ndarray:
    """
    The full 256-entry substitution table of an engine as a read-only uint8
    array: codebook(engine)[p] == encrypt_block(engine, p). With inverse=True
    the table decrypts instead.
    """
    first, second = (engine.k2, engine.k1) if inverse else (engine.k1, engine.k2)
    table = np.array([_run_block(b, first, second) for b in range(BLOCK_MAX + 1)], dtype=np.uint8)
    table.setflags(write=False)
    logger.debug("built %s codebook for key %d", "decryption" if inverse else "encryption",
                 engine.master_key)
    return table


def encrypt_bytes(engine: CipherEngine, data: bytes) -> bytes:
    """Encrypt a byte string, one block per byte."""
    return codebook(engine)[np.frombuffer(data, dtype=np.uint8)].tobytes()


def decrypt_bytes(engine: CipherEngine, data: bytes) -> bytes:
    """Decrypt a byte string produced by encrypt_bytes() with the same key."""
    return codebook(engine, inverse=True)[np.frombuffer(data, dtype=np.uint8)].tobytes()


def key_schedule(key: str) -> Tuple[str, str]:
    """
    Given a 10-bit key string, generate the two 8-bit subkeys (K1, K2) as
    bit strings.
    """
    k1, k2 = generate_keys(from_bitstring(key, KEY_WIDTH))
    return to_bitstring(k1, 8), to_bitstring(k2, 8)


def sdes_encrypt(plaintext: str, key: str) -> str:
    """
    Encrypt an 8-bit plaintext with a 10-bit key using S-DES.
    Both are '0'/'1' strings; returns the 8-bit ciphertext string.
    """
    if len(plaintext) != 8 or len(key) != KEY_WIDTH:
        raise ValueError("plaintext must be 8 bits and key must be 10 bits.")
    engine = construct(from_bitstring(key, KEY_WIDTH))
    return to_bitstring(encrypt_block(engine, from_bitstring(plaintext, 8)), 8)


def sdes_decrypt(ciphertext: str, key: str) -> str:
    """
    Decrypt an 8-bit ciphertext with a 10-bit key using S-DES.
    Returns the 8-bit plaintext string.
    """
    if len(ciphertext) != 8 or len(key) != KEY_WIDTH:
        raise ValueError("ciphertext must be 8 bits and key must be 10 bits.")
    engine = construct(from_bitstring(key, KEY_WIDTH))
    return to_bitstring(decrypt_block(engine, from_bitstring(ciphertext, 8)), 8)
