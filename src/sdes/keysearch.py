"""
Known-plaintext key recovery by exhaustive search.

A 10-bit key leaves only 1024 candidates, so every key is simply tried
against the known (plaintext, ciphertext) blocks. Several keys can map the
same plaintexts to the same ciphertexts; all of them are returned.
"""
import logging
from typing import Dict, List, Optional

import numpy as np
from tqdm import tqdm

from sdes import config
from sdes.cipher import code_points, construct, encrypt_block
from sdes.errors import KeySearchError
from sdes.key_schedule import KEY_MASK

logger = logging.getLogger(__name__)


def collect_pairs(message: str, ciphertext: str) -> Dict[int, int]:
    """
    Pair up the blocks of a known message and its ciphertext.

    Returns:
        {plaintext_block: ciphertext_block}, one entry per distinct plaintext.

    Raises:
        KeySearchError: if the lengths differ, or one plaintext block maps to
            two different ciphertext blocks (no single key can explain that).
        InvalidCharacterWidth: for code points above 255.
    """
    if len(message) != len(ciphertext):
        raise KeySearchError(
            f"message has {len(message)} characters but ciphertext has {len(ciphertext)}"
        )
    pairs: Dict[int, int] = {}
    for plain, cipher in zip(code_points(message), code_points(ciphertext)):
        seen = pairs.setdefault(plain, cipher)
        if seen != cipher:
            raise KeySearchError(
                f"plaintext block {plain} maps to both {seen} and {cipher}"
            )
    return pairs


def candidate_keys(pairs: Dict[int, int], progress: bool = False) -> List[int]:
    """
    Try every 10-bit key against the known pairs.

    Args:
        pairs: {plaintext_block: ciphertext_block}, as from collect_pairs().
        progress: show a tqdm progress bar.

    Returns:
        Every key that reproduces all pairs, in ascending order. Empty if none.
    """
    plaintexts = list(pairs)
    expected = np.array([pairs[p] for p in plaintexts], dtype=np.uint8)

    matches = []
    for key in tqdm(range(KEY_MASK + 1), desc="Key search", disable=not progress):
        engine = construct(key)
        produced = np.fromiter((encrypt_block(engine, p) for p in plaintexts),
                               dtype=np.uint8, count=len(plaintexts))
        if np.array_equal(produced, expected):
            matches.append(key)
    return matches


def search_keys(message: str, ciphertext: str, progress: Optional[bool] = None) -> List[int]:
    """
    Recover every key under which `message` encrypts to `ciphertext`.

    Raises:
        KeySearchError: if the pair is inconsistent or no key matches.
    """
    if progress is None:
        progress = config.KEYSEARCH_SHOW_PROGRESS
    pairs = collect_pairs(message, ciphertext)
    keys = candidate_keys(pairs, progress=progress)
    if not keys:
        raise KeySearchError(f"no 10-bit key maps the {len(pairs)} known blocks")
    logger.info("%d candidate key(s) from %d distinct known blocks", len(keys), len(pairs))
    return keys
