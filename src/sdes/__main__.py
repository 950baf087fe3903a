import argparse
import logging
import time

import numpy as np

from sdes import config
from sdes.cipher import construct, decrypt, encrypt
from sdes.errors import SDESError
from sdes.keysearch import search_keys
from sdes.utils import from_bitstring, hamming_distance, random_8bit_string, to_bitstring


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdes-demo",
        description="Encrypt and decrypt a message with S-DES, optionally recovering the key.",
    )
    parser.add_argument("--key", type=lambda s: int(s, 0), default=config.DEMO_KEY,
                        help="10-bit master key, any int literal (default: %(default)s)")
    parser.add_argument("--message", default=config.DEMO_MESSAGE,
                        help="text to encrypt, code points 0-255 only")
    parser.add_argument("--workers", type=int, default=None,
                        help="threads used to process blocks (default: config.NUM_WORKERS)")
    parser.add_argument("--search", action="store_true",
                        help="recover the key from the message/ciphertext pair")
    parser.add_argument("--no-progress", action="store_true",
                        help="hide the key search progress bar")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.getLevelName(config.LOG_LEVEL.strip().upper())
    if not isinstance(level, int):
        print(f"error: unknown log level {config.LOG_LEVEL!r}")
        return 1
    logging.basicConfig(level=level)

    # ─── 1. Optionally fix RNG for reproducibility ─────────────────────────────────
    if config.GLOBAL_RANDOM_SEED is not None:
        np.random.seed(config.GLOBAL_RANDOM_SEED)

    try:
        engine = construct(args.key)
        true_key = to_bitstring(engine.master_key, 10)
        print(f"Key:            {true_key}")
        print(f"Subkeys:        K1={to_bitstring(engine.k1, 8)} K2={to_bitstring(engine.k2, 8)}")

        # ─── 2. Round trip the message ─────────────────────────────────────────────
        cipher = encrypt(engine, args.message, workers=args.workers)
        message = decrypt(engine, cipher, workers=args.workers)
        print(f"{args.message!r} => {cipher!r}")
        print(f"{cipher!r} => {message!r}")

        if not args.search:
            return 0

        # ─── 3. Recover the key from known plaintext ───────────────────────────────
        # Extra random blocks narrow down the set of equivalent keys
        known = args.message + "".join(
            chr(from_bitstring(random_8bit_string())) for _ in range(config.DEMO_NUM_PLAINTEXTS)
        )
        start_time = time.time()
        candidates = search_keys(known, encrypt(engine, known),
                                 progress=not args.no_progress and config.KEYSEARCH_SHOW_PROGRESS)
        elapsed_time = time.time() - start_time

        print(f"Candidate keys ({len(candidates)}):")
        for key in candidates:
            key_str = to_bitstring(key, 10)
            print(f"  {key_str}  hamming distance {hamming_distance(true_key, key_str)}")
        print(f"Key search time: {elapsed_time:.2f} seconds")
    except SDESError as exc:
        print(f"error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
