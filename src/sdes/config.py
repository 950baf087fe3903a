# config.py
import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


# ─── Cipher ────────────────────────────────────────────────────────────────────

# Keys wider than 10 bits are masked down unless this is set, in which case
# construct() raises InvalidKeyWidth instead.
STRICT_KEY_WIDTH = _env_flag("SDES_STRICT_KEY_WIDTH", False)

# Threads used by encrypt()/decrypt() when the caller does not pass `workers`.
# 1 keeps everything on the calling thread.
NUM_WORKERS = _env_int("SDES_NUM_WORKERS", 1)


# ─── Demo ──────────────────────────────────────────────────────────────────────

DEMO_KEY = 0b1100101101
DEMO_MESSAGE = "hello world"

# Random plaintext blocks added to the demo message before a key search
DEMO_NUM_PLAINTEXTS = 4


# ─── Key search ────────────────────────────────────────────────────────────────

KEYSEARCH_SHOW_PROGRESS = True


# ─── Misc ──────────────────────────────────────────────────────────────────────

LOG_LEVEL = os.getenv("SDES_LOG_LEVEL", "WARNING")

# If you want to fix numpy’s RNG (for total determinism), set this to an int.
GLOBAL_RANDOM_SEED = 12345
