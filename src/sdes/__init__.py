"""
Simplified DES (S-DES): an 8-bit block, 10-bit key, two-round Feistel cipher
for teaching. Not a security primitive.
"""
from sdes.cipher import (
    CipherEngine,
    codebook,
    construct,
    decrypt,
    decrypt_block,
    decrypt_bytes,
    encrypt,
    encrypt_block,
    encrypt_bytes,
    key_schedule,
    sdes_decrypt,
    sdes_encrypt,
)
from sdes.errors import (
    InvalidCharacterWidth,
    InvalidKeyWidth,
    KeySearchError,
    MalformedPermutationTable,
    SDESError,
)
from sdes.key_schedule import generate_keys

__version__ = "0.1.0"
