"""BIP-39 mnemonic encoding (English wordlist)."""

from __future__ import annotations

import hashlib
from functools import lru_cache

from mnemonic import Mnemonic

from voice_bip39.errors import InvalidEntropyLength

VALID_ENTROPY_LENGTHS = (16, 20, 24, 28, 32)
WORD_BITS = 11


@lru_cache(maxsize=1)
def wordlist() -> list[str]:
    """The canonical 2048-word English list, in index order."""
    words = Mnemonic("english").wordlist
    if len(words) != 2 ** WORD_BITS:
        raise RuntimeError(f"English wordlist has {len(words)} words, expected 2048")
    return list(words)


def checksum_bits(entropy: bytes) -> str:
    """Top ``len(entropy) * 8 / 32`` bits of SHA-256(entropy) as a bit string."""
    length = len(entropy) * 8 // 32
    digest = hashlib.sha256(entropy).digest()
    return format(digest[0], "08b")[:length]


def encode_mnemonic(combined: bytes) -> str:
    """Encode *combined* as a space-joined BIP-39 mnemonic.

    Word order encodes the checksum positionally, so groups are emitted
    strictly in bitstream order.
    """
    if len(combined) not in VALID_ENTROPY_LENGTHS:
        raise InvalidEntropyLength(len(combined))

    combined = bytes(combined)
    entropy_bits = "".join(format(byte, "08b") for byte in combined)
    all_bits = entropy_bits + checksum_bits(combined)

    words = wordlist()
    return " ".join(
        words[int(all_bits[i:i + WORD_BITS], 2)]
        for i in range(0, len(all_bits), WORD_BITS)
    )


def word_count(entropy_len: int) -> int:
    """Number of words produced for *entropy_len* bytes of entropy."""
    if entropy_len not in VALID_ENTROPY_LENGTHS:
        raise InvalidEntropyLength(entropy_len)
    bits = entropy_len * 8
    return (bits + bits // 32) // WORD_BITS
