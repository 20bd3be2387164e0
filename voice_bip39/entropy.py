"""OS-backed entropy generation and HKDF key derivation."""

from __future__ import annotations

import logging
import os

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from voice_bip39.errors import DerivationError, InvalidParameter, SourceUnavailable

logger = logging.getLogger(__name__)

VALID_BIT_SIZES = (128, 160, 192, 224, 256)
KEY_SIZE = 32  # 256 bits
HASH_LEN = 32  # SHA-256 output
MAX_KEY_LEN = 255 * HASH_LEN


def generate_entropy(bit_size: int = 256) -> bytes:
    """Return ``bit_size // 8`` bytes from the operating system CSPRNG.

    Parameters
    ----------
    bit_size:
        One of 128, 160, 192, 224 or 256.

    Raises
    ------
    InvalidParameter
        If *bit_size* is not a legal BIP-39 entropy size.
    SourceUnavailable
        If the OS entropy call fails. There is no fallback generator.
    """
    if isinstance(bit_size, bool) or not isinstance(bit_size, int) or bit_size not in VALID_BIT_SIZES:
        raise InvalidParameter(
            f"bit size must be one of {VALID_BIT_SIZES}, got {bit_size!r}", stage="entropy"
        )
    try:
        entropy = os.urandom(bit_size // 8)
    except (OSError, NotImplementedError) as e:
        raise SourceUnavailable(f"OS entropy source failed: {e}", stage="entropy") from e
    logger.debug("Generated %d bits of entropy", bit_size)
    return entropy


def derive_key(entropy: bytes, key_len: int = KEY_SIZE) -> bytes:
    """HKDF-SHA256 extract-and-expand of *entropy* with no salt and no info.

    The entropy doubles as input keying material without a salt, which is
    weaker than recommended HKDF usage. The result is for display only.
    """
    if not entropy:
        raise InvalidParameter("entropy must not be empty", stage="derive")
    if isinstance(key_len, bool) or not isinstance(key_len, int) or not 0 < key_len <= MAX_KEY_LEN:
        raise DerivationError(
            f"key length must be between 1 and {MAX_KEY_LEN} bytes, got {key_len!r}",
            stage="derive",
        )
    hkdf = HKDF(algorithm=hashes.SHA256(), length=key_len, salt=None, info=None)
    key = hkdf.derive(bytes(entropy))
    logger.debug("Derived %d-byte key from %d bytes of entropy", key_len, len(entropy))
    return key
