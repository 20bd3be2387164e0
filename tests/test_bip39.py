"""Tests for BIP-39 mnemonic encoding."""

import os

import pytest
from mnemonic import Mnemonic

from voice_bip39.bip39 import checksum_bits, encode_mnemonic, word_count, wordlist
from voice_bip39.errors import InvalidEntropyLength

# Official BIP-39 English test vectors (trezor/python-mnemonic vectors.json)
VECTORS = [
    ("00" * 16, "abandon " * 11 + "about"),
    ("7f" * 16, "legal winner thank year wave sausage worth useful legal winner thank yellow"),
    ("80" * 16, "letter advice cage absurd amount doctor acoustic avoid letter advice cage above"),
    ("ff" * 16, "zoo " * 11 + "wrong"),
    ("00" * 24, "abandon " * 17 + "agent"),
    ("00" * 32, "abandon " * 23 + "art"),
    (
        "7f" * 32,
        "legal winner thank year wave sausage worth useful legal winner thank year "
        "wave sausage worth useful legal winner thank year wave sausage worth title",
    ),
    (
        "80" * 32,
        "letter advice cage absurd amount doctor acoustic avoid letter advice cage absurd "
        "amount doctor acoustic avoid letter advice cage absurd amount doctor acoustic bless",
    ),
    ("ff" * 32, "zoo " * 23 + "vote"),
    ("9e885d952ad362caeb4efe34a8e91bd2", "ozone drill grab fiber curtain grace pudding thank cruise elder eight picnic"),
]


class TestWordlist:
    def test_size(self):
        assert len(wordlist()) == 2048

    def test_order(self):
        words = wordlist()
        assert words[0] == "abandon"
        assert words[-1] == "zoo"


class TestEncodeMnemonic:
    @pytest.mark.parametrize("entropy_hex,expected", VECTORS, ids=lambda v: v[:8])
    def test_official_vectors(self, entropy_hex, expected):
        assert encode_mnemonic(bytes.fromhex(entropy_hex)) == expected

    def test_all_zero_is_stable(self):
        first = encode_mnemonic(b"\x00" * 32)
        assert all(encode_mnemonic(b"\x00" * 32) == first for _ in range(10))
        assert first.split()[-1] == "art"

    @pytest.mark.parametrize("n_bytes,words", [(16, 12), (20, 15), (24, 18), (28, 21), (32, 24)])
    def test_word_count(self, n_bytes, words):
        assert len(encode_mnemonic(os.urandom(n_bytes)).split(" ")) == words
        assert word_count(n_bytes) == words

    @pytest.mark.parametrize("n_bytes", [16, 20, 24, 28, 32])
    def test_matches_reference(self, n_bytes):
        ref = Mnemonic("english")
        for _ in range(20):
            data = os.urandom(n_bytes)
            phrase = encode_mnemonic(data)
            assert phrase == ref.to_mnemonic(data)
            assert ref.check(phrase)

    @pytest.mark.parametrize("n_bytes", [0, 1, 15, 31, 33, 64])
    def test_invalid_length(self, n_bytes):
        with pytest.raises(InvalidEntropyLength) as exc:
            encode_mnemonic(b"\x00" * n_bytes)
        assert exc.value.length == n_bytes
        assert exc.value.stage == "encode"

    def test_single_spaces(self):
        phrase = encode_mnemonic(os.urandom(32))
        assert "  " not in phrase
        assert phrase == phrase.strip()


class TestChecksum:
    def test_length(self):
        assert len(checksum_bits(b"\x00" * 16)) == 4
        assert len(checksum_bits(b"\x00" * 32)) == 8

    def test_zero_entropy(self):
        # SHA-256 of 32 zero bytes starts with 0x66
        assert checksum_bits(b"\x00" * 32) == "01100110"
