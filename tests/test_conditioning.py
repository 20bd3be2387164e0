"""Tests for audio hashing and combination."""

import hashlib

import pytest

from voice_bip39.conditioning import combine, hash_audio
from voice_bip39.errors import EmptyInput, InvalidParameter


class TestHashAudio:
    def test_is_sha256(self):
        data = b"\x01\x00\xff\x7f" * 25
        assert hash_audio(data) == hashlib.sha256(data).digest()

    def test_deterministic(self):
        data = bytes(range(200))
        assert hash_audio(data) == hash_audio(data)

    def test_order_sensitive(self):
        first, second = b"\x00" * 50, b"\x01" * 50
        assert hash_audio(first + second) != hash_audio(second + first)

    def test_accepts_bytearray(self):
        data = bytearray(b"\x10" * 64)
        assert hash_audio(data) == hashlib.sha256(bytes(data)).digest()

    def test_empty_raises(self):
        with pytest.raises(EmptyInput) as exc:
            hash_audio(b"")
        assert exc.value.stage == "hash_audio"


class TestCombine:
    def test_entropy_first(self):
        e = b"\xaa" * 32
        d = hashlib.sha256(b"audio").digest()
        assert combine(e, d) == hashlib.sha256(e + d).digest()

    def test_order_matters(self):
        e = bytes(range(32))
        d = hashlib.sha256(b"\x00" * 100).digest()
        assert combine(e, d) != combine(d, e)

    def test_output_length(self):
        assert len(combine(b"\x00" * 16, b"\x00" * 32)) == 32

    def test_bad_digest_length(self):
        with pytest.raises(InvalidParameter):
            combine(b"\x00" * 32, b"\x00" * 31)

    def test_empty_entropy(self):
        with pytest.raises(InvalidParameter):
            combine(b"", b"\x00" * 32)
