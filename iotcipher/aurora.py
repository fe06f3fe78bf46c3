"""Aurora-Light: an authenticated cipher built on a 256-bit ARX duplex sponge."""

from __future__ import annotations

import hmac
import struct
from collections.abc import Iterable, Iterator

LANES = 4
WORD_BITS = 64
TAG_BYTES = WORD_BITS // 8
RATE_BYTES = 24
CAPACITY_BYTES = WORD_BITS // 8
KEY_BYTES = 16
NONCE_BYTES = 16
MIN_ROUNDS = 6
MAX_ROUNDS = 12

_MASK = (1 << 64) - 1
_GOLDEN = 0x9E3779B97F4A7C15
_RATE_WORDS = struct.Struct("<3Q")
_LANE = struct.Struct("<Q")


class AuthenticationError(ValueError):
    """Raised when a tag does not match the ciphertext and associated data."""


def _rotl(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & _MASK


def _rotr(x: int, r: int) -> int:
    return ((x >> r) | (x << (64 - r))) & _MASK


def _mix(x: int) -> int:
    x = (x + _rotl(x, 13)) & _MASK
    x ^= _rotr(x, 7)
    return (x + _GOLDEN) & _MASK


def permute(state: Iterable[int], rounds: int) -> list[int]:
    """Apply `rounds` rounds of the ARX permutation to the four 64-bit lanes."""
    lanes = [lane & _MASK for lane in state]
    if len(lanes) != LANES:
        raise ValueError(f"state must have {LANES} lanes, got {len(lanes)}")
    for _ in range(rounds):
        lanes = [_mix(lane) for lane in lanes]
    return lanes


def _check_length(name: str, value: bytes, size: int) -> bytes:
    value = bytes(value)
    if len(value) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(value)}")
    return value


class Aurora:
    """A duplex AEAD context keyed with a 128-bit key and a 128-bit nonce.

    Every call advances the context state, so a message must be decrypted
    by a context set up with the same key and nonce and fed the same calls.
    """

    def __init__(self, key: bytes, nonce: bytes) -> None:
        key = _check_length("key", key, KEY_BYTES)
        nonce = _check_length("nonce", nonce, NONCE_BYTES)
        self._state = [0] * LANES
        self._absorb(key + nonce, MIN_ROUNDS // 2)

    def _absorb(self, data: bytes, rounds: int) -> None:
        for start in range(0, len(data), RATE_BYTES):
            block = data[start:start + RATE_BYTES]
            if len(block) < RATE_BYTES:
                block = (block + b"\x80").ljust(RATE_BYTES, b"\x00")
            words = _RATE_WORDS.unpack(block)
            self._state[:3] = [lane ^ word for lane, word in zip(self._state, words)]
            self._state = permute(self._state, rounds)

    def _keystream(self, length: int) -> Iterator[bytes]:
        remaining = length
        while remaining > 0:
            rounds = min(MIN_ROUNDS + remaining // 64, MAX_ROUNDS)
            block = _RATE_WORDS.pack(*self._state[:3])
            self._state = permute(self._state, rounds)
            chunk = min(remaining, RATE_BYTES)
            yield block[:chunk]
            remaining -= chunk

    def _process(self, data: bytes, associated_data: bytes) -> bytes:
        if associated_data:
            self._absorb(bytes(associated_data), MIN_ROUNDS)
        stream = b"".join(self._keystream(len(data)))
        return bytes(a ^ b for a, b in zip(data, stream))

    def _finalize(self) -> bytes:
        self._state = permute(self._state, MAX_ROUNDS)
        return _LANE.pack(self._state[3])

    def encrypt(self, plaintext: bytes, associated_data: bytes = b"") -> tuple[bytes, bytes]:
        """Encrypt `plaintext`; return the ciphertext and an 8-byte tag."""
        ciphertext = self._process(bytes(plaintext), associated_data)
        return ciphertext, self._finalize()

    def decrypt(self, ciphertext: bytes, tag: bytes, associated_data: bytes = b"") -> bytes:
        """Decrypt `ciphertext` and verify `tag`; raise AuthenticationError on mismatch."""
        plaintext = self._process(bytes(ciphertext), associated_data)
        expected = self._finalize()
        if not hmac.compare_digest(expected, bytes(tag)):
            raise AuthenticationError("authentication tag mismatch")
        return plaintext