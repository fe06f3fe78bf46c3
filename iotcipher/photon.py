"""A PHOTON-Beetle style sponge cipher over a 256-bit byte state."""

from __future__ import annotations

BLOCK_SIZE = 16
RATE = 16
CAPACITY = 16
KEY_SIZE = 16
NONCE_SIZE = 16
TAG_SIZE = 16
STATE_SIZE = RATE + CAPACITY

SBOX = (0xC, 0x5, 0x6, 0xB, 0x9, 0x0, 0xA, 0xD,
        0x3, 0xE, 0xF, 0x8, 0x4, 0x7, 0x1, 0x2)

_BYTE_SBOX = bytes((SBOX[b >> 4] << 4) | SBOX[b & 0x0F] for b in range(256))


def sbox_substitution(state: bytes) -> bytes:
    """Substitute both nibbles of every state byte through the S-box."""
    return bytes(state).translate(_BYTE_SBOX)


def p_layer(state: bytes) -> bytes:
    """Apply the bit permutation layer, bit i*8+j moving to (i*8+j) mod the state width."""
    source = bytes(state)
    width = len(source) * 8
    out = bytearray(len(source))
    for i, byte in enumerate(source):
        for j in range(8):
            pos = (i * 8 + j) % width
            out[pos // 8] |= ((byte >> j) & 1) << (pos % 8)
    return bytes(out)


def permute(state: bytes, rounds: int) -> bytes:
    """Run `rounds` rounds of S-box substitution followed by the permutation layer."""
    result = bytes(state)
    for _ in range(rounds):
        result = p_layer(sbox_substitution(result))
    return result


class PhotonBeetle:
    """A sponge context initialised from a 16-byte key and a 16-byte nonce."""

    def __init__(self, key: bytes, nonce: bytes) -> None:
        key, nonce = bytes(key), bytes(nonce)
        if len(key) != KEY_SIZE:
            raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
        if len(nonce) != NONCE_SIZE:
            raise ValueError(f"nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
        self._state = bytearray(permute(nonce + key, 12))

    def _permute(self, rounds: int) -> None:
        self._state = bytearray(permute(self._state, rounds))

    def _xor_rate(self, block: bytes) -> None:
        for index, byte in enumerate(block):
            self._state[index] ^= byte

    def absorb(self, data: bytes, domain: int = 0x02) -> None:
        """Absorb associated data; `domain` is accepted but does not affect the state."""
        data = bytes(data)
        full = len(data) - len(data) % RATE
        for start in range(0, full, RATE):
            self._xor_rate(data[start:start + RATE])
            self._permute(12)
        tail = data[full:]
        if tail or not data:
            self._xor_rate(tail)
            self._state[len(tail)] ^= 0x01
            self._permute(12)

    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt `plaintext`, feeding each ciphertext block back into the state."""
        plaintext = bytes(plaintext)
        out = bytearray()
        for start in range(0, len(plaintext), RATE):
            block = plaintext[start:start + RATE]
            self._permute(6)
            ciphertext = bytes(s ^ p for s, p in zip(self._state, block))
            self._state[:len(ciphertext)] = ciphertext
            out += ciphertext
            if len(block) < RATE:
                self._state[len(block)] ^= 0x01
        return bytes(out)

    def generate_tag(self) -> bytes:
        """Permute the state and return its first TAG_SIZE bytes."""
        self._permute(12)
        return bytes(self._state[:TAG_SIZE])