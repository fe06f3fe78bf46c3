"""A Quark-style sponge cipher over a 176-bit byte state."""

from __future__ import annotations

STATE_BITS = 176
STATE_BYTES = STATE_BITS // 8
RATE = 16
TAG_SIZE = 8
KEY_BYTES = RATE // 2
NONCE_BYTES = RATE // 2
ROUNDS = 512

SBOX = (0xC, 0x5, 0x6, 0xB, 0x9, 0x0, 0xA, 0xD,
        0x3, 0xE, 0xF, 0x8, 0x4, 0x7, 0x1, 0x2)

_BYTE_SBOX = bytes((SBOX[b >> 4] << 4) | SBOX[b & 0x0F] for b in range(256))
_DESTINATIONS = tuple((i * 13) % STATE_BITS for i in range(STATE_BITS))


def _check_state(state: bytes) -> bytes:
    state = bytes(state)
    if len(state) != STATE_BYTES:
        raise ValueError(f"state must be {STATE_BYTES} bytes, got {len(state)}")
    return state


def sbox_substitution(state: bytes, length: int) -> bytes:
    """Substitute the nibbles of the first `length` bytes through the S-box."""
    state = bytes(state)
    return state[:length].translate(_BYTE_SBOX) + state[length:]


def p_layer(state: bytes) -> bytes:
    """Move bit i of the state to bit (13 * i) mod 176."""
    value = int.from_bytes(_check_state(state), "little")
    result = 0
    for src, dst in enumerate(_DESTINATIONS):
        if (value >> src) & 1:
            result |= 1 << dst
    return result.to_bytes(STATE_BYTES, "little")


def _round(state: bytes) -> bytes:
    return p_layer(sbox_substitution(state, RATE))


def absorb(state: bytes, data: bytes) -> bytes:
    """XOR each input byte into the state at its own index, with a round after each."""
    current = _check_state(state)
    data = bytes(data)
    if len(data) > STATE_BYTES:
        raise ValueError(f"at most {STATE_BYTES} bytes can be absorbed, got {len(data)}")
    for index, byte in enumerate(data):
        mixed = bytearray(current)
        mixed[index] ^= byte
        current = _round(mixed)
    return current


def squeeze(state: bytes, length: int) -> tuple[bytes, bytes]:
    """Read `length` bytes, one state byte per round; return the output and the new state."""
    current = _check_state(state)
    if not 0 <= length <= STATE_BYTES:
        raise ValueError(f"can squeeze 0 to {STATE_BYTES} bytes, got {length}")
    output = bytearray()
    for index in range(length):
        output.append(current[index])
        current = _round(current)
    return bytes(output), current


def quark_aead_encrypt(key: bytes, nonce: bytes, plaintext: bytes) -> tuple[bytes, bytes]:
    """Encrypt `plaintext` with an 8-byte key and nonce; return ciphertext and 8-byte tag."""
    key, nonce, plaintext = bytes(key), bytes(nonce), bytes(plaintext)
    if len(key) != KEY_BYTES:
        raise ValueError(f"key must be {KEY_BYTES} bytes, got {len(key)}")
    if len(nonce) != NONCE_BYTES:
        raise ValueError(f"nonce must be {NONCE_BYTES} bytes, got {len(nonce)}")

    state = bytearray(_round(key + nonce + bytes(STATE_BYTES - RATE)))
    ciphertext = bytearray()
    for index, byte in enumerate(plaintext):
        position = index % RATE
        state[position] ^= byte
        ciphertext.append(state[position])
        if position == RATE - 1:
            state = bytearray(_round(state))
    if len(plaintext) % RATE:
        state = bytearray(_round(state))

    tag, _ = squeeze(state, TAG_SIZE)
    return bytes(ciphertext), tag


def quark_encrypt(data: bytes, key: bytes, nonce: bytes) -> tuple[bytes, bytes]:
    """Encrypt `data`; same as quark_aead_encrypt with the arguments reordered."""
    return quark_aead_encrypt(key, nonce, data)