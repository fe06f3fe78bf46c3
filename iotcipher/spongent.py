"""SPONGENT-256/256/16 hashing."""

from __future__ import annotations

STATE_BITS = 272
STATE_SIZE = STATE_BITS // 8
HASH_BITS = 256
HASH_SIZE = HASH_BITS // 8

SBOX = (0xE, 0xD, 0xB, 0x0, 0x2, 0x1, 0x4, 0xF,
        0x7, 0xA, 0x8, 0x5, 0x9, 0xC, 0x3, 0x6)

_BYTE_SBOX = bytes((SBOX[b >> 4] << 4) | SBOX[b & 0x0F] for b in range(256))


def next_lfsr(lfsr: int) -> int:
    """Advance the 8-bit round-constant LFSR by one step."""
    feedback = ((lfsr >> 1) ^ (lfsr >> 2) ^ (lfsr >> 3) ^ (lfsr >> 7)) & 1
    return ((lfsr << 1) | feedback) & 0xFF


def reverse_bits(value: int) -> int:
    """Reverse the order of the bits of a byte."""
    b = value & 0xFF
    b = (b & 0xF0) >> 4 | (b & 0x0F) << 4
    b = (b & 0xCC) >> 2 | (b & 0x33) << 2
    return ((b & 0xAA) >> 1 | (b & 0x55) << 1) & 0xFF


def _destination(index: int) -> int:
    if index == STATE_BITS - 1:
        return index
    return (index * STATE_BITS // 4) % (STATE_BITS - 1)


def _byte_table(position: int) -> tuple[int, ...]:
    targets = [1 << _destination(position * 8 + bit) for bit in range(8)]
    return tuple(
        sum(target for bit, target in enumerate(targets) if (value >> bit) & 1)
        for value in range(256)
    )


_P_TABLE = tuple(_byte_table(position) for position in range(STATE_SIZE))


def _round_constants() -> tuple[int, ...]:
    constants = []
    lfsr = 0x9E
    while True:
        constants.append(lfsr)
        lfsr = next_lfsr(lfsr)
        if lfsr == 0xFF:
            return tuple(constants)
        if len(constants) > 256:
            raise RuntimeError("round-constant LFSR never reaches 0xFF")


_ROUND_CONSTANTS = _round_constants()


def _check_state(state: bytes) -> bytes:
    state = bytes(state)
    if len(state) != STATE_SIZE:
        raise ValueError(f"state must be {STATE_SIZE} bytes, got {len(state)}")
    return state


def p_layer(state: bytes) -> bytes:
    """Move bit i to (i * 68) mod 271; the top bit stays in place."""
    accumulated = 0
    for table, byte in zip(_P_TABLE, _check_state(state)):
        accumulated |= table[byte]
    return accumulated.to_bytes(STATE_SIZE, "little")


def permute(state: bytes) -> bytes:
    """Apply the full SPONGENT permutation, one round per LFSR constant."""
    current = _check_state(state)
    for constant in _ROUND_CONSTANTS:
        mixed = bytearray(current)
        mixed[0] ^= constant
        mixed[-1] ^= reverse_bits(constant)
        current = p_layer(bytes(mixed).translate(_BYTE_SBOX))
    return current


def _xor_head(state: bytes, first: int, second: int) -> bytes:
    mixed = bytearray(state)
    mixed[0] ^= first
    mixed[1] ^= second
    return bytes(mixed)


class Spongent:
    """A SPONGENT sponge; its state carries over from one digest to the next."""

    def __init__(self) -> None:
        self._state = bytes(STATE_SIZE)

    def digest(self, data: bytes) -> bytes:
        """Hash `data` up to its first zero byte and return a 32-byte digest."""
        message = bytes(data).split(b"\x00", 1)[0]
        state = self._state
        paired = len(message) - len(message) % 2
        for index in range(0, paired, 2):
            state = permute(_xor_head(state, message[index], message[index + 1]))
        if len(message) % 2:
            state = _xor_head(state, message[-1], 0x80)
        else:
            state = _xor_head(state, 0x80, 0x00)
        state = permute(state)

        output = bytearray()
        for _ in range(HASH_SIZE // 2):
            output += state[:2]
            state = permute(state)
        self._state = state
        return bytes(output)