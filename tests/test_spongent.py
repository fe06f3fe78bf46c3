import pytest

from iotcipher.spongent import (
    HASH_SIZE,
    STATE_SIZE,
    Spongent,
    next_lfsr,
    p_layer,
    permute,
    reverse_bits,
)


def _popcount(data):
    return sum(bin(b).count("1") for b in data)


def test_next_lfsr_all_ones():
    assert next_lfsr(0xFF) == 0xFE


def test_next_lfsr_stays_in_a_byte():
    assert all(0 <= next_lfsr(v) <= 0xFF for v in range(256))


def test_reverse_bits_examples():
    assert reverse_bits(0x01) == 0x80
    assert reverse_bits(0x9E) == 0x79


def test_reverse_bits_is_an_involution():
    assert all(reverse_bits(reverse_bits(v)) == v for v in range(256))


def test_p_layer_preserves_bit_count():
    state = bytes(range(3, 3 + STATE_SIZE))
    assert _popcount(p_layer(state)) == _popcount(state)


def test_p_layer_keeps_first_and_last_bits():
    first = b"\x01" + bytes(STATE_SIZE - 1)
    last = bytes(STATE_SIZE - 1) + b"\x80"
    assert p_layer(first) == first
    assert p_layer(last) == last


def test_p_layer_is_a_bijection_on_single_bits():
    images = {p_layer((1 << bit).to_bytes(STATE_SIZE, "little")) for bit in range(STATE_SIZE * 8)}
    assert len(images) == STATE_SIZE * 8


def test_p_layer_rejects_wrong_size():
    with pytest.raises(ValueError):
        p_layer(bytes(STATE_SIZE - 1))


def test_permute_keeps_size_and_changes_zero_state():
    result = permute(bytes(STATE_SIZE))
    assert len(result) == STATE_SIZE
    assert result != bytes(STATE_SIZE)


def test_digest_length_and_determinism():
    message = b"Integrity Check via SPONGENT"
    first = Spongent().digest(message)
    second = Spongent().digest(message)
    assert len(first) == HASH_SIZE
    assert first == second


def test_digest_stops_at_zero_byte():
    assert Spongent().digest(b"ab\x00cd") == Spongent().digest(b"ab")


def test_digest_distinguishes_messages():
    assert Spongent().digest(b"Hello, world!") != Spongent().digest(b"Hello, world?")
    assert Spongent().digest(b"") != Spongent().digest(b"a")


def test_state_carries_between_digests():
    hasher = Spongent()
    first = hasher.digest(b"abc")
    second = hasher.digest(b"abc")
    assert first == Spongent().digest(b"abc")
    assert second != first