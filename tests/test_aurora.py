import pytest

from iotcipher.aurora import AuthenticationError, Aurora, TAG_BYTES, permute

KEY = bytes(range(16))
NONCE = bytes(15 - i for i in range(16))


def test_permute_zero_rounds_is_identity():
    state = [1, 2, 3, 0xFFFFFFFFFFFFFFFF]
    assert permute(state, 0) == state


def test_permute_zero_state_one_round_gives_golden_constant():
    assert permute([0, 0, 0, 0], 1) == [0x9E3779B97F4A7C15] * 4


def test_permute_rejects_wrong_lane_count():
    with pytest.raises(ValueError):
        permute([0, 0, 0], 1)


def test_permute_stays_within_64_bits():
    lanes = permute([0xFFFFFFFFFFFFFFFF] * 4, 12)
    assert all(0 <= lane < 2**64 for lane in lanes)


def test_round_trip_without_associated_data():
    message = b"Hello from Aurora!"
    ciphertext, tag = Aurora(KEY, NONCE).encrypt(message)
    assert len(ciphertext) == len(message)
    assert len(tag) == TAG_BYTES
    assert Aurora(KEY, NONCE).decrypt(ciphertext, tag) == message


def test_round_trip_long_message_with_associated_data():
    message = bytes(range(256)) * 3
    ad = b"header-data-that-spans-more-than-one-block"
    ciphertext, tag = Aurora(KEY, NONCE).encrypt(message, ad)
    assert ciphertext != message
    assert Aurora(KEY, NONCE).decrypt(ciphertext, tag, ad) == message


def test_empty_plaintext():
    ciphertext, tag = Aurora(KEY, NONCE).encrypt(b"")
    assert ciphertext == b""
    assert Aurora(KEY, NONCE).decrypt(b"", tag) == b""


def test_tampered_tag_is_rejected():
    ciphertext, tag = Aurora(KEY, NONCE).encrypt(b"payload")
    bad = bytes([tag[0] ^ 1]) + tag[1:]
    with pytest.raises(AuthenticationError):
        Aurora(KEY, NONCE).decrypt(ciphertext, bad)


def test_wrong_associated_data_is_rejected():
    ciphertext, tag = Aurora(KEY, NONCE).encrypt(b"payload", b"one")
    with pytest.raises(AuthenticationError):
        Aurora(KEY, NONCE).decrypt(ciphertext, tag, b"two")


def test_keystream_does_not_depend_on_plaintext():
    first = b"A" * 40
    second = b"z" * 40
    ct1, tag1 = Aurora(KEY, NONCE).encrypt(first)
    ct2, tag2 = Aurora(KEY, NONCE).encrypt(second)
    assert bytes(a ^ b for a, b in zip(ct1, first)) == bytes(a ^ b for a, b in zip(ct2, second))
    assert tag1 == tag2


def test_different_nonce_changes_ciphertext():
    message = b"same message"
    ct1, _ = Aurora(KEY, NONCE).encrypt(message)
    ct2, _ = Aurora(KEY, bytes(16)).encrypt(message)
    assert ct1 != ct2


@pytest.mark.parametrize("key,nonce", [(bytes(15), bytes(16)), (bytes(16), bytes(17))])
def test_bad_key_or_nonce_length(key, nonce):
    with pytest.raises(ValueError):
        Aurora(key, nonce)