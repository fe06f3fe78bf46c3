# iotcipher

A small collection of sponge-style lightweight ciphers and a hash function,
with two command-line tools that send their output over MQTT and print simple
size, timing and throughput figures. It is meant for experiments and
classroom comparisons of lightweight cryptography on constrained devices.

**These constructions are experimental and have not been analysed. Do not use
them to protect real data.**

## Modules

- `iotcipher.aurora` – `Aurora(key, nonce)`, an ARX duplex authenticated
  cipher with a 16-byte key, a 16-byte nonce and an 8-byte tag.
  `encrypt(plaintext, associated_data=b"")` returns `(ciphertext, tag)`;
  `decrypt(ciphertext, tag, associated_data=b"")` returns the plaintext or
  raises `AuthenticationError` (a `ValueError`) when the tag does not match.
  `permute(state, rounds)` exposes the underlying four-lane permutation.
- `iotcipher.photon` – `PhotonBeetle(key, nonce)`, a sponge cipher with a
  32-byte state, a 16-byte key and nonce and a 16-byte tag. Call
  `absorb(data, domain=0x02)` for associated data (the `domain` value does
  not change the result), then `encrypt(plaintext)`, then `generate_tag()`.
  `sbox_substitution`, `p_layer` and `permute` are the building blocks.
- `iotcipher.quark` – `quark_aead_encrypt(key, nonce, plaintext)` and
  `quark_encrypt(data, key, nonce)`, a byte-wise sponge cipher over a 22-byte
  state with an 8-byte key and nonce; both return `(ciphertext, tag)` with an
  8-byte tag. `sbox_substitution`, `p_layer`, `absorb` and `squeeze` (which
  returns the output and the new state) are the building blocks.
- `iotcipher.spongent` – `Spongent().digest(data)`, a SPONGENT-256/256/16
  style hash giving a 32-byte digest. The input is taken up to its first zero
  byte. The object's state carries over from one digest to the next, so use a
  fresh `Spongent()` for each independent hash. `next_lfsr`, `reverse_bits`,
  `p_layer` and `permute` are also available.
- `iotcipher.report` – `Metrics`, a dataclass whose `render()` returns a
  titled text report, plus `format_hex(label, data)` and
  `throughput(size, elapsed)`.
- `iotcipher.publishers` – `build_aurora`, `build_quark`, `build_photon` and
  `build_spongent` return an `Encoded` (algorithm, topic, payload, metrics);
  `publish(client, topic, payload, qos=1)` publishes and waits for delivery.
- `iotcipher.subscribers` – `describe_payload(algorithm, payload, elapsed)`
  and `make_on_message(algorithm, write=print)` for building receiver
  reports.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the primitives

```python
from iotcipher.aurora import Aurora
from iotcipher.quark import quark_aead_encrypt
from iotcipher.spongent import Spongent

key = bytes(range(16))
nonce = bytes(range(15, -1, -1))

ciphertext, tag = Aurora(key, nonce).encrypt(b"Hello from Aurora!")
plaintext = Aurora(key, nonce).decrypt(ciphertext, tag)

quark_ct, quark_tag = quark_aead_encrypt(bytes(8), bytes(8), b"Secure IoT Message")

digest = Spongent().digest(b"Integrity Check via SPONGENT")
```

Every cipher object holds running sponge state, so create a fresh one for
each message.

## MQTT tools

Both tools take the algorithm as their first argument: `aurora`, `quark`,
`photon` or `spongent`. They connect to a broker at `localhost:1883` unless
`--host` and `--port` say otherwise.

Start a subscriber, which prints a report for every payload that arrives
until interrupted with Ctrl-C:

```
iotcipher-subscribe aurora
```

In another terminal, encrypt (or, for `spongent`, hash) a message, print the
sender metrics with the ciphertext and tag, and publish it:

```
iotcipher-publish aurora
iotcipher-publish quark --message "Another reading"
```

Topics are `aurora/encrypted` for Aurora, `iot/sensor` for Quark and
PHOTON-Beetle, and `iot/spongent/hash` for SPONGENT. Each algorithm has a
built-in default message; `--message` replaces it. Messages are limited to
128 bytes for Aurora and 64 bytes for Quark and PHOTON-Beetle.

## What it does not do

- The subscribers only report on what they receive; they do not decrypt
  payloads or check tags.
- `PhotonBeetle` and the Quark functions encrypt only; there is no decryption
  or tag verification for them. Only `Aurora` can decrypt.
- Keys and nonces used by the publishing tool are fixed in the code; there is
  no key management or key exchange.