"""Encrypt or hash a message and publish it over MQTT."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass

import paho.mqtt.client as mqtt

from .aurora import Aurora
from .photon import PhotonBeetle
from .quark import quark_aead_encrypt
from .report import Metrics
from .spongent import HASH_SIZE, STATE_SIZE, Spongent

BROKER_HOST = "localhost"
BROKER_PORT = 1883
QOS = 1
TIMEOUT = 10.0

TOPICS = {
    "aurora": "aurora/encrypted",
    "quark": "iot/sensor",
    "photon": "iot/sensor",
    "spongent": "iot/spongent/hash",
}

PUBLISHER_IDS = {
    "aurora": "AuroraPublisher",
    "quark": "QuarkPublisher",
    "photon": "PhotonPublisher",
    "spongent": "SpongentPublisher",
}

DEFAULT_MESSAGES = {
    "aurora": "Hello from Aurora!",
    "quark": "Secure IoT Message",
    "photon": "Photon-Beetle Secure IoT!",
    "spongent": "Integrity Check via SPONGENT",
}

_AURORA_KEY = bytes(range(16))
_AURORA_NONCE = bytes(15 - i for i in range(16))
_AURORA_CT_BUFFER = 128
_AURORA_TAG = 8

_QUARK_KEY = bytes(range(8))
_QUARK_NONCE = bytes(i + 0x10 for i in range(8))
_QUARK_CT_BUFFER = 64
_QUARK_TAG = 8

_PHOTON_KEY = bytes(range(16))
_PHOTON_NONCE = bytes(i + 0xA0 for i in range(16))
_PHOTON_CT_BUFFER = 64
_PHOTON_CONTEXT = 56
_PHOTON_TAG = 16

_NOTICES = {
    "quark": "Published encrypted message.",
    "photon": "Published encrypted Photon-Beetle message.",
    "spongent": "Published SPONGENT hash.",
}


@dataclass(frozen=True)
class Encoded:
    """A payload ready to publish, with the metrics of producing it."""

    algorithm: str
    topic: str
    payload: bytes
    metrics: Metrics


def _as_bytes(message: str | bytes) -> bytes:
    return message.encode() if isinstance(message, str) else bytes(message)


def _check_fits(data: bytes, limit: int) -> None:
    if len(data) > limit:
        raise ValueError(f"message must be at most {limit} bytes, got {len(data)}")


def build_aurora(message: str | bytes = DEFAULT_MESSAGES["aurora"]) -> Encoded:
    """Encrypt `message` with Aurora; the payload is ciphertext followed by the tag."""
    data = _as_bytes(message)
    _check_fits(data, _AURORA_CT_BUFFER)
    start = time.process_time()
    ciphertext, tag = Aurora(_AURORA_KEY, _AURORA_NONCE).encrypt(data)
    elapsed = time.process_time() - start
    ram = len(_AURORA_KEY) + len(_AURORA_NONCE) + _AURORA_CT_BUFFER + _AURORA_TAG
    metrics = Metrics(
        title="SENDER METRICS",
        size=len(data),
        elapsed=elapsed,
        leading=(("Algorithm", "Aurora AEAD"),),
        trailing=(("Static RAM Usage", f"{ram} bytes"),),
        dumps=(("Ciphertext", ciphertext), ("Tag", tag)),
    )
    return Encoded("aurora", TOPICS["aurora"], ciphertext + tag, metrics)


def build_quark(message: str | bytes = DEFAULT_MESSAGES["quark"]) -> Encoded:
    """Encrypt `message` with Quark; the payload is ciphertext followed by the tag."""
    data = _as_bytes(message)
    _check_fits(data, _QUARK_CT_BUFFER)
    start = time.process_time()
    ciphertext, tag = quark_aead_encrypt(_QUARK_KEY, _QUARK_NONCE, data)
    elapsed = time.process_time() - start
    ram = len(_QUARK_KEY) + len(_QUARK_NONCE) + _QUARK_CT_BUFFER + _QUARK_TAG
    metrics = Metrics(
        title="QUARK ENCRYPTION METRICS",
        size=len(data),
        elapsed=elapsed,
        leading=(("Algorithm", "Quark AEAD"),),
        trailing=(("Static RAM Usage", f"{ram} bytes"),),
        dumps=(("Ciphertext", ciphertext), ("Tag", tag)),
    )
    return Encoded("quark", TOPICS["quark"], ciphertext + tag, metrics)


def build_photon(message: str | bytes = DEFAULT_MESSAGES["photon"]) -> Encoded:
    """Encrypt `message` with PHOTON-Beetle and no associated data."""
    data = _as_bytes(message)
    _check_fits(data, _PHOTON_CT_BUFFER)
    start = time.process_time()
    context = PhotonBeetle(_PHOTON_KEY, _PHOTON_NONCE)
    context.absorb(b"", 0x02)
    ciphertext = context.encrypt(data)
    tag = context.generate_tag()
    elapsed = time.process_time() - start
    ram = (_PHOTON_CONTEXT + len(_PHOTON_KEY) + len(_PHOTON_NONCE)
           + _PHOTON_TAG + _PHOTON_CT_BUFFER)
    metrics = Metrics(
        title="PHOTON-BEETLE ENCRYPTION METRICS",
        size=len(data),
        elapsed=elapsed,
        trailing=(("Static RAM Usage", f"{ram} bytes"),),
        dumps=(("Ciphertext", ciphertext), ("Tag", tag)),
    )
    return Encoded("photon", TOPICS["photon"], ciphertext + tag, metrics)


def build_spongent(message: str | bytes = DEFAULT_MESSAGES["spongent"]) -> Encoded:
    """Hash `message` with SPONGENT; the payload is the 32-byte digest."""
    data = _as_bytes(message)
    text = data.split(b"\x00", 1)[0]
    start = time.perf_counter()
    digest = Spongent().digest(data)
    elapsed = time.perf_counter() - start
    metrics = Metrics(
        title="SPONGENT HASH METRICS",
        size=len(text),
        elapsed=elapsed,
        leading=(("Message", text.decode(errors="replace")),),
        details=(("Hash Size", f"{HASH_SIZE} bytes"),),
        trailing=(("RAM Usage", f"{2 * STATE_SIZE} bytes"),),
        dumps=(("Hash", digest),),
    )
    return Encoded("spongent", TOPICS["spongent"], digest, metrics)


BUILDERS = {
    "aurora": build_aurora,
    "quark": build_quark,
    "photon": build_photon,
    "spongent": build_spongent,
}


def publish(client, topic: str, payload: bytes, qos: int = QOS):
    """Publish `payload` on `topic` and wait for delivery to complete."""
    info = client.publish(topic, payload, qos=qos)
    info.wait_for_publish(TIMEOUT)
    return info


def _make_client(client_id: str):
    if hasattr(mqtt, "CallbackAPIVersion"):
        return mqtt.Client(mqtt.CallbackAPIVersion.VERSION2, client_id=client_id)
    return mqtt.Client(client_id=client_id)


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Encrypt or hash a message and publish it over MQTT.")
    parser.add_argument("algorithm", choices=sorted(BUILDERS))
    parser.add_argument("--host", default=BROKER_HOST)
    parser.add_argument("--port", type=int, default=BROKER_PORT)
    parser.add_argument("--message", default=None)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Build the chosen payload, print its metrics and publish it."""
    args = _parse_args(argv)
    message = args.message if args.message is not None else DEFAULT_MESSAGES[args.algorithm]
    encoded = BUILDERS[args.algorithm](message)

    client = _make_client(PUBLISHER_IDS[args.algorithm])
    client.connect(args.host, args.port)
    client.loop_start()
    try:
        if args.algorithm == "aurora":
            publish(client, encoded.topic, encoded.payload)
            print("Published encrypted message and tag to MQTT.")
            print(encoded.metrics.render())
            publish(client, encoded.topic, encoded.payload)
            print("Published encrypted message.")
        else:
            print(encoded.metrics.render())
            publish(client, encoded.topic, encoded.payload)
            print(_NOTICES[args.algorithm])
    finally:
        client.disconnect()
        client.loop_stop()
    return 0