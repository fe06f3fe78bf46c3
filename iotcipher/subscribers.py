"""Receive published payloads over MQTT and report on them."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable

from .photon import TAG_SIZE as PHOTON_TAG_SIZE
from .publishers import BROKER_HOST, BROKER_PORT, QOS, TOPICS, _make_client
from .report import Metrics

SUBSCRIBER_IDS = {
    "aurora": "AuroraSubscriber",
    "quark": "QuarkSubscriber",
    "photon": "PhotonSubscriber",
    "spongent": "SpongentSubscriber",
}

_WAITING = {
    "quark": "Waiting for encrypted messages...",
    "photon": "Waiting for Photon-Beetle encrypted messages...",
    "spongent": "Waiting for SPONGENT hashes...",
}

_POINTER_SIZE = 8
_SIMULATED_WORK = 100e-6


def _check_algorithm(algorithm: str) -> None:
    if algorithm not in SUBSCRIBER_IDS:
        raise ValueError(f"unknown algorithm: {algorithm!r}")


def describe_payload(algorithm: str, payload: bytes, elapsed: float) -> str:
    """Return the receiver report for a payload of the given algorithm."""
    _check_algorithm(algorithm)
    payload = bytes(payload)
    size = len(payload)

    if algorithm == "aurora":
        return Metrics(
            title="RECEIVER METRICS (NO DECRYPTION)",
            size=size,
            elapsed=elapsed,
            trailing=(("Static RAM Usage", f"{size} bytes"),),
            dumps=(("Encrypted Payload", payload),),
        ).render()

    if algorithm == "quark":
        header = f"\nEncrypted payload received ({size} bytes):"
        return header + "\n" + Metrics(
            title="RECEIVER METRICS (NO DECRYPTION)",
            size=size,
            elapsed=elapsed,
            trailing=(("Static RAM Usage", f"{_POINTER_SIZE} bytes"),),
            dumps=(("Encrypted Payload", payload),),
        ).render()

    if algorithm == "photon":
        if size < PHOTON_TAG_SIZE:
            raise ValueError(f"payload must hold a {PHOTON_TAG_SIZE}-byte tag, got {size} bytes")
        header = f"\nEncrypted payload received ({size} bytes):"
        ct_len = size - PHOTON_TAG_SIZE
        return header + "\n" + Metrics(
            title="RECEIVER METRICS (NO DECRYPTION)",
            size=ct_len,
            elapsed=elapsed,
            size_label="Ciphertext Size",
            dumps=(("Ciphertext", payload[:ct_len]), ("Tag", payload[ct_len:])),
        ).render()

    header = f"\nHash received ({size} bytes):"
    return header + "\n" + Metrics(
        title="RECEIVER METRICS",
        size=size,
        elapsed=elapsed,
        size_label="Hash Size",
        trailing=(("RAM Usage", f"{_POINTER_SIZE} bytes (approx)"),),
        dumps=(("Received Hash", payload),),
    ).render()


def make_on_message(algorithm: str, write: Callable[[str], object] = print):
    """Return an MQTT message callback that times the handling and writes a report."""
    _check_algorithm(algorithm)
    clock = time.perf_counter if algorithm == "spongent" else time.process_time
    simulate = algorithm != "aurora"

    def on_message(client, userdata, message) -> None:
        start = clock()
        if simulate:
            time.sleep(_SIMULATED_WORK)
        elapsed = clock() - start
        write(describe_payload(algorithm, message.payload, elapsed))

    return on_message


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Subscribe to published payloads and report on them.")
    parser.add_argument("algorithm", choices=sorted(SUBSCRIBER_IDS))
    parser.add_argument("--host", default=BROKER_HOST)
    parser.add_argument("--port", type=int, default=BROKER_PORT)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Subscribe to the chosen algorithm's topic and report until interrupted."""
    args = _parse_args(argv)
    client = _make_client(SUBSCRIBER_IDS[args.algorithm])
    client.on_message = make_on_message(args.algorithm)
    client.connect(args.host, args.port)
    client.subscribe(TOPICS[args.algorithm], QOS)
    if args.algorithm in _WAITING:
        print(_WAITING[args.algorithm])
    try:
        client.loop_forever()
    except KeyboardInterrupt:
        pass
    finally:
        client.disconnect()
    return 0