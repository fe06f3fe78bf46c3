from types import SimpleNamespace
from unittest import mock

import pytest

from iotcipher.report import format_hex, throughput
from iotcipher.subscribers import describe_payload, main, make_on_message


def test_aurora_report_uses_payload_length():
    payload = bytes(range(5))
    text = describe_payload("aurora", payload, 0.5)
    assert "RECEIVER METRICS (NO DECRYPTION)" in text
    assert "Message Size     : 5 bytes" in text
    assert "Static RAM Usage : 5 bytes" in text
    assert text.endswith(format_hex("Encrypted Payload", payload))


def test_quark_report_has_received_header():
    payload = b"\xaa" * 26
    text = describe_payload("quark", payload, 0.25)
    assert text.startswith("\nEncrypted payload received (26 bytes):\n")
    assert f"Throughput       : {throughput(26, 0.25):.2f} bytes/sec" in text


def test_photon_report_splits_ciphertext_and_tag():
    payload = bytes(range(20))
    text = describe_payload("photon", payload, 1.0)
    assert "Ciphertext Size  : 4 bytes" in text
    assert format_hex("Ciphertext", payload[:4]) in text
    assert text.endswith(format_hex("Tag", payload[4:]))


def test_photon_report_rejects_short_payload():
    with pytest.raises(ValueError):
        describe_payload("photon", b"short", 1.0)


def test_spongent_report():
    digest = bytes(32)
    text = describe_payload("spongent", digest, 0.5)
    assert text.startswith("\nHash received (32 bytes):\n")
    assert "Hash Size        : 32 bytes" in text
    assert text.endswith("Received Hash: " + "00" * 32)


def test_unknown_algorithm_rejected():
    with pytest.raises(ValueError):
        describe_payload("rot13", b"", 1.0)
    with pytest.raises(ValueError):
        make_on_message("rot13")


def test_on_message_writes_one_report():
    written = []
    callback = make_on_message("quark", written.append)
    callback(None, None, SimpleNamespace(payload=b"\x01\x02"))
    assert len(written) == 1
    assert format_hex("Encrypted Payload", b"\x01\x02") in written[0]


def test_on_message_spongent_report():
    written = []
    callback = make_on_message("spongent", written.append)
    callback(None, None, SimpleNamespace(payload=b"\xff" * 32))
    assert written[0].endswith("Received Hash: " + "FF" * 32)


@mock.patch("paho.mqtt.client.Client")
def test_main_subscribes_and_stops_on_interrupt(client_cls, capsys):
    instance = client_cls.return_value
    instance.loop_forever.side_effect = KeyboardInterrupt
    assert main(["spongent"]) == 0
    instance.subscribe.assert_called_once_with("iot/spongent/hash", 1)
    instance.disconnect.assert_called_once_with()
    assert "Waiting for SPONGENT hashes..." in capsys.readouterr().out


@mock.patch("paho.mqtt.client.Client")
def test_main_aurora_topic(client_cls, capsys):
    instance = client_cls.return_value
    instance.loop_forever.side_effect = KeyboardInterrupt
    assert main(["aurora", "--host", "broker.example.com", "--port", "1884"]) == 0
    instance.connect.assert_called_once_with("broker.example.com", 1884)
    instance.subscribe.assert_called_once_with("aurora/encrypted", 1)
    assert capsys.readouterr().out == ""