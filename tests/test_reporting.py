"""Tests for text and JSON rendering of results."""

import json

from ibox_discover.config import DiscoveryConfig
from ibox_discover.discovery import DiscoveryIssue, DiscoveryResult, IssueKind
from ibox_discover.protocol import decode_reply
from ibox_discover.reporting import JsonReporter, format_device, format_devices
from tests.fakes import make_reply


def test_format_device(reply):
    text = format_device(decode_reply(reply, "192.168.1.1"))

    assert text.splitlines() == [
        "TESTNET",
        "=======",
        "IP Address: 192.168.1.1",
        "Subnet Mask: 255.255.255.0",
        "Product ID: RT-AC68U",
        "Firmware Version: 3.0.0.4",
        "Operation Mode: 1",
        "MAC address: 00:11:22:33:44:55",
        "Regulation: 2",
    ]


def test_format_devices_keeps_order():
    devices = [
        decode_reply(make_reply(name=b"one"), "10.0.0.1"),
        decode_reply(make_reply(name=b"two"), "10.0.0.2"),
    ]
    blocks = format_devices(devices).split("\n\n")

    assert [b.splitlines()[0] for b in blocks] == ["one", "two"]


def test_json_report_aborted():
    result = DiscoveryResult(issues=[DiscoveryIssue(kind=IssueKind.SETUP, message="bind failed")])

    report = JsonReporter().generate(result, DiscoveryConfig())

    assert report["status"] == "aborted"
    assert report["error"] == "bind failed"
    assert report["issues"] == [{"kind": "setup", "message": "bind failed", "target": None}]
    assert report["config"]["port"] == 9999


def test_json_save_roundtrip(tmp_path, reply):
    reporter = JsonReporter()
    result = DiscoveryResult(devices=[decode_reply(reply, "192.168.1.1")], discarded=3)
    report = reporter.generate(result)

    path = reporter.save(report, tmp_path / "r.json")

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["summary"]["discarded"] == 3
    assert saved["config"] is None
    assert json.loads(reporter.to_json_string(report, pretty=False)) == saved
