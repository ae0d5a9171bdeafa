"""Tests for the ibox-discover command."""

import json
import logging

import pytest
from click.testing import CliRunner

from ibox_discover import cli
from ibox_discover.discovery import DiscoveryIssue, DiscoveryResult, IssueKind
from ibox_discover.protocol import decode_reply
from tests.fakes import make_reply


class FakeSession:
    """Records the config and returns a canned result."""
    configs = []
    result = DiscoveryResult()

    def __init__(self, config):
        FakeSession.configs.append(config)

    def run(self, timeout=None):
        return FakeSession.result


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fake_session(monkeypatch):
    FakeSession.configs = []
    FakeSession.result = DiscoveryResult(
        devices=[decode_reply(make_reply(), "192.168.1.1")],
        targets=["192.168.1.255"],
    )
    monkeypatch.setattr(cli, "DiscoverySession", FakeSession)
    return FakeSession


def test_text_output(fake_session):
    result = CliRunner().invoke(cli.main, [])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[:3] == ["TESTNET", "=======", "IP Address: 192.168.1.1"]
    assert "Subnet Mask: 255.255.255.0" in lines
    assert "MAC address: 00:11:22:33:44:55" in lines
    assert "Operation Mode: 1" in lines
    assert "Regulation: 2" in lines


def test_json_output(fake_session):
    result = CliRunner().invoke(cli.main, ["--format", "json", "--quiet"])

    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report["status"] == "completed"
    assert report["summary"]["devices"] == 1
    assert report["devices"][0]["hardware_address"] == "00:11:22:33:44:55"


def test_overrides_reach_config(fake_session, tmp_path):
    path = tmp_path / "discover.yaml"
    path.write_text("discovery:\n  timeout: 9\n  port: 10000\n")

    result = CliRunner().invoke(cli.main, ["--config", str(path), "--timeout", "1.5", "--duplicates", "hardware-address"])

    assert result.exit_code == 0
    config = fake_session.configs[0]
    assert config.timeout == 1.5
    assert config.port == 10000
    assert config.duplicates == "hardware-address"


def test_invalid_config_exits_2(fake_session):
    result = CliRunner().invoke(cli.main, ["--timeout", "0"])

    assert result.exit_code == cli.EXIT_USAGE
    assert fake_session.configs == []


def test_setup_failure_exits_1(fake_session):
    fake_session.result = DiscoveryResult(
        issues=[DiscoveryIssue(kind=IssueKind.SETUP, message="Unable to create a datagram socket")],
    )

    result = CliRunner().invoke(cli.main, ["--quiet"])

    assert result.exit_code == cli.EXIT_SETUP_FAILURE
    assert result.stdout == ""


def test_save_report(fake_session, tmp_path):
    path = tmp_path / "out" / "report.json"

    result = CliRunner().invoke(cli.main, ["--save-report", str(path)])

    assert result.exit_code == 0
    assert json.loads(path.read_text())["devices"][0]["ip_address"] == "192.168.1.1"
