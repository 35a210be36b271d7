"""Integration tests for the lwc command line."""

import json

import pytest

import launchwarden.api.service._open_monitor as open_monitor_module
from launchwarden import __version__
from launchwarden.api.domain.ServiceDomain import ServiceDomain
from launchwarden.api.launchctl import CommandOutput
from launchwarden.cli import main
from tests.conftest import list_output, write_plist

pytestmark = [pytest.mark.cli, pytest.mark.timeout(30)]


@pytest.fixture
def fake_monitor(monkeypatch, monitor_factory, domain_root, runner):
    write_plist(domain_root / ServiceDomain.USER_AGENTS.value, "com.a.b.plist", {"Label": "com.a.b"})
    runner.set(("list",), CommandOutput(list_output(("7", "0", "com.a.b")), 0))
    monkeypatch.setattr(open_monitor_module, "_open_monitor", lambda config=None: monitor_factory())


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"lwc {__version__}"


def test_config_show_as_json(launchwarden_home, capsys):
    assert main(["--display", "json", "config", "show", "log"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["content"] == {"level": "INFO"}
    assert data["section"] == "log"


def test_unknown_section_exits_nonzero(launchwarden_home, capsys):
    assert main(["config", "show", "nope"]) == 1
    assert "Unknown section" in capsys.readouterr().out


def test_invalid_display_format(capsys):
    assert main(["--display", "xml", "config", "show"]) == 1
    assert "--display must be" in capsys.readouterr().err


def test_service_list_as_json(fake_monitor, capsys):
    assert main(["-d", "json", "service", "list"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["count"] == 1
    assert data["services"][0]["state"]["text"] == "Running (PID: 7)"


def test_service_stop_missing_label_is_usage_error(fake_monitor):
    assert main(["service", "stop"]) == 2


def test_service_stop_unknown_label(fake_monitor, capsys):
    assert main(["-d", "json", "service", "stop", "com.none"]) == 1
    data = json.loads(capsys.readouterr().out)
    assert data["status"] == "rejected"
