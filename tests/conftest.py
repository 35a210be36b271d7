"""Shared pytest configuration and fixtures for all tests."""

import os
import plistlib
import tempfile
import threading
from collections.abc import Callable
from pathlib import Path

import pytest

from launchwarden.api.config.LaunchWardenConfig import LaunchWardenConfig
from launchwarden.api.domain.ServiceDomain import ServiceDomain
from launchwarden.api.launchctl.CommandOutput import CommandOutput
from launchwarden.api.launchctl.LaunchctlBridge import LaunchctlBridge
from launchwarden.api.privilege.PrivilegeEscalator import PrivilegeEscalator
from launchwarden.api.service.ServiceMonitor import ServiceMonitor

_MARKERS = {
    "unit": "fast tests of a single module",
    "integration": "tests that touch the real filesystem watcher",
    "cli": "Typer command-line surface",
    "config": "configuration loading and saving",
    "descriptor": "property list scanning and write-back",
    "domain": "service domain table",
    "launchctl": "launchctl subprocess bridge and parsers",
    "privilege": "elevated command construction",
    "service": "reconciliation and the service monitor",
    "watcher": "debounced directory watching",
}


def pytest_configure(config):
    """Keep logs and config out of the real home directory."""
    for name, description in _MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")
    if "LAUNCHWARDEN_HOME" not in os.environ:
        os.environ["LAUNCHWARDEN_HOME"] = tempfile.mkdtemp(prefix="launchwarden-tests-")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fakes
# =============================================================================


LIST_HEADER = "PID\tStatus\tLabel\n"


def list_output(*rows: tuple[str, str, str]) -> str:
    """`launchctl list` text for (pid, status, label) rows."""
    return LIST_HEADER + "".join(f"{pid}\t{status}\t{label}\n" for pid, status, label in rows)


Response = CommandOutput | Callable[[list[str]], CommandOutput]


class FakeRunner:
    """Stands in for run_command and records every argv it is given.

    Responses are keyed by the argv after the executable, matched on the longest
    registered prefix. Unregistered commands succeed with empty output.
    """

    def __init__(self, responses: dict[tuple[str, ...], Response] | None = None):
        self.responses: dict[tuple[str, ...], Response] = dict(responses or {})
        self.calls: list[list[str]] = []
        self._lock = threading.Lock()

    def set(self, args: tuple[str, ...], response: Response) -> None:
        self.responses[args] = response

    def __call__(self, argv, timeout=None) -> CommandOutput:  # noqa: ARG002
        argv = list(argv)
        with self._lock:
            self.calls.append(argv)
        tail = tuple(argv[1:])
        for length in range(len(tail), -1, -1):
            response = self.responses.get(tail[:length])
            if response is not None:
                return response(argv) if callable(response) else response
        return CommandOutput(output="", returncode=0)

    def commands(self) -> list[tuple[str, ...]]:
        """Subcommand and arguments of each call, executable stripped."""
        with self._lock:
            return [tuple(argv[1:]) for argv in self.calls]

    def count(self, subcommand: str) -> int:
        return sum(1 for args in self.commands() if args and args[0] == subcommand)


# =============================================================================
# Helpers
# =============================================================================


def write_plist(directory: Path, name: str, data: dict, fmt=plistlib.FMT_XML) -> Path:
    """Write a property list file and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_bytes(plistlib.dumps(data, fmt=fmt))
    return path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def make_config(domain_root: Path, **monitor) -> LaunchWardenConfig:
    """Configuration whose domain directories all live under domain_root."""
    directories = {domain.value: str(domain_root / domain.value) for domain in ServiceDomain}
    return LaunchWardenConfig(monitor={"directories": directories, "settle_delay_secs": 0, **monitor})


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def launchwarden_home(tmp_path: Path, monkeypatch) -> Path:
    """Point LAUNCHWARDEN_HOME at an empty directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("LAUNCHWARDEN_HOME", str(home))
    return home


@pytest.fixture
def domain_root(tmp_path: Path) -> Path:
    """Root holding one directory per domain, created empty."""
    root = tmp_path / "domains"
    for domain in ServiceDomain:
        (root / domain.value).mkdir(parents=True)
    return root


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def osascript() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def monitor_factory(domain_root: Path, runner: FakeRunner, osascript: FakeRunner):
    """Build ServiceMonitors wired to the fake runners; all are closed at teardown."""
    monitors: list[ServiceMonitor] = []

    def factory(**monitor_settings) -> ServiceMonitor:
        config = make_config(domain_root, **monitor_settings)
        monitor = ServiceMonitor(
            config,
            bridge=LaunchctlBridge(launchctl_path="/bin/launchctl", runner=runner),
            escalator=PrivilegeEscalator(osascript_path="/usr/bin/osascript", runner=osascript),
            sleep=lambda _secs: None,
        )
        monitors.append(monitor)
        return monitor

    yield factory
    for monitor in monitors:
        monitor.close()
