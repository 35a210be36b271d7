"""Unit tests for launchwarden.api.launchctl.run_command."""

import sys

import pytest

from launchwarden.api.launchctl.run_command import run_command

pytestmark = pytest.mark.launchctl


def test_combines_stdout_and_stderr():
    result = run_command([sys.executable, "-c", "import sys; print('out'); print('err', file=sys.stderr)"])
    assert result.launched
    assert result.returncode == 0
    assert "out" in result.output
    assert "err" in result.output


def test_large_output_does_not_deadlock():
    result = run_command([sys.executable, "-c", "print('x' * 1_000_000)"], timeout=30)
    assert result.returncode == 0
    assert len(result.output.strip()) == 1_000_000


def test_nonzero_exit_status():
    result = run_command([sys.executable, "-c", "raise SystemExit(3)"])
    assert result.returncode == 3


def test_missing_executable_is_not_launched(tmp_path):
    result = run_command([str(tmp_path / "no-such-binary")])
    assert not result.launched
    assert result.returncode is None
    assert result.output == ""


@pytest.mark.timeout(20)
def test_timeout_kills_the_child():
    result = run_command([sys.executable, "-c", "import time; time.sleep(30)"], timeout=0.5)
    assert result.launched
    assert result.returncode is None
