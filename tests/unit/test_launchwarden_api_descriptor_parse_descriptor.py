"""Unit tests for launchwarden.api.descriptor.parse_descriptor."""

import plistlib

import pytest

from launchwarden.api.descriptor.parse_descriptor import parse_descriptor
from launchwarden.api.domain.ServiceDomain import ServiceDomain
from launchwarden.api.errors import DescriptorParseError
from tests.unit.conftest import write_plist

pytestmark = pytest.mark.descriptor


def test_label_falls_back_to_filename_stem(tmp_path):
    path = write_plist(tmp_path, "com.foo.bar.plist", {"Program": "/usr/bin/true"})
    descriptor = parse_descriptor(path, ServiceDomain.USER_AGENTS)
    assert descriptor.label == "com.foo.bar"


def test_declared_label_wins_over_filename(tmp_path):
    path = write_plist(tmp_path, "whatever.plist", {"Label": "com.example.real"})
    assert parse_descriptor(path, ServiceDomain.USER_AGENTS).label == "com.example.real"


def test_full_descriptor(tmp_path):
    path = write_plist(
        tmp_path,
        "com.example.agent.plist",
        {
            "Label": "com.example.agent",
            "ProgramArguments": ["/usr/local/bin/agent", "--serve"],
            "RunAtLoad": True,
            "StartInterval": 300,
            "EnvironmentVariables": {"MODE": "prod"},
            "WorkingDirectory": "/tmp",
            "StandardOutPath": "/tmp/out.log",
            "StandardErrorPath": "/tmp/err.log",
            "UserName": "nobody",
            "GroupName": "staff",
            "Disabled": True,
            "SomethingElse": 1,
        },
    )
    d = parse_descriptor(path, ServiceDomain.GLOBAL_DAEMONS)
    assert d.domain is ServiceDomain.GLOBAL_DAEMONS
    assert d.source_path == path
    assert d.executable == "/usr/local/bin/agent"
    assert d.program is None
    assert d.program_arguments == ("/usr/local/bin/agent", "--serve")
    assert d.run_at_load is True
    assert d.start_interval == 300
    assert d.environment_variables == {"MODE": "prod"}
    assert (d.working_directory, d.stdout_path, d.stderr_path) == ("/tmp", "/tmp/out.log", "/tmp/err.log")
    assert (d.user, d.group) == ("nobody", "staff")
    assert d.disabled is True


def test_program_takes_precedence_over_arguments(tmp_path):
    path = write_plist(tmp_path, "a.plist", {"Program": "/bin/a", "ProgramArguments": ["/bin/b"]})
    assert parse_descriptor(path, ServiceDomain.USER_AGENTS).executable == "/bin/a"


def test_no_program_means_no_executable(tmp_path):
    path = write_plist(tmp_path, "a.plist", {"Label": "a"})
    assert parse_descriptor(path, ServiceDomain.USER_AGENTS).executable is None


@pytest.mark.parametrize(
    ("keep_alive", "expected"),
    [
        (True, True),
        (False, False),
        ({"SuccessfulExit": False}, True),
        ({}, False),
        ("yes", False),
    ],
)
def test_keep_alive(tmp_path, keep_alive, expected):
    path = write_plist(tmp_path, "k.plist", {"Label": "k", "KeepAlive": keep_alive})
    assert parse_descriptor(path, ServiceDomain.USER_AGENTS).keep_alive is expected


def test_missing_keep_alive_is_false(tmp_path):
    path = write_plist(tmp_path, "k.plist", {"Label": "k"})
    assert parse_descriptor(path, ServiceDomain.USER_AGENTS).keep_alive is False


def test_wrongly_typed_values_are_ignored(tmp_path):
    path = write_plist(
        tmp_path,
        "t.plist",
        {"Label": "t", "RunAtLoad": "yes", "StartInterval": True, "ProgramArguments": "/bin/x", "UserName": 5},
    )
    d = parse_descriptor(path, ServiceDomain.USER_AGENTS)
    assert d.run_at_load is False
    assert d.start_interval is None
    assert d.program_arguments == ()
    assert d.user is None


def test_binary_plist(tmp_path):
    path = write_plist(tmp_path, "bin.plist", {"Label": "com.bin", "RunAtLoad": True}, fmt=plistlib.FMT_BINARY)
    d = parse_descriptor(path, ServiceDomain.USER_AGENTS)
    assert d.label == "com.bin"
    assert d.run_at_load is True


def test_garbage_raises(tmp_path):
    path = tmp_path / "bad.plist"
    path.write_text("this is not a property list")
    with pytest.raises(DescriptorParseError) as exc_info:
        parse_descriptor(path, ServiceDomain.USER_AGENTS)
    assert exc_info.value.path == path


def test_non_dictionary_plist_raises(tmp_path):
    path = tmp_path / "list.plist"
    path.write_bytes(plistlib.dumps(["a", "b"]))
    with pytest.raises(DescriptorParseError, match="expected dict"):
        parse_descriptor(path, ServiceDomain.USER_AGENTS)


def test_missing_file_raises(tmp_path):
    with pytest.raises(DescriptorParseError, match="unreadable"):
        parse_descriptor(tmp_path / "gone.plist", ServiceDomain.USER_AGENTS)
