"""Unit tests for launchwarden.api.domain."""

import os
from pathlib import Path

import pytest

from launchwarden.api.domain import (
    ServiceDomain,
    all_domains,
    control_target,
    directory,
    is_read_only,
    requires_elevation,
    scan_domains,
)

pytestmark = pytest.mark.domain


def test_user_agents_live_in_the_home_directory():
    assert directory(ServiceDomain.USER_AGENTS) == Path.home() / "Library" / "LaunchAgents"
    assert control_target(ServiceDomain.USER_AGENTS) == f"gui/{os.getuid()}"
    assert not requires_elevation(ServiceDomain.USER_AGENTS)
    assert not is_read_only(ServiceDomain.USER_AGENTS)
    assert ServiceDomain.USER_AGENTS.listed_by_session


@pytest.mark.parametrize(
    ("domain", "path", "target", "read_only"),
    [
        (ServiceDomain.GLOBAL_AGENTS, "/Library/LaunchAgents", "gui", False),
        (ServiceDomain.GLOBAL_DAEMONS, "/Library/LaunchDaemons", "system", False),
        (ServiceDomain.SYSTEM_AGENTS, "/System/Library/LaunchAgents", "gui", True),
        (ServiceDomain.SYSTEM_DAEMONS, "/System/Library/LaunchDaemons", "system", True),
    ],
)
def test_machine_wide_domains_require_elevation(domain, path, target, read_only):
    assert directory(domain) == Path(path)
    assert control_target(domain).split("/")[0] == target
    assert requires_elevation(domain)
    assert is_read_only(domain) is read_only
    assert domain.is_editable is not read_only


def test_only_system_target_is_not_listed_by_session():
    unlisted = {d for d in ServiceDomain if not d.listed_by_session}
    assert unlisted == {ServiceDomain.GLOBAL_DAEMONS, ServiceDomain.SYSTEM_DAEMONS}


def test_all_domains_is_the_full_table():
    assert all_domains() == frozenset(ServiceDomain)
    assert len(all_domains()) == 5


def test_scan_domains_default_excludes_system_domains():
    assert scan_domains(False) == [
        ServiceDomain.USER_AGENTS,
        ServiceDomain.GLOBAL_AGENTS,
        ServiceDomain.GLOBAL_DAEMONS,
    ]
    assert scan_domains(True) == list(ServiceDomain)


def test_domain_round_trips_through_its_value():
    assert ServiceDomain("global-daemons") is ServiceDomain.GLOBAL_DAEMONS
    assert ServiceDomain.SYSTEM_AGENTS.display_name == "System Agents"
    assert ServiceDomain.SYSTEM_AGENTS.is_system
