"""Unit tests for launchwarden.api.service.reconcile."""

from pathlib import Path

import pytest

from launchwarden.api.descriptor.ServiceDescriptor import ServiceDescriptor
from launchwarden.api.domain.ServiceDomain import ServiceDomain
from launchwarden.api.launchctl import ExitedNonZero, ListEntry, LoadedNoPid, RunningProcess
from launchwarden.api.service import (
    Disabled,
    Failed,
    Loaded,
    Running,
    Stopped,
    Unknown,
    Unloaded,
    derive_state,
    guess_domain,
    reconcile,
)
from launchwarden.api.service.LiveSnapshot import LiveSnapshot

pytestmark = pytest.mark.service

USER = ServiceDomain.USER_AGENTS
DAEMONS = ServiceDomain.GLOBAL_DAEMONS


def descriptor(label: str, domain: ServiceDomain = USER, **kwargs) -> ServiceDescriptor:
    return ServiceDescriptor(label=label, domain=domain, source_path=Path(f"/d/{label}.plist"), **kwargs)


@pytest.mark.parametrize(
    ("live", "declared", "override", "expected"),
    [
        (RunningProcess(7), False, False, Running(7)),
        (RunningProcess(7), True, True, Running(7)),
        (ExitedNonZero(1), False, False, Failed(1)),
        (LoadedNoPid(), False, False, Loaded()),
        (LoadedNoPid(), False, True, Stopped()),
        (None, True, False, Disabled()),
        (None, False, True, Disabled()),
        (None, False, False, Unloaded()),
    ],
)
def test_derive_state(live, declared, override, expected):
    assert derive_state(live, declared_disabled=declared, override_disabled=override) == expected


def test_running_and_unloaded_scenario():
    scans = {USER: [descriptor("com.a.b", run_at_load=True), descriptor("com.c.d")]}
    snapshot = LiveSnapshot(listed={"com.a.b": ListEntry(pid=42, exit_code=0)})
    records = reconcile(scans, snapshot, include_unmatched=False)
    assert [(r.label, r.state) for r in records] == [("com.a.b", Running(42)), ("com.c.d", Unloaded())]
    assert records[0].pid == 42


def test_unavailable_launchctl_makes_everything_unknown():
    scans = {USER: [descriptor("com.a")], DAEMONS: [descriptor("com.b", DAEMONS)]}
    records = reconcile(scans, LiveSnapshot.unavailable(), include_unmatched=True)
    assert [r.state for r in records] == [Unknown(), Unknown()]


def test_system_target_status_comes_from_print():
    system = {"com.daemon": ListEntry(pid=None, exit_code=78)}
    scans = {DAEMONS: [descriptor("com.daemon", DAEMONS)]}
    snapshot = LiveSnapshot(listed={"com.daemon": ListEntry(pid=5, exit_code=0)}, by_target={"system": system})
    (record,) = reconcile(scans, snapshot, include_unmatched=False)
    assert record.state == Failed(78)
    assert record.last_exit_status == 78


def test_override_database_per_target():
    target = USER.control_target
    scans = {USER: [descriptor("com.loaded"), descriptor("com.absent")]}
    snapshot = LiveSnapshot(
        listed={"com.loaded": ListEntry(pid=None, exit_code=0)},
        disabled={target: {"com.loaded", "com.absent"}, "system": set()},
    )
    states = {r.label: r.state for r in reconcile(scans, snapshot, include_unmatched=False)}
    assert states == {"com.loaded": Stopped(), "com.absent": Disabled()}


def test_declared_disabled_flag():
    scans = {USER: [descriptor("com.off", disabled=True)]}
    (record,) = reconcile(scans, LiveSnapshot(), include_unmatched=False)
    assert record.state == Disabled()


def test_duplicate_labels_keep_the_first():
    first = ServiceDescriptor(label="com.dup", domain=USER, source_path=Path("/d/a.plist"))
    second = ServiceDescriptor(label="com.dup", domain=USER, source_path=Path("/d/b.plist"))
    (record,) = reconcile({USER: [first, second]}, LiveSnapshot(), include_unmatched=False)
    assert record.source_path == Path("/d/a.plist")


def test_same_label_in_two_domains_gives_two_records():
    scans = {USER: [descriptor("com.x")], DAEMONS: [descriptor("com.x", DAEMONS)]}
    records = reconcile(scans, LiveSnapshot(), include_unmatched=False)
    assert [r.domain for r in records] == [USER, DAEMONS]


def test_unmatched_live_labels_only_with_system_domains():
    snapshot = LiveSnapshot(
        listed={"com.apple.dock": ListEntry(pid=300, exit_code=0), "com.vendor.helper": ListEntry()},
        by_target={"system": {"com.apple.syslogd": ListEntry(pid=99, exit_code=0), "com.vendor.d": ListEntry()}},
    )
    assert reconcile({}, snapshot, include_unmatched=False) == ()

    records = reconcile({}, snapshot, include_unmatched=True)
    assert [(r.label, r.domain, r.descriptor) for r in records] == [
        ("com.apple.dock", ServiceDomain.SYSTEM_AGENTS, None),
        ("com.apple.syslogd", ServiceDomain.SYSTEM_DAEMONS, None),
        ("com.vendor.d", ServiceDomain.GLOBAL_DAEMONS, None),
        ("com.vendor.helper", ServiceDomain.USER_AGENTS, None),
    ]
    assert records[0].state == Running(300)


def test_matched_labels_are_not_synthesized_twice():
    snapshot = LiveSnapshot(listed={"com.a": ListEntry(pid=1, exit_code=0)})
    records = reconcile({USER: [descriptor("com.a")]}, snapshot, include_unmatched=True)
    assert len(records) == 1
    assert records[0].descriptor is not None


@pytest.mark.parametrize(
    ("label", "target", "domain"),
    [
        ("com.apple.x", "gui/501", ServiceDomain.SYSTEM_AGENTS),
        ("com.apple.x", "system", ServiceDomain.SYSTEM_DAEMONS),
        ("com.other.x", "gui/501", ServiceDomain.USER_AGENTS),
        ("com.other.x", "system", ServiceDomain.GLOBAL_DAEMONS),
    ],
)
def test_guess_domain(label, target, domain):
    assert guess_domain(label, target) is domain


def test_merge_is_deterministic():
    scans = {USER: [descriptor("com.z"), descriptor("com.a")], DAEMONS: [descriptor("com.m", DAEMONS)]}
    snapshot = LiveSnapshot(listed={"com.z": ListEntry(pid=3, exit_code=0)}, by_target={"system": {}})
    first = [r.to_dict() for r in reconcile(scans, snapshot, include_unmatched=True)]
    second = [r.to_dict() for r in reconcile(scans, snapshot, include_unmatched=True)]
    assert first == second
    assert [r["label"] for r in first] == ["com.a", "com.m", "com.z"]
