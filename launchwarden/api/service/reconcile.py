"""Merge scanned descriptors with live launchd status."""

from collections.abc import Mapping, Sequence

from ...utils.get_logger import get_logger
from ..descriptor.ServiceDescriptor import ServiceDescriptor
from ..domain.ServiceDomain import ServiceDomain
from ..launchctl.ListEntry import ListEntry
from ..launchctl.LiveStatus import ExitedNonZero, LiveStatus, RunningProcess, live_status_from_entry
from .LiveSnapshot import LiveSnapshot
from .ServiceRecord import ServiceRecord
from .ServiceState import Disabled, Failed, Loaded, Running, ServiceState, Stopped, Unknown, Unloaded

_DOMAIN_ORDER = {domain: index for index, domain in enumerate(ServiceDomain)}


def derive_state(live: LiveStatus | None, *, declared_disabled: bool, override_disabled: bool) -> ServiceState:
    """Project live status plus disabled flags into a published state.

    Args:
        live: Tagged live status, or None when launchd does not know the label
        declared_disabled: The descriptor file sets Disabled
        override_disabled: launchd's override database disables the label
    """
    if isinstance(live, RunningProcess):
        return Running(pid=live.pid)
    if isinstance(live, ExitedNonZero):
        return Failed(exit_code=live.exit_code)
    if live is not None:
        return Stopped() if override_disabled else Loaded()
    if declared_disabled or override_disabled:
        return Disabled()
    return Unloaded()


def guess_domain(label: str, target: str) -> ServiceDomain:
    """Best guess for a label that has no descriptor file."""
    apple = label.startswith("com.apple.")
    if target == "system":
        return ServiceDomain.SYSTEM_DAEMONS if apple else ServiceDomain.GLOBAL_DAEMONS
    return ServiceDomain.SYSTEM_AGENTS if apple else ServiceDomain.USER_AGENTS


def _status_map(snapshot: LiveSnapshot, domain: ServiceDomain) -> dict[str, ListEntry]:
    if not domain.listed_by_session:
        return snapshot.by_target.get(domain.control_target, {})
    return snapshot.listed


def _record(
    label: str,
    domain: ServiceDomain,
    entry: ListEntry | None,
    descriptor: ServiceDescriptor | None,
    snapshot: LiveSnapshot,
) -> ServiceRecord:
    if not snapshot.available:
        state: ServiceState = Unknown()
    else:
        state = derive_state(
            live_status_from_entry(entry) if entry is not None else None,
            declared_disabled=descriptor.disabled if descriptor else False,
            override_disabled=label in snapshot.disabled.get(domain.control_target, set()),
        )
    return ServiceRecord(
        label=label,
        domain=domain,
        state=state,
        descriptor=descriptor,
        pid=entry.pid if entry else None,
        last_exit_status=entry.exit_code if entry else None,
    )


def reconcile(
    scans: Mapping[ServiceDomain, Sequence[ServiceDescriptor]],
    snapshot: LiveSnapshot,
    *,
    include_unmatched: bool,
) -> tuple[ServiceRecord, ...]:
    """Build the canonical record set for one pass.

    Pure function: the same inputs always give the same, identically ordered output.

    Args:
        scans: Descriptors found per scanned domain
        snapshot: Live status gathered in the same pass
        include_unmatched: Also emit records for live labels with no descriptor
            (only meaningful when the read-only system domains are scanned)

    Returns:
        Records sorted by label, then by domain table order
    """
    log = get_logger("reconcile")
    records: dict[tuple[str, ServiceDomain], ServiceRecord] = {}

    for domain, descriptors in scans.items():
        status = _status_map(snapshot, domain)
        for descriptor in descriptors:
            key = (descriptor.label, domain)
            if key in records:
                log.warning(
                    "Duplicate label %s in %s: keeping %s, ignoring %s",
                    descriptor.label,
                    domain.value,
                    records[key].source_path,
                    descriptor.source_path,
                )
                continue
            records[key] = _record(descriptor.label, domain, status.get(descriptor.label), descriptor, snapshot)

    if include_unmatched and snapshot.available:
        known = {label for label, _domain in records}
        sources: list[tuple[str, dict[str, ListEntry]]] = [("gui", snapshot.listed)]
        sources.extend(sorted(snapshot.by_target.items()))
        for target, entries in sources:
            for label in sorted(entries):
                if label in known:
                    continue
                domain = guess_domain(label, target)
                known.add(label)
                records[(label, domain)] = _record(label, domain, entries[label], None, snapshot)

    return tuple(sorted(records.values(), key=lambda r: (r.label, _DOMAIN_ORDER[r.domain])))
