"""Coordinator that owns the reconciled record set."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from ...utils.get_logger import get_logger
from ..descriptor.scan_directory import scan_directory
from ..descriptor.ServiceDescriptor import ServiceDescriptor
from ..domain.registry import scan_domains
from ..domain.ServiceDomain import ServiceDomain
from ..errors import (
    CommandFailed,
    CommandInProgress,
    ControlUtilityUnavailable,
    ElevationCancelled,
    MissingDescriptor,
    ReadOnlyDomain,
)
from ..launchctl.LaunchctlBridge import LaunchctlBridge
from ..privilege.PrivilegeEscalator import PrivilegeEscalator
from ..privilege.validate_label import validate_label
from ..watcher.ChangeWatcher import ChangeWatcher
from .build_elevated_steps import build_elevated_steps
from .CommandOutcome import CommandOutcome
from .LiveSnapshot import LiveSnapshot
from .reconcile import reconcile
from .RefreshStage import RefreshStage
from .ServiceAction import ServiceAction
from .ServiceRecord import ServiceRecord

if TYPE_CHECKING:
    from ..config.LaunchWardenConfig import LaunchWardenConfig

RecordListener = Callable[[tuple[ServiceRecord, ...]], None]


class ServiceMonitor:
    """Single source of truth for service records.

    One coordinator thread runs reconciliation passes and is the only writer of
    the record set. Directory scans and launchctl queries of a pass fan out to a
    worker pool; the pass publishes only after every one of them has finished.
    Commands run on their own pool, so a command waiting for its follow-up
    refresh never starves the pass of workers.

    Example:
        >>> monitor = ServiceMonitor()
        >>> monitor.refresh().result()
        >>> record = monitor.find("com.example.agent")
        >>> outcome = monitor.stop(record).result()
    """

    def __init__(
        self,
        config: LaunchWardenConfig | None = None,
        *,
        bridge: LaunchctlBridge | None = None,
        escalator: PrivilegeEscalator | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if config is None:
            from ..config.LaunchWardenConfig import LaunchWardenConfig

            config = LaunchWardenConfig()
        self.config = config
        self.bridge = bridge or LaunchctlBridge(
            launchctl_path=config.launchctl.launchctl_path,
            timeout_secs=config.launchctl.timeout_secs,
        )
        self.escalator = escalator or PrivilegeEscalator(osascript_path=config.launchctl.osascript_path)
        self._sleep = sleep
        self._directory_overrides = {
            domain: Path(path).expanduser() for domain, path in config.monitor.directory_overrides().items()
        }

        self._coordinator = ThreadPoolExecutor(max_workers=1, thread_name_prefix="launchwarden-coordinator")
        self._io = ThreadPoolExecutor(max_workers=config.monitor.workers, thread_name_prefix="launchwarden-io")
        self._commands = ThreadPoolExecutor(max_workers=config.monitor.workers, thread_name_prefix="launchwarden-cmd")

        self._lock = threading.Lock()
        self._records: tuple[ServiceRecord, ...] = ()
        self._stage = RefreshStage.IDLE
        self._last_refresh: datetime | None = None
        self._error: str | None = None
        self._pending: Future | None = None
        self._in_flight: set[tuple[str, ServiceDomain]] = set()
        self._listeners: list[RecordListener] = []
        self._watcher: ChangeWatcher | None = None
        self._closed = False

    # --------------------------------------------------------------- properties

    @property
    def include_system(self) -> bool:
        return self.config.monitor.show_system_services

    @property
    def active_domains(self) -> list[ServiceDomain]:
        return scan_domains(self.include_system)

    def directory_for(self, domain: ServiceDomain) -> Path:
        return self._directory_overrides.get(domain, domain.directory)

    @property
    def error(self) -> str | None:
        """Message of the last failed command, None after success or `clear_error()`."""
        with self._lock:
            return self._error

    @property
    def last_refresh(self) -> datetime | None:
        with self._lock:
            return self._last_refresh

    @property
    def stage(self) -> RefreshStage:
        with self._lock:
            return self._stage

    @property
    def is_loading(self) -> bool:
        return self.stage in (RefreshStage.SCANNING, RefreshStage.MERGING)

    def clear_error(self) -> None:
        with self._lock:
            self._error = None

    def subscribe(self, callback: RecordListener) -> Callable[[], None]:
        """Call `callback` with every published record set. Returns an unsubscribe function."""
        with self._lock:
            self._listeners.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._listeners:
                    self._listeners.remove(callback)

        return unsubscribe

    # ------------------------------------------------------------------ queries

    def records(self, domain: ServiceDomain | None = None, search_text: str = "") -> list[ServiceRecord]:
        """Published records filtered by domain and case-insensitive label/display name match."""
        with self._lock:
            records = self._records
        needle = search_text.strip().lower()
        return [
            r
            for r in records
            if (domain is None or r.domain == domain)
            and (not needle or needle in r.label.lower() or needle in r.display_name.lower())
        ]

    def find(self, label: str, domain: ServiceDomain | None = None) -> ServiceRecord | None:
        """First published record with this label (in domain table order)."""
        for record in self.records(domain):
            if record.label == label:
                return record
        return None

    def blame(self, record: ServiceRecord) -> str:
        """launchd's explanation for why the service last started."""
        return self.bridge.blame(record.domain.control_target, validate_label(record.label))

    # -------------------------------------------------------------- refreshing

    def refresh(self, *, after_changes: bool = False) -> Future:
        """Schedule a reconciliation pass, coalescing with the one already scheduled.

        Args:
            after_changes: Only join a pass that has not started yet. Use after a
                mutation (file change or command) so the pass is sure to see it;
                a pass already scanning is followed by exactly one more.

        Returns:
            Future resolving to the published record tuple
        """
        with self._lock:
            pending = self._pending
            if pending is not None and not pending.done() and not (after_changes and pending.running()):
                return pending
            self._pending = self._coordinator.submit(self._run_pass)
            return self._pending

    def _set_stage(self, stage: RefreshStage) -> None:
        with self._lock:
            self._stage = stage

    def _collect_snapshot(self, domains: Sequence[ServiceDomain]) -> LiveSnapshot:
        log = get_logger("monitor")
        targets = sorted({d.control_target for d in domains})
        print_targets = sorted({d.control_target for d in domains if not d.listed_by_session})

        listed_f = self._io.submit(self.bridge.list_status)
        services_f = {t: self._io.submit(self.bridge.query_services, t) for t in print_targets}
        disabled_f = {t: self._io.submit(self.bridge.query_disabled, t) for t in targets}
        wait([listed_f, *services_f.values(), *disabled_f.values()])

        try:
            return LiveSnapshot(
                listed=listed_f.result(),
                by_target={t: f.result() for t, f in services_f.items()},
                disabled={t: f.result() for t, f in disabled_f.items()},
            )
        except ControlUtilityUnavailable as exc:
            log.warning("Live status unavailable: %s", exc)
            return LiveSnapshot.unavailable()

    def _run_pass(self) -> tuple[ServiceRecord, ...]:
        log = get_logger("monitor")
        try:
            self._set_stage(RefreshStage.SCANNING)
            domains = self.active_domains
            scan_f = {d: self._io.submit(scan_directory, self.directory_for(d), d) for d in domains}
            snapshot = self._collect_snapshot(domains)
            wait(scan_f.values())
            scans: dict[ServiceDomain, list[ServiceDescriptor]] = {d: f.result() for d, f in scan_f.items()}

            self._set_stage(RefreshStage.MERGING)
            records = reconcile(scans, snapshot, include_unmatched=self.include_system)
        except Exception:
            log.exception("Reconciliation pass failed")
            self._set_stage(RefreshStage.IDLE)
            raise

        with self._lock:
            self._records = records
            self._last_refresh = datetime.now()
            self._stage = RefreshStage.PUBLISHED
            listeners = list(self._listeners)
        log.info("Published %d record(s) from %d domain(s)", len(records), len(domains))

        for listener in listeners:
            try:
                listener(records)
            except Exception:
                log.exception("Record listener failed")
        return records

    # ----------------------------------------------------------------- commands

    def start(self, record: ServiceRecord) -> Future:
        return self.submit(ServiceAction.START, record)

    def stop(self, record: ServiceRecord) -> Future:
        return self.submit(ServiceAction.STOP, record)

    def enable(self, record: ServiceRecord) -> Future:
        return self.submit(ServiceAction.ENABLE, record)

    def disable(self, record: ServiceRecord) -> Future:
        return self.submit(ServiceAction.DISABLE, record)

    def submit(self, action: ServiceAction, record: ServiceRecord) -> Future:
        """Validate synchronously, then run the action on the command pool.

        Raises:
            ReadOnlyDomain: Record belongs to a SIP-protected domain
            MissingDescriptor: Loading a service that has no descriptor file
            InvalidLabel: Label cannot be passed to launchctl safely
            CommandInProgress: Another command for the same service is still running

        Returns:
            Future resolving to a CommandOutcome, exactly once
        """
        if record.domain.is_read_only:
            raise ReadOnlyDomain(record.label, record.domain)
        if action.loads and record.source_path is None:
            raise MissingDescriptor(f"{record.label} has no descriptor file to bootstrap")
        validate_label(record.label)

        key = record.identity
        with self._lock:
            if key in self._in_flight:
                raise CommandInProgress(f"A command for {record.label} is already running")
            self._in_flight.add(key)
        try:
            return self._commands.submit(self._execute, action, record)
        except RuntimeError:
            with self._lock:
                self._in_flight.discard(key)
            raise

    def _run_direct(self, action: ServiceAction, record: ServiceRecord) -> None:
        log = get_logger("monitor")
        target = record.domain.control_target
        if action.loads:
            self.bridge.enable(target, record.label)
            self.bridge.bootstrap(target, record.source_path)
            return
        result = self.bridge.bootout(target, record.label)
        if result.returncode not in (0, None):
            log.debug("bootout %s exited %s: %s", record.label, result.returncode, result.output.strip())
        self.bridge.disable(target, record.label)

    def _execute(self, action: ServiceAction, record: ServiceRecord) -> CommandOutcome:
        log = get_logger("monitor")
        log.info("%s %s (%s)", action.value, record.label, record.domain.value)
        try:
            try:
                if record.domain.requires_elevation:
                    steps = build_elevated_steps(action, record, self.bridge.launchctl_path)
                    self.escalator.run_elevated(steps)
                else:
                    self._run_direct(action, record)
            except ElevationCancelled:
                log.info("%s %s cancelled", action.value, record.label)
                return CommandOutcome.cancelled()
            except CommandFailed as exc:
                log.warning("%s %s failed: %s", action.value, record.label, exc.message)
                with self._lock:
                    self._error = exc.message
                outcome = CommandOutcome.failed(exc.message)
            else:
                with self._lock:
                    self._error = None
                outcome = CommandOutcome.succeeded()

            self._sleep(self.config.monitor.settle_delay_secs)
            try:
                self.refresh(after_changes=True).result()
            except Exception:
                log.exception("Refresh after %s %s failed", action.value, record.label)
            return outcome
        finally:
            with self._lock:
                self._in_flight.discard(record.identity)

    # ------------------------------------------------------------------ watching

    def watch(self, on_change: Callable[[], None] | None = None) -> ChangeWatcher:
        """Start a debounced watch over the active domain directories.

        Each burst of changes schedules a pass that starts after the burst, then
        calls `on_change`. Calling again returns the running watcher.
        """
        with self._lock:
            if self._watcher is not None:
                return self._watcher

        def changed() -> None:
            self.refresh(after_changes=True)
            if on_change is not None:
                on_change()

        watcher = ChangeWatcher(
            [self.directory_for(d) for d in self.active_domains],
            changed,
            debounce_secs=self.config.monitor.debounce_secs,
        )
        watcher.start()
        with self._lock:
            self._watcher = watcher
        return watcher

    def close(self) -> None:
        """Stop watching and shut down worker threads. Safe to call twice."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            watcher, self._watcher = self._watcher, None
        if watcher is not None:
            watcher.stop()
        self._commands.shutdown(wait=True)
        self._coordinator.shutdown(wait=True)
        self._io.shutdown(wait=True)

    def __enter__(self) -> ServiceMonitor:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
