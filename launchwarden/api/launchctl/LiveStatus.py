"""Live status reported by launchd for a registered label."""

from dataclasses import dataclass

from .ListEntry import ListEntry


@dataclass(frozen=True)
class RunningProcess:
    pid: int


@dataclass(frozen=True)
class ExitedNonZero:
    exit_code: int


@dataclass(frozen=True)
class LoadedNoPid:
    pass


# A label absent from the status map is not registered with launchd.
LiveStatus = RunningProcess | ExitedNonZero | LoadedNoPid


def live_status_from_entry(entry: ListEntry) -> LiveStatus:
    """Collapse the optional pid/exit-code pair into a tagged status."""
    if entry.pid is not None:
        return RunningProcess(pid=entry.pid)
    if entry.exit_code is not None and entry.exit_code != 0:
        return ExitedNonZero(exit_code=entry.exit_code)
    return LoadedNoPid()
