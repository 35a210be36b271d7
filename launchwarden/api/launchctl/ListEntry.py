"""One row of `launchctl list` output."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ListEntry:
    pid: int | None = None
    exit_code: int | None = None
