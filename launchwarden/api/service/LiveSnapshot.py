"""Everything launchctl reported during one reconciliation pass."""

from dataclasses import dataclass, field

from ..launchctl.ListEntry import ListEntry


@dataclass(frozen=True)
class LiveSnapshot:
    available: bool = True
    """False when launchctl could not be launched; every record becomes Unknown."""

    listed: dict[str, ListEntry] = field(default_factory=dict)
    """`launchctl list` for the caller's session (gui/<uid> domains)."""

    by_target: dict[str, dict[str, ListEntry]] = field(default_factory=dict)
    """`launchctl print <target>` for targets the session listing does not cover."""

    disabled: dict[str, set[str]] = field(default_factory=dict)
    """`launchctl print-disabled <target>` per target."""

    @classmethod
    def unavailable(cls) -> "LiveSnapshot":
        return cls(available=False)
