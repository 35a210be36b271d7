"""Published per-service state as an exhaustive tagged union."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Running:
    pid: int
    kind: ClassVar[str] = "running"

    @property
    def display_text(self) -> str:
        return f"Running (PID: {self.pid})"


@dataclass(frozen=True)
class Stopped:
    kind: ClassVar[str] = "stopped"
    display_text: ClassVar[str] = "Stopped"


@dataclass(frozen=True)
class Loaded:
    kind: ClassVar[str] = "loaded"
    display_text: ClassVar[str] = "Loaded"


@dataclass(frozen=True)
class Unloaded:
    kind: ClassVar[str] = "unloaded"
    display_text: ClassVar[str] = "Not Loaded"


@dataclass(frozen=True)
class Failed:
    exit_code: int
    kind: ClassVar[str] = "failed"

    @property
    def display_text(self) -> str:
        return f"Failed (Exit: {self.exit_code})"


@dataclass(frozen=True)
class Disabled:
    kind: ClassVar[str] = "disabled"
    display_text: ClassVar[str] = "Disabled"


@dataclass(frozen=True)
class Unknown:
    kind: ClassVar[str] = "unknown"
    display_text: ClassVar[str] = "Unknown"


ServiceState = Running | Stopped | Loaded | Unloaded | Failed | Disabled | Unknown


def state_to_dict(state: ServiceState) -> dict:
    """Serialize a state as {"kind": ..., plus its payload}."""
    data: dict = {"kind": state.kind, "text": state.display_text}
    if isinstance(state, Running):
        data["pid"] = state.pid
    elif isinstance(state, Failed):
        data["exit_code"] = state.exit_code
    return data
