"""Canonical reconciled service record."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..descriptor.ServiceDescriptor import ServiceDescriptor
from ..domain.ServiceDomain import ServiceDomain
from .ServiceState import ServiceState, state_to_dict

_DISPLAY_PREFIXES = ("com.apple.", "com.", "org.", "io.", "net.")


@dataclass(frozen=True, eq=False)
class ServiceRecord:
    """One service as seen by consumers.

    Identity is (label, domain): two passes that rebuild a record for the same
    service produce equal, equally-hashed objects.
    """

    label: str
    domain: ServiceDomain
    state: ServiceState
    descriptor: ServiceDescriptor | None = None
    """None when launchd knows the label but no descriptor file was found."""

    pid: int | None = None
    last_exit_status: int | None = None

    @property
    def identity(self) -> tuple[str, ServiceDomain]:
        return (self.label, self.domain)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServiceRecord):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    @property
    def source_path(self) -> Path | None:
        return self.descriptor.source_path if self.descriptor else None

    @property
    def executable(self) -> str | None:
        return self.descriptor.executable if self.descriptor else None

    @property
    def display_name(self) -> str:
        """Label without the first common vendor prefix."""
        for prefix in _DISPLAY_PREFIXES:
            if self.label.startswith(prefix):
                return self.label[len(prefix):]
        return self.label

    @property
    def is_editable(self) -> bool:
        return self.domain.is_editable and not self.domain.requires_elevation

    @property
    def is_system_service(self) -> bool:
        return self.label.startswith("com.apple.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "domain": self.domain.value,
            "state": state_to_dict(self.state),
            "pid": self.pid,
            "last_exit_status": self.last_exit_status,
            "display_name": self.display_name,
            "descriptor": self.descriptor.to_dict() if self.descriptor else None,
        }
