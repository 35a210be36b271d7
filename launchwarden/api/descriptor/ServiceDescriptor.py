"""Service descriptor DTO parsed from one property list file."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..domain.ServiceDomain import ServiceDomain


@dataclass(frozen=True)
class ServiceDescriptor:
    """Declarative half of a service: what the plist on disk says."""

    label: str
    """Unique key within a domain; falls back to the filename stem."""

    domain: ServiceDomain
    source_path: Path

    program: str | None = None
    program_arguments: tuple[str, ...] = ()
    run_at_load: bool = False
    keep_alive: bool = False
    start_interval: int | None = None
    environment_variables: dict[str, str] = field(default_factory=dict)
    working_directory: str | None = None
    stdout_path: str | None = None
    stderr_path: str | None = None
    user: str | None = None
    group: str | None = None
    disabled: bool = False
    """Explicit opt-out flag declared in the file."""

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("ServiceDescriptor.label must be non-empty")

    @property
    def executable(self) -> str | None:
        """Program path, or the first element of ProgramArguments."""
        if self.program:
            return self.program
        return self.program_arguments[0] if self.program_arguments else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "domain": self.domain.value,
            "source_path": str(self.source_path),
            "executable": self.executable,
            "program_arguments": list(self.program_arguments),
            "run_at_load": self.run_at_load,
            "keep_alive": self.keep_alive,
            "start_interval": self.start_interval,
            "environment_variables": dict(self.environment_variables),
            "working_directory": self.working_directory,
            "stdout_path": self.stdout_path,
            "stderr_path": self.stderr_path,
            "user": self.user,
            "group": self.group,
            "disabled": self.disabled,
        }
