"""Service monitor configuration Pydantic model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..domain.ServiceDomain import ServiceDomain


class MonitorConfig(BaseModel):
    """Scan scope, timing and worker settings for the service monitor."""

    model_config = ConfigDict(extra="forbid")

    show_system_services: bool = Field(False, description="Also scan the read-only Apple system domains")
    debounce_secs: float = Field(1.0, gt=0, description="Quiet period before a burst of file changes triggers a rescan")
    settle_delay_secs: float = Field(0.5, ge=0, description="Pause after a command before refreshing")
    workers: int = Field(4, ge=1, le=32, description="Worker threads for subprocess calls and directory scans")
    directories: dict[str, str] = Field(
        default_factory=dict,
        description="Per-domain directory overrides keyed by domain name (e.g. 'user-agents')",
    )

    @model_validator(mode="before")
    @classmethod
    def _require_dict(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            raise ValueError(f"monitor config must be a dict, got {type(values).__name__}")
        return values

    @field_validator("directories")
    @classmethod
    def _known_domains(cls, value: dict[str, str]) -> dict[str, str]:
        known = {domain.value for domain in ServiceDomain}
        unknown = sorted(set(value) - known)
        if unknown:
            raise ValueError(f"Unknown domain(s) {unknown} (supported: {sorted(known)})")
        return value

    def directory_overrides(self) -> dict[ServiceDomain, str]:
        return {ServiceDomain(name): path for name, path in self.directories.items()}
