"""launchctl and osascript locations."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LaunchctlConfig(BaseModel):
    """Paths to the control utilities and the subprocess timeout."""

    model_config = ConfigDict(extra="forbid")

    launchctl_path: str = Field("/bin/launchctl", description="launchctl executable")
    osascript_path: str = Field("/usr/bin/osascript", description="osascript executable used for elevation")
    timeout_secs: float = Field(30.0, gt=0, description="Upper bound for a single non-interactive launchctl call")

    @model_validator(mode="before")
    @classmethod
    def _require_dict(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            raise ValueError(f"launchctl config must be a dict, got {type(values).__name__}")
        return values
