"""Top-level LaunchWarden configuration."""

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from ...utils.get_launchwarden_home import get_launchwarden_home
from ..launchctl.LaunchctlConfig import LaunchctlConfig
from ..service.MonitorConfig import MonitorConfig
from .LogConfig import LogConfig


class LaunchWardenConfig(BaseModel):
    """Top-level configuration for LaunchWarden layers."""

    model_config = ConfigDict(extra="forbid")

    monitor: MonitorConfig = Field(default_factory=MonitorConfig)
    launchctl: LaunchctlConfig = Field(default_factory=LaunchctlConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @computed_field
    def path(self) -> Path:
        """Path to config file."""
        return self.get_config_path()

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get home directory based on LAUNCHWARDEN_HOME or default to ~/.launchwarden."""
        return get_launchwarden_home()

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "LaunchWardenConfig":
        """Load and validate config from file.

        Every section is optional; a missing file gives the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "monitor": self.monitor.model_dump(),
            "launchctl": self.launchctl.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Write the configuration atomically (temp file in the same directory, then rename).

        Raises:
            RuntimeError: If the file could not be written
        """
        path = self.get_config_path()
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile("w", dir=path.parent, prefix=".config.", suffix=".tmp", delete=False) as fh:
                tmp_name = fh.name
                json.dump(self.to_dict(), fh, indent=4)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                with suppress(OSError):
                    os.unlink(tmp_name)
            raise RuntimeError(f"Failed to save config: {e}") from e
