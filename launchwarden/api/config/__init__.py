"""Config API module."""

from .LaunchWardenConfig import LaunchWardenConfig
from .LogConfig import LogConfig

__all__ = ["LaunchWardenConfig", "LogConfig"]
