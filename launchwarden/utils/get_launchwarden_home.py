"""Utility to discover the LaunchWarden home directory."""

import os
from pathlib import Path


def get_launchwarden_home() -> Path:
    """Get home directory based on LAUNCHWARDEN_HOME or default to ~/.launchwarden."""
    home_env = os.environ.get("LAUNCHWARDEN_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".launchwarden"
