"""Domain registry - static table of launchd service scopes."""

from .ServiceDomain import ServiceDomain
from .registry import (
    all_domains,
    control_target,
    directory,
    is_read_only,
    requires_elevation,
    scan_domains,
)

__all__ = [
    "ServiceDomain",
    "all_domains",
    "control_target",
    "directory",
    "is_read_only",
    "requires_elevation",
    "scan_domains",
]
