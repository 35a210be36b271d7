"""Progress of a reconciliation pass."""

from enum import Enum


class RefreshStage(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    MERGING = "merging"
    PUBLISHED = "published"
