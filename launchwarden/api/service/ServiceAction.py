"""State-changing actions a consumer can request."""

from enum import Enum


class ServiceAction(str, Enum):
    START = "start"
    STOP = "stop"
    ENABLE = "enable"
    DISABLE = "disable"

    @property
    def loads(self) -> bool:
        """True for actions that register the service (enable, then bootstrap)."""
        return self in (ServiceAction.START, ServiceAction.ENABLE)
