"""Service disable command."""

from ..StageResult import StageResult
from ._cmd_action import _cmd_action
from .ServiceAction import ServiceAction


def cmd_disable(label: str, domain: str = "") -> StageResult:
    """Disable a service so launchd will not load it, unloading it first."""
    return _cmd_action(ServiceAction.DISABLE, label, domain)
