"""Service enable command."""

from ..StageResult import StageResult
from ._cmd_action import _cmd_action
from .ServiceAction import ServiceAction


def cmd_enable(label: str, domain: str = "") -> StageResult:
    """Enable a service so launchd loads it, and load it now."""
    return _cmd_action(ServiceAction.ENABLE, label, domain)
