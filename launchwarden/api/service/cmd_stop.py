"""Service stop command."""

from ..StageResult import StageResult
from ._cmd_action import _cmd_action
from .ServiceAction import ServiceAction


def cmd_stop(label: str, domain: str = "") -> StageResult:
    """Stop a service: boot it out, then disable it so it stays down."""
    return _cmd_action(ServiceAction.STOP, label, domain)
