"""Service start command."""

from ..StageResult import StageResult
from ._cmd_action import _cmd_action
from .ServiceAction import ServiceAction


def cmd_start(label: str, domain: str = "") -> StageResult:
    """Start a service: enable it, then bootstrap its descriptor."""
    return _cmd_action(ServiceAction.START, label, domain)
