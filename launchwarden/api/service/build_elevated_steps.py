"""Privileged launchctl sequences for one service action."""

import os

from ..privilege.ElevatedStep import ElevatedStep
from ..privilege.validate_label import validate_label
from .ServiceAction import ServiceAction
from .ServiceRecord import ServiceRecord


def build_elevated_steps(action: ServiceAction, record: ServiceRecord, launchctl_path: str) -> list[ElevatedStep]:
    """Two-step sequence run as root for an elevated domain.

    Loading is `enable` then `bootstrap`; unloading is `bootout` (stderr discarded,
    the service may not be loaded) then `disable`. Steps addressing a `gui/<uid>`
    target are wrapped in `launchctl asuser <uid>` so they run in the user's
    bootstrap namespace rather than root's.

    Raises:
        InvalidLabel: If the label contains characters outside the allow-list
    """
    label = validate_label(record.label)
    target = record.domain.control_target
    prefix: tuple[str, ...] = ()
    if target.startswith("gui/"):
        prefix = (launchctl_path, "asuser", str(os.getuid()))

    if action.loads:
        return [
            ElevatedStep((*prefix, launchctl_path, "enable", f"{target}/{label}")),
            ElevatedStep((*prefix, launchctl_path, "bootstrap", target, str(record.source_path))),
        ]
    return [
        ElevatedStep((*prefix, launchctl_path, "bootout", f"{target}/{label}"), discard_stderr=True),
        ElevatedStep((*prefix, launchctl_path, "disable", f"{target}/{label}")),
    ]
