"""Render elevated steps into one /bin/sh command line."""

import shlex
from collections.abc import Sequence

from .ElevatedStep import ElevatedStep


def build_shell_command(steps: Sequence[ElevatedStep]) -> str:
    """Join steps with statement separators, quoting every argument.

    Args:
        steps: Commands to run in order under one elevation

    Returns:
        Shell command line, e.g. "/bin/launchctl bootout system/com.x 2>/dev/null; ..."

    Raises:
        ValueError: If steps is empty
    """
    if not steps:
        raise ValueError("At least one step is required")
    rendered = []
    for step in steps:
        line = shlex.join(step.argv)
        if step.discard_stderr:
            line += " 2>/dev/null"
        rendered.append(line)
    return "; ".join(rendered)
