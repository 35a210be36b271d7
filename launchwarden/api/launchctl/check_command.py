"""Decide whether a mutating launchctl command failed."""

from ..errors import CommandFailed
from .CommandOutput import CommandOutput

# Phrases launchctl prints when the requested state already holds
IDEMPOTENT_MARKERS: tuple[str, ...] = (
    "already bootstrapped",
    "already loaded",
    "not found",
    "no such process",
)


def check_command(result: CommandOutput, action: str) -> None:
    """Raise CommandFailed when a command explicitly reported an error.

    Exit status 0 is success regardless of the text. Otherwise an "error" marker in
    the output, without an idempotency marker, is a failure. A non-zero exit status
    without an error marker is not treated as a failure.

    Args:
        result: Output of the command
        action: Human-readable description used in the failure message

    Raises:
        CommandFailed: On explicit failure, or when launchctl could not be launched
    """
    if not result.launched:
        raise CommandFailed(f"{action}: launchctl could not be launched")
    if result.returncode == 0:
        return
    lowered = result.output.lower()
    if "error" not in lowered:
        return
    if any(marker in lowered for marker in IDEMPOTENT_MARKERS):
        return
    raise CommandFailed(f"{action}: {result.output.strip()}")
