"""Run an external command and capture its combined output."""

import subprocess
from collections.abc import Sequence

from ...utils.get_logger import get_logger
from .CommandOutput import CommandOutput


def run_command(argv: Sequence[str], timeout: float | None = None) -> CommandOutput:
    """Run a command without a shell.

    Output is drained with communicate() before the exit status is collected, so a
    large output cannot fill the pipe and deadlock the child. Launch failures never
    raise; they return CommandOutput.not_launched().

    Args:
        argv: Executable followed by its arguments
        timeout: Seconds before the child is killed, or None to wait indefinitely

    Returns:
        CommandOutput with stdout and stderr combined
    """
    log = get_logger("launchctl")
    log.debug("Running: %s", " ".join(argv))
    try:
        proc = subprocess.Popen(
            list(argv),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        log.warning("Cannot launch %s: %s", argv[0], exc)
        return CommandOutput.not_launched()

    try:
        output, _ = proc.communicate(timeout=timeout)
    except subprocess.TimeoutExpired:
        proc.kill()
        output, _ = proc.communicate()
        log.warning("Timed out after %ss: %s", timeout, " ".join(argv))
        return CommandOutput(output=output or "", returncode=None)

    log.debug("Finished (%s), output length %d", proc.returncode, len(output or ""))
    return CommandOutput(output=output or "", returncode=proc.returncode)
