"""Run a command sequence with administrator privileges via osascript."""

import re
from collections.abc import Callable, Sequence

from ...utils.get_logger import get_logger
from ..errors import CommandFailed, ElevationCancelled
from ..launchctl.CommandOutput import CommandOutput
from ..launchctl.run_command import run_command
from .build_shell_command import build_shell_command
from .ElevatedStep import ElevatedStep

USER_CANCELLED = -128
"""AppleScript error number for a declined authorization prompt."""

# "0:123: execution error: User canceled. (-128)"
_EXECUTION_ERROR = re.compile(r"execution error:\s*(?P<message>.*?)\s*\((?P<number>-?\d+)\)\s*$", re.DOTALL)


def _applescript_string(text: str) -> str:
    """Quote text as an AppleScript string literal."""
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class PrivilegeEscalator:
    """Request one administrator prompt for a whole sequence of commands.

    The composite script is handed to osascript as an argument vector; no local
    shell ever sees it. Inside the privileged shell every argument is quoted with
    shlex, so labels and paths cannot change the command structure.
    """

    def __init__(
        self,
        osascript_path: str = "/usr/bin/osascript",
        runner: Callable[..., CommandOutput] = run_command,
    ):
        self.osascript_path = osascript_path
        self._runner = runner

    def build_script(self, steps: Sequence[ElevatedStep]) -> str:
        command = build_shell_command(steps)
        return f"do shell script {_applescript_string(command)} with administrator privileges"

    def run_elevated(self, steps: Sequence[ElevatedStep]) -> None:
        """Run steps as root behind a single authorization prompt.

        Raises:
            ElevationCancelled: If the user declined the prompt
            CommandFailed: If osascript could not run or the script failed
        """
        log = get_logger("privilege")
        script = self.build_script(steps)
        log.info("Requesting elevation for %d step(s)", len(steps))
        result = self._runner([self.osascript_path, "-e", script])

        if not result.launched:
            raise CommandFailed(f"{self.osascript_path} could not be launched")
        if result.returncode == 0:
            return

        output = result.output.strip()
        match = _EXECUTION_ERROR.search(output)
        if match and int(match.group("number")) == USER_CANCELLED:
            log.info("Elevation cancelled by user")
            raise ElevationCancelled()
        message = match.group("message") if match else output
        log.warning("Elevated command failed: %s", message)
        raise CommandFailed(message or f"osascript exited with status {result.returncode}")
