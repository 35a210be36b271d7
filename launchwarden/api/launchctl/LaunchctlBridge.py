"""Subprocess bridge to launchctl."""

from collections.abc import Callable
from pathlib import Path

from ..errors import ControlUtilityUnavailable
from .check_command import check_command
from .CommandOutput import CommandOutput
from .ListEntry import ListEntry
from .parse_list_output import parse_list_output
from .parse_print_disabled import parse_print_disabled
from .parse_print_services import parse_print_services
from .run_command import run_command

Runner = Callable[..., CommandOutput]


class LaunchctlBridge:
    """Query and mutate launchd registration state through launchctl.

    All methods block on a subprocess; callers run them off the coordinator thread.
    """

    def __init__(
        self,
        launchctl_path: str = "/bin/launchctl",
        timeout_secs: float | None = 30.0,
        runner: Runner = run_command,
    ):
        self.launchctl_path = launchctl_path
        self.timeout_secs = timeout_secs
        self._runner = runner

    def argv(self, *args: str) -> list[str]:
        """Full argument vector for a launchctl subcommand."""
        return [self.launchctl_path, *args]

    def _run(self, *args: str) -> CommandOutput:
        return self._runner(self.argv(*args), timeout=self.timeout_secs)

    def _query(self, *args: str) -> str:
        result = self._run(*args)
        if not result.launched:
            raise ControlUtilityUnavailable(f"{self.launchctl_path} could not be launched")
        return result.output

    # ------------------------------------------------------------------ queries

    def list_status(self) -> dict[str, ListEntry]:
        """All labels loaded in the caller's session with pid and last exit status.

        Raises:
            ControlUtilityUnavailable: If launchctl could not be launched
        """
        return parse_list_output(self._query("list"))

    def query_services(self, target: str) -> dict[str, ListEntry]:
        """Services registered in a domain target, from `launchctl print`."""
        return parse_print_services(self._query("print", target))

    def query_running(self, target: str) -> set[str]:
        """Labels with a live process in a domain target."""
        return {label for label, entry in self.query_services(target).items() if entry.pid is not None}

    def query_disabled(self, target: str) -> set[str]:
        """Labels disabled in launchd's override database for a domain target."""
        return parse_print_disabled(self._query("print-disabled", target))

    def blame(self, target: str, label: str) -> str:
        """Reason launchd gives for the service's last (re)start."""
        result = self._run("blame", f"{target}/{label}")
        return result.output.strip()

    # ---------------------------------------------------------------- mutations

    def enable(self, target: str, label: str) -> None:
        check_command(self._run("enable", f"{target}/{label}"), f"enable {label}")

    def disable(self, target: str, label: str) -> None:
        check_command(self._run("disable", f"{target}/{label}"), f"disable {label}")

    def bootstrap(self, target: str, path: Path) -> None:
        check_command(self._run("bootstrap", target, str(path)), f"bootstrap {path.name}")

    def bootout(self, target: str, label: str) -> CommandOutput:
        """Unload a service. Failures are returned, not raised; a service that is
        not loaded cannot be booted out and that is fine."""
        return self._run("bootout", f"{target}/{label}")
