"""Service Typer app factory."""

import typer

from ..api.service.cmd_blame import cmd_blame
from ..api.service.cmd_disable import cmd_disable
from ..api.service.cmd_enable import cmd_enable
from ..api.service.cmd_list import cmd_list
from ..api.service.cmd_show import cmd_show
from ..api.service.cmd_start import cmd_start
from ..api.service.cmd_stop import cmd_stop
from ..api.service.cmd_watch import cmd_watch
from ._handle_stage_result import _handle_stage_result

_DOMAIN_HELP = "Domain: user-agents, global-agents, global-daemons, system-agents, system-daemons"


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="Discover and control launchd agents and daemons",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd(
        search: str = typer.Argument("", help="Text to match against label or display name"),
        domain: str = typer.Option("", "--domain", "-D", help=_DOMAIN_HELP),
    ) -> None:
        """List services with their reconciled state."""
        _handle_stage_result(cmd_list)(domain=domain, search=search)

    @app.command(name="show")
    def show_cmd(
        label: str = typer.Argument(..., help="Service label"),
        domain: str = typer.Option("", "--domain", "-D", help=_DOMAIN_HELP),
    ) -> None:
        """Show one service and its property list."""
        _handle_stage_result(cmd_show)(label, domain=domain)

    @app.command(name="start")
    def start_cmd(
        label: str = typer.Argument(..., help="Service label"),
        domain: str = typer.Option("", "--domain", "-D", help=_DOMAIN_HELP),
    ) -> None:
        """Enable and bootstrap a service."""
        _handle_stage_result(cmd_start)(label, domain=domain)

    @app.command(name="stop")
    def stop_cmd(
        label: str = typer.Argument(..., help="Service label"),
        domain: str = typer.Option("", "--domain", "-D", help=_DOMAIN_HELP),
    ) -> None:
        """Boot out and disable a service."""
        _handle_stage_result(cmd_stop)(label, domain=domain)

    @app.command(name="enable")
    def enable_cmd(
        label: str = typer.Argument(..., help="Service label"),
        domain: str = typer.Option("", "--domain", "-D", help=_DOMAIN_HELP),
    ) -> None:
        """Enable a service and load it."""
        _handle_stage_result(cmd_enable)(label, domain=domain)

    @app.command(name="disable")
    def disable_cmd(
        label: str = typer.Argument(..., help="Service label"),
        domain: str = typer.Option("", "--domain", "-D", help=_DOMAIN_HELP),
    ) -> None:
        """Unload a service and disable it."""
        _handle_stage_result(cmd_disable)(label, domain=domain)

    @app.command(name="blame")
    def blame_cmd(
        label: str = typer.Argument(..., help="Service label"),
        domain: str = typer.Option("", "--domain", "-D", help=_DOMAIN_HELP),
    ) -> None:
        """Show why launchd last started a service."""
        _handle_stage_result(cmd_blame)(label, domain=domain)

    @app.command(name="watch")
    def watch_cmd(
        duration: float | None = typer.Option(None, "--duration", help="Stop after this many seconds"),
    ) -> None:
        """Rescan whenever descriptor files change (Ctrl-C to stop)."""
        _handle_stage_result(cmd_watch)(duration_secs=duration)

    return app
