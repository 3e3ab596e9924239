"""Create the main Typer CLI app."""

from pathlib import Path

import typer

from hgctl import __version__
from hgctl.api.config.ControllerConfig import ControllerConfig
from hgctl.api.config.ServiceSpec import ServiceSpec
from hgctl.api.service.cmd_restart import cmd_restart
from hgctl.api.service.cmd_start import cmd_start
from hgctl.api.service.cmd_stop import cmd_stop
from hgctl.api.service.Command import usage_message
from hgctl.cli._handle_stage_result import DISPLAY_FORMATS, _handle_stage_result
from hgctl.cli._ServiceGroup import _ServiceGroup


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"hgctl {__version__}")
        raise typer.Exit(0)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        cls=_ServiceGroup,
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Start, stop and restart the helium_gateway daemon",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
        add_completion=False,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        env_file: Path | None = typer.Option(  # noqa: B008
            None, "--env-file", help="Environment override file (default: /etc/default/<name>)"
        ),
        name: str | None = typer.Option(None, "--name", help="Service name"),
        pid_file: Path | None = typer.Option(None, "--pid-file", help="PID file path"),  # noqa: B008
        config_file: Path | None = typer.Option(  # noqa: B008
            None, "--config-file", help="Configuration file passed to the daemon"
        ),
        binary: Path | None = typer.Option(None, "--binary", help="Daemon executable"),  # noqa: B008
        opts: str | None = typer.Option(None, "--opts", help="Daemon arguments (replaces OPTS)"),
        enabled: bool | None = typer.Option(None, "--enabled/--disabled", help="Override the ENABLED flag"),
        version: bool = typer.Option(  # noqa: ARG001
            False, "--version", "-v", callback=_version_callback, is_eager=True, help="Show the version and exit"
        ),
    ) -> None:
        # Validate display format
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        if ctx.invoked_subcommand is None:
            typer.echo(usage_message(ctx.find_root().info_name or "hgctl"), err=True)
            raise typer.Exit(1)

        try:
            spec = ServiceSpec.load(
                env_file,
                name=name,
                enabled=enabled,
                pid_file=pid_file,
                configuration_file=config_file,
                binary=binary,
                opts=opts,
            )
            config = ControllerConfig.load()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

        # Store resolved settings in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["spec"] = spec
        ctx.obj["config"] = config

    def start_command(ctx: typer.Context) -> None:
        """Start the daemon."""
        _handle_stage_result(cmd_start, display_format=ctx.obj["display_format"])(
            spec=ctx.obj["spec"], config=ctx.obj["config"]
        )

    def stop_command(ctx: typer.Context) -> None:
        """Stop the daemon."""
        _handle_stage_result(cmd_stop, display_format=ctx.obj["display_format"])(
            spec=ctx.obj["spec"], config=ctx.obj["config"]
        )

    def restart_command(ctx: typer.Context) -> None:
        """Stop the daemon, pause, then start it again."""
        _handle_stage_result(cmd_restart, display_format=ctx.obj["display_format"])(
            spec=ctx.obj["spec"], config=ctx.obj["config"]
        )

    app.command(name="start")(start_command)
    app.command(name="stop")(stop_command)
    app.command(name="restart")(restart_command)
    app.command(name="force-reload", help="Alias of restart.")(restart_command)

    return app
