"""CLI for swarm-relay.

Commands:
    event            Handle one host event (trigger entry point)
    ping             Check that Swarm's queue accepts items
    version          Show Swarm's version and the relay version
    validate         Check the configuration
    triggers         Print the trigger table for the event registrations
    config-template  Print default settings in dotenv format

Trigger usage (exit status 0 lets the operation proceed):
    swarm-relay event change-submit change=%change% user=%user% clientip=%clientip%
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from swarm_relay import __version__
from swarm_relay.application.services.operator_command_service import (
    CommandResult,
    OperatorCommandService,
)
from swarm_relay.bootstrap import RelayRuntime, configure_logging
from swarm_relay.config.registrations import trigger_table_lines
from swarm_relay.config.swarm_config import (
    GLOBAL_CONFIG_DEFAULTS,
    INSTANCE_CONFIG_DEFAULTS,
)
from swarm_relay.domain.errors.configuration import ConfigurationError
from swarm_relay.domain.errors.host_event import HostEventError
from swarm_relay.infrastructure.adapters.config.dotenv_source import (
    GLOBAL_CONFIG_ENV,
    INSTANCE_CONFIG_ENV,
    DotenvConfigSource,
)
from swarm_relay.infrastructure.adapters.host import (
    build_hook_event,
    parse_variable_args,
)


class ConfigScope(str, Enum):
    """Which settings a template covers."""

    all = "all"
    global_ = "global"
    instance = "instance"


app = typer.Typer(
    name="swarm-relay",
    help="Relay Helix Core events to Helix Swarm",
    add_completion=False,
)
console = Console(soft_wrap=True, highlight=False)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"swarm-relay version {__version__}")
        raise typer.Exit()


def _client_output(text: str) -> None:
    typer.echo(text, nl=False)


def _runtime(ctx: typer.Context) -> RelayRuntime:
    return RelayRuntime(ctx.obj, client_output=_client_output)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    global_config: Optional[Path] = typer.Option(
        None,
        "--global-config",
        "-g",
        envvar=GLOBAL_CONFIG_ENV,
        help="Global settings file (Swarm-URL, Swarm-Token, ...)",
    ),
    instance_config: Optional[Path] = typer.Option(
        None,
        "--instance-config",
        "-i",
        envvar=INSTANCE_CONFIG_ENV,
        help="Instance settings file (depot-path, enableWorkflow, ...)",
    ),
) -> None:
    """Swarm relay for Helix Core.

    Gates submits and shelves on Swarm workflow checks and keeps Swarm's
    queue informed of commits, shelves and spec changes.
    """
    # Default level until the configuration has been read
    configure_logging()
    ctx.obj = DotenvConfigSource(global_config, instance_config)


@app.command()
def event(
    ctx: typer.Context,
    event_name: str = typer.Argument(
        ...,
        help="Host event name, e.g. change-submit",
    ),
    variables: Optional[list[str]] = typer.Argument(
        None,
        help="Host variables as NAME=VALUE",
    ),
) -> None:
    """Handle one host event.

    Prints the message for the user, if any, and exits 0 to let the
    operation proceed or 1 to reject it.

    Example:
        swarm-relay event form-commit formtype=user formname=alice user=alice
    """
    try:
        hook_event = build_hook_event(event_name, parse_variable_args(variables or []))
    except (HostEventError, ValueError) as e:
        _fail(str(e))

    decision = _runtime(ctx).handle_event(hook_event)
    if decision.message:
        typer.echo(decision.message)
    raise typer.Exit(code=decision.exit_code)


def _run_operator_command(
    ctx: typer.Context, command: Callable[[OperatorCommandService], CommandResult]
) -> None:
    try:
        with _runtime(ctx).services() as services:
            result = command(services.commands)
    except ConfigurationError as e:
        _fail(str(e))

    for line in result.lines:
        console.print(line, markup=False)
    if not result.ok:
        raise typer.Exit(code=1)


@app.command()
def ping(ctx: typer.Context) -> None:
    """Check that Swarm's queue accepts items.

    Prints OK, or BAD with the reason.
    """
    _run_operator_command(ctx, lambda commands: commands.ping())


@app.command()
def version(ctx: typer.Context) -> None:
    """Show Swarm's version and the relay version."""
    _run_operator_command(ctx, lambda commands: commands.version())


@app.command()
def validate(ctx: typer.Context) -> None:
    """Check the configuration, one line per problem."""
    _run_operator_command(ctx, lambda commands: commands.validate())


@app.command()
def triggers(
    ctx: typer.Context,
    command: str = typer.Option(
        "swarm-relay",
        "--command",
        "-c",
        help="Relay executable as seen by the Helix Core server",
    ),
) -> None:
    """Print trigger table lines for the event registrations.

    Example:
        swarm-relay -i swarm-instance.env triggers >> triggers.txt
    """
    try:
        config = _runtime(ctx).config()
    except ConfigurationError as e:
        _fail(str(e))

    typer.echo("Triggers:")
    for line in trigger_table_lines(config, command=command):
        typer.echo(line)


@app.command()
def config_template(
    scope: ConfigScope = typer.Option(
        ConfigScope.all,
        "--scope",
        "-s",
        help="Settings to include: all, global or instance",
    ),
) -> None:
    """Print default settings in dotenv format."""
    sections = []
    if scope in (ConfigScope.all, ConfigScope.global_):
        sections.append(("# Global settings", GLOBAL_CONFIG_DEFAULTS))
    if scope in (ConfigScope.all, ConfigScope.instance):
        sections.append(("# Instance settings", INSTANCE_CONFIG_DEFAULTS))

    for index, (title, defaults) in enumerate(sections):
        if index:
            typer.echo("")
        typer.echo(title)
        for key, value in defaults.items():
            typer.echo(f"{key}={value}")


if __name__ == "__main__":
    app()
