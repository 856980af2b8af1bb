"""``write`` and ``config`` commands."""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from nslog.core.exceptions import NSLogError
from nslog.core.logging import Level, LoggerRegistry

from .formatters import JSONFormatter, TableFormatter
from .utils import exit_with_error, get_cli_options, resolve_cli_config


def register(app: typer.Typer) -> None:
    """Register the commands on the root CLI application."""

    app.command("write")(write_command)
    app.command("config")(config_command)


def get_registry() -> LoggerRegistry:
    """Factory hook returning the registry loggers are acquired from."""

    return LoggerRegistry()


def write_command(
    ctx: typer.Context,
    level: str = typer.Argument(..., help="debug, info, warn, error or event."),
    message: str = typer.Argument(..., help="Message template, may contain %-tokens."),
    args: list[str] | None = typer.Argument(None, help="Values substituted into the template."),
    namespace: str | None = typer.Option(None, "--namespace", "-n", help="Logger namespace."),
    directory: Path | None = typer.Option(None, "--directory", "-d", help="Log directory."),
    ns_width: int | None = typer.Option(None, "--ns-width", help="Width of the namespace column."),
    event_id: str | None = typer.Option(None, "--event-id", help="Identifier for EVENT messages."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not echo the line to the console."),
    debug: bool = typer.Option(False, "--debug", help="Allow DEBUG messages."),
) -> None:
    """Write one message through a namespaced logger."""

    try:
        parsed_level = Level.parse(level)
    except ValueError as exc:
        allowed = ", ".join(item.name.lower() for item in Level)
        raise typer.BadParameter(f"Unsupported level '{level}'. Allowed values: {allowed}", param_hint="LEVEL") from exc

    config = resolve_cli_config(
        ctx,
        namespace=namespace,
        directory=directory,
        ns_width=ns_width,
        to_console=False if quiet else None,
        debug=True if debug else None,
        use_console_debug=True if debug else None,
    )

    try:
        log = get_registry().acquire(config)
        log.log(parsed_level, message, *(args or []), event_id=event_id)
    except NSLogError as error:
        exit_with_error(error)


def config_command(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """Show the resolved logger configuration."""

    config = resolve_cli_config(ctx)
    settings = config.model_dump(mode="json")
    if as_json:
        JSONFormatter().render(settings, stream=sys.stdout)
    else:
        TableFormatter(no_color=get_cli_options(ctx).no_color).render(settings, stream=sys.stdout)


__all__ = ["config_command", "get_registry", "register", "write_command"]
