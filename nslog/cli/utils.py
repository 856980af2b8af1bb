"""Utility helpers shared across CLI commands."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, NoReturn

import typer

from nslog.core.config import ConfigManager
from nslog.core.exceptions import NSLogError
from nslog.core.logging import LoggerConfig

from .constants import CONFIGURATION_EXIT_CODE


@dataclass(slots=True)
class CLIOptions:
    """Resolved options derived from the Typer context."""

    config_path: Path | None = None
    no_color: bool = False


def get_cli_options(ctx: typer.Context) -> CLIOptions:
    """Extract :class:`CLIOptions` from the Typer context object."""

    ctx.ensure_object(dict)
    data = ctx.obj or {}
    return CLIOptions(
        config_path=data.get("config_path"),
        no_color=bool(data.get("no_color", False)),
    )


def resolve_cli_config(ctx: typer.Context, **overrides: Any) -> LoggerConfig:
    """Resolve the logger configuration for a command, exiting on configuration errors."""

    options = get_cli_options(ctx)
    cleaned = {key: value for key, value in overrides.items() if value is not None}
    if options.no_color:
        cleaned["colors"] = False
    try:
        return ConfigManager(options.config_path).resolve(**cleaned)
    except NSLogError as error:
        exit_with_error(error)


def exit_with_error(error: NSLogError) -> NoReturn:
    """Report ``error`` on stderr and stop the command."""

    emit_error(error.message, str(getattr(error.error_code, "value", error.error_code)), details=error.details)
    raise typer.Exit(code=CONFIGURATION_EXIT_CODE) from error


def emit_error(message: str, code: str, *, details: Mapping[str, object] | None = None) -> None:
    """Print a structured error payload to stderr."""

    payload: dict[str, object] = {"code": code, "message": message}
    if details:
        payload["details"] = _sanitize_details(details)
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)


def _sanitize_details(details: Mapping[str, object]) -> Mapping[str, object]:
    sanitized: dict[str, object] = {}
    for key, value in details.items():
        if isinstance(value, (str, int, float, bool)) or value is None:
            sanitized[key] = value
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            sanitized[key] = [_describe_item(item) for item in value]
        else:
            sanitized[key] = str(value)
    return sanitized


def _describe_item(item: object) -> str:
    """Condense a pydantic validation error entry to ``field: message``."""

    if isinstance(item, Mapping) and "msg" in item:
        location = ".".join(str(part) for part in item.get("loc", ()))
        return f"{location}: {item['msg']}" if location else str(item["msg"])
    return str(item)


__all__ = ["CLIOptions", "emit_error", "exit_with_error", "get_cli_options", "resolve_cli_config"]
