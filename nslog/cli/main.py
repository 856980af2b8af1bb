"""Main entry point for the nslog command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from .commands import register as register_commands


def create_app() -> typer.Typer:
    """Create a Typer application instance for nslog."""

    app = typer.Typer(add_completion=False, help="nslog command line interface")

    @app.callback()
    def main(
        ctx: typer.Context,
        config: Path | None = typer.Option(
            None,
            "--config",
            "-c",
            help="TOML file with an [nslog] table.",
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        ctx.obj.update({"config_path": config, "no_color": no_color})

    register_commands(app)
    return app


app = create_app()
