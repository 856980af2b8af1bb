"""Output formatters for the ``config`` command."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

from rich.box import SIMPLE
from rich.console import Console
from rich.table import Table


@dataclass(slots=True)
class TableFormatter:
    """Render settings as a two column Rich table."""

    no_color: bool = False

    def render(self, settings: Mapping[str, object], *, stream: TextIO) -> None:
        console = Console(file=stream, color_system=None if self.no_color else "auto", no_color=self.no_color)
        table = Table(box=SIMPLE, show_lines=False)
        header_style = "" if self.no_color else "bold"
        table.add_column("option", header_style=header_style)
        table.add_column("value", header_style=header_style)
        for key, value in settings.items():
            table.add_row(key, self._format_cell(value))
        console.print(table)

    def _format_cell(self, value: object) -> str:
        if value is None:
            return "-"
        return str(value)


@dataclass(slots=True)
class JSONFormatter:
    """Render settings as one JSON document."""

    def render(self, settings: Mapping[str, object], *, stream: TextIO) -> None:
        json.dump(dict(settings), stream, ensure_ascii=False, default=str, indent=2)
        stream.write("\n")
        stream.flush()


__all__ = ["JSONFormatter", "TableFormatter"]
