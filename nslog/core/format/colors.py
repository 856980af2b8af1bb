"""Named-style text decoration backed by rich."""

from __future__ import annotations

import re

from rich.color import ColorSystem
from rich.style import Style

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


class Colorizer:
    """Wrap text in ANSI escapes for a rich style name, or pass it through unchanged."""

    def __init__(self, enabled: bool = True, color_system: ColorSystem = ColorSystem.STANDARD) -> None:
        self.enabled = enabled
        self.color_system = color_system

    def decorate(self, text: str, style: str) -> str:
        if not self.enabled or not text:
            return text
        return Style.parse(style).render(text, color_system=self.color_system)

    __call__ = decorate

    def __repr__(self) -> str:
        return f"Colorizer(enabled={self.enabled!r}, color_system={self.color_system.name})"


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from ``text``."""

    return ANSI_PATTERN.sub("", text)


__all__ = ["ANSI_PATTERN", "Colorizer", "strip_ansi"]
