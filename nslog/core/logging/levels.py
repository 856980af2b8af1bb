"""Message levels and their display attributes."""

from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """Message level. The ordering is only used for display."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    EVENT = 4

    @property
    def tag(self) -> str:
        """Fixed five character label shown between brackets."""
        return _TAGS[self]

    @property
    def style(self) -> str:
        return _STYLES[self]

    @classmethod
    def parse(cls, value: str | int | Level) -> Level:
        """Look up a level by name (case-insensitive, ``warning`` allowed) or value."""

        if isinstance(value, Level):
            return value
        if isinstance(value, bool):
            raise TypeError(f"Level must be a name or an integer, not {value!r}")
        if isinstance(value, int):
            return cls(value)
        name = value.strip().upper()
        name = _ALIASES.get(name, name)
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown level: {value!r}") from None


_TAGS = {
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO ",
    Level.WARN: "WARN ",
    Level.ERROR: "ERROR",
    Level.EVENT: "EVENT",
}

_STYLES = {
    Level.DEBUG: "bright_black",
    Level.INFO: "green",
    Level.WARN: "yellow",
    Level.ERROR: "red",
    Level.EVENT: "blue",
}

_ALIASES = {"WARNING": "WARN", "ERR": "ERROR"}

TIMESTAMP_STYLE = "cyan"
NAMESPACE_STYLE = "magenta"
EVENT_ID_STYLE = "white on blue"

__all__ = ["Level", "TIMESTAMP_STYLE", "NAMESPACE_STYLE", "EVENT_ID_STYLE"]
