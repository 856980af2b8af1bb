"""Text capabilities used by the renderer: colors, timestamps, token substitution."""

from nslog.core.format.colors import Colorizer, strip_ansi
from nslog.core.format.timestamp import DEFAULT_DATE_FORMAT, timestamp
from nslog.core.format.tokens import (
    CONSOLE_KIND_MAP,
    FILE_KIND_MAP,
    count_arguments,
    escape,
    rewrite_kinds,
    substitute,
    to_json,
)

__all__ = [
    "Colorizer",
    "strip_ansi",
    "DEFAULT_DATE_FORMAT",
    "timestamp",
    "CONSOLE_KIND_MAP",
    "FILE_KIND_MAP",
    "count_arguments",
    "escape",
    "rewrite_kinds",
    "substitute",
    "to_json",
]
