"""Destinations for rendered lines."""

from __future__ import annotations

import os
import re
import sys
from fnmatch import fnmatchcase
from pathlib import Path
from typing import IO

from loguru import logger

from nslog.core.exceptions import SinkSetupError
from nslog.core.format.colors import Colorizer


class FileSink:
    """Append-only text file.

    The file's existence is checked on every write and no handle is kept open,
    so a file removed behind the logger's back simply stops receiving lines.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def prepare(self) -> None:
        """Create the file empty when it does not exist yet.

        Raises:
            SinkSetupError: the path is taken by something other than a regular
                file, or the file could not be created.
        """

        if self.path.is_file():
            return
        if self.path.exists():
            raise SinkSetupError(f"Log file path '{self.path}' is not a regular file", self.path)
        try:
            self.path.write_text("", encoding="utf-8")
        except OSError as exc:
            raise SinkSetupError(f"Unable to create log file '{self.path}': {exc}", self.path) from exc
        logger.debug("Created log file {}", self.path)

    def write(self, line: str) -> bool:
        if not self.path.is_file():
            logger.debug("Skipping missing log file {}", self.path)
            return False
        with open(self.path, "a", encoding="utf-8") as file:
            file.write(line)
            file.write("\n")
        return True

    def __repr__(self) -> str:
        return f"FileSink({str(self.path)!r})"


class ConsoleSink:
    """Sink writing lines to ``sys.stdout`` or ``sys.stderr``.

    The stream is looked up at write time so redirected streams are honoured.
    """

    def __init__(self, stream_name: str = "stdout") -> None:
        if stream_name not in ("stdout", "stderr"):
            raise ValueError(f"Unsupported console stream: {stream_name!r}")
        self.stream_name = stream_name

    @property
    def stream(self) -> IO[str]:
        return getattr(sys, self.stream_name)

    def write(self, line: str) -> None:
        stream = self.stream
        stream.write(line)
        stream.write("\n")
        stream.flush()


_PATTERN_SPLIT = re.compile(r"[\s,]+")


def debug_enabled(namespace: str, patterns: str) -> bool:
    """Return whether ``namespace`` is selected by a ``DEBUG``-style pattern list.

    Patterns are separated by commas or whitespace, ``*`` matches anything and
    a leading ``-`` excludes matching namespaces.
    """

    included = False
    for pattern in _PATTERN_SPLIT.split(patterns.strip()):
        if not pattern:
            continue
        if pattern.startswith("-"):
            if fnmatchcase(namespace, pattern[1:]):
                return False
        elif fnmatchcase(namespace, pattern):
            included = True
    return included


class DebugChannel:
    """Debug-only console channel, silent unless the ``DEBUG`` environment variable selects its namespace."""

    env_var = "DEBUG"

    def __init__(self, namespace: str, colorizer: Colorizer | None = None) -> None:
        self.namespace = namespace
        self.colorizer = colorizer or Colorizer(enabled=False)
        self._console = ConsoleSink("stderr")

    @property
    def enabled(self) -> bool:
        return debug_enabled(self.namespace, os.environ.get(self.env_var, ""))

    def write(self, text: str) -> bool:
        if not self.enabled:
            return False
        self._console.write(f"{self.colorizer(self.namespace, 'bold magenta')} {text}")
        return True


__all__ = ["ConsoleSink", "DebugChannel", "FileSink", "debug_enabled"]
