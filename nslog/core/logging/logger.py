"""Namespaced logger: rendering of leveled messages and dispatch to its sinks."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from loguru import logger

from nslog.core.exceptions import ConfigurationError, ParameterCountError, SinkSetupError
from nslog.core.format.colors import Colorizer
from nslog.core.format.timestamp import timestamp
from nslog.core.format.tokens import (
    CONSOLE_KIND_MAP,
    FILE_KIND_MAP,
    count_arguments,
    escape,
    rewrite_kinds,
    substitute,
)
from nslog.core.logging.config import LoggerConfig
from nslog.core.logging.levels import EVENT_ID_STYLE, NAMESPACE_STYLE, TIMESTAMP_STYLE, Level
from nslog.core.logging.sinks import ConsoleSink, DebugChannel, FileSink

if TYPE_CHECKING:
    from nslog.core.logging.registry import LoggerRegistry

NULL_EVENT_ID = "NULL_EVENT_ID"

_PLAIN = Colorizer(enabled=False)


@dataclass(slots=True)
class RenderedMessage:
    """A message rendered for every sink.

    ``line`` is the (possibly colored) line returned to the caller, ``plain`` is
    the same line without color for the file sinks. The console templates keep
    their tokens so the console writer substitutes ``args`` itself.
    """

    level: Level
    line: str
    plain: str
    template: str
    debug_template: str
    args: tuple[Any, ...]


class Logger:
    """A namespaced logger writing to a message file, an event file and the console.

    Instances are normally obtained through :meth:`LoggerRegistry.acquire` (or
    :meth:`Logger.instance`), which guarantees one instance per namespace.
    """

    def __init__(self, config: LoggerConfig | None = None, *, registry: LoggerRegistry | None = None) -> None:
        self._lock = threading.RLock()
        self._registry = registry
        self._config: LoggerConfig | None = None
        self._colorizer = _PLAIN
        self._message_sink: FileSink | None = None
        self._event_sink: FileSink | None = None
        self._debug_channel: DebugChannel | None = None
        self._stdout = ConsoleSink("stdout")
        self._stderr = ConsoleSink("stderr")
        if config is not None:
            self.configure(config)

    @classmethod
    def instance(cls, config: LoggerConfig | Mapping[str, Any] | None = None, **overrides: Any) -> Logger:
        """Acquire the logger for a namespace from the default registry."""

        from nslog.core.logging.registry import default_registry

        return default_registry.acquire(config, **overrides)

    @property
    def config(self) -> LoggerConfig:
        if self._config is None:
            raise ConfigurationError("Logger has not been configured")
        return self._config

    @property
    def namespace(self) -> str:
        return self.config.namespace or ""

    @property
    def message_path(self) -> Path | None:
        return self._message_sink.path if self._message_sink else None

    @property
    def event_path(self) -> Path | None:
        return self._event_sink.path if self._event_sink else None

    def configure(self, config: LoggerConfig) -> None:
        """Apply ``config``, creating the log directory and files it names.

        Raises:
            SinkSetupError: the directory or a file could not be created.
        """

        message_sink: FileSink | None = None
        event_sink: FileSink | None = None

        if not config.nofile:
            directory = Path(config.directory)
            if not directory.is_dir():
                try:
                    directory.mkdir(parents=True, exist_ok=True)
                except OSError as exc:
                    raise SinkSetupError(f"Unable to create log directory '{directory}': {exc}", directory) from exc
                logger.debug("Created log directory {}", directory)

            if config.message_file is not None:
                message_sink = FileSink(directory / config.message_file)
                message_sink.prepare()
            if config.event_file is not None:
                event_sink = FileSink(directory / config.event_file)
                event_sink.prepare()

        colorizer = Colorizer(enabled=config.colors)
        with self._lock:
            self._config = config
            self._colorizer = colorizer
            self._message_sink = message_sink
            self._event_sink = event_sink
            self._debug_channel = DebugChannel(config.namespace or "", colorizer)

    def debug(self, message: Any = "", *args: Any) -> str:
        return self.log(Level.DEBUG, message, *args)

    def info(self, message: Any = "", *args: Any) -> str:
        return self.log(Level.INFO, message, *args)

    def warn(self, message: Any = "", *args: Any) -> str:
        return self.log(Level.WARN, message, *args)

    warning = warn

    def error(self, message: Any = "", *args: Any) -> str:
        return self.log(Level.ERROR, message, *args)

    def event(self, event_id: Any, message: Any = "", *args: Any) -> str:
        """Log an EVENT; ``event_id`` of ``None`` is shown as ``NULL_EVENT_ID``."""
        return self.log(Level.EVENT, message, *args, event_id=event_id)

    def log(self, level: Level | str, message: Any = "", *args: Any, event_id: Any = None) -> str:
        """Render ``message`` at ``level``, write it to the sinks and return the line.

        Returns an empty string when the logger is disabled or when a DEBUG
        message arrives with debugging switched off.
        """

        level = Level.parse(level)
        with self._lock:
            rendered = self._render(str(message), level, args, event_id)
            if rendered is None:
                return ""
            self.emit(rendered)
            return rendered.line

    def render(self, message: Any, level: Level | str, args: tuple[Any, ...] = (), event_id: Any = None) -> str:
        """Render a line without writing it anywhere."""

        with self._lock:
            rendered = self._render(str(message), Level.parse(level), tuple(args), event_id)
        return rendered.line if rendered else ""

    def _render(self, body: str, level: Level, args: tuple[Any, ...], event_id: Any) -> RenderedMessage | None:
        config = self.config
        if not config.enabled:
            return None
        if level is Level.DEBUG and not config.debug:
            return None

        if config.strict:
            expected = count_arguments(body)
            if expected != len(args):
                raise ParameterCountError(body, expected, len(args))

        stamp = timestamp(config.date_format)
        namespace = (config.namespace or "").strip()
        if config.ns_width > 0:
            namespace = namespace[: config.ns_width].ljust(config.ns_width)

        if level is Level.EVENT:
            ident = NULL_EVENT_ID if event_id is None else str(event_id)
        else:
            ident = None

        template = self._assemble(self._colorizer, level, stamp, namespace, body, ident)
        plain_template = self._assemble(_PLAIN, level, stamp, namespace, body, ident) if config.colors else template

        line = substitute(rewrite_kinds(template, FILE_KIND_MAP), args, strict=config.strict)
        plain = line if plain_template is template else substitute(rewrite_kinds(plain_template, FILE_KIND_MAP), args)

        debug_template = f"{escape(self._colorizer(stamp, TIMESTAMP_STYLE))} ~> {body}"
        return RenderedMessage(level, line, plain, template, debug_template, args)

    @staticmethod
    def _assemble(
        colorize: Colorizer, level: Level, stamp: str, namespace: str, body: str, ident: str | None
    ) -> str:
        prefix = (
            f"[{colorize(level.tag, level.style)}] {colorize(stamp, TIMESTAMP_STYLE)} "
            f"[{colorize(namespace, NAMESPACE_STYLE)}] ~> "
        )
        if ident is not None:
            prefix += f"{colorize(ident, EVENT_ID_STYLE)} => "
        return escape(prefix) + body

    def emit(self, rendered: RenderedMessage) -> None:
        """Write a rendered message to the event file, the message file and the console."""

        if rendered.level is Level.EVENT and self._event_sink is not None:
            self._event_sink.write(rendered.plain)
        if self._message_sink is not None:
            self._message_sink.write(rendered.plain)

        config = self.config
        if not config.to_console:
            return
        if rendered.level is Level.DEBUG and not config.use_console_debug and self._debug_channel is not None:
            self._debug_channel.write(substitute(rendered.debug_template, rendered.args))
            return

        console_line = substitute(rewrite_kinds(rendered.template, CONSOLE_KIND_MAP), rendered.args)
        if rendered.level is Level.ERROR:
            self._stderr.write(console_line)
        else:
            self._stdout.write(console_line)

    def __str__(self) -> str:
        namespaces = self._registry.namespaces() if self._registry is not None else [self.namespace]
        config = self._config.model_dump_json(indent=4, by_alias=True) if self._config else "{}"
        return "\n".join([config, "\ninstances:", *(f" - {ns}" for ns in namespaces), ""])

    def __repr__(self) -> str:
        namespace = self._config.namespace if self._config else None
        return f"Logger(namespace={namespace!r})"


__all__ = ["Logger", "NULL_EVENT_ID", "RenderedMessage"]
