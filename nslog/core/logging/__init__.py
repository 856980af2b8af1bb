"""Namespaced loggers writing to message/event files and the console."""

from nslog.core.logging.config import LoggerConfig, resolve_config
from nslog.core.logging.levels import Level
from nslog.core.logging.logger import NULL_EVENT_ID, Logger, RenderedMessage
from nslog.core.logging.registry import LoggerRegistry, default_registry, instance
from nslog.core.logging.sinks import ConsoleSink, DebugChannel, FileSink, debug_enabled

__all__ = [
    "ConsoleSink",
    "DebugChannel",
    "FileSink",
    "Level",
    "Logger",
    "LoggerConfig",
    "LoggerRegistry",
    "NULL_EVENT_ID",
    "RenderedMessage",
    "debug_enabled",
    "default_registry",
    "instance",
    "resolve_config",
]
