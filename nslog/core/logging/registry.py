"""Process-wide mapping from namespace to :class:`Logger`."""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from typing import Any

from loguru import logger

from nslog.core.logging.config import LoggerConfig, resolve_config
from nslog.core.logging.logger import Logger


class LoggerRegistry:
    """Holds at most one :class:`Logger` per namespace.

    Acquiring a namespace that is already registered reconfigures the existing
    instance in place and returns the same object. Files created by an earlier
    configuration are left where they are.
    """

    def __init__(self) -> None:
        self._instances: dict[str, Logger] = {}
        self._lock = threading.RLock()

    def acquire(self, config: LoggerConfig | Mapping[str, Any] | None = None, **overrides: Any) -> Logger:
        """Resolve ``config`` and return the configured logger for its namespace."""

        resolved = resolve_config(config, **overrides)
        namespace = resolved.namespace or ""
        with self._lock:
            instance = self._instances.get(namespace)
            if instance is None:
                instance = Logger(registry=self)
                instance.configure(resolved)
                self._instances[namespace] = instance
                logger.debug("Registered logger namespace {!r}", namespace)
            else:
                instance.configure(resolved)
                logger.debug("Reconfigured logger namespace {!r}", namespace)
        return instance

    def get(self, namespace: str) -> Logger | None:
        with self._lock:
            return self._instances.get(namespace)

    def namespaces(self) -> list[str]:
        with self._lock:
            return list(self._instances)

    def clear(self) -> None:
        """Forget every registered logger. Files on disk are untouched."""
        with self._lock:
            self._instances.clear()

    def __contains__(self, namespace: object) -> bool:
        with self._lock:
            return namespace in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)

    def __iter__(self) -> Iterator[Logger]:
        with self._lock:
            return iter(list(self._instances.values()))


default_registry = LoggerRegistry()


def instance(
    config: LoggerConfig | Mapping[str, Any] | None = None,
    *,
    registry: LoggerRegistry | None = None,
    **overrides: Any,
) -> Logger:
    """Acquire a logger from ``registry`` (the default registry when omitted)."""

    target = registry if registry is not None else default_registry
    return target.acquire(config, **overrides)


__all__ = ["LoggerRegistry", "default_registry", "instance"]
