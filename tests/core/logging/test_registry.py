"""Tests for the namespace registry."""

from __future__ import annotations

import uuid
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

import nslog
from nslog.core.format import strip_ansi
from nslog.core.logging import Logger, LoggerRegistry, default_registry, instance


class TestAcquire:
    def test_same_namespace_returns_same_instance(self, registry: LoggerRegistry, log_dir: Path):
        first = registry.acquire(directory=log_dir, namespace="shared", to_console=False)
        second = registry.acquire(directory=log_dir, namespace="shared", to_console=False)

        assert first is second
        assert len(registry) == 1
        assert first.message_path == second.message_path

    def test_reacquire_replaces_configuration(self, registry: LoggerRegistry, log_dir: Path):
        log = registry.acquire(directory=log_dir, namespace="reconfigure", to_console=False)
        assert log.config.colors is True

        again = registry.acquire(directory=log_dir, namespace="reconfigure", to_console=False, colors=False)

        assert again is log
        assert log.config.colors is False
        assert log.config.ns_width == -1

    def test_disabling_a_sink_keeps_existing_file(self, registry: LoggerRegistry, log_dir: Path):
        log = registry.acquire(directory=log_dir, namespace="sinks", to_console=False)
        registry.acquire(directory=log_dir, namespace="sinks", to_console=False, message_file=None)

        assert (log_dir / "messages.log").exists()
        assert log.message_path is None
        log.info("not written")
        assert (log_dir / "messages.log").read_text() == ""

    def test_different_namespaces_are_independent(self, registry: LoggerRegistry, tmp_path: Path):
        first = registry.acquire(directory=tmp_path / "a", namespace="a", to_console=False, colors=False)
        second = registry.acquire(directory=tmp_path / "b", namespace="b", to_console=True, colors=True)

        assert first is not second
        assert first.config.colors is False
        assert second.config.colors is True
        assert "\x1b[" not in first.info("plain")
        assert sorted(registry.namespaces()) == ["a", "b"]

    def test_null_namespace_is_generated(self, registry: LoggerRegistry, log_dir: Path):
        log = registry.acquire(directory=log_dir, namespace=None, enabled=False)

        assert log.namespace
        uuid.UUID(log.namespace)
        assert log.namespace in registry
        assert registry.get(log.namespace) is log

    def test_concurrent_acquire_creates_one_instance(self, registry: LoggerRegistry, log_dir: Path):
        def _acquire(_: int) -> Logger:
            return registry.acquire(directory=log_dir, namespace="threads", to_console=False)

        with ThreadPoolExecutor(max_workers=8) as pool:
            loggers = list(pool.map(_acquire, range(32)))

        assert len(registry) == 1
        assert all(log is loggers[0] for log in loggers)

    def test_clear_forgets_instances(self, registry: LoggerRegistry, log_dir: Path):
        log = registry.acquire(directory=log_dir, namespace="cleared", to_console=False)
        registry.clear()

        assert "cleared" not in registry
        assert registry.acquire(directory=log_dir, namespace="cleared", to_console=False) is not log
        assert list(registry)[0].namespace == "cleared"


class TestDefaultRegistry:
    def test_instance_uses_default_registry(self, log_dir: Path):
        namespace = str(uuid.uuid4())

        log = instance(directory=log_dir, namespace=namespace, to_console=False)

        assert default_registry.get(namespace) is log
        assert Logger.instance(directory=log_dir, namespace=namespace, to_console=False) is log
        assert nslog.instance({"directory": log_dir, "namespace": namespace, "toConsole": False}) is log

    def test_instance_accepts_explicit_registry(self, registry: LoggerRegistry, log_dir: Path):
        log = instance(directory=log_dir, namespace="explicit", registry=registry, to_console=False)

        assert registry.get("explicit") is log
        assert default_registry.get("explicit") is not log

    def test_no_configuration_uses_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        registry = LoggerRegistry()

        log = registry.acquire(to_console=False)

        assert log.namespace == "default"
        assert "[INFO ]" in strip_ansi(log.info("Test Message info"))
        assert (tmp_path / "logs" / "messages.log").exists()
        assert (tmp_path / "logs" / "events.log").exists()
