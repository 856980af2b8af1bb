"""Tests for configuration resolution."""

from __future__ import annotations

import uuid
from pathlib import Path

import pytest

from nslog.core.exceptions import ConfigurationError, ErrorCode
from nslog.core.logging import LoggerConfig, resolve_config


class TestDefaults:
    def test_documented_defaults(self):
        config = resolve_config()

        assert config.enabled is True
        assert config.colors is True
        assert config.debug is False
        assert config.to_console is True
        assert config.directory == Path("./logs")
        assert config.message_file == "messages.log"
        assert config.event_file == "events.log"
        assert config.namespace == "default"
        assert config.ns_width == -1
        assert config.date_format == "%Y-%m-%d @ %H:%M:%S:%L"
        assert config.strict is False


class TestOverrides:
    def test_camel_case_aliases(self):
        config = resolve_config({"messageFile": None, "nsWidth": 7, "toConsole": False, "dateFormat": "%H"})

        assert config.message_file is None
        assert config.ns_width == 7
        assert config.to_console is False
        assert config.date_format == "%H"

    def test_explicit_none_differs_from_absent(self):
        config = resolve_config({"event_file": None})

        assert config.event_file is None
        assert config.message_file == "messages.log"

    def test_keywords_win_over_mapping(self):
        assert resolve_config({"namespace": "a"}, namespace="b").namespace == "b"
        assert resolve_config({"nsWidth": 3}, ns_width=4).ns_width == 4

    def test_null_namespace_generates_identifier(self):
        first = resolve_config(namespace=None)
        second = resolve_config(namespace=None)

        assert uuid.UUID(first.namespace)
        assert first.namespace != second.namespace

    def test_config_instance_is_accepted(self):
        original = LoggerConfig(namespace="given", colors=False)

        config = resolve_config(original, ns_width=2)

        assert config.namespace == "given"
        assert config.colors is False
        assert config.ns_width == 2

    def test_directory_string_becomes_path(self):
        assert resolve_config(directory="/tmp/x").directory == Path("/tmp/x")


class TestInvalid:
    def test_unknown_option(self):
        with pytest.raises(ConfigurationError) as excinfo:
            resolve_config({"colour": True})

        assert excinfo.value.error_code == ErrorCode.CONFIGURATION_ERROR
        assert excinfo.value.details["errors"]

    def test_wrong_type(self):
        with pytest.raises(ConfigurationError):
            resolve_config(ns_width="wide")
