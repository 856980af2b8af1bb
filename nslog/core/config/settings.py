"""Configuration sources for loggers: TOML files and ``NSLOG_*`` environment variables."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from loguru import logger

from nslog.core.exceptions import ConfigurationError
from nslog.core.logging.config import LoggerConfig, resolve_config

ENV_PREFIX = "NSLOG_"

_BOOL_FIELDS = ("enabled", "colors", "debug", "to_console", "nofile", "use_console_debug", "strict")
_TEXT_FIELDS = ("directory", "namespace", "date_format")
_FILE_FIELDS = ("message_file", "event_file")
_DISABLED_VALUES = {"", "none", "null", "false"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}", details={"variable": name})


def load_config_from_env(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Read logger options from ``NSLOG_*`` environment variables.

    File sink variables set to an empty string, ``none``, ``null`` or ``false``
    disable the sink.
    """

    env = os.environ if environ is None else environ
    config: dict[str, Any] = {}

    for field in _BOOL_FIELDS:
        value = env.get(ENV_PREFIX + field.upper())
        if value is not None:
            config[field] = _parse_bool(ENV_PREFIX + field.upper(), value)

    for field in _TEXT_FIELDS:
        value = env.get(ENV_PREFIX + field.upper())
        if value is not None:
            config[field] = value

    for field in _FILE_FIELDS:
        value = env.get(ENV_PREFIX + field.upper())
        if value is not None:
            config[field] = None if value.strip().lower() in _DISABLED_VALUES else value

    ns_width = env.get(ENV_PREFIX + "NS_WIDTH")
    if ns_width is not None:
        try:
            config["ns_width"] = int(ns_width)
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid integer for {ENV_PREFIX}NS_WIDTH: {ns_width!r}", details={"variable": ENV_PREFIX + "NS_WIDTH"}
            ) from exc

    return config


class ConfigManager:
    """Loads logger options from the ``[nslog]`` table of a TOML file."""

    def __init__(self, config_path: Path | str | None = None):
        """Initialise the manager.

        Args:
            config_path: TOML file to read; defaults to ``./nslog.toml``
        """
        self.config_path = Path(config_path) if config_path is not None else Path("nslog.toml")
        self.options = self._load_options()

    def _load_options(self) -> dict[str, Any]:
        if not self.config_path.exists():
            logger.debug("No config file at {}", self.config_path)
            return {}

        try:
            with open(self.config_path, "rb") as f:
                document = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigurationError(
                f"Failed to load config from {self.config_path}: {exc}", details={"path": str(self.config_path)}
            ) from exc

        table = document.get("nslog", {})
        if not isinstance(table, dict):
            raise ConfigurationError(
                f"[nslog] in {self.config_path} must be a table", details={"path": str(self.config_path)}
            )

        options = dict(table)
        # TOML has no null; false switches a file sink off
        for key in ("message_file", "messageFile", "event_file", "eventFile"):
            if options.get(key) is False:
                options[key] = None
        return options

    def resolve(self, environ: dict[str, str] | None = None, **overrides: Any) -> LoggerConfig:
        """Layer the file, the environment and ``overrides`` (in that order) over the defaults."""

        merged: dict[str, Any] = {}
        merged.update(resolve_config(self.options).model_dump(exclude_unset=True))
        merged.update(load_config_from_env(environ))
        merged.update(overrides)
        return resolve_config(merged)


__all__ = ["ConfigManager", "ENV_PREFIX", "load_config_from_env"]
