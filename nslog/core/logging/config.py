"""Logger configuration model and resolution of caller overrides."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from nslog.core.exceptions import ConfigurationError
from nslog.core.format.timestamp import DEFAULT_DATE_FORMAT


class LoggerConfig(BaseModel):
    """Per-instance logger configuration.

    Fields accept their snake_case names or camelCase aliases (``messageFile``,
    ``nsWidth`` ...). ``message_file`` / ``event_file`` set to ``None`` disable
    the corresponding file sink; ``namespace`` set to ``None`` is replaced by a
    generated identifier during :func:`resolve_config`.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    enabled: bool = True
    colors: bool = True
    debug: bool = False
    to_console: bool = True
    directory: Path = Path("./logs")
    message_file: str | None = "messages.log"
    event_file: str | None = "events.log"
    namespace: str | None = "default"
    ns_width: int = -1
    date_format: str = DEFAULT_DATE_FORMAT
    nofile: bool = False
    use_console_debug: bool = False
    strict: bool = False


_ALIAS_TO_FIELD = {
    field.alias: name for name, field in LoggerConfig.model_fields.items() if field.alias and field.alias != name
}


def _normalize_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    return {_ALIAS_TO_FIELD.get(key, key): value for key, value in data.items()}


def resolve_config(overrides: LoggerConfig | Mapping[str, Any] | None = None, **kwargs: Any) -> LoggerConfig:
    """Merge ``overrides`` and ``kwargs`` over the defaults.

    Keyword arguments win over the mapping. Explicit ``None`` values are kept,
    so ``message_file=None`` disables the sink while an absent key keeps the
    default file name.
    """

    if isinstance(overrides, LoggerConfig):
        data = overrides.model_dump()
    else:
        data = _normalize_keys(overrides or {})
    data.update(_normalize_keys(kwargs))

    try:
        config = LoggerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid logger configuration",
            details={"errors": exc.errors(include_url=False, include_context=False)},
        ) from exc

    if config.namespace is None:
        config = config.model_copy(update={"namespace": str(uuid4())})
    return config


__all__ = ["LoggerConfig", "resolve_config"]
