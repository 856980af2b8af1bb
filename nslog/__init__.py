"""nslog - namespaced loggers for message, event and console output.

Each namespace owns one configurable :class:`Logger`. A logger renders every
message into a single line::

    [INFO ] 2024-01-01 @ 12:00:00:000 [svc  ] ~> hello world

appends it to ``<directory>/messages.log`` (EVENT messages also to
``<directory>/events.log``), echoes it to the console and returns it.

Examples:
    >>> import nslog
    >>> log = nslog.instance(namespace="svc", directory="/tmp/x", ns_width=5)
    >>> log.info("hello %s", "world")  # doctest: +SKIP
"""

from loguru import logger as _diagnostics

from nslog.core.exceptions import (
    ConfigurationError,
    ErrorCode,
    NSLogError,
    ParameterCountError,
    SinkSetupError,
    TokenFormatError,
)
from nslog.core.logging import (
    NULL_EVENT_ID,
    Level,
    Logger,
    LoggerConfig,
    LoggerRegistry,
    default_registry,
    instance,
    resolve_config,
)

# Internal diagnostics stay silent until the application calls logger.enable("nslog").
_diagnostics.disable("nslog")

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ErrorCode",
    "Level",
    "Logger",
    "LoggerConfig",
    "LoggerRegistry",
    "NSLogError",
    "NULL_EVENT_ID",
    "ParameterCountError",
    "SinkSetupError",
    "TokenFormatError",
    "default_registry",
    "instance",
    "resolve_config",
    "__version__",
]
