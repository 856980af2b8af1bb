"""Exception handling module."""

from nslog.core.exceptions.base import (
    ConfigurationError,
    NSLogError,
    ParameterCountError,
    SinkSetupError,
    TokenFormatError,
)
from nslog.core.exceptions.codes import ErrorCode

__all__ = [
    "NSLogError",
    "ConfigurationError",
    "SinkSetupError",
    "ParameterCountError",
    "TokenFormatError",
    "ErrorCode",
]
