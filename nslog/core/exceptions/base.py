"""nslog core exception classes."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from nslog.core.exceptions.codes import ErrorCode


class NSLogError(Exception):
    """Base class for every error raised by nslog."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode | str = ErrorCode.GENERAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        """Initialise the error.

        Args:
            message: human readable description
            error_code: stable error identifier
            details: extra context for callers and diagnostics
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        code = self.error_code.value if isinstance(self.error_code, ErrorCode) else self.error_code
        return {"error_code": code, "message": self.message, "details": self.details}


class ConfigurationError(NSLogError):
    """Invalid logger options or an unreadable configuration file."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode | str = ErrorCode.CONFIGURATION_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, error_code, details)


class SinkSetupError(ConfigurationError):
    """The log directory or one of the log files could not be created."""

    def __init__(
        self,
        message: str,
        path: Path | str,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details["path"] = str(path)
        super().__init__(message, ErrorCode.SINK_SETUP_ERROR, super_details)
        self.path = Path(path)


class ParameterCountError(NSLogError):
    """A template's tokens do not match the number of supplied arguments."""

    def __init__(self, template: str, expected: int, actual: int):
        message = f"Expected {expected} argument(s) but received {actual} for template {template!r}"
        super().__init__(
            message,
            ErrorCode.PARAMETER_COUNT_ERROR,
            {"template": template, "expected": expected, "actual": actual},
        )
        self.template = template
        self.expected = expected
        self.actual = actual


class TokenFormatError(NSLogError):
    """An argument could not be converted for its token."""

    def __init__(self, token: str, value: Any, reason: str):
        message = f"Cannot render {value!r} with token {token!r}: {reason}"
        super().__init__(message, ErrorCode.TOKEN_FORMAT_ERROR, {"token": token, "value": repr(value)})
        self.token = token
        self.value = value
