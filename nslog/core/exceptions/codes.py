"""Error codes shared by nslog exceptions."""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable identifiers attached to every :class:`NSLogError`."""

    GENERAL_ERROR = "GENERAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    SINK_SETUP_ERROR = "SINK_SETUP_ERROR"
    PARAMETER_COUNT_ERROR = "PARAMETER_COUNT_ERROR"
    TOKEN_FORMAT_ERROR = "TOKEN_FORMAT_ERROR"
