"""Timestamp rendering with strftime patterns plus ``%L`` milliseconds."""

from __future__ import annotations

import re
from datetime import datetime

DEFAULT_DATE_FORMAT = "%Y-%m-%d @ %H:%M:%S:%L"

_DIRECTIVE = re.compile(r"%(%|L)")


def timestamp(date_format: str = DEFAULT_DATE_FORMAT, now: datetime | None = None) -> str:
    """Render ``now`` (default: the current local time) with ``date_format``.

    ``%L`` expands to zero-padded milliseconds; every other directive is
    handled by :meth:`datetime.strftime`.
    """

    moment = now or datetime.now()
    millis = f"{moment.microsecond // 1000:03d}"

    def _expand(match: re.Match[str]) -> str:
        # keep escaped percents intact for strftime
        return "%%" if match.group(1) == "%" else millis

    return moment.strftime(_DIRECTIVE.sub(_expand, date_format))


__all__ = ["DEFAULT_DATE_FORMAT", "timestamp"]
