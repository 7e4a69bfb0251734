"""Backlog timestamp parsing"""
import re
from datetime import datetime, timezone
from typing import Any, Optional

# Backlog renders timestamps as e.g. "2013/07/08T10:24:28Z", always UTC.
_BACKLOG_DATE_RE = re.compile(
    r"(?P<year>[0-9]{4})/(?P<month>[0-9]{2})/(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})Z"
)


def parse_backlog_date(value: Any) -> Optional[datetime]:
    """Parse a Backlog timestamp into an aware UTC datetime, or None if it doesn't match"""
    if not isinstance(value, str):
        return None
    m = _BACKLOG_DATE_RE.fullmatch(value)
    if not m:
        return None
    try:
        return datetime(
            int(m.group("year")),
            int(m.group("month")),
            int(m.group("day")),
            int(m.group("hour")),
            int(m.group("minute")),
            int(m.group("second")),
            tzinfo=timezone.utc,
        )
    except ValueError:
        # Pattern matched but fields out of range (month 13, Feb 30, ...)
        return None


def format_backlog_date(dt: datetime) -> str:
    """Render a datetime in Backlog's format (naive values are taken as UTC)"""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y/%m/%dT%H:%M:%SZ")
