"""Date and time parsing for Notion date values."""

from datetime import datetime
from typing import Optional

import pytz
from dateutil import parser as dateutil_parser

from notionical.config.constants import DATE_ONLY_LENGTH
from notionical.exceptions.errors import RecordDataError


def is_date_only(value: str) -> bool:
    """Return True for a date-only string such as ``2024-03-01``."""
    return len(value) == DATE_ONLY_LENGTH


def parse_notion_datetime(value: str, time_zone: Optional[str] = None) -> datetime:
    """Parse a Notion date or date-time string into an aware UTC datetime.

    Date-only strings are midnight UTC of that day. Strings carrying an
    offset are converted to UTC. Naive date-times are localized in
    ``time_zone`` when Notion supplies one, otherwise taken as UTC.

    Args:
        value: ISO 8601 date or date-time string.
        time_zone: Optional IANA zone name attached to the Notion date.

    Returns:
        A timezone-aware datetime in UTC.

    Raises:
        RecordDataError: If the string or the zone cannot be interpreted.
    """
    if not isinstance(value, str):
        raise RecordDataError(f"date value must be a string, got {type(value).__name__}")

    try:
        parsed = dateutil_parser.isoparse(value)
    except (ValueError, OverflowError) as exc:
        raise RecordDataError(f"unparsable date {value!r}: {exc}") from exc

    if parsed.tzinfo is not None:
        return parsed.astimezone(pytz.utc)

    if time_zone and not is_date_only(value):
        return attach_timezone(time_zone, parsed).astimezone(pytz.utc)

    return pytz.utc.localize(parsed)


def attach_timezone(tz_name: str, naive_dt: datetime) -> datetime:
    """Return ``naive_dt`` localized in ``tz_name`` using DST rules.

    Raises:
        RecordDataError: If the zone name is unknown.
    """
    try:
        tzobj = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError as exc:
        raise RecordDataError(f"unknown time zone {tz_name!r}") from exc

    try:
        return tzobj.localize(naive_dt, is_dst=None)
    except (pytz.AmbiguousTimeError, pytz.NonExistentTimeError):
        # Fall back to is_dst=True on ambiguity (earlier)
        return tzobj.localize(naive_dt, is_dst=True)
