"""ICS feed building from mapped calendar events."""

import logging
from datetime import datetime
from typing import Iterable, Optional

import pytz
from icalendar import Calendar, Event, vText

from notionical.config.constants import (
    ICS_CALSCALE,
    ICS_METHOD,
    ICS_PRODID,
    ICS_VERSION,
)
from notionical.core.event_model import CalendarEvent

logger = logging.getLogger(__name__)


def build_calendar(
    events: Iterable[CalendarEvent],
    name: str,
    stamp: Optional[datetime] = None,
) -> Calendar:
    """Build an icalendar Calendar holding one VEVENT per event.

    Args:
        events: Events in the order they should appear in the feed.
        name: Calendar display name.
        stamp: DTSTAMP for every event (default: now, UTC).

    Returns:
        The populated Calendar object.
    """
    stamp = stamp or datetime.now(pytz.utc)

    cal = _create_ics_calendar(name)
    count = 0
    for event in events:
        cal.add_component(_create_ics_event(event, stamp))
        count += 1

    logger.debug("Built calendar %r with %d event(s)", name, count)
    return cal


def render_calendar(
    events: Iterable[CalendarEvent],
    name: str,
    stamp: Optional[datetime] = None,
) -> str:
    """Render events as an iCalendar document string.

    Returns:
        ICS content string with CRLF line endings.
    """
    return _format_ics_output(build_calendar(events, name, stamp))


def _create_ics_calendar(name: str) -> Calendar:
    """Create a new ICS calendar with standard headers.

    Args:
        name: Calendar display name.

    Returns:
        A new Calendar object with required headers.
    """
    cal = Calendar()
    cal.add("PRODID", ICS_PRODID)
    cal.add("VERSION", ICS_VERSION)
    cal.add("CALSCALE", ICS_CALSCALE)
    cal.add("METHOD", ICS_METHOD)
    cal.add("NAME", vText(name))
    cal.add("X-WR-CALNAME", vText(name))
    return cal


def _create_ics_event(event: CalendarEvent, stamp: datetime) -> Event:
    """Create an ICS event component.

    Args:
        event: The mapped calendar event.
        stamp: Value for DTSTAMP.

    Returns:
        An Event component ready to add to a calendar.
    """
    ve = Event()
    ve.add("UID", event.uid)
    ve.add("DTSTAMP", stamp)

    if event.all_day:
        # date values serialize as DTSTART;VALUE=DATE
        ve.add("DTSTART", event.start.date())
        ve.add("DTEND", event.end.date())
    else:
        ve.add("DTSTART", event.start)
        ve.add("DTEND", event.end)

    ve.add("SUMMARY", vText(event.summary))
    ve.add("URL", event.url)

    if event.location:
        ve.add("LOCATION", vText(event.location))

    return ve


def _format_ics_output(cal: Calendar) -> str:
    """Format calendar to ICS string with proper line endings.

    Args:
        cal: The Calendar object to format.

    Returns:
        ICS content string with CRLF line endings.
    """
    raw_ical = cal.to_ical()
    decoded_ical = raw_ical.decode("utf-8", errors="replace")
    # Ensure CRLF line endings per RFC5545
    return decoded_ical.replace("\r\n", "\n").replace("\n", "\r\n")
