"""Notion page to calendar event mapping."""

import enum
import logging
from datetime import timedelta
from typing import Any, Dict, Iterable, List, Optional

from notion_client.helpers import is_full_page

from notionical.core.event_model import CalendarEvent
from notionical.core.fields import (
    FieldNames,
    read_category,
    read_date_range,
    read_location,
    read_title,
)
from notionical.exceptions.errors import RecordDataError
from notionical.utils.date_parsing import is_date_only, parse_notion_datetime

logger = logging.getLogger(__name__)


class DataErrorPolicy(enum.Enum):
    """What to do with a record whose data cannot be mapped."""

    SKIP = "skip"
    RAISE = "raise"


def map_records(
    records: Iterable[Dict[str, Any]],
    field_names: FieldNames,
    category_fallback: str,
    policy: DataErrorPolicy = DataErrorPolicy.SKIP,
) -> List[CalendarEvent]:
    """Map Notion pages to calendar events, preserving input order.

    Partial pages and pages without a date are dropped silently. Pages with
    unusable data (empty title, malformed date, wrong property type) are
    dropped with a warning under ``SKIP`` or abort the whole mapping under
    ``RAISE``.

    Args:
        records: Page objects as returned by a database query.
        field_names: Configured property names.
        category_fallback: Label used when no category is selected.
        policy: Handling of records with unusable data.

    Returns:
        List of CalendarEvent in input order.

    Raises:
        RecordDataError: Under ``RAISE`` policy, for the first unusable record.
    """
    events = []
    skipped = 0

    for record in records:
        try:
            event = map_record(record, field_names, category_fallback)
        except RecordDataError as exc:
            error = exc.for_page(record.get("id"))
            if policy is DataErrorPolicy.RAISE:
                raise error from exc
            logger.warning("Skipping record: %s", error)
            skipped += 1
            continue
        if event is None:
            skipped += 1
            continue
        logger.debug("Mapped page %s: %s", record.get("id"), event.to_dict())
        events.append(event)

    logger.debug("Mapped %d event(s), skipped %d record(s)", len(events), skipped)
    return events


def map_record(
    record: Dict[str, Any],
    field_names: FieldNames,
    category_fallback: str,
) -> Optional[CalendarEvent]:
    """Map a single Notion page to a CalendarEvent.

    Returns:
        The event, or None if the page is partial or has no date.

    Raises:
        RecordDataError: If the page data is unusable.
    """
    if not is_full_page(record):
        logger.debug("Skipping partial page %s", record.get("id"))
        return None

    properties = record.get("properties") or {}
    date_range = read_date_range(properties, field_names.datetime)
    if date_range is None:
        logger.debug("Skipping page %s without a date", record.get("id"))
        return None

    title = read_title(properties, field_names.title)
    category = read_category(properties, field_names.category)
    location = read_location(properties, field_names.location)

    all_day = is_date_only(date_range.start)
    start = parse_notion_datetime(date_range.start, date_range.time_zone)
    if date_range.end:
        end = parse_notion_datetime(date_range.end, date_range.time_zone)
    else:
        end = start
    if all_day:
        # Notion end dates are inclusive, iCalendar DTEND is exclusive
        end = end + timedelta(days=1)
        if end <= start:
            raise RecordDataError(
                f"date range ends before it starts ({date_range.start}..{date_range.end})"
            )
    elif end < start:
        raise RecordDataError(
            f"date range ends before it starts ({date_range.start}..{date_range.end})"
        )

    if category is None:
        category = category_fallback

    return CalendarEvent(
        uid=CalendarEvent.uid_for_page(record["id"]),
        summary=f"[{category}] {title}",
        start=start,
        end=end,
        all_day=all_day,
        url=record["url"],
        location=location,
    )
