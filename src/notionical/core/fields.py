"""Typed accessors for Notion page properties.

Each logical field role (title, category, datetime, location) is read by a
dedicated function that checks the property's declared ``type`` before
touching its payload, so a misconfigured property name or an unexpected
property type surfaces as a ``RecordDataError`` instead of a KeyError deep
inside the mapper.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from notionical.exceptions.errors import RecordDataError

Properties = Mapping[str, Dict[str, Any]]


@dataclass(frozen=True)
class FieldNames:
    """Configured Notion property name for each logical field role."""

    title: str
    category: str
    datetime: str
    location: str


@dataclass(frozen=True)
class DateRange:
    """Raw value of a Notion date property."""

    start: str
    end: Optional[str] = None
    time_zone: Optional[str] = None


def _get_property(
    properties: Properties, name: str, expected_type: str, required: bool
) -> Optional[Dict[str, Any]]:
    prop = properties.get(name)
    if prop is None:
        if required:
            raise RecordDataError(f"property {name!r} is missing")
        return None
    actual_type = prop.get("type")
    if actual_type != expected_type:
        raise RecordDataError(
            f"property {name!r} has type {actual_type!r}, expected {expected_type!r}"
        )
    return prop


def _first_plain_text(runs: Optional[List[Dict[str, Any]]]) -> Optional[str]:
    if not runs:
        return None
    return runs[0].get("plain_text")


def read_title(properties: Properties, name: str) -> str:
    """Return the plain text of the first title run.

    Raises:
        RecordDataError: If the property is missing, not a title, or empty.
    """
    prop = _get_property(properties, name, "title", required=True)
    text = _first_plain_text(prop.get("title"))
    if text is None:
        raise RecordDataError(f"title property {name!r} has no text")
    return text


def read_category(properties: Properties, name: str) -> Optional[str]:
    """Return the selected option name, or None when nothing is selected."""
    prop = _get_property(properties, name, "select", required=False)
    if prop is None:
        return None
    select = prop.get("select")
    if not select:
        return None
    return select.get("name")


def read_date_range(properties: Properties, name: str) -> Optional[DateRange]:
    """Return the date range, or None when the date or its start is empty.

    Raises:
        RecordDataError: If the property is missing, not a date, or holds
            non-string start/end values.
    """
    prop = _get_property(properties, name, "date", required=True)
    value = prop.get("date")
    if value is None:
        return None
    start = value.get("start")
    if start is None or start == "":
        return None
    end = value.get("end")
    for label, raw in (("start", start), ("end", end)):
        if raw is not None and not isinstance(raw, str):
            raise RecordDataError(
                f"date property {name!r} has a non-string {label}: {raw!r}"
            )
    return DateRange(
        start=start,
        end=end or None,
        time_zone=value.get("time_zone") or None,
    )


def read_location(properties: Properties, name: str) -> Optional[str]:
    """Return the plain text of the first rich-text run, if any."""
    prop = _get_property(properties, name, "rich_text", required=False)
    if prop is None:
        return None
    return _first_plain_text(prop.get("rich_text"))
