"""Core business logic for notionical."""

from notionical.core.auth import authenticate, tokens_match
from notionical.core.event_mapper import DataErrorPolicy, map_record, map_records
from notionical.core.event_model import CalendarEvent
from notionical.core.fields import FieldNames
from notionical.core.ics_builder import build_calendar, render_calendar
from notionical.core.record_store import NotionRecordStore, RecordStore

__all__ = [
    "authenticate",
    "tokens_match",
    "CalendarEvent",
    "DataErrorPolicy",
    "FieldNames",
    "map_record",
    "map_records",
    "build_calendar",
    "render_calendar",
    "NotionRecordStore",
    "RecordStore",
]
