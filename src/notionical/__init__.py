"""
notionical - Notion database to iCalendar feed

A small authenticated web service that renders the rows of a Notion
database as a subscribable iCalendar feed.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from notionical.config.settings import Settings, load_settings
from notionical.exceptions.errors import (
    ConfigurationError,
    NotionicalError,
    RecordDataError,
    RecordStoreError,
)
from notionical.core.auth import authenticate
from notionical.core.event_mapper import DataErrorPolicy, map_records
from notionical.core.event_model import CalendarEvent
from notionical.core.fields import FieldNames
from notionical.core.ics_builder import render_calendar

__all__ = [
    # Version
    "__version__",
    # Config
    "Settings",
    "load_settings",
    # Exceptions
    "ConfigurationError",
    "NotionicalError",
    "RecordDataError",
    "RecordStoreError",
    # Core
    "authenticate",
    "CalendarEvent",
    "DataErrorPolicy",
    "FieldNames",
    "map_records",
    "render_calendar",
]
