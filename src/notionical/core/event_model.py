"""Event data model for calendar events."""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from notionical.config.constants import UID_DOMAIN


@dataclass(frozen=True)
class CalendarEvent:
    """Normalized calendar event built from one Notion page.

    ``start`` and ``end`` are aware UTC datetimes. For all-day events
    ``end`` is exclusive: one day past the last included day.
    """

    uid: str
    summary: str
    start: datetime
    end: datetime
    all_day: bool
    url: str
    location: Optional[str] = None

    @staticmethod
    def uid_for_page(page_id: str) -> str:
        """Build a stable event UID from a Notion page id."""
        return f"{page_id}@{UID_DOMAIN}"

    def to_dict(self) -> Dict:
        """Convert to a JSON-friendly dictionary.

        Returns:
            Dictionary representation of the event.
        """
        result = {
            "uid": self.uid,
            "summary": self.summary,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "all_day": self.all_day,
            "url": self.url,
        }
        if self.location is not None:
            result["location"] = self.location
        return result
