"""Shared fixtures: Notion page objects and settings."""

from typing import Any, Dict, Optional

import pytest

from notionical.config.settings import Settings
from notionical.core.fields import FieldNames

FIELD_NAMES = FieldNames(
    title="Name",
    category="Category",
    datetime="When",
    location="Place",
)


def _runs(text: Optional[str]) -> list:
    if text is None:
        return []
    return [{"type": "text", "text": {"content": text}, "plain_text": text}]


def build_page(
    page_id: str = "page-1",
    title: Optional[str] = "Standup",
    category: Optional[str] = "Work",
    start: Optional[str] = "2024-03-01T09:00:00.000+00:00",
    end: Optional[str] = None,
    time_zone: Optional[str] = None,
    location: Optional[str] = None,
) -> Dict[str, Any]:
    date = None if start is None else {"start": start, "end": end, "time_zone": time_zone}
    return {
        "object": "page",
        "id": page_id,
        "url": f"https://www.notion.so/{page_id}",
        "properties": {
            "Name": {"id": "title", "type": "title", "title": _runs(title)},
            "Category": {
                "id": "cat",
                "type": "select",
                "select": None if category is None else {"id": "opt", "name": category, "color": "blue"},
            },
            "When": {"id": "when", "type": "date", "date": date},
            "Place": {"id": "loc", "type": "rich_text", "rich_text": _runs(location)},
        },
    }


@pytest.fixture
def field_names() -> FieldNames:
    return FIELD_NAMES


@pytest.fixture
def make_page():
    return build_page


@pytest.fixture
def settings() -> Settings:
    return Settings(
        access_token="s3cret-token",
        notion_secret="secret_notion_integration",
        database_id="db-123",
        calendar_name="Team Calendar",
        field_names=FIELD_NAMES,
        category_fallback="Misc",
    )
