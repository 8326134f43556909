"""Utility functions for notionical."""

from notionical.utils.date_parsing import is_date_only, parse_notion_datetime
from notionical.utils.masking import mask_secret

__all__ = [
    "is_date_only",
    "mask_secret",
    "parse_notion_datetime",
]
