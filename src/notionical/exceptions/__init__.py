"""Custom exceptions for notionical."""

from notionical.exceptions.errors import (
    ConfigurationError,
    NotionicalError,
    RecordDataError,
    RecordStoreError,
)

__all__ = [
    "ConfigurationError",
    "NotionicalError",
    "RecordDataError",
    "RecordStoreError",
]
