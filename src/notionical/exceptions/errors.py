"""Exception hierarchy for notionical."""

from typing import Optional


class NotionicalError(Exception):
    """Base class for all notionical errors."""


class ConfigurationError(NotionicalError):
    """Raised when the deployment settings are missing or invalid."""

    def __init__(self, variable: str, reason: str):
        self.variable = variable
        self.reason = reason
        super().__init__(f"Invalid configuration for {variable}: {reason}")


class RecordDataError(NotionicalError):
    """Raised when a record passes the shape checks but its data is unusable.

    Examples are an empty title, a property of an unexpected type, or a date
    string that cannot be parsed.
    """

    def __init__(self, reason: str, page_id: Optional[str] = None):
        self.reason = reason
        self.page_id = page_id
        where = f" in page {page_id}" if page_id else ""
        super().__init__(f"Unusable record data{where}: {reason}")

    def for_page(self, page_id: Optional[str]) -> "RecordDataError":
        """Return a copy of this error bound to ``page_id``."""
        return RecordDataError(self.reason, page_id=page_id)


class RecordStoreError(NotionicalError):
    """Raised when querying the record store fails."""

    def __init__(self, database_id: str, message: str):
        self.database_id = database_id
        super().__init__(f"Failed to query database {database_id}: {message}")
