"""Configuration module for notionical.

Settings live in ``notionical.config.settings``; this package namespace only
re-exports constants so core modules can import them without pulling in the
settings loader.
"""

from notionical.config.constants import (
    FEED_CONTENT_TYPE,
    FEED_FILENAME,
    ICS_PRODID,
    TOKEN_QUERY_PARAM,
)

__all__ = [
    "FEED_CONTENT_TYPE",
    "FEED_FILENAME",
    "ICS_PRODID",
    "TOKEN_QUERY_PARAM",
]
