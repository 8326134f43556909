"""Centralized constants for notionical."""

# Environment variable names
ENV_ACCESS_TOKEN = "ACCESS_TOKEN"
ENV_NOTION_SECRET = "NOTION_SECRET"
ENV_NOTION_CALENDAR_ID = "NOTION_CALENDAR_ID"
ENV_CALENDAR_NAME = "CALENDAR_NAME"
ENV_PROPERTY_TITLE = "EVENT_PROPERTY_TITLE"
ENV_PROPERTY_CATEGORY = "EVENT_PROPERTY_CATEGORY"
ENV_PROPERTY_DATETIME = "EVENT_PROPERTY_DATETIME"
ENV_PROPERTY_LOCATION = "EVENT_PROPERTY_LOCATION"
ENV_CATEGORY_FALLBACK = "CATEGORY_FALLBACK_TEXT"
ENV_DATA_ERROR_POLICY = "DATA_ERROR_POLICY"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_HOST = "HOST"
ENV_PORT = "PORT"

REQUIRED_ENV_VARS = (ENV_ACCESS_TOKEN, ENV_NOTION_SECRET, ENV_NOTION_CALENDAR_ID)

# Defaults for optional settings
DEFAULT_CALENDAR_NAME = "Notion"
DEFAULT_PROPERTY_TITLE = "Name"
DEFAULT_PROPERTY_CATEGORY = "Category"
DEFAULT_PROPERTY_DATETIME = "Date"
DEFAULT_PROPERTY_LOCATION = "Location"
DEFAULT_CATEGORY_FALLBACK = "Other"
DEFAULT_DATA_ERROR_POLICY = "skip"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8787

# ICS calendar constants
ICS_PRODID = "-//notionical//Notion Calendar Feed//EN"
ICS_VERSION = "2.0"
ICS_CALSCALE = "GREGORIAN"
ICS_METHOD = "PUBLISH"
UID_DOMAIN = "notionical"

# HTTP response constants
TOKEN_QUERY_PARAM = "token"
FEED_CONTENT_TYPE = "text/calendar"
FEED_FILENAME = "notionical.ics"
UNAUTHORIZED_BODY = "Unauthorized"

# Length of a date-only ISO string (YYYY-MM-DD)
DATE_ONLY_LENGTH = 10
