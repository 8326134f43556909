"""Deployment settings, read once at process start."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import dotenv_values

from notionical.config.constants import (
    DEFAULT_CALENDAR_NAME,
    DEFAULT_CATEGORY_FALLBACK,
    DEFAULT_DATA_ERROR_POLICY,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_PROPERTY_CATEGORY,
    DEFAULT_PROPERTY_DATETIME,
    DEFAULT_PROPERTY_LOCATION,
    DEFAULT_PROPERTY_TITLE,
    ENV_ACCESS_TOKEN,
    ENV_CALENDAR_NAME,
    ENV_CATEGORY_FALLBACK,
    ENV_DATA_ERROR_POLICY,
    ENV_HOST,
    ENV_LOG_LEVEL,
    ENV_NOTION_CALENDAR_ID,
    ENV_NOTION_SECRET,
    ENV_PORT,
    ENV_PROPERTY_CATEGORY,
    ENV_PROPERTY_DATETIME,
    ENV_PROPERTY_LOCATION,
    ENV_PROPERTY_TITLE,
    REQUIRED_ENV_VARS,
)
from notionical.core.event_mapper import DataErrorPolicy
from notionical.core.fields import FieldNames
from notionical.exceptions.errors import ConfigurationError
from notionical.utils.masking import mask_secret

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Immutable per-deployment configuration passed into every component."""

    access_token: str = field(repr=False)
    notion_secret: str = field(repr=False)
    database_id: str
    calendar_name: str = DEFAULT_CALENDAR_NAME
    field_names: FieldNames = field(default_factory=lambda: FieldNames(
        title=DEFAULT_PROPERTY_TITLE,
        category=DEFAULT_PROPERTY_CATEGORY,
        datetime=DEFAULT_PROPERTY_DATETIME,
        location=DEFAULT_PROPERTY_LOCATION,
    ))
    category_fallback: str = DEFAULT_CATEGORY_FALLBACK
    data_error_policy: DataErrorPolicy = DataErrorPolicy.SKIP
    log_level: str = DEFAULT_LOG_LEVEL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def describe(self) -> str:
        """Return a log-safe one-line summary of the settings."""
        return (
            f"database={self.database_id} calendar={self.calendar_name!r} "
            f"token={mask_secret(self.access_token)} "
            f"secret={mask_secret(self.notion_secret)} "
            f"policy={self.data_error_policy.value}"
        )


def load_settings(
    env_file: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build Settings from the environment and an optional .env file.

    Values in ``environ`` (``os.environ`` by default) take precedence over
    the .env file, which is parsed without touching ``os.environ``.

    Args:
        env_file: Optional path to a .env file.
        environ: Mapping to read variables from instead of ``os.environ``.

    Returns:
        A validated Settings instance.

    Raises:
        ConfigurationError: If a required value is missing or a value is invalid.
    """
    values = {}
    if env_file is not None:
        path = Path(env_file)
        if not path.exists():
            raise ConfigurationError(str(path), "env file does not exist")
        values.update({k: v for k, v in dotenv_values(path).items() if v is not None})
    values.update(os.environ if environ is None else environ)

    for name in REQUIRED_ENV_VARS:
        if not _clean(values.get(name)):
            raise ConfigurationError(name, "required value is missing")

    field_names = FieldNames(
        title=_non_empty(values, ENV_PROPERTY_TITLE, DEFAULT_PROPERTY_TITLE),
        category=_non_empty(values, ENV_PROPERTY_CATEGORY, DEFAULT_PROPERTY_CATEGORY),
        datetime=_non_empty(values, ENV_PROPERTY_DATETIME, DEFAULT_PROPERTY_DATETIME),
        location=_non_empty(values, ENV_PROPERTY_LOCATION, DEFAULT_PROPERTY_LOCATION),
    )

    settings = Settings(
        access_token=_clean(values[ENV_ACCESS_TOKEN]),
        notion_secret=_clean(values[ENV_NOTION_SECRET]),
        database_id=_clean(values[ENV_NOTION_CALENDAR_ID]),
        calendar_name=_non_empty(values, ENV_CALENDAR_NAME, DEFAULT_CALENDAR_NAME),
        field_names=field_names,
        # The fallback label may legitimately be empty ("[] Title")
        category_fallback=values.get(ENV_CATEGORY_FALLBACK, DEFAULT_CATEGORY_FALLBACK),
        data_error_policy=_parse_policy(values.get(ENV_DATA_ERROR_POLICY)),
        log_level=_parse_log_level(_non_empty(values, ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)),
        host=_non_empty(values, ENV_HOST, DEFAULT_HOST),
        port=_parse_port(values.get(ENV_PORT)),
    )
    logger.debug("Loaded settings: %s", settings.describe())
    return settings


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def _non_empty(values: Mapping[str, str], name: str, default: str) -> str:
    if name not in values:
        return default
    value = _clean(values[name])
    if not value:
        raise ConfigurationError(name, "must not be empty")
    return value


def _parse_policy(raw: Optional[str]) -> DataErrorPolicy:
    value = _clean(raw).lower() or DEFAULT_DATA_ERROR_POLICY
    try:
        return DataErrorPolicy(value)
    except ValueError:
        allowed = ", ".join(policy.value for policy in DataErrorPolicy)
        raise ConfigurationError(
            ENV_DATA_ERROR_POLICY, f"expected one of {allowed}, got {raw!r}"
        ) from None


def _parse_log_level(raw: str) -> str:
    level = raw.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(ENV_LOG_LEVEL, f"unknown level {raw!r}")
    return level


def _parse_port(raw: Optional[str]) -> int:
    if not _clean(raw):
        return DEFAULT_PORT
    try:
        port = int(_clean(raw))
    except ValueError:
        raise ConfigurationError(ENV_PORT, f"not an integer: {raw!r}") from None
    if not 0 < port < 65536:
        raise ConfigurationError(ENV_PORT, f"out of range: {port}")
    return port
