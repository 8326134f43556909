"""FastAPI application serving the Notion calendar feed.

Usage:
    python -m notionical

or, with settings taken from the environment:
    uvicorn notionical.app:create_app_from_env --factory
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from notionical.config.constants import (
    FEED_CONTENT_TYPE,
    FEED_FILENAME,
    TOKEN_QUERY_PARAM,
    UNAUTHORIZED_BODY,
)
from notionical.config.settings import Settings, load_settings
from notionical.core.auth import authenticate
from notionical.core.event_mapper import map_records
from notionical.core.ics_builder import render_calendar
from notionical.core.record_store import NotionRecordStore, RecordStore
from notionical.exceptions.errors import RecordDataError, RecordStoreError

logger = logging.getLogger(__name__)


def create_app(settings: Settings, record_store: Optional[RecordStore] = None) -> FastAPI:
    """Create the feed application.

    Args:
        settings: Deployment settings.
        record_store: Store to query; a NotionRecordStore is created on
            startup when omitted.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_store = app.state.record_store is None
        if owns_store:
            app.state.record_store = NotionRecordStore(settings.notion_secret)
        logger.info("Serving calendar feed: %s", settings.describe())
        try:
            yield
        finally:
            if owns_store:
                await app.state.record_store.aclose()
                app.state.record_store = None

    app = FastAPI(
        title="notionical",
        description="iCalendar feed for a Notion database",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.record_store = record_store

    @app.get("/")
    async def calendar_feed(request: Request) -> Response:
        presented = request.query_params.get(TOKEN_QUERY_PARAM, "")
        if not authenticate(presented, settings.access_token):
            logger.warning("Rejected feed request from %s", _client_host(request))
            return PlainTextResponse(UNAUTHORIZED_BODY, status_code=401)

        store: RecordStore = request.app.state.record_store
        try:
            records = await store.query(settings.database_id)
        except RecordStoreError as exc:
            return PlainTextResponse(f"Bad Gateway: {exc}", status_code=502)

        try:
            events = map_records(
                records,
                settings.field_names,
                settings.category_fallback,
                settings.data_error_policy,
            )
        except RecordDataError as exc:
            logger.error("Aborting feed: %s", exc)
            return PlainTextResponse(f"Internal Server Error: {exc}", status_code=500)

        logger.info("Serving %d event(s) from %d record(s)", len(events), len(records))
        return Response(
            content=render_calendar(events, settings.calendar_name),
            headers={
                "Content-Type": FEED_CONTENT_TYPE,
                "Content-Disposition": f'attachment; filename="{FEED_FILENAME}"',
            },
        )

    return app


def create_app_from_env() -> FastAPI:
    """Application factory reading settings from the environment."""
    return create_app(load_settings())


def _client_host(request: Request) -> str:
    return request.client.host if request.client else "unknown"
