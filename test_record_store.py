import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from notionical.core.record_store import NotionRecordStore
from notionical.exceptions.errors import RecordStoreError


def _store_with(query: AsyncMock) -> NotionRecordStore:
    client = MagicMock()
    client.databases.query = query
    client.aclose = AsyncMock()
    return NotionRecordStore("secret", client=client)


def test_query_returns_results(make_page) -> None:
    pages = [make_page(page_id="a"), make_page(page_id="b")]
    query = AsyncMock(return_value={"object": "list", "results": pages, "has_more": False})
    store = _store_with(query)

    results = asyncio.run(store.query("db-123"))

    assert results == pages
    query.assert_awaited_once_with(database_id="db-123")


def test_query_serves_first_page_only(make_page) -> None:
    query = AsyncMock(
        return_value={"results": [make_page()], "has_more": True, "next_cursor": "abc"}
    )
    store = _store_with(query)

    assert len(asyncio.run(store.query("db-123"))) == 1
    assert query.await_count == 1


def test_transport_errors_are_wrapped() -> None:
    store = _store_with(AsyncMock(side_effect=httpx.ConnectError("boom")))

    with pytest.raises(RecordStoreError) as excinfo:
        asyncio.run(store.query("db-123"))

    assert excinfo.value.database_id == "db-123"
    assert "boom" in str(excinfo.value)


def test_aclose_closes_client() -> None:
    store = _store_with(AsyncMock())
    asyncio.run(store.aclose())
    store.client.aclose.assert_awaited_once()
