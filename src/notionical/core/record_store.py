"""Notion database access."""

import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx
from notion_client import APIResponseError, AsyncClient
from notion_client.errors import RequestTimeoutError

from notionical.exceptions.errors import RecordStoreError

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Anything that can return the rows of a database as page objects."""

    async def query(self, database_id: str) -> List[Dict[str, Any]]:
        ...

    async def aclose(self) -> None:
        ...


class NotionRecordStore:
    """RecordStore backed by the official Notion SDK.

    Only the first page of query results is returned.
    """

    def __init__(self, secret: str, client: Optional[AsyncClient] = None):
        self.client = client or AsyncClient(auth=secret)

    async def query(self, database_id: str) -> List[Dict[str, Any]]:
        """Query a database and return its result pages.

        Args:
            database_id: Notion database id.

        Returns:
            The ``results`` list of the query response.

        Raises:
            RecordStoreError: If the Notion API call fails.
        """
        try:
            response = await self.client.databases.query(database_id=database_id)
        except APIResponseError as exc:
            logger.error("Notion API error for database %s: %s (%s)", database_id, exc, exc.code)
            raise RecordStoreError(database_id, str(exc)) from exc
        except (RequestTimeoutError, httpx.HTTPError) as exc:
            logger.error("Notion request failed for database %s: %s", database_id, exc)
            raise RecordStoreError(database_id, str(exc) or type(exc).__name__) from exc

        results = response.get("results", [])
        if response.get("has_more"):
            logger.info(
                "Database %s has more than %d rows; only the first page is served",
                database_id, len(results),
            )
        return results

    async def aclose(self) -> None:
        await self.client.aclose()
