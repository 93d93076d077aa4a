"""Property search: runs the built filter query and maps the rows."""

from __future__ import annotations

from collections.abc import Callable, Coroutine, Mapping
from typing import Any

import aiosqlite

from lightbnb.db.query_builder import build_property_query
from lightbnb.db.row_mappers import row_to_property_listing
from lightbnb.filters import PropertyFilter
from lightbnb.logging import get_logger
from lightbnb.models import PropertyListing

logger = get_logger(__name__)


class PropertyQueryService:
    """Read-only property search over the ``properties`` table."""

    def __init__(
        self,
        get_connection: Callable[[], Coroutine[Any, Any, aiosqlite.Connection]],
        default_limit: int | None = None,
    ) -> None:
        self._get_connection = get_connection
        self._default_limit = default_limit

    async def get_all_properties(
        self,
        filters: PropertyFilter | Mapping[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[PropertyListing]:
        """Search properties matching every active filter, cheapest first.

        Args:
            filters: Search criteria (see PropertyFilter).
            limit: Maximum rows to return; falls back to the service default.

        Returns:
            Matching properties with their average review rating.
        """
        if limit is None:
            limit = self._default_limit
        if filters is None:
            filters = PropertyFilter()
        elif not isinstance(filters, PropertyFilter):
            filters = PropertyFilter.model_validate(dict(filters))
        query = build_property_query(filters, limit, placeholder="?")
        logger.debug(
            "property_query_built",
            sql=query.sql,
            params=query.params,
            active_filters=filters.active_count,
        )

        conn = await self._get_connection()
        cursor = await conn.execute(query.sql, query.params)
        rows = await cursor.fetchall()
        return [row_to_property_listing(row) for row in rows]
