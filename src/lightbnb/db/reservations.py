"""Reservation store: a guest's completed stays."""

from __future__ import annotations

from collections.abc import Callable, Coroutine
from datetime import UTC, date, datetime
from typing import Any

import aiosqlite

from lightbnb.db.query_builder import DEFAULT_RESULT_LIMIT
from lightbnb.db.row_mappers import row_to_reservation
from lightbnb.logging import get_logger
from lightbnb.models import Reservation

logger = get_logger(__name__)


class ReservationRepository:
    """Read-only queries over reservations joined with their properties."""

    def __init__(
        self,
        get_connection: Callable[[], Coroutine[Any, Any, aiosqlite.Connection]],
    ) -> None:
        self._get_connection = get_connection

    async def get_all_reservations(
        self,
        guest_id: int,
        limit: int = DEFAULT_RESULT_LIMIT,
        *,
        today: date | None = None,
    ) -> list[Reservation]:
        """Get a guest's past reservations, earliest first.

        Only reservations whose end date is strictly before ``today`` are
        returned. Store errors propagate to the caller.

        Args:
            guest_id: The guest's user id.
            limit: Maximum reservations to return.
            today: Reference date (defaults to the current UTC date).

        Returns:
            Reservations with their property and its average rating.
        """
        if today is None:
            today = datetime.now(UTC).date()
        conn = await self._get_connection()
        cursor = await conn.execute(
            """
            SELECT reservations.id AS reservation_id,
                   reservations.guest_id,
                   reservations.start_date,
                   reservations.end_date,
                   properties.*,
                   avg(property_reviews.rating) AS average_rating
            FROM properties
            JOIN reservations ON properties.id = reservations.property_id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = ? AND ? > reservations.end_date
            GROUP BY reservations.id, properties.id
            ORDER BY reservations.start_date
            LIMIT ?
            """,
            (guest_id, today.isoformat(), limit),
        )
        rows = await cursor.fetchall()
        logger.debug("reservations_loaded", guest_id=guest_id, count=len(rows))
        return [row_to_reservation(row) for row in rows]
