"""SQLite storage for users, properties and reservations."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import Any

import aiosqlite

from lightbnb.db.properties import PropertyQueryService
from lightbnb.db.query_builder import DEFAULT_RESULT_LIMIT
from lightbnb.db.reservations import ReservationRepository
from lightbnb.db.results import Lookup
from lightbnb.db.users import UserRepository
from lightbnb.filters import PropertyFilter
from lightbnb.logging import get_logger
from lightbnb.models import NewUser, PropertyListing, Reservation, User

logger = get_logger(__name__)

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        email TEXT NOT NULL UNIQUE,
        password TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS properties (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        owner_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
        title TEXT NOT NULL,
        description TEXT,
        thumbnail_photo_url TEXT,
        cover_photo_url TEXT,
        cost_per_night INTEGER NOT NULL DEFAULT 0,
        parking_spaces INTEGER NOT NULL DEFAULT 0,
        number_of_bathrooms INTEGER NOT NULL DEFAULT 0,
        number_of_bedrooms INTEGER NOT NULL DEFAULT 0,
        country TEXT NOT NULL,
        street TEXT NOT NULL,
        city TEXT NOT NULL,
        province TEXT NOT NULL,
        post_code TEXT NOT NULL,
        active INTEGER NOT NULL DEFAULT 1
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS reservations (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        start_date TEXT NOT NULL,
        end_date TEXT NOT NULL,
        property_id INTEGER NOT NULL REFERENCES properties(id) ON DELETE CASCADE,
        guest_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS property_reviews (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        guest_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
        property_id INTEGER NOT NULL REFERENCES properties(id) ON DELETE CASCADE,
        reservation_id INTEGER NOT NULL REFERENCES reservations(id) ON DELETE CASCADE,
        rating INTEGER NOT NULL DEFAULT 0,
        message TEXT
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_properties_city ON properties(city)",
    "CREATE INDEX IF NOT EXISTS idx_properties_owner ON properties(owner_id)",
    "CREATE INDEX IF NOT EXISTS idx_reservations_guest ON reservations(guest_id)",
    "CREATE INDEX IF NOT EXISTS idx_reviews_property ON property_reviews(property_id)",
)


class LightBnbStorage:
    """SQLite-backed data access for the listing site."""

    def __init__(self, db_path: str, *, default_limit: int | None = None) -> None:
        """Initialize storage with database path.

        Args:
            db_path: Path to SQLite database file, or ":memory:" for in-memory.
            default_limit: Row cap for property searches made without a limit.
        """
        self.db_path = db_path
        self._conn: aiosqlite.Connection | None = None
        self._ensure_directory()
        self._users = UserRepository(self._get_connection)
        self._reservations = ReservationRepository(self._get_connection)
        self._properties = PropertyQueryService(self._get_connection, default_limit)

    def _ensure_directory(self) -> None:
        """Ensure the directory for the database exists."""
        if self.db_path != ":memory:":
            path = Path(self.db_path)
            path.parent.mkdir(parents=True, exist_ok=True)

    async def _get_connection(self) -> aiosqlite.Connection:
        """Get or create the database connection."""
        if self._conn is None:
            self._conn = await aiosqlite.connect(self.db_path)
            self._conn.row_factory = aiosqlite.Row
            await self._conn.execute("PRAGMA foreign_keys=ON")
        return self._conn

    async def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None

    async def initialize(self) -> None:
        """Create tables and indexes that do not exist yet."""
        conn = await self._get_connection()
        for statement in _SCHEMA:
            await conn.execute(statement)
        await conn.commit()
        logger.info("database_initialized", db_path=self.db_path)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_user_with_email(self, email: str) -> Lookup[User]:
        return await self._users.get_user_with_email(email)

    async def get_user_with_id(self, user_id: int) -> Lookup[User]:
        return await self._users.get_user_with_id(user_id)

    async def add_user(self, user: NewUser) -> Lookup[User]:
        return await self._users.add_user(user)

    # ------------------------------------------------------------------
    # Reservations
    # ------------------------------------------------------------------

    async def get_all_reservations(
        self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT, *, today: date | None = None
    ) -> list[Reservation]:
        return await self._reservations.get_all_reservations(guest_id, limit, today=today)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    async def get_all_properties(
        self,
        filters: PropertyFilter | Mapping[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[PropertyListing]:
        return await self._properties.get_all_properties(filters, limit)
