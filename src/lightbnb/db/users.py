"""User store: account lookups and sign-up."""

from __future__ import annotations

from collections.abc import Callable, Coroutine
from typing import Any

import aiosqlite

from lightbnb.db.results import Lookup
from lightbnb.db.row_mappers import row_to_user
from lightbnb.logging import get_logger
from lightbnb.models import NewUser, User

logger = get_logger(__name__)


class UserRepository:
    """Database operations on the ``users`` table.

    Every method returns a :class:`Lookup` instead of raising, so callers can
    tell a missing user apart from a failing store.
    """

    def __init__(
        self,
        get_connection: Callable[[], Coroutine[Any, Any, aiosqlite.Connection]],
    ) -> None:
        self._get_connection = get_connection

    async def _fetch_user(self, sql: str, params: tuple[Any, ...], **context: Any) -> Lookup[User]:
        try:
            conn = await self._get_connection()
            cursor = await conn.execute(sql, params)
            row = await cursor.fetchone()
        except aiosqlite.Error as e:
            logger.warning("user_lookup_failed", error=str(e), **context)
            return Lookup.failed(str(e))
        if row is None:
            return Lookup.not_found()
        return Lookup.found(row_to_user(row))

    async def get_user_with_email(self, email: str) -> Lookup[User]:
        """Get a single user by email address.

        Args:
            email: Email address; compared case-insensitively.

        Returns:
            Lookup holding the user, not-found, or the store error.
        """
        return await self._fetch_user(
            "SELECT * FROM users WHERE email = ?",
            (email.strip().lower(),),
            email=email,
        )

    async def get_user_with_id(self, user_id: int) -> Lookup[User]:
        """Get a single user by id."""
        return await self._fetch_user(
            "SELECT * FROM users WHERE id = ?",
            (user_id,),
            user_id=user_id,
        )

    async def add_user(self, user: NewUser) -> Lookup[User]:
        """Insert a new user.

        Args:
            user: Sign-up details.

        Returns:
            Lookup holding the stored user with its assigned id, or the store
            error (for example a duplicate email).
        """
        try:
            conn = await self._get_connection()
            cursor = await conn.execute(
                "INSERT INTO users (name, email, password) VALUES (?, ?, ?)",
                (user.name, user.email, user.password),
            )
            await conn.commit()
        except aiosqlite.Error as e:
            logger.warning("user_insert_failed", email=user.email, error=str(e))
            return Lookup.failed(str(e))

        stored = User(id=cursor.lastrowid, **user.model_dump())  # type: ignore[arg-type]
        logger.debug("user_added", user_id=stored.id)
        return Lookup.found(stored)
