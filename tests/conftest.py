"""Shared pytest fixtures."""

import gc
import os
import sys
import threading
from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from hypothesis import HealthCheck, settings

from lightbnb.config import Settings
from lightbnb.db.storage import LightBnbStorage


def pytest_configure(config: pytest.Config) -> None:
    """Force line-buffered stdout when piped."""
    if hasattr(sys.stdout, "reconfigure") and not sys.stdout.isatty():
        sys.stdout.reconfigure(line_buffering=True)
    if hasattr(sys.stderr, "reconfigure") and not sys.stderr.isatty():
        sys.stderr.reconfigure(line_buffering=True)


# Hypothesis settings profiles for different environments
settings.register_profile("fast", max_examples=25)
settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent the local .env file from leaking into test Settings instances."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )


@pytest.fixture(autouse=True)
def _cleanup_aiosqlite_threads():
    """Safety net: detect and stop leaked aiosqlite worker threads.

    aiosqlite creates a non-daemon worker thread per connection. If a test
    leaks a connection (doesn't call ``await storage.close()``), the thread
    prevents clean process exit.
    """
    yield

    from aiosqlite.core import Connection

    leaked = False

    gc.collect()
    for obj in gc.get_objects():
        if isinstance(obj, Connection) and obj._connection is not None:
            leaked = True
            obj.stop()

    for thread in threading.enumerate():
        if "_connection_worker_thread" in (thread.name or "") and thread.is_alive():
            leaked = True
            thread.join(timeout=1.0)

    if leaked:
        import warnings

        warnings.warn(
            "Test leaked aiosqlite connection(s); add 'await storage.close()' to fixture teardown",
            ResourceWarning,
            stacklevel=1,
        )


# ---------------------------------------------------------------------------
# Seed rows
# ---------------------------------------------------------------------------

USERS: list[dict[str, Any]] = [
    {"id": 1, "name": "Alice Owner", "email": "alice@example.com", "password": "hash-a"},
    {"id": 2, "name": "Bob Guest", "email": "bob@example.com", "password": "hash-b"},
    {"id": 3, "name": "Carol Owner", "email": "carol@example.com", "password": "hash-c"},
]


def _property(
    property_id: int, owner_id: int, title: str, city: str, cost_per_night: int
) -> dict[str, Any]:
    return {
        "id": property_id,
        "owner_id": owner_id,
        "title": title,
        "description": "description",
        "thumbnail_photo_url": f"https://example.com/{property_id}/thumb.jpg",
        "cover_photo_url": f"https://example.com/{property_id}/cover.jpg",
        "cost_per_night": cost_per_night,
        "parking_spaces": 1,
        "number_of_bathrooms": 1,
        "number_of_bedrooms": 2,
        "country": "Canada" if city == "Vancouver" else "USA",
        "street": f"{property_id} Main Street",
        "city": city,
        "province": "BC" if city == "Vancouver" else "CO",
        "post_code": f"{property_id:05d}",
        "active": 1,
    }


PROPERTIES: list[dict[str, Any]] = [
    _property(1, 1, "Denver loft", "Denver", 10000),
    _property(2, 1, "Denver cabin", "North Denver", 5000),
    _property(3, 3, "Vancouver flat", "Vancouver", 20000),
    # No reviews: the inner join on property_reviews excludes it from searches.
    _property(4, 3, "Unreviewed studio", "Denver", 1000),
]

RESERVATIONS: list[dict[str, Any]] = [
    {"id": 1, "start_date": "2024-01-01", "end_date": "2024-01-05", "property_id": 1, "guest_id": 2},
    {"id": 2, "start_date": "2023-06-01", "end_date": "2023-06-10", "property_id": 3, "guest_id": 2},
    {"id": 3, "start_date": "2030-01-01", "end_date": "2030-01-03", "property_id": 2, "guest_id": 2},
]

REVIEWS: list[dict[str, Any]] = [
    {"guest_id": 2, "property_id": 1, "reservation_id": 1, "rating": 4, "message": "Great"},
    {"guest_id": 2, "property_id": 1, "reservation_id": 1, "rating": 2, "message": "Noisy"},
    {"guest_id": 2, "property_id": 2, "reservation_id": 3, "rating": 5, "message": "Cosy"},
    {"guest_id": 2, "property_id": 3, "reservation_id": 2, "rating": 3, "message": "Fine"},
]


async def insert_rows(storage: LightBnbStorage, table: str, rows: list[dict[str, Any]]) -> None:
    """Insert seed rows into a table."""
    conn = await storage._get_connection()
    columns = list(rows[0])
    placeholders = ", ".join("?" for _ in columns)
    await conn.executemany(
        f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})",
        [tuple(row[c] for c in columns) for row in rows],
    )
    await conn.commit()


@pytest_asyncio.fixture
async def storage() -> AsyncGenerator[LightBnbStorage, None]:
    """Create an initialized in-memory storage instance."""
    storage = LightBnbStorage(":memory:")
    await storage.initialize()
    yield storage
    await storage.close()


@pytest_asyncio.fixture
async def seeded_storage(storage: LightBnbStorage) -> LightBnbStorage:
    """In-memory storage holding the USERS/PROPERTIES/RESERVATIONS/REVIEWS rows."""
    await insert_rows(storage, "users", USERS)
    await insert_rows(storage, "properties", PROPERTIES)
    await insert_rows(storage, "reservations", RESERVATIONS)
    await insert_rows(storage, "property_reviews", REVIEWS)
    return storage
