"""Explicit wiring of the data layer's collaborators.

Each caller gets its own :class:`DataLayer`; there is no module-level
connection or singleton to reach for.
"""

from __future__ import annotations

from dataclasses import dataclass

from lightbnb.config import Settings
from lightbnb.db.storage import LightBnbStorage
from lightbnb.logging import configure_logging, get_logger, parse_level
from lightbnb.registry import InMemoryPropertyRegistry

logger = get_logger(__name__)


@dataclass
class DataLayer:
    """Storage handle plus in-memory property registry for one application."""

    settings: Settings
    storage: LightBnbStorage
    registry: InMemoryPropertyRegistry

    @classmethod
    async def open(cls, settings: Settings | None = None) -> DataLayer:
        """Configure logging, open and initialize storage, seed the registry.

        Args:
            settings: Settings to use; loaded from the environment when None.

        Returns:
            A ready DataLayer. Call close() when done.
        """
        if settings is None:
            settings = Settings()
        configure_logging(json_output=settings.log_json, level=parse_level(settings.log_level))

        storage = LightBnbStorage(
            settings.database_path, default_limit=settings.default_result_limit
        )
        await storage.initialize()
        registry = InMemoryPropertyRegistry.from_json(settings.property_seed_path)
        logger.info(
            "data_layer_opened",
            db_path=settings.database_path,
            seeded_properties=len(registry),
        )
        return cls(settings=settings, storage=storage, registry=registry)

    async def close(self) -> None:
        """Release the database connection."""
        await self.storage.close()
