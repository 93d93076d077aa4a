"""In-memory property registry for listings created during this process."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from lightbnb.logging import get_logger

logger = get_logger(__name__)


class InMemoryPropertyRegistry:
    """Keeps newly created properties in a dict keyed by sequential id.

    Nothing is persisted; the registry lives as long as the process.
    """

    def __init__(self, properties: dict[int, dict[str, Any]] | None = None) -> None:
        self._properties: dict[int, dict[str, Any]] = dict(properties or {})

    @classmethod
    def from_json(cls, path: Path | str) -> InMemoryPropertyRegistry:
        """Seed a registry from a JSON object keyed by property id."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        registry = cls({int(key): value for key, value in raw.items()})
        logger.debug("property_registry_seeded", path=str(path), count=len(registry))
        return registry

    def __len__(self) -> int:
        return len(self._properties)

    def get_property(self, property_id: int) -> dict[str, Any] | None:
        return self._properties.get(property_id)

    async def add_property(self, property_data: dict[str, Any]) -> dict[str, Any]:
        """Store a property under the next id (current size + 1).

        Args:
            property_data: Property details as submitted; any ``id`` is replaced.

        Returns:
            The stored record including its new ``id``.
        """
        property_id = len(self._properties) + 1
        record = {**property_data, "id": property_id}
        self._properties[property_id] = record
        logger.debug("property_added", property_id=property_id)
        return record
