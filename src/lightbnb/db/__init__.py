"""Database storage for users, properties and reservations."""

from lightbnb.db.query_builder import DEFAULT_RESULT_LIMIT, PropertyQuery, build_property_query
from lightbnb.db.results import Lookup, LookupStatus
from lightbnb.db.storage import LightBnbStorage

__all__ = [
    "DEFAULT_RESULT_LIMIT",
    "LightBnbStorage",
    "Lookup",
    "LookupStatus",
    "PropertyQuery",
    "build_property_query",
]
