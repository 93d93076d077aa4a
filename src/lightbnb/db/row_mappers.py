"""Shared row-mapping utilities for database modules."""

from __future__ import annotations

from typing import Any

import aiosqlite

from lightbnb.models import PropertyListing, Reservation, User

_RESERVATION_COLUMNS = ("reservation_id", "guest_id", "start_date", "end_date")


def row_to_user(row: aiosqlite.Row) -> User:
    """Convert a ``users`` row to a User."""
    return User.model_validate(dict(row))


def row_to_property_listing(row: aiosqlite.Row | dict[str, Any]) -> PropertyListing:
    """Convert a property row carrying an ``average_rating`` column."""
    return PropertyListing.model_validate(dict(row))


def row_to_reservation(row: aiosqlite.Row) -> Reservation:
    """Convert a reservation/property join row to a Reservation.

    The query aliases the reservation id as ``reservation_id`` so that
    ``id`` stays the property id.
    """
    data = dict(row)
    reservation = {key: data.pop(key) for key in _RESERVATION_COLUMNS}
    return Reservation(
        id=reservation["reservation_id"],
        guest_id=reservation["guest_id"],
        start_date=reservation["start_date"],
        end_date=reservation["end_date"],
        listing=row_to_property_listing(data),
    )
