"""PropertyFilter model: the optional criteria narrowing a property search."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


def _blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_int(value: object) -> int:
    """Parse a whole number, raising ValueError for anything else."""
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    return int(str(value).strip())


def _parse_number(value: object) -> int | float:
    """Parse an int or float, keeping fractions; raises ValueError otherwise."""
    if isinstance(value, bool):
        raise ValueError(f"expected a number, got {value!r}")
    if isinstance(value, int | float):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


class PropertyFilter(BaseModel):
    """Validated property search criteria.

    All fields default to None (no filter). Presence is ``is not None``, so a
    ``minimum_rating`` of 0 is a real filter. Validators coerce strings coming
    from query parameters; None or a blank string means "no filter", and any
    other value that does not parse raises a ValidationError.
    """

    city: str | None = None
    owner_id: int | None = None
    minimum_price_per_night: int | float | None = None
    maximum_price_per_night: int | float | None = None
    minimum_rating: float | None = None

    @field_validator("city", mode="before")
    @classmethod
    def clean_city(cls, v: object) -> str | None:
        if v is None:
            return None
        s = str(v).strip()
        return s if s else None

    @field_validator("owner_id", mode="before")
    @classmethod
    def coerce_owner(cls, v: object) -> int | None:
        return None if _blank(v) else _parse_int(v)

    @field_validator("minimum_price_per_night", "maximum_price_per_night", mode="before")
    @classmethod
    def coerce_price(cls, v: object) -> int | float | None:
        return None if _blank(v) else _parse_number(v)

    @field_validator("minimum_rating", mode="before")
    @classmethod
    def coerce_rating(cls, v: object) -> float | None:
        return None if _blank(v) else float(_parse_number(v))

    @property
    def active_count(self) -> int:
        """Number of criteria that will become predicates."""
        return sum(
            1
            for v in [
                self.city,
                self.owner_id,
                self.minimum_price_per_night,
                self.maximum_price_per_night,
                self.minimum_rating,
            ]
            if v is not None
        )
