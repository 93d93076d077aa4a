"""Pydantic models for users, properties and reservations."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NewUser(BaseModel):
    """User details submitted at sign-up, before the store assigns an id."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(description="Password hash as produced by the auth layer")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: object) -> object:
        """Lowercase and strip email addresses so lookups are stable."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class User(NewUser):
    """A stored user account."""

    id: int


class Property(BaseModel):
    """A rental property listing as stored in the ``properties`` table."""

    model_config = ConfigDict(frozen=True)

    id: int
    owner_id: int
    title: str
    description: str | None = None
    thumbnail_photo_url: str | None = None
    cover_photo_url: str | None = None
    cost_per_night: int = Field(ge=0, description="Nightly cost in cents")
    parking_spaces: int = Field(default=0, ge=0)
    number_of_bathrooms: int = Field(default=0, ge=0)
    number_of_bedrooms: int = Field(default=0, ge=0)
    country: str
    street: str
    city: str
    province: str
    post_code: str
    active: bool = True


class PropertyListing(Property):
    """A property together with the mean rating of its reviews."""

    average_rating: float | None = None


class Reservation(BaseModel):
    """A guest's reservation of a property."""

    model_config = ConfigDict(frozen=True)

    id: int
    guest_id: int
    start_date: date
    end_date: date
    listing: PropertyListing
