"""
models/property.py
------------------
Domain models for rental properties and the property search form.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional


def _optional(value: Any, cast: Callable[[Any], Any]) -> Any:
    """Cast a form value, treating None and blank strings as 'not given'."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return cast(value)


@dataclass
class Property:
    """
    Represents a rental listing as submitted by its owner.

    Attributes:
        owner_id: ID of the user who lists the property.
        title: Listing headline.
        description: Free-text description.
        thumbnail_photo_url: Small photo shown in search results.
        cover_photo_url: Large photo shown on the listing page.
        cost_per_night: Nightly price in dollars (stored as cents).
        street, city, province, post_code, country: Address fields.
        parking_spaces: Number of parking spots (0 if unknown).
        number_of_bathrooms: Bathroom count (0 if unknown).
        number_of_bedrooms: Bedroom count (0 if unknown).
        id: Database primary key (None for new records).
    """
    owner_id: int
    title: str
    description: str
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: float
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: Optional[int] = 0
    number_of_bathrooms: Optional[int] = 0
    number_of_bedrooms: Optional[int] = 0
    id: Optional[int] = None

    @property
    def cost_per_night_cents(self) -> int:
        """Nightly price converted to the integer cents the table stores."""
        return round(self.cost_per_night * 100)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Property":
        """
        Build a Property from a submitted listing form, where every value
        may arrive as a string. Blank room counts become 0.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If owner_id, cost_per_night or a count is not a number.
        """
        return cls(
            owner_id=int(data["owner_id"]),
            title=data["title"],
            description=data.get("description") or "",
            thumbnail_photo_url=data["thumbnail_photo_url"],
            cover_photo_url=data["cover_photo_url"],
            cost_per_night=float(data["cost_per_night"]),
            street=data["street"],
            city=data["city"],
            province=data["province"],
            post_code=data["post_code"],
            country=data["country"],
            parking_spaces=_optional(data.get("parking_spaces"), int) or 0,
            number_of_bathrooms=_optional(data.get("number_of_bathrooms"), int) or 0,
            number_of_bedrooms=_optional(data.get("number_of_bedrooms"), int) or 0,
        )

    def __str__(self) -> str:
        return f"{self.title} ({self.city}) - ${self.cost_per_night:.2f}/night"


@dataclass
class PropertySearchOptions:
    """
    Filters for the property search. Every field is optional; a falsy
    value means the filter is not applied.

    Attributes:
        owner_id: Only properties listed by this user.
        city: Case-insensitive substring of the city name.
        minimum_price_per_night: Lower bound in dollars.
        maximum_price_per_night: Upper bound in dollars.
        minimum_rating: Lower bound on the average review rating.
    """
    owner_id: Optional[int] = None
    city: Optional[str] = None
    minimum_price_per_night: Optional[float] = None
    maximum_price_per_night: Optional[float] = None
    minimum_rating: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PropertySearchOptions":
        """
        Build search options from query-string style values.
        Unknown keys are ignored and blank values are dropped.

        Raises:
            ValueError: If a numeric filter is not a number.
        """
        city = data.get("city")
        return cls(
            owner_id=_optional(data.get("owner_id"), int),
            city=(city.strip() or None) if isinstance(city, str) else city,
            minimum_price_per_night=_optional(data.get("minimum_price_per_night"), float),
            maximum_price_per_night=_optional(data.get("maximum_price_per_night"), float),
            minimum_rating=_optional(data.get("minimum_rating"), float),
        )
