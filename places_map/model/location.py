"""Location - A saved place on the map.

A Location wraps a Coordinate for its position (single source of truth)
and carries the user's name and details text.

Locations are created only by committing a draft. Only name and details can
change afterwards; the store replaces the frozen instance on edit.
"""

from dataclasses import dataclass, replace
from typing import Any

from places_map.constants import LocationConfig
from places_map.model.coordinate import Coordinate


def normalize_details(details: str) -> str:
    """Trim details, substituting the placeholder text when empty."""
    return details.strip() or LocationConfig.DETAILS_PLACEHOLDER


@dataclass(frozen=True)
class Location:
    """A committed entry in the location store.

    Attributes:
        id: Unique identifier (e.g., "P1", "P2", ...), never reused
        coordinate: Where the user clicked when placing the draft
        name: Non-empty trimmed name
        details: Trimmed details or the placeholder text

    Example:
        loc = Location(id="P1", coordinate=Coordinate(lat=34.05, lng=-118.24), name="Home", details="")
    """

    id: str
    coordinate: Coordinate
    name: str
    details: str

    @property
    def lat(self) -> float:
        """Latitude delegated from coordinate."""
        return self.coordinate.lat

    @property
    def lng(self) -> float:
        """Longitude delegated from coordinate."""
        return self.coordinate.lng

    def with_text(self, name: str, details: str) -> "Location":
        """Return a copy with new name/details; id and coordinate are kept."""
        return replace(self, name=name.strip(), details=normalize_details(details))

    def to_dict(self) -> dict[str, Any]:
        """Flat dict view used by rendering and tests."""
        return {
            "id": self.id,
            "lat": self.lat,
            "lng": self.lng,
            "name": self.name,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"Location({self.id}, {self.name!r}, {self.coordinate})"
