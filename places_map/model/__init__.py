"""Data model classes for places on a map.

- Coordinate: Geometry atom (lat, lng)
- Location: Saved entry (wraps Coordinate, has ID, name, details)
- LocationStore: Central manager owning all saved locations
- ClickInfo: Unified map click description
- ValidationError / NotFoundError: Recoverable user-action errors
"""

from places_map.model.click_info import ClickInfo, MapClickType, MarkerType
from places_map.model.coordinate import Coordinate
from places_map.model.errors import NotFoundError, PlacesMapError, ValidationError
from places_map.model.location import Location, normalize_details
from places_map.model.location_store import LocationStore

__all__ = [
    "Coordinate",
    "Location",
    "LocationStore",
    "normalize_details",
    "ClickInfo",
    "MapClickType",
    "MarkerType",
    "PlacesMapError",
    "ValidationError",
    "NotFoundError",
]
