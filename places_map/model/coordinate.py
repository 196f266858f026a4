"""Coordinate - A clicked point on the map.

The geometry atom for places: a (lat, lng) pair captured verbatim from the
map click. Frozen so a saved location's position can never drift.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point.

    Attributes:
        lat: Latitude in decimal degrees
        lng: Longitude in decimal degrees

    Example:
        coord = Coordinate(lat=34.05, lng=-118.24)
    """

    lat: float
    lng: float

    @property
    def lat_lng(self) -> tuple[float, float]:
        """Return (lat, lng) tuple - standard geographic order."""
        return (self.lat, self.lng)

    @property
    def lng_lat(self) -> tuple[float, float]:
        """Return (lng, lat) tuple - GeoJSON/Pydeck order."""
        return (self.lng, self.lat)

    def __repr__(self) -> str:
        return f"Coordinate(lat={self.lat:.5f}, lng={self.lng:.5f})"
