"""Click detection types - unified click information for map interactions.

This module defines the canonical types for ALL click detection:
- MapClickType: Source of click (MARKER or TERRAIN)
- MarkerType: Type of marker clicked (or None for terrain)
- ClickInfo: Unified click information returned by ClickDetector

STRICT: All click detection flows through ClickInfo. Any deviation is a bug.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MapClickType(Enum):
    """Source of click on the map - EXACTLY one per interaction."""

    MARKER = "marker"  # Clicked on a pickable marker
    TERRAIN = "terrain"  # Clicked on empty map (raw coordinates)


class MarkerType(Enum):
    """Type of marker clicked. None for terrain clicks."""

    LOCATION = "location"
    DRAFT = "draft"


@dataclass(frozen=True)
class ClickInfo:
    """Unified click information - the ONLY output from click detection.

    STRICT CONTRACT:
    - For TERRAIN: lat/lng are REQUIRED, marker_type is None
    - For MARKER: marker_type is REQUIRED, lat/lng are None
    - LOCATION markers carry location_id; DRAFT markers carry no id
    """

    click_type: MapClickType
    lat: Optional[float] = None
    lng: Optional[float] = None
    marker_type: Optional[MarkerType] = None
    location_id: Optional[str] = None  # "P1" for LOCATION

    def __post_init__(self) -> None:
        """Validate invariants - STRICT: fail immediately on invalid state."""
        if self.click_type == MapClickType.TERRAIN:
            if self.lat is None or self.lng is None:
                raise ValueError("TERRAIN click must have lat/lng set")
            if self.marker_type is not None:
                raise ValueError("TERRAIN click must NOT have marker_type set")
        elif self.click_type == MapClickType.MARKER:
            if self.marker_type is None:
                raise ValueError("MARKER click must have marker_type set")
            if self.lat is not None or self.lng is not None:
                raise ValueError("MARKER click must NOT have lat/lng set")
            if self.marker_type == MarkerType.LOCATION and self.location_id is None:
                raise ValueError("LOCATION marker must have location_id set")
        else:
            raise RuntimeError(f"Unknown click_type: {self.click_type}")

    @property
    def display_name(self) -> str:
        """Human-readable description for logging."""
        if self.click_type == MapClickType.TERRAIN:
            return f"map click at ({self.lat:.5f}, {self.lng:.5f})"
        if self.marker_type == MarkerType.LOCATION:
            return f"location marker {self.location_id}"
        return "draft marker"
