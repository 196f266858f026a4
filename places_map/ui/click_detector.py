"""Click detector - turns streamlit-deckgl click events into ClickInfo.

Pickable markers carry "type" and "id" fields, so a picked object tells us
which marker was hit. A click on empty map only carries a coordinate.

Coordinate/object tracking prevents re-processing the same click on reruns.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from places_map.constants import ClickConfig
from places_map.model.click_info import ClickInfo, MapClickType, MarkerType

if TYPE_CHECKING:
    from places_map.ui.context import ClickDeduplicationContext

logger = logging.getLogger(__name__)


@dataclass
class ClickDetector:
    """Detects clicks from pydeck picked objects.

    Attributes:
        dedup: ClickDeduplicationContext for tracking last-seen clicks
    """

    dedup: "ClickDeduplicationContext"

    def detect(
        self,
        clicked_object: dict[str, Any] | None,
        clicked_coordinate: list[float] | None,
    ) -> ClickInfo | None:
        """Detect click from deck.gl event data.

        Args:
            clicked_object: The picked deck.gl object data (dict) or None
            clicked_coordinate: [lng, lat] of click location or None

        Returns:
            ClickInfo for new clicks, None otherwise
        """
        obj_id = self._get_object_id(obj=clicked_object)
        coord_tuple = tuple(clicked_coordinate) if clicked_coordinate else None

        if not self.dedup.is_new_click(coord=coord_tuple, obj_id=obj_id):
            return None

        if clicked_object is not None:
            return self._parse_object_click(obj=clicked_object)

        if clicked_coordinate is not None:
            lng, lat = clicked_coordinate[0], clicked_coordinate[1]
            logger.debug(f"Map click at ({lat:.6f}, {lng:.6f})")
            return ClickInfo(click_type=MapClickType.TERRAIN, lat=lat, lng=lng)

        return None

    def _get_object_id(self, obj: dict[str, Any] | None) -> str | None:
        """Generate unique ID for object for deduplication."""
        if obj is None:
            return None

        obj_type = obj.get("type", "")
        obj_id = obj.get("id", "")
        return f"{obj_type}_{obj_id}" if obj_id else obj_type

    def _parse_object_click(self, obj: dict[str, Any]) -> ClickInfo | None:
        """Parse clicked object to ClickInfo."""
        obj_type = obj.get("type")

        if not obj_type:
            logger.warning(f"Object click without type field: {obj}")
            return None

        logger.debug(f"Object click: type={obj_type}, data={obj}")

        if obj_type == ClickConfig.TYPE_LOCATION:
            location_id = obj.get("id")
            if not location_id:
                logger.warning("Location click missing id")
                return None
            return ClickInfo(
                click_type=MapClickType.MARKER,
                marker_type=MarkerType.LOCATION,
                location_id=location_id,
            )

        if obj_type == ClickConfig.TYPE_DRAFT:
            return ClickInfo(click_type=MapClickType.MARKER, marker_type=MarkerType.DRAFT)

        logger.warning(f"Unknown object type: {obj_type}")
        return None
