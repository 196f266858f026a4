"""Pydeck click handler using streamlit-deckgl for map click support.

Uses st_deckgl from streamlit-deckgl to capture ALL click events, including
clicks on empty map (where a draft is placed), not just object selections.

The key difference from st.pydeck_chart:
- st.pydeck_chart: Only returns object selections (pickable=True objects)
- st_deckgl: Returns full deck.gl onClick event with coordinate field for ALL clicks
"""

import logging
from dataclasses import dataclass
from typing import Any

import pydeck as pdk
from streamlit_deckgl import st_deckgl  # type: ignore[import-untyped]

from places_map.constants import MapConfig

logger = logging.getLogger(__name__)


@dataclass
class PydeckClickResult:
    """Result from pydeck click detection.

    Attributes:
        clicked_object: The picked deck.gl object data (dict) or None for map clicks
        clicked_coordinate: [lng, lat] of click location (always available for clicks)
    """

    clicked_object: dict[str, Any] | None
    clicked_coordinate: list[float] | None

    @property
    def is_object_click(self) -> bool:
        return self.clicked_object is not None

    @property
    def is_map_click(self) -> bool:
        """True if empty map was clicked with valid coordinates."""
        return self.clicked_object is None and self.clicked_coordinate is not None

    @staticmethod
    def empty() -> "PydeckClickResult":
        """Return empty result (no click detected)."""
        return PydeckClickResult(clicked_object=None, clicked_coordinate=None)


def parse_deckgl_event(event: dict[str, Any] | None) -> PydeckClickResult:
    """Split a raw st_deckgl event into picked object and coordinate.

    st_deckgl SPREADS object properties into the event dict (no "object" key!):
    - Map click: {coordinate: [lng, lat], eventType: "click"}
    - Object click: {type: ..., id: ..., coordinate: [lng, lat], eventType: "click"}
    """
    if not event:
        return PydeckClickResult.empty()

    clicked_object: dict[str, Any] | None = None
    clicked_coordinate: list[float] | None = None

    coord = event.get("coordinate")
    if isinstance(coord, (list, tuple)) and len(coord) >= 2:
        clicked_coordinate = [float(coord[0]), float(coord[1])]

    # Our layers tag every pickable object with a "type" field
    if event.get("type") and event["type"] != "click":
        clicked_object = {k: v for k, v in event.items() if k not in ("coordinate", "eventType")}

    return PydeckClickResult(clicked_object=clicked_object, clicked_coordinate=clicked_coordinate)


def render_pydeck_map(
    deck: pdk.Deck,
    key: str,
    height: int = MapConfig.HEIGHT_PX,
) -> PydeckClickResult:
    """Render pydeck map with full click support.

    Deduplication of repeated events happens in ClickDetector; this function
    only renders and parses.

    Args:
        deck: Configured pydeck.Deck object
        key: Unique key for this component instance (includes map_version)
        height: Height in pixels

    Returns:
        PydeckClickResult with click info (object and/or coordinate)
    """
    # MUST pass events=['click'] to enable click detection!
    event = st_deckgl(deck, key=key, height=height, events=["click"])
    if event:
        logger.debug(f"st_deckgl event keys: {list(event.keys()) if isinstance(event, dict) else type(event)}")
    return parse_deckgl_event(event=event if isinstance(event, dict) else None)
