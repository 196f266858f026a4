"""MapRenderer - Pydeck map rendering for the places map.

Projects the current store snapshot and draft onto an interactive map:
- OpenStreetMap raster basemap (Mapbox GL style dict, no API key)
- Saved locations as opaque clickable markers (ScatterplotLayer)
- The pending draft as one semi-transparent marker

The renderer holds no domain state: every call to render() rebuilds the deck
from the locations and draft it is given.

Key pydeck conventions:
- Uses [lng, lat] coordinate order (GeoJSON standard)
- Colors as RGBA lists [R, G, B, A] (0-255)
- Data prepared as list[dict] for GPU streaming
- pickable=True enables click detection
"""

import html
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import pydeck as pdk

from places_map.constants import ClickConfig, MapConfig, MarkerConfig, TileConfig
from places_map.model.coordinate import Coordinate
from places_map.model.location import Location

logger = logging.getLogger(__name__)


# Mapbox GL style specification for the 2D raster basemap.
# pydeck's TileLayer needs a JavaScript renderSubLayers callback to draw tiles,
# so raster tiles go through map_style with map_provider="mapbox" instead.
OSM_STYLE: dict[str, object] = {
    "version": 8,
    "sources": {
        "osm": {
            "type": "raster",
            "tiles": TileConfig.TILE_URLS,
            "tileSize": TileConfig.TILE_SIZE,
            "attribution": TileConfig.ATTRIBUTION,
        }
    },
    "layers": [
        {
            "id": "osm",
            "type": "raster",
            "source": "osm",
            "minzoom": TileConfig.MIN_ZOOM,
            "maxzoom": TileConfig.MAX_ZOOM,
        }
    ],
}


@dataclass
class LayerCollection:
    """Manages pydeck layers with correct z-ordering.

    Z-order (back to front): locations -> draft

    The draft is placed last so it stays visible (and clickable) when it
    overlaps a saved location.
    """

    locations: list[pdk.Layer] = field(default_factory=list)
    draft: list[pdk.Layer] = field(default_factory=list)

    def get_ordered_layers(self) -> list[pdk.Layer]:
        """Return all layers in correct z-order (back to front)."""
        return self.locations + self.draft


class MapRenderer:
    """Renders saved locations and the draft on a pydeck map.

    Example:
        renderer = MapRenderer(center_lat=34.05, center_lng=-118.24, zoom=3)
        deck = renderer.render(locations=store.snapshot(), draft=None)
        render_pydeck_map(deck=deck, key="map_0")
    """

    def __init__(
        self,
        center_lat: float = MapConfig.START_CENTER_LAT,
        center_lng: float = MapConfig.START_CENTER_LNG,
        zoom: int = MapConfig.DEFAULT_ZOOM,
    ) -> None:
        self.center_lat = center_lat
        self.center_lng = center_lng
        self.zoom = zoom

    def get_view_state(self) -> pdk.ViewState:
        """Create pydeck ViewState from current settings."""
        return pdk.ViewState(
            latitude=self.center_lat,
            longitude=self.center_lng,
            zoom=self.zoom,
            pitch=0,
            bearing=0,
        )

    def update_view(self, lat: float | None = None, lng: float | None = None, zoom: int | None = None) -> None:
        """Update view state parameters."""
        if lat is not None:
            self.center_lat = lat
        if lng is not None:
            self.center_lng = lng
        if zoom is not None:
            self.zoom = zoom

    def render(self, locations: Sequence[Location], draft: Coordinate | None = None) -> pdk.Deck:
        """Render the complete map.

        Args:
            locations: Store snapshot, one marker per entry
            draft: Coordinate of the pending draft, if any

        Returns:
            pdk.Deck object ready for display.
        """
        layer_collection = LayerCollection()
        layer_collection.locations.append(self._create_location_layer(locations=locations))
        if draft is not None:
            layer_collection.draft.append(self._create_draft_layer(draft=draft))

        logger.debug(f"[MAP] Rendering {len(locations)} locations, draft={draft}")

        return pdk.Deck(
            map_style=OSM_STYLE,
            map_provider="mapbox",  # Required when map_style is a dict
            initial_view_state=self.get_view_state(),
            layers=layer_collection.get_ordered_layers(),
            tooltip=self._create_tooltip_config(),
            parameters={"pickingRadius": ClickConfig.PICKING_RADIUS_PX},
        )

    @staticmethod
    def cursor_for(is_adding: bool) -> str:
        """CSS cursor for the map: crosshair while map clicks place drafts."""
        return MarkerConfig.CURSOR_ADDING if is_adding else MarkerConfig.CURSOR_BROWSING

    # =========================================================================
    # MARKER LAYERS
    # =========================================================================

    @staticmethod
    def location_rows(locations: Sequence[Location]) -> list[dict[str, object]]:
        """Marker data for saved locations.

        Tooltip text is HTML-escaped because deck.gl inserts it as markup.
        """
        return [
            {
                "type": ClickConfig.TYPE_LOCATION,
                "id": location.id,
                "position": [location.lng, location.lat],
                "name": html.escape(location.name),
                "details": html.escape(location.details),
            }
            for location in locations
        ]

    @staticmethod
    def draft_rows(draft: Coordinate) -> list[dict[str, object]]:
        return [
            {
                "type": ClickConfig.TYPE_DRAFT,
                "id": "draft",
                "position": list(draft.lng_lat),
                "name": "New location",
                "details": ClickConfig.DRAFT_TOOLTIP,
            }
        ]

    def _create_location_layer(self, locations: Sequence[Location]) -> pdk.Layer:
        return pdk.Layer(
            "ScatterplotLayer",
            self.location_rows(locations=locations),
            get_position="position",
            get_radius=MarkerConfig.RADIUS_PX,
            radius_units="pixels",
            get_fill_color=MarkerConfig.LOCATION_COLOR,
            get_line_color=MarkerConfig.LOCATION_BORDER,
            stroked=True,
            line_width_min_pixels=2,
            pickable=True,
            auto_highlight=True,
            highlight_color=MarkerConfig.HIGHLIGHT_COLOR,
            id="locations",
        )

    def _create_draft_layer(self, draft: Coordinate) -> pdk.Layer:
        return pdk.Layer(
            "ScatterplotLayer",
            self.draft_rows(draft=draft),
            get_position="position",
            get_radius=MarkerConfig.RADIUS_PX,
            radius_units="pixels",
            get_fill_color=MarkerConfig.DRAFT_COLOR,
            get_line_color=MarkerConfig.LOCATION_BORDER,
            stroked=True,
            line_width_min_pixels=2,
            opacity=MarkerConfig.DRAFT_OPACITY,
            pickable=True,
            id="draft",
        )

    def _create_tooltip_config(self) -> dict[str, str | dict[str, str]]:
        """Popup for markers: name plus full details (or the draft notice)."""
        return {
            "html": "<b>{name}</b><br/>{details}",
            "style": {
                "backgroundColor": "rgba(255, 255, 255, 0.95)",
                "color": "#333",
                "padding": "6px 10px",
                "borderRadius": "4px",
                "maxWidth": "280px",
            },
        }
