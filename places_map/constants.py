"""Configuration constants for Places Map.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    MapConfig: Default map view parameters
    TileConfig: Raster basemap tiles and attribution
    LocationConfig: Location ids, placeholder text, list preview length
    MarkerConfig: Map marker styling
    ClickConfig: Picked-object tags and tooltip texts
"""


class AppConfig:
    """UI application settings."""

    TITLE = "My Places Map"
    ICON = "🌍"
    LAYOUT = "wide"


class MapConfig:
    """Default map view parameters."""

    # Initial center: Los Angeles, zoomed out far enough to see most of the world
    START_CENTER_LAT = 34.0522
    START_CENTER_LNG = -118.2437
    DEFAULT_ZOOM = 3

    # Map component height in pixels
    HEIGHT_PX = 600


class TileConfig:
    """Raster basemap tiles (OpenStreetMap, no API key)."""

    # pydeck raster sources don't support the {s} placeholder, so list subdomains explicitly
    TILE_URLS = [
        "https://a.tile.openstreetmap.org/{z}/{x}/{y}.png",
        "https://b.tile.openstreetmap.org/{z}/{x}/{y}.png",
        "https://c.tile.openstreetmap.org/{z}/{x}/{y}.png",
    ]
    ATTRIBUTION = '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
    TILE_SIZE = 256
    MIN_ZOOM = 0
    MAX_ZOOM = 19


class LocationConfig:
    """Location entity settings."""

    ID_PREFIX = "P"  # "P1", "P2", ...
    DETAILS_PLACEHOLDER = "No details provided."
    DETAILS_PREVIEW_LENGTH = 50
    ELLIPSIS = "..."

    # Form placeholders shown in the draft form
    NAME_HINT = "Location Name (e.g., Home, Dream Vacation)"
    DETAILS_HINT = "Details (e.g., lived here 2015-2020, favorite restaurant)"


class MarkerConfig:
    """Map marker styling. Colors as RGBA lists (0-255) for pydeck."""

    LOCATION_COLOR = [37, 99, 235, 255]  # Blue-600
    LOCATION_BORDER = [255, 255, 255, 255]
    DRAFT_COLOR = [37, 99, 235, 255]
    DRAFT_OPACITY = 0.6  # Draft marker is drawn semi-transparent
    RADIUS_PX = 8
    HIGHLIGHT_COLOR = [255, 255, 0, 180]

    CURSOR_ADDING = "crosshair"
    CURSOR_BROWSING = "default"


class ClickConfig:
    """Click detection tags and tooltip texts."""

    # Picked object "type" field, set on every pickable marker
    TYPE_LOCATION = "location"
    TYPE_DRAFT = "draft"

    # Max distance in pixels for a click to pick a marker
    PICKING_RADIUS_PX = 10

    DRAFT_TOOLTIP = "Waiting for details..."

    # Minimum time between two accepted clicks (rapid double-click guard)
    DEBOUNCE_SECONDS = 0.15
