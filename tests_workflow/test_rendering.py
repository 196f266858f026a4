"""Integration tests for map rendering.

Tests that MapRenderer produces deck structures that project the store and
draft faithfully: one marker per saved location, one translucent draft marker.
"""

import json

from places_map.constants import ClickConfig, MapConfig, MarkerConfig, TileConfig
from places_map.model.coordinate import Coordinate
from places_map.ui.center_map import OSM_STYLE, MapRenderer
from places_map.ui.state_machine import PlacesController
from tests_workflow.conftest import HOME, OFFICE, save_location


def _layers_by_id(deck) -> dict[str, dict]:
    return {layer["id"]: layer for layer in json.loads(deck.to_json())["layers"]}


class TestMapRendering:
    """Tests for map layer rendering."""

    def test_renders_empty_store(self) -> None:
        """Empty store: a locations layer with no data, no draft layer."""
        deck = MapRenderer().render(locations=())

        layers = _layers_by_id(deck)
        assert set(layers) == {"locations"}
        assert layers["locations"]["data"] == []

    def test_initial_view_from_config(self) -> None:
        deck = MapRenderer().render(locations=())
        assert deck.initial_view_state.latitude == MapConfig.START_CENTER_LAT
        assert deck.initial_view_state.longitude == MapConfig.START_CENTER_LNG
        assert deck.initial_view_state.zoom == MapConfig.DEFAULT_ZOOM

    def test_one_marker_per_location(self, controller: PlacesController) -> None:
        save_location(controller=controller, coords=HOME, name="Home", details="Lived here")
        save_location(controller=controller, coords=OFFICE, name="Office")

        deck = MapRenderer().render(locations=controller.snapshot())

        data = _layers_by_id(deck)["locations"]["data"]
        assert [row["id"] for row in data] == ["P1", "P2"]
        assert data[0]["type"] == ClickConfig.TYPE_LOCATION
        assert data[0]["position"] == [HOME[1], HOME[0]], "pydeck expects [lng, lat]"
        assert data[0]["details"] == "Lived here"

    def test_draft_marker_is_translucent(self) -> None:
        deck = MapRenderer().render(locations=(), draft=Coordinate(lat=HOME[0], lng=HOME[1]))

        layers = _layers_by_id(deck)
        assert list(layers) == ["locations", "draft"], "Draft is drawn on top"
        draft = layers["draft"]
        assert draft["opacity"] == MarkerConfig.DRAFT_OPACITY
        assert draft["data"][0]["type"] == ClickConfig.TYPE_DRAFT
        assert draft["data"][0]["details"] == ClickConfig.DRAFT_TOOLTIP

    def test_tooltip_text_is_escaped(self, controller: PlacesController) -> None:
        """Names are inserted into tooltip HTML, so markup is escaped."""
        save_location(controller=controller, coords=HOME, name="<b>Home</b>", details="a & b")

        rows = MapRenderer.location_rows(locations=controller.snapshot())

        assert rows[0]["name"] == "&lt;b&gt;Home&lt;/b&gt;"
        assert rows[0]["details"] == "a &amp; b"
        assert controller.snapshot()[0].name == "<b>Home</b>", "Stored text is untouched"

    def test_render_follows_store_changes(self, controller: PlacesController) -> None:
        """The renderer holds no state: each render reflects the current snapshot."""
        renderer = MapRenderer()
        home_id = save_location(controller=controller, coords=HOME, name="Home")
        assert len(_layers_by_id(renderer.render(locations=controller.snapshot()))["locations"]["data"]) == 1

        controller.delete_location(location_id=home_id)
        assert _layers_by_id(renderer.render(locations=controller.snapshot()))["locations"]["data"] == []


class TestBasemapAndCursor:
    """Tile configuration and cursor affordance."""

    def test_osm_style_uses_configured_tiles(self) -> None:
        source = OSM_STYLE["sources"]["osm"]
        assert source["tiles"] == TileConfig.TILE_URLS
        assert source["attribution"] == TileConfig.ATTRIBUTION
        assert all("{z}/{x}/{y}" in url for url in TileConfig.TILE_URLS)

    def test_cursor_for_mode(self) -> None:
        assert MapRenderer.cursor_for(is_adding=True) == "crosshair"
        assert MapRenderer.cursor_for(is_adding=False) == "default"

    def test_update_view(self) -> None:
        renderer = MapRenderer()
        renderer.update_view(lat=1.0, lng=2.0, zoom=7)
        view = renderer.get_view_state()
        assert (view.latitude, view.longitude, view.zoom) == (1.0, 2.0, 7)
