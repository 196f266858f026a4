"""Shared pytest fixtures for places_map tests.

All fixtures build plain objects (no Streamlit runtime needed). Controllers
are created without the UI listener, and click dedup runs with debounce
disabled so back-to-back test clicks are not dropped.

COORDINATES:
    Los Angeles (34.05, -118.24) is the default click; the other named points
    are just distinct, realistic coordinates.
"""

import pytest

from places_map.model.coordinate import Coordinate
from places_map.model.location import Location
from places_map.model.location_store import LocationStore
from places_map.ui.context import ClickDeduplicationContext
from places_map.ui.state_machine import PlacesController

LA = Coordinate(lat=34.05, lng=-118.24)
PARIS = Coordinate(lat=48.8566, lng=2.3522)
TOKYO = Coordinate(lat=35.6762, lng=139.6503)


def add_location(store: LocationStore, name: str, coordinate: Coordinate = LA, details: str = "") -> Location:
    """Store a location the way a commit would (fresh id, trimmed text)."""
    location = Location(id=store.next_id(), coordinate=coordinate, name=name, details=details)
    store.add(location=location)
    return location


@pytest.fixture
def store() -> LocationStore:
    """Fresh empty store."""
    return LocationStore()


@pytest.fixture
def three_locations(store: LocationStore) -> LocationStore:
    """Store with Home (P1), Office (P2), Cafe (P3) in that order."""
    add_location(store=store, name="Home", coordinate=LA, details="Lived here 2015-2020")
    add_location(store=store, name="Office", coordinate=PARIS, details="Second floor")
    add_location(store=store, name="Cafe", coordinate=TOKYO, details="Best matcha")
    return store


@pytest.fixture
def controller() -> PlacesController:
    """Controller in Adding/Idle with an empty store, no UI listener."""
    return PlacesController.create(add_ui_listener=False)


@pytest.fixture
def drafting_controller(controller: PlacesController) -> PlacesController:
    """Controller with a draft placed at LA."""
    assert controller.handle_map_click(lat=LA.lat, lng=LA.lng)
    return controller


@pytest.fixture
def dedup() -> ClickDeduplicationContext:
    """Dedup context with debounce disabled."""
    return ClickDeduplicationContext(debounce_seconds=0)
