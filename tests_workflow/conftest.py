"""Shared pytest fixtures for places_map workflow tests.

Keep conftest.py minimal: one controller fixture plus a helper that walks a
controller into a given (mode, draft) state through real transitions.
"""

import pytest

from places_map.ui.context import DraftState, Mode
from places_map.ui.state_machine import PlacesController

HOME = (34.05, -118.24)
OFFICE = (48.8566, 2.3522)
CAFE = (35.6762, 139.6503)


@pytest.fixture
def controller() -> PlacesController:
    """Controller in Adding/Idle with an empty store, no UI listener."""
    return PlacesController.create(add_ui_listener=False)


def reach_state(controller: PlacesController, mode: str, draft_state: str) -> None:
    """Drive a fresh controller into (mode, draft_state) using normal operations.

    Drafting is only reachable in Adding mode; (browsing, drafting) is not a
    valid combination and raises.
    """
    if mode == Mode.BROWSING and draft_state == DraftState.DRAFTING:
        raise ValueError("A draft can't exist while browsing")
    if draft_state == DraftState.DRAFTING:
        controller.handle_map_click(lat=HOME[0], lng=HOME[1])
    if mode == Mode.BROWSING:
        controller.finish_adding()
    assert controller.context.mode == mode
    assert controller.context.draft_state == draft_state


def save_location(controller: PlacesController, coords: tuple[float, float], name: str, details: str = "") -> str:
    """Click + fill + commit. Returns the new id."""
    assert controller.handle_map_click(lat=coords[0], lng=coords[1])
    controller.update_form(name=name, details=details)
    return controller.commit().id
