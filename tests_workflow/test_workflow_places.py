"""Workflow tests - complete user journeys through the controller.

Scenario A: click -> name -> save produces exactly one entry
Scenario B: a second click while drafting keeps the first draft
Scenario C: Done Adding drops a pending draft, Continue starts fresh
Scenario D: deleting the first of three keeps the others' ids and order
Plus edit/delete in Browsing mode and full reset.
"""

import pytest
from statemachine.exceptions import TransitionNotAllowed

from places_map.constants import LocationConfig
from places_map.model.errors import NotFoundError, ValidationError
from places_map.ui.context import DraftState, Mode
from places_map.ui.state_machine import PlacesController
from tests_workflow.conftest import CAFE, HOME, OFFICE, save_location


class TestScenarioA:
    """Click at (34.05, -118.24), name it Home, save."""

    def test_single_entry_with_placeholder(self, controller: PlacesController) -> None:
        assert controller.handle_map_click(lat=34.05, lng=-118.24)
        controller.update_form(name="Home", details="")
        controller.commit()

        entries = [loc.to_dict() for loc in controller.snapshot()]
        assert len(entries) == 1
        entry = entries[0]
        assert entry["lat"] == 34.05
        assert entry["lng"] == -118.24
        assert entry["name"] == "Home"
        assert entry["details"] == "No details provided."
        assert entry["details"] == LocationConfig.DETAILS_PLACEHOLDER


class TestScenarioB:
    """Two clicks while adding, the first still unsaved."""

    def test_second_click_does_not_overwrite(self, controller: PlacesController) -> None:
        controller.handle_map_click(lat=HOME[0], lng=HOME[1])
        controller.update_form(name="First", details="")

        placed = controller.handle_map_click(lat=OFFICE[0], lng=OFFICE[1])

        assert placed is False
        assert controller.context.draft.coordinate.lat_lng == HOME
        loc = controller.commit()
        assert (loc.lat, loc.lng) == HOME
        assert len(controller.snapshot()) == 1

    def test_click_after_save_starts_new_draft(self, controller: PlacesController) -> None:
        save_location(controller=controller, coords=HOME, name="First")
        assert controller.handle_map_click(lat=OFFICE[0], lng=OFFICE[1])
        assert controller.context.draft.coordinate.lat_lng == OFFICE


class TestScenarioC:
    """Done Adding with a pending draft."""

    def test_finish_discards_and_resume_starts_idle(self, controller: PlacesController) -> None:
        controller.handle_map_click(lat=HOME[0], lng=HOME[1])
        controller.update_form(name="Unsaved", details="typed")

        controller.finish_adding()
        assert controller.context.mode == Mode.BROWSING
        assert controller.context.draft_state == DraftState.IDLE

        controller.resume_adding()
        assert controller.context.mode == Mode.ADDING
        assert controller.context.draft_state == DraftState.IDLE
        assert controller.context.draft.coordinate is None
        assert controller.context.draft.name == ""
        assert controller.snapshot() == ()

        with pytest.raises(TransitionNotAllowed):
            controller.commit()


class TestScenarioD:
    """Delete the first of three by id."""

    def test_remaining_keep_ids_and_order(self, controller: PlacesController) -> None:
        ids = [
            save_location(controller=controller, coords=HOME, name="Home"),
            save_location(controller=controller, coords=OFFICE, name="Office"),
            save_location(controller=controller, coords=CAFE, name="Cafe"),
        ]
        remaining_before = controller.snapshot()[1:]

        controller.delete_location(location_id=ids[0])

        assert controller.snapshot() == remaining_before
        assert [loc.id for loc in controller.snapshot()] == ids[1:]


class TestBrowsingJourney:
    """Finish adding, then browse, edit, and delete."""

    def test_browse_edit_delete_resume(self, controller: PlacesController) -> None:
        home_id = save_location(controller=controller, coords=HOME, name="Home", details="old")
        office_id = save_location(controller=controller, coords=OFFICE, name="Office")
        controller.finish_adding()

        # Map is locked
        assert controller.handle_map_click(lat=CAFE[0], lng=CAFE[1]) is False

        # Marker click shows details
        shown = controller.show_location(location_id=home_id)
        assert shown.name == "Home"

        # Edit keeps coordinates
        edited = controller.edit_location(location_id=home_id, name="Casa", details="")
        assert (edited.lat, edited.lng) == HOME
        assert edited.details == LocationConfig.DETAILS_PLACEHOLDER

        # Rejected edit changes nothing
        with pytest.raises(ValidationError):
            controller.edit_location(location_id=office_id, name="  ", details="x")
        assert controller.store.get(location_id=office_id).name == "Office"

        # Delete then stale delete
        controller.delete_location(location_id=office_id)
        with pytest.raises(NotFoundError):
            controller.delete_location(location_id=office_id)

        controller.resume_adding()
        new_id = save_location(controller=controller, coords=CAFE, name="Cafe")
        assert new_id == "P3", "Ids are never reused"
        assert [loc.name for loc in controller.snapshot()] == ["Casa", "Cafe"]


class TestReset:
    """Full reset from any state."""

    @pytest.mark.parametrize("browsing,drafting", [(False, False), (False, True), (True, False)])
    def test_reset_empties_everything(self, controller: PlacesController, browsing: bool, drafting: bool) -> None:
        save_location(controller=controller, coords=HOME, name="Home")
        save_location(controller=controller, coords=OFFICE, name="Office")
        if drafting:
            controller.handle_map_click(lat=CAFE[0], lng=CAFE[1])
        if browsing:
            controller.finish_adding()

        removed = controller.reset()

        assert removed == 2
        assert controller.snapshot() == ()
        assert controller.context.mode == Mode.ADDING
        assert controller.context.draft_state == DraftState.IDLE
        assert controller.context.draft.coordinate is None
        # Adding works straight away
        assert controller.handle_map_click(lat=HOME[0], lng=HOME[1])
