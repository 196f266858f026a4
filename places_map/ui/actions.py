"""UI Actions - All action functions for the places map.

Centralizes the functions that change state in response to user input.
This is the error boundary: ValidationError and NotFoundError are caught
here and turned into messages; neither propagates past an action.

This module handles:
- Draft operations (place_draft_action, save_draft_action, cancel_draft_action)
- Mode operations (finish_adding_action, resume_adding_action, reset_map_action)
- Entry operations (edit_location_action, delete_location_action, show_location_action,
  close_details_action)
"""

import logging

import streamlit as st

from places_map.model.errors import NotFoundError, ValidationError
from places_map.model.message import (
    DraftPlacedMessage,
    InvalidClickMessage,
    LocationDeletedMessage,
    LocationNotFoundMessage,
    LocationSavedMessage,
    LocationUpdatedMessage,
    MapResetMessage,
    Message,
)
from places_map.ui.infra import reload_map, trigger_rerun
from places_map.ui.state_machine import PlacesController

logger = logging.getLogger(__name__)


def get_controller() -> PlacesController:
    """Session controller (created by app.init_session_state)."""
    return st.session_state.controller


# =============================================================================
# DRAFT OPERATIONS
# =============================================================================


def place_draft_action(lat: float, lng: float) -> None:
    """Map click in Adding mode -> pending draft."""
    controller = get_controller()
    if controller.is_drafting:
        InvalidClickMessage(
            action="place another point",
            reason="save or cancel the current location first",
        ).display()
        return
    if not controller.handle_map_click(lat=lat, lng=lng):
        InvalidClickMessage(action="place a location", reason="click ➕ Continue Adding first").display()
        return
    DraftPlacedMessage(lat=lat, lng=lng).display()
    # No map version bump: keeps the user's pan/zoom while the draft marker appears
    trigger_rerun()


def save_draft_action(name: str, details: str) -> None:
    """Submit the draft form. Empty names leave the draft and show an inline error."""
    controller = get_controller()
    controller.context.messages.clear()
    controller.update_form(name=name, details=details)
    try:
        location = controller.commit()
    except ValidationError as e:
        logger.info(f"Save blocked: {e}")
        # Rerun so the inline error renders under the form
        trigger_rerun()
        return
    LocationSavedMessage(name=location.name).display()
    trigger_rerun()


def cancel_draft_action() -> None:
    """Discard the draft and return to the list."""
    controller = get_controller()
    controller.cancel()
    trigger_rerun()


# =============================================================================
# MODE OPERATIONS
# =============================================================================


def finish_adding_action() -> None:
    """Done Adding: lock the map for browsing (drops any pending draft)."""
    controller = get_controller()
    controller.finish_adding()
    reload_map(reason="done adding")


def resume_adding_action() -> None:
    """Continue Adding: map clicks place drafts again."""
    controller = get_controller()
    controller.resume_adding()
    reload_map(reason="continue adding")


def reset_map_action() -> None:
    """Clear every location and the draft, back to Adding mode."""
    controller = get_controller()
    removed_count = controller.reset()
    controller.context.map.reset_view()
    MapResetMessage(removed_count=removed_count).display()
    reload_map(reason="reset")


# =============================================================================
# ENTRY OPERATIONS
# =============================================================================


def edit_location_action(location_id: str, name: str, details: str) -> Message | None:
    """Apply an edit from the list.

    Returns:
        The validation Message if the new name is empty (caller shows it
        inline and keeps the dialog open), otherwise None.
    """
    controller = get_controller()
    try:
        location = controller.edit_location(location_id=location_id, name=name, details=details)
    except ValidationError as e:
        return e.message
    except NotFoundError as e:
        LocationNotFoundMessage(location_id=e.location_id).display()
        trigger_rerun()
        return None
    LocationUpdatedMessage(name=location.name).display()
    trigger_rerun()
    return None


def delete_location_action(location_id: str) -> None:
    """Delete one entry after confirmation; a stale id is a no-op with a notice."""
    controller = get_controller()
    try:
        removed = controller.delete_location(location_id=location_id)
    except NotFoundError as e:
        LocationNotFoundMessage(location_id=e.location_id).display()
    else:
        LocationDeletedMessage(name=removed.name).display()
    reload_map(reason=f"delete {location_id}")


def show_location_action(location_id: str) -> None:
    """Marker click: open the details popup in the control panel."""
    controller = get_controller()
    try:
        controller.show_location(location_id=location_id)
    except NotFoundError as e:
        LocationNotFoundMessage(location_id=e.location_id).display()
        return
    trigger_rerun()


def close_details_action() -> None:
    """Hide the details popup; the map is reloaded so the same marker can be clicked again."""
    controller = get_controller()
    reload_map(before=controller.context.viewing.clear, reason="close details")
