"""Click handlers for the places map.

Uses ClickDetector to detect clicks, then dispatches to mode-specific handlers.

Design Principles:
- One handler per mode (no if-else chains on mode)
- Handlers never mutate state directly; they call ui/actions.py
- STRICT: Unknown/unhandled clicks raise RuntimeError immediately
"""

import logging
from collections.abc import Callable

import streamlit as st

from places_map.model.click_info import ClickInfo, MapClickType, MarkerType
from places_map.model.message import InvalidClickMessage
from places_map.ui.actions import place_draft_action, show_location_action

logger = logging.getLogger(__name__)

ClickHandler = Callable[[ClickInfo], None]


# =============================================================================
# CLICK DISPATCH
# =============================================================================


def get_click_handler(mode_name: str) -> ClickHandler:
    """Get the click handler for the given mode state name.

    Raises:
        RuntimeError: If the mode has no registered handler
    """
    handlers: dict[str, ClickHandler] = {
        "Adding": handle_adding_click,
        "Browsing": handle_browsing_click,
    }

    handler = handlers.get(mode_name)
    if handler is None:
        raise RuntimeError(
            f"No click handler registered for mode '{mode_name}'. Available modes: {list(handlers.keys())}."
        )
    return handler


def dispatch_click(click_info: ClickInfo) -> None:
    """Dispatch click to the handler of the current mode.

    Called by app.py after ClickDetector returns a ClickInfo.
    """
    controller = st.session_state.controller
    mode_name = controller.modes.current_state.name
    logger.info(f"[CLICK] Dispatching {click_info.display_name} in mode {mode_name}")

    handler = get_click_handler(mode_name=mode_name)
    handler(click_info)


# =============================================================================
# MODE-SPECIFIC HANDLERS
# =============================================================================


def handle_adding_click(click_info: ClickInfo) -> None:
    """Adding mode.

    TERRAIN -> place a draft (ignored with a toast while a draft is pending)
    LOCATION -> show details
    DRAFT -> remind the user to fill in the form
    """
    if click_info.click_type == MapClickType.TERRAIN:
        place_draft_action(lat=click_info.lat, lng=click_info.lng)
        return
    handle_marker_click(click_info=click_info)


def handle_browsing_click(click_info: ClickInfo) -> None:
    """Browsing mode: the map is locked, markers still show details."""
    if click_info.click_type == MapClickType.TERRAIN:
        logger.info("[CLICK] Map click ignored: browsing")
        InvalidClickMessage(action="place a location", reason="click ➕ Continue Adding first").display()
        return
    handle_marker_click(click_info=click_info)


def handle_marker_click(click_info: ClickInfo) -> None:
    """Marker clicks behave the same in both modes."""
    if click_info.marker_type == MarkerType.LOCATION:
        show_location_action(location_id=click_info.location_id)
        return
    if click_info.marker_type == MarkerType.DRAFT:
        InvalidClickMessage(action="open the draft", reason="fill in the form to save it").display()
        return
    raise RuntimeError(f"Unhandled marker click: {click_info}")
