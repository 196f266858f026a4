"""Control panel (right column) for the places map.

Shows, top to bottom:
- The draft form while a location is pending (Save / Cancel, inline error)
- The details popup of the location whose marker was clicked
- The list of saved locations
"""

import logging

import streamlit as st

from places_map.constants import LocationConfig
from places_map.model.errors import NotFoundError
from places_map.model.message import DraftActionMessage
from places_map.ui.actions import cancel_draft_action, close_details_action, save_draft_action
from places_map.ui.location_list import LocationListPanel, escape_markdown
from places_map.ui.state_machine import PlacesController

logger = logging.getLogger(__name__)


def render_control_panel(controller: PlacesController) -> None:
    """Render the right column for the current state."""
    if controller.is_drafting:
        _render_draft_form(controller=controller)
        st.divider()
    if controller.context.viewing.location_id is not None:
        _render_location_details(controller=controller)
        st.divider()
    LocationListPanel(locations=controller.snapshot()).render()


def _render_draft_form(controller: PlacesController) -> None:
    """Name/details form for the pending draft."""
    ctx = controller.context
    coordinate = ctx.draft.coordinate
    if coordinate is None:
        raise RuntimeError("Drafting state without a draft coordinate")

    DraftActionMessage(lat=coordinate.lat, lng=coordinate.lng).display()

    with st.form(key="draft_form", clear_on_submit=False, border=True):
        name = st.text_input(
            "Location Name",
            value=ctx.draft.name,
            placeholder=LocationConfig.NAME_HINT,
            key="draft_name",
        )
        details = st.text_area(
            "Details",
            value=ctx.draft.details,
            placeholder=LocationConfig.DETAILS_HINT,
            key="draft_details",
        )
        if ctx.messages.form_error is not None:
            ctx.messages.form_error.display()

        col_save, col_cancel = st.columns(2)
        with col_save:
            save_clicked = st.form_submit_button("💾 Save Location", type="primary", width="stretch", key="draft_save")
        with col_cancel:
            cancel_clicked = st.form_submit_button("✖️ Cancel", width="stretch", key="draft_cancel")

    if save_clicked:
        save_draft_action(name=name, details=details)
    elif cancel_clicked:
        cancel_draft_action()


def _render_location_details(controller: PlacesController) -> None:
    """Popup content for a clicked saved marker."""
    location_id = controller.context.viewing.location_id
    try:
        location = controller.store.get(location_id=location_id)
    except NotFoundError:
        # Entry deleted since the marker was clicked
        logger.info(f"Viewed location {location_id} no longer exists")
        controller.context.viewing.clear()
        return

    with st.container(border=True):
        st.markdown(f"#### 📍 {escape_markdown(location.name)}")
        st.markdown(escape_markdown(location.details))
        st.caption(f"Lat: {location.lat:.4f}, Lng: {location.lng:.4f}")
        if st.button("✖️ Close", key="close_details", width="stretch"):
            close_details_action()
