"""Sidebar UI renderer for the places map.

Renders the left sidebar with:
- Mode header and instructions (Adding vs Browsing)
- Done Adding / Continue Adding toggle
- Reset Map (with confirmation) and Reset View
- Summary statistics

All rendering logic is encapsulated to keep the main app.py concise.
"""

import logging

import streamlit as st

from places_map.model.message import AddingContextMessage, BrowsingContextMessage
from places_map.ui.actions import finish_adding_action, reset_map_action, resume_adding_action
from places_map.ui.infra import reload_map
from places_map.ui.state_machine import PlacesController

logger = logging.getLogger(__name__)


@st.dialog("Confirm Reset")
def _confirm_reset_dialog(location_count: int) -> None:
    """Show confirmation dialog before clearing every location."""
    st.write(f"Remove all **{location_count}** location(s) and start over?")
    st.caption("This cannot be undone.")

    col_yes, col_no = st.columns(2)
    with col_yes:
        if st.button("🔄 Yes, Reset", type="primary", width="stretch", key="reset_confirm"):
            reset_map_action()
    with col_no:
        if st.button("✖️ Cancel", width="stretch", key="reset_cancel"):
            st.rerun()


class SidebarRenderer:
    """Renders the sidebar controls for the current mode."""

    def __init__(self, controller: PlacesController) -> None:
        self.controller = controller
        self.ctx = controller.context

    def render(self) -> None:
        with st.sidebar:
            self._render_mode_header()
            st.divider()
            self._render_mode_toggle()
            self._render_reset_buttons()
            st.divider()
            self._render_stats()

    def _render_mode_header(self) -> None:
        location_count = len(self.controller.store)
        if self.controller.is_adding:
            st.markdown("### ➕ Adding Locations")
            AddingContextMessage(location_count=location_count).display()
        else:
            st.markdown("### 👁️ Browsing")
            BrowsingContextMessage(location_count=location_count).display()

    def _render_mode_toggle(self) -> None:
        if self.controller.is_adding:
            help_text = "Lock the map; a pending draft is discarded"
            if self.controller.is_drafting:
                help_text = "Lock the map and discard the unsaved location"
            if st.button(
                "✅ Done Adding Locations",
                key="done_adding",
                type="primary",
                width="stretch",
                help=help_text,
            ):
                finish_adding_action()
        else:
            if st.button(
                "➕ Continue Adding",
                key="continue_adding",
                width="stretch",
                help="Map clicks place new locations again",
            ):
                resume_adding_action()

    def _render_reset_buttons(self) -> None:
        location_count = len(self.controller.store)
        if st.button(
            "🔄 Reset Map",
            key="reset_map",
            width="stretch",
            help="Remove all locations and return to Adding mode",
        ):
            if location_count == 0:
                # Nothing to lose, skip the confirmation
                reset_map_action()
            else:
                _confirm_reset_dialog(location_count=location_count)

        if st.button(
            "🎯 Reset View",
            key="reset_view",
            width="stretch",
            help="Return the map to the start position and zoom",
        ):
            reload_map(before=self.ctx.map.reset_view, reason="reset view")

    def _render_stats(self) -> None:
        st.markdown("### 📊 Summary")
        col_saved, col_mode = st.columns(2)
        col_saved.metric("Saved", len(self.controller.store))
        col_mode.metric("Mode", "Adding" if self.controller.is_adding else "Browsing")
        if self.controller.is_drafting:
            st.caption("📍 1 unsaved location on the map")
