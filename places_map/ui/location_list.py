"""Location list - browsable projection of the store snapshot.

The list never mutates locations itself. Per-entry Edit and Delete open
Streamlit dialogs that collect the replacement text or confirmation, then
call the edit/delete actions, which go straight to the LocationStore.
Both work in Adding and Browsing mode.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

import streamlit as st

from places_map.constants import LocationConfig
from places_map.model.location import Location
from places_map.ui.actions import delete_location_action, edit_location_action

logger = logging.getLogger(__name__)

EMPTY_LIST_TEXT = "Click on the map to start adding places!"

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]<>()#+\-.!|~$:])")


def escape_markdown(text: str) -> str:
    """Show user text literally in st.markdown/st.caption (line breaks kept)."""
    escaped = _MARKDOWN_SPECIAL.sub(r"\\\1", text)
    return escaped.replace("\n", "  \n")


def truncate_details(text: str, limit: int = LocationConfig.DETAILS_PREVIEW_LENGTH) -> str:
    """Preview text for the list; the ellipsis is added only when text was cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + LocationConfig.ELLIPSIS


@dataclass(frozen=True)
class ListRow:
    """One rendered list entry."""

    id: str
    name: str
    preview: str


def build_rows(snapshot: Sequence[Location]) -> list[ListRow]:
    """Rows in store order with truncated details."""
    return [ListRow(id=loc.id, name=loc.name, preview=truncate_details(text=loc.details)) for loc in snapshot]


def list_header(count: int) -> str:
    return f"Entered Locations ({count})"


# =============================================================================
# DIALOGS
# =============================================================================


@st.dialog("Edit Location")
def _edit_location_dialog(location: Location) -> None:
    """Prompt for a replacement name and details."""
    name = st.text_input("Name", value=location.name, key=f"edit_name_{location.id}")
    details = st.text_area("Details", value=location.details, key=f"edit_details_{location.id}")

    col_save, col_cancel = st.columns(2)
    with col_save:
        if st.button("💾 Save", type="primary", width="stretch", key=f"edit_save_{location.id}"):
            error = edit_location_action(location_id=location.id, name=name, details=details)
            if error is not None:
                error.display()
    with col_cancel:
        if st.button("✖️ Cancel", width="stretch", key=f"edit_cancel_{location.id}"):
            st.rerun()


@st.dialog("Confirm Delete")
def _confirm_delete_dialog(location: Location) -> None:
    """Show confirmation dialog before deleting a location."""
    st.markdown(f"Are you sure you want to delete **{escape_markdown(location.name)}**?")
    st.caption("This cannot be undone.")

    col_yes, col_no = st.columns(2)
    with col_yes:
        if st.button("🗑️ Yes, Delete", type="primary", width="stretch", key=f"delete_yes_{location.id}"):
            logger.info(f"Deleting location {location.id} ({location.name})")
            delete_location_action(location_id=location.id)
    with col_no:
        if st.button("✖️ Cancel", width="stretch", key=f"delete_no_{location.id}"):
            st.rerun()


# =============================================================================
# PANEL
# =============================================================================


class LocationListPanel:
    """Renders the list of saved locations with Edit/Delete per entry.

    Example:
        LocationListPanel(locations=controller.snapshot()).render()
    """

    def __init__(self, locations: Sequence[Location]) -> None:
        self.locations = tuple(locations)
        self.rows = build_rows(snapshot=self.locations)

    def render(self) -> None:
        st.subheader(list_header(count=len(self.rows)))

        if not self.rows:
            st.caption(EMPTY_LIST_TEXT)
            return

        by_id = {loc.id: loc for loc in self.locations}
        for row in self.rows:
            with st.container(border=True):
                st.markdown(f"**{escape_markdown(row.name)}**")
                st.caption(escape_markdown(row.preview))
                col_edit, col_delete = st.columns(2)
                with col_edit:
                    if st.button("✏️ Edit", key=f"edit_{row.id}", width="stretch"):
                        _edit_location_dialog(location=by_id[row.id])
                with col_delete:
                    if st.button("🗑️ Delete", key=f"delete_{row.id}", width="stretch"):
                        _confirm_delete_dialog(location=by_id[row.id])
