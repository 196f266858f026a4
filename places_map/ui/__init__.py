"""User interface components for the places map.

File Structure (layout-based naming):
- left_panel.py: Sidebar with mode toggle, reset buttons, stats
- center_map.py: Pydeck map with saved locations and the draft marker
- right_panel.py: Draft form, details popup, location list
- location_list.py: List rows, edit and delete dialogs

Core Components:
- state_machine.py: ModeStateMachine + DraftStateMachine + PlacesController
- context.py: PlacesContext shared by both machines
- actions.py: All action functions (save, cancel, finish, reset, edit, delete)
- click_handlers.py: Mode-specific map click processing
- validators.py: Input validation with Optional[Message] returns
"""

from places_map.ui.actions import (
    cancel_draft_action,
    delete_location_action,
    edit_location_action,
    finish_adding_action,
    reset_map_action,
    resume_adding_action,
    save_draft_action,
)
from places_map.ui.center_map import MapRenderer
from places_map.ui.click_detector import ClickDetector
from places_map.ui.click_handlers import dispatch_click
from places_map.ui.context import PlacesContext
from places_map.ui.left_panel import SidebarRenderer
from places_map.ui.location_list import LocationListPanel
from places_map.ui.right_panel import render_control_panel
from places_map.ui.state_machine import (
    DraftStateMachine,
    ModeStateMachine,
    PlacesController,
    UIListener,
)

__all__ = [
    "PlacesController",
    "PlacesContext",
    "ModeStateMachine",
    "DraftStateMachine",
    "UIListener",
    "MapRenderer",
    "SidebarRenderer",
    "LocationListPanel",
    "ClickDetector",
    "dispatch_click",
    "render_control_panel",
    "cancel_draft_action",
    "delete_location_action",
    "edit_location_action",
    "finish_adding_action",
    "reset_map_action",
    "resume_adding_action",
    "save_draft_action",
]
