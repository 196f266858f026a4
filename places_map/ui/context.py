"""Context classes for the Places Map state machines.

This module contains the dataclasses that hold mutable UI state. Both state
machines (mode and draft) use one PlacesContext as their shared model, each
storing its current state value in its own field.

Architecture:
- All contexts inherit from BaseContext (provides clear() interface)
- PlacesContext composes all sub-contexts
- Contexts are pure data holders - no business logic
- State machines own the transitions, UI reads from the context

Sub-contexts:
    DraftContext: Pending location coordinate + form buffer
    ViewingContext: Which saved location's details are shown
    MapContext: Map center and zoom
    ClickDeduplicationContext: Click deduplication tracking
    UIMessagesContext: Inline form error
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from places_map.constants import ClickConfig, MapConfig
from places_map.model.coordinate import Coordinate

if TYPE_CHECKING:
    from places_map.model.message import Message


class Mode:
    """Interaction mode values, stored in PlacesContext.mode."""

    ADDING = "adding"
    BROWSING = "browsing"


class DraftState:
    """Draft lifecycle values, stored in PlacesContext.draft_state."""

    IDLE = "idle"
    DRAFTING = "drafting"


class BaseContext(ABC):
    """Abstract base class for all context dataclasses."""

    @abstractmethod
    def clear(self) -> None:
        """Reset context to initial state."""
        ...


@dataclass
class DraftContext(BaseContext):
    """The single pending location and its uncommitted form input."""

    coordinate: Coordinate | None = None
    name: str = ""
    details: str = ""

    def clear(self) -> None:
        self.coordinate = None
        self.clear_form()

    def clear_form(self) -> None:
        self.name = ""
        self.details = ""

    def place(self, lat: float, lng: float) -> None:
        """Set draft coordinate. Use this setter, don't set fields directly."""
        self.coordinate = Coordinate(lat=lat, lng=lng)

    def update_form(self, name: str, details: str) -> None:
        """Store raw form input, untrimmed and unvalidated."""
        self.name = name
        self.details = details

    def has_draft(self) -> bool:
        return self.coordinate is not None


@dataclass
class ViewingContext(BaseContext):
    """Details popup for a saved location (shown in the control panel)."""

    location_id: str | None = None

    def show(self, location_id: str) -> None:
        self.location_id = location_id

    def clear(self) -> None:
        self.location_id = None


@dataclass
class MapContext(BaseContext):
    """Map view state. Center is kept in (lat, lng) fields."""

    lat: float = MapConfig.START_CENTER_LAT
    lng: float = MapConfig.START_CENTER_LNG
    zoom: int = MapConfig.DEFAULT_ZOOM

    @property
    def lat_lng(self) -> tuple[float, float]:
        """Return (lat, lng) tuple - standard geographic order."""
        return (self.lat, self.lng)

    def clear(self) -> None:
        self.reset_view()

    def reset_view(self) -> None:
        """Back to the configured start view."""
        self.lat = MapConfig.START_CENTER_LAT
        self.lng = MapConfig.START_CENTER_LNG
        self.zoom = MapConfig.DEFAULT_ZOOM


@dataclass
class ClickDeduplicationContext(BaseContext):
    """Click deduplication by tracking last-seen coordinates and object IDs.

    streamlit-deckgl returns the last click event again on every rerun, so the
    same event must not be processed twice. A short debounce also drops
    rapid double-clicks.
    """

    last_coord: tuple[float, float] | None = None
    last_object_id: str | None = None
    last_click_timestamp: float = 0.0
    debounce_seconds: float = ClickConfig.DEBOUNCE_SECONDS

    def is_new_click(
        self,
        coord: tuple[float, ...] | None,
        obj_id: str | None,
    ) -> bool:
        """Check if this is a new click by comparing coordinates, object ID, and timing.

        Args:
            coord: Click coordinate tuple (lng, lat) or None
            obj_id: Unique object identifier string or None for map clicks

        Returns:
            True if this is a new click that should be processed
        """
        if coord is None and obj_id is None:
            return False

        # Skip debounce entirely when disabled (tests)
        now = time.time()
        if self.debounce_seconds > 0 and now - self.last_click_timestamp < self.debounce_seconds:
            return False

        if obj_id is not None:
            if obj_id != self.last_object_id:
                self.last_object_id = obj_id
                self.last_click_timestamp = now
                if coord is not None:
                    self.last_coord = (coord[0], coord[1])
                return True
            return False

        if coord is not None:
            coord_2d = (coord[0], coord[1])
            if coord_2d != self.last_coord:
                self.last_coord = coord_2d
                self.last_click_timestamp = now
                return True
            return False

        return False

    def clear(self) -> None:
        self.last_coord = None
        self.last_object_id = None
        self.last_click_timestamp = 0.0

    def clear_marker(self) -> None:
        """Forget the last marker so the same marker can be clicked again."""
        self.last_object_id = None


@dataclass
class UIMessagesContext(BaseContext):
    """Inline error shown under the draft form."""

    form_error: Message | None = None

    def clear(self) -> None:
        self.form_error = None


@dataclass
class PlacesContext:
    """Shared model for the mode and draft state machines.

    The single explicit state container: mode, draft and view state live
    here and are only changed through the state machines and actions.

    Note: 'mode' and 'draft_state' are managed by python-statemachine
    (one state field per machine). Read them, never assign them.
    """

    mode: str | None = None
    draft_state: str | None = None

    draft: DraftContext = field(default_factory=DraftContext)
    viewing: ViewingContext = field(default_factory=ViewingContext)
    map: MapContext = field(default_factory=MapContext)
    click_dedup: ClickDeduplicationContext = field(default_factory=ClickDeduplicationContext)
    messages: UIMessagesContext = field(default_factory=UIMessagesContext)

    def is_adding(self) -> bool:
        return self.mode == Mode.ADDING

    def has_draft(self) -> bool:
        return self.draft.has_draft()

    def clear_draft(self) -> None:
        """Drop draft coordinate, form buffer and form error."""
        self.draft.clear()
        self.messages.clear()

    def __repr__(self) -> str:
        return (
            f"PlacesContext(mode={self.mode}, draft_state={self.draft_state}, "
            f"draft={self.draft.coordinate}, viewing={self.viewing.location_id})"
        )
