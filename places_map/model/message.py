"""Message - User-facing messages for the places map UI.

Architecture:
- LEFT (sidebar): ONE blue info message showing the current mode
- RIGHT (control panel): ONE yellow instruction for what to do NOW,
  red validation errors inline under the draft form
- TOASTS: transient feedback for clicks, saves, edits, deletes

Design Principles:
- Maximum ONE inline message per panel location at any time
- Validation failures never mutate state, they only produce a message
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - context/status
    WARNING = "warning"  # Yellow - action instructions
    ERROR = "error"  # Red - user mistakes


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for messages displayed inline (sidebar/panels).

    Rendered as st.info/st.warning/st.error blocks that persist until replaced.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)


@dataclass(frozen=True)
class ToastMessage(ABC):
    """Abstract base class for transient popup notifications.

    Good for: click feedback, not-found notices, quick confirmations
    Bad for: mode context, instruction panels
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for the toast notification."""
        raise NotImplementedError

    @property
    @abstractmethod
    def icon(self) -> str:
        """Icon to show in toast."""
        raise NotImplementedError

    def display(self) -> None:
        """Show this message as a toast notification and log it."""
        import streamlit as st

        logger = logging.getLogger(__name__)
        logger.info(f"[TOAST] {self.icon} {self.message}")
        st.toast(f"{self.icon} {self.message}")


# =============================================================================
# INLINE MESSAGES
# =============================================================================


@dataclass(frozen=True)
class EmptyNameMessage(Message):
    """Save/edit attempted with an empty or whitespace-only name."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return "Name is required — enter a name for this location."


@dataclass(frozen=True)
class AddingContextMessage(Message):
    """Sidebar context while map clicks create drafts."""

    location_count: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return (
            "**Adding** — Click on the map to mark a location and enter its details.\n\n"
            f"📍 {self.location_count} location(s) saved"
        )


@dataclass(frozen=True)
class BrowsingContextMessage(Message):
    """Sidebar context while the map is locked for browsing."""

    location_count: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return (
            "**Browsing** — Click on the markers to see the details you entered.\n\n"
            f"📍 {self.location_count} location(s) saved"
        )


@dataclass(frozen=True)
class DraftActionMessage(Message):
    """Instruction shown above the draft form."""

    lat: float
    lng: float

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        return f"**Add Location Details** — Lat: {self.lat:.4f}, Lng: {self.lng:.4f}"


# =============================================================================
# TOAST MESSAGES
# =============================================================================


@dataclass(frozen=True)
class InvalidClickMessage(ToastMessage):
    """User clicked something not allowed in the current mode."""

    action: str  # e.g., "place a location"
    reason: str  # e.g., "click Continue Adding first"

    @property
    def icon(self) -> str:
        return "⚠️"

    @property
    def message(self) -> str:
        return f"Cannot {self.action} — {self.reason}"


@dataclass(frozen=True)
class DraftPlacedMessage(ToastMessage):
    """A draft was placed; points the user at the form."""

    lat: float
    lng: float

    @property
    def icon(self) -> str:
        return "📍"

    @property
    def message(self) -> str:
        return f"Point placed at ({self.lat:.4f}, {self.lng:.4f}) — enter its details in the panel."


@dataclass(frozen=True)
class LocationSavedMessage(ToastMessage):
    """Draft committed into the store."""

    name: str

    @property
    def icon(self) -> str:
        return "✅"

    @property
    def message(self) -> str:
        return f"Saved **{self.name}**"


@dataclass(frozen=True)
class LocationUpdatedMessage(ToastMessage):
    """Entry edited in place."""

    name: str

    @property
    def icon(self) -> str:
        return "✏️"

    @property
    def message(self) -> str:
        return f"Updated **{self.name}**"


@dataclass(frozen=True)
class LocationDeletedMessage(ToastMessage):
    """Entry removed from the store."""

    name: str

    @property
    def icon(self) -> str:
        return "🗑️"

    @property
    def message(self) -> str:
        return f"Deleted **{self.name}**"


@dataclass(frozen=True)
class LocationNotFoundMessage(ToastMessage):
    """Edit/delete target vanished (e.g., deleted while a dialog was open)."""

    location_id: str

    @property
    def icon(self) -> str:
        return "❓"

    @property
    def message(self) -> str:
        return f"Location {self.location_id} no longer exists — nothing was changed."


@dataclass(frozen=True)
class MapResetMessage(ToastMessage):
    """All locations cleared and mode forced back to Adding."""

    removed_count: int

    @property
    def icon(self) -> str:
        return "🔄"

    @property
    def message(self) -> str:
        return f"Map reset — removed {self.removed_count} location(s)."
