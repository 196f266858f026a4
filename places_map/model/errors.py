"""Errors raised by the places model.

Both are expected, user-recoverable conditions. They are caught at the action
boundary in ui/actions.py and shown to the user as messages; neither should
escape a render cycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from places_map.model.message import Message


class PlacesMapError(Exception):
    """Base class for places map errors."""


class ValidationError(PlacesMapError):
    """A required field is empty. Blocks the operation, nothing is mutated.

    Attributes:
        message: The Message to display inline next to the input.
    """

    def __init__(self, message: Message) -> None:
        super().__init__(message.message)
        self.message = message


class NotFoundError(PlacesMapError):
    """Edit/delete target is no longer in the store."""

    def __init__(self, location_id: str) -> None:
        super().__init__(f"Location {location_id} not found")
        self.location_id = location_id
