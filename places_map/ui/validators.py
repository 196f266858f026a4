"""Validators - Input validation for the places map.

Validators return Optional[Message]:
- None if valid
- A Message object if invalid (caller displays it or wraps it in ValidationError)
"""

from places_map.model.message import EmptyNameMessage, Message


def validate_location_name(name: str) -> Message | None:
    """Validate that a location name is non-empty after trimming.

    Returns:
        None if valid, EmptyNameMessage if empty or whitespace-only.
    """
    if not name.strip():
        return EmptyNameMessage()
    return None
