"""LocationStore - Canonical collection of saved locations.

Owns every committed Location and the operations over them:
- Allocating ids for new entries
- Adding committed drafts
- Editing name/details in place
- Deleting single entries
- Clearing everything (full reset)
- Read-only snapshots for rendering

Entries are keyed by id, never by list position, so deleting one entry
can't invalidate a reference another pending operation holds.
"""

import logging
from collections.abc import Iterator

from places_map.constants import LocationConfig
from places_map.model.errors import NotFoundError, ValidationError
from places_map.model.location import Location
from places_map.model.message import EmptyNameMessage

logger = logging.getLogger(__name__)


class LocationStore:
    """Ordered, id-keyed collection of Locations.

    Insertion order is the display order. Instances are frozen, so callers
    can't mutate what snapshot() hands out; this store is the sole mutator.

    Example:
        store = LocationStore()
        store.add(location=Location(id=store.next_id(), coordinate=coord, name="Home", details="x"))
        store.delete(location_id="P1")
    """

    def __init__(self) -> None:
        """Initialize empty store."""
        self._locations: dict[str, Location] = {}
        self._location_counter = 0

    def next_id(self) -> str:
        """Allocate a fresh id. Ids are never reused, not even after clear()."""
        self._location_counter += 1
        return f"{LocationConfig.ID_PREFIX}{self._location_counter}"

    # =========================================================================
    # Mutations
    # =========================================================================

    def add(self, location: Location) -> None:
        """Append a committed location.

        Raises:
            ValueError: If the id is already stored (programming error upstream).
        """
        if location.id in self._locations:
            raise ValueError(f"Duplicate location id {location.id}")
        self._locations[location.id] = location
        logger.info(f"[STORE] Added {location.id} '{location.name}' at ({location.lat:.5f}, {location.lng:.5f})")

    def edit(self, location_id: str, name: str, details: str) -> Location:
        """Replace name/details of one entry; id, coordinate and position are kept.

        Returns:
            The updated Location.

        Raises:
            NotFoundError: If no entry has this id.
            ValidationError: If name is empty after trimming.
        """
        current = self.get(location_id=location_id)
        if not name.strip():
            raise ValidationError(EmptyNameMessage())

        updated = current.with_text(name=name, details=details)
        # Reassigning an existing key keeps its position in the dict
        self._locations[location_id] = updated
        logger.info(f"[STORE] Edited {location_id}: '{current.name}' -> '{updated.name}'")
        return updated

    def delete(self, location_id: str) -> Location:
        """Remove one entry, leaving the order of the rest unchanged.

        Returns:
            The removed Location.

        Raises:
            NotFoundError: If no entry has this id.
        """
        removed = self._locations.pop(location_id, None)
        if removed is None:
            raise NotFoundError(location_id=location_id)
        logger.info(f"[STORE] Deleted {location_id} '{removed.name}'")
        return removed

    def clear(self) -> int:
        """Remove all entries. Returns the number removed."""
        removed_count = len(self._locations)
        self._locations.clear()
        logger.info(f"[STORE] Cleared {removed_count} location(s)")
        return removed_count

    # =========================================================================
    # Queries
    # =========================================================================

    def get(self, location_id: str) -> Location:
        """Look up one entry.

        Raises:
            NotFoundError: If no entry has this id.
        """
        location = self._locations.get(location_id)
        if location is None:
            raise NotFoundError(location_id=location_id)
        return location

    def snapshot(self) -> tuple[Location, ...]:
        """Current entries in insertion order."""
        return tuple(self._locations.values())

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, location_id: object) -> bool:
        return location_id in self._locations

    def __iter__(self) -> Iterator[Location]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"LocationStore(count={len(self._locations)}, next=P{self._location_counter + 1})"
