"""Rerun and map-reload helpers for the action layer.

Every state change ends in one of two ways:
- trigger_rerun: redraw with the same map component (pan/zoom kept), used
  after placing or saving a draft and after edits
- reload_map: redraw with a fresh map component, used after mode changes,
  reset, delete and closing details so a stale click event cannot fire again

The map component key is "main_map_{map_version}" (see app._render_map).
"""

import logging
from collections.abc import Callable

import streamlit as st

logger = logging.getLogger(__name__)


def trigger_rerun() -> None:
    """Redraw the page. Raises Streamlit's rerun exception, so nothing after it runs."""
    st.rerun()


def bump_map_version(reason: str) -> int:
    """Give the map a new component key; the old click event is forgotten.

    Returns:
        The new map version.
    """
    new_version = st.session_state.get("map_version", 0) + 1
    st.session_state.map_version = new_version
    logger.info(f"[MAP] map_version -> {new_version} ({reason})")
    return new_version


def reload_map(before: Callable[[], None] | None = None, reason: str = "reload") -> None:
    """Run `before`, swap in a fresh map component, then rerun."""
    if before is not None:
        before()
    bump_map_version(reason=reason)
    trigger_rerun()
