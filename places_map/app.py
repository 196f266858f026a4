"""My Places Map - Mark places on a map and describe them.

Click the map to place a location, name it, save it into the list, then
browse, edit and delete the saved locations.

Run: streamlit run places_map/app.py
"""

import logging
import traceback

import streamlit as st

from places_map.constants import AppConfig, MapConfig
from places_map.ui import (
    ClickDetector,
    MapRenderer,
    PlacesController,
    SidebarRenderer,
    dispatch_click,
    render_control_panel,
)
from places_map.ui.infra import bump_map_version
from places_map.ui.pydeck_click_handler import render_pydeck_map

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MAP_CONTAINER_KEY = "places_map"


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> None:
    """Initialize session state with the controller and map renderer."""
    if "controller" not in st.session_state:
        st.session_state.controller = PlacesController.create()

    if "map_renderer" not in st.session_state:
        st.session_state.map_renderer = MapRenderer(
            center_lat=MapConfig.START_CENTER_LAT,
            center_lng=MapConfig.START_CENTER_LNG,
            zoom=MapConfig.DEFAULT_ZOOM,
        )

    if "map_version" not in st.session_state:
        st.session_state.map_version = 0


def reset_ui_state() -> None:
    """Reset UI state to initial while preserving the saved locations.

    Called when an error occurs to recover gracefully. Resets:
    - Mode to Adding, no draft, no details popup
    - Map version (to clear any stale map state)

    Preserves:
    - LocationStore (all saved locations and the id counter)
    """
    logger.info("Resetting UI state due to error recovery")

    store = st.session_state.controller.store
    st.session_state.controller = PlacesController.create(store=store)

    bump_map_version(reason="error recovery")

    logger.info("UI state reset complete - locations preserved")


# =============================================================================
# MAP RENDERING
# =============================================================================


def _apply_cursor_style(cursor: str) -> None:
    """Cursor affordance on the map container (cosmetic)."""
    st.html(f"<style>.st-key-{MAP_CONTAINER_KEY} iframe {{ cursor: {cursor}; }}</style>")


def _render_map() -> None:
    """Render map and handle clicks."""
    controller: PlacesController = st.session_state.controller
    renderer: MapRenderer = st.session_state.map_renderer
    ctx = controller.context

    map_version = st.session_state.get("map_version", 0)
    logger.debug(f"[MAP] Render: mode={ctx.mode}, draft={ctx.draft_state}, map_version={map_version}")

    renderer.update_view(lat=ctx.map.lat, lng=ctx.map.lng, zoom=ctx.map.zoom)
    deck = renderer.render(locations=controller.snapshot(), draft=ctx.draft.coordinate)

    _apply_cursor_style(cursor=MapRenderer.cursor_for(is_adding=controller.is_adding))
    with st.container(key=MAP_CONTAINER_KEY):
        click_result = render_pydeck_map(deck=deck, key=f"main_map_{map_version}", height=MapConfig.HEIGHT_PX)

    detector = ClickDetector(dedup=ctx.click_dedup)
    click_info = detector.detect(
        clicked_object=click_result.clicked_object,
        clicked_coordinate=click_result.clicked_coordinate,
    )
    if click_info:
        dispatch_click(click_info=click_info)


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    init_session_state()

    st.title(f"{AppConfig.TITLE} {AppConfig.ICON}")

    try:
        _run_app_ui()
    except Exception as e:
        error_msg = f"{type(e).__name__}: {e}"
        full_traceback = traceback.format_exc()
        logger.error(f"[MAIN] UI error caught: {error_msg}\n{full_traceback}")

        st.error(f"⚠️ Something went wrong: {error_msg}")

        # Reset UI state while preserving the locations
        reset_ui_state()

        if st.button("🔄 Reset and Continue", type="primary"):
            st.rerun()


def _run_app_ui() -> None:
    """Main UI rendering: sidebar, map (left) and control panel (right)."""
    controller: PlacesController = st.session_state.controller

    SidebarRenderer(controller=controller).render()

    if controller.is_adding:
        st.caption("Click on the map to mark a location and enter its details.")
    else:
        st.caption("Click on the markers to see the details you entered.")

    col_map, col_panel = st.columns([3, 1])
    with col_map:
        _render_map()
    with col_panel:
        render_control_panel(controller=controller)


if __name__ == "__main__":
    main()
