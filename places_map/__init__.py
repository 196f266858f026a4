"""Places Map - Mark places on an interactive map and describe them.

A single-user Streamlit application featuring:
- Click-to-place drafts that become named, described locations
- Adding/Browsing modes driven by explicit state machines
- A browsable list with per-entry edit and delete

Modules:
    model: Data structures (Coordinate, Location, LocationStore, messages, errors)
    ui: Streamlit interface components (state machines, renderers, panels)

Example:
    from places_map.ui import PlacesController

    controller = PlacesController.create(add_ui_listener=False)
    controller.handle_map_click(lat=34.05, lng=-118.24)
    controller.update_form(name="Home", details="")
    controller.commit()
"""
