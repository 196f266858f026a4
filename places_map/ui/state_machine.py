"""State machines for the places map UI.

Uses python-statemachine for robust state management with:
- Clear state definitions
- Guarded transitions (conditions) and validators
- Entry/exit hooks for side effects
- Explicit event-driven transitions

Architecture Overview
---------------------
Two small machines share one PlacesContext as their model, each storing its
state value in its own field:

    ModeStateMachine  (context.mode):        Adding <-> Browsing
    DraftStateMachine (context.draft_state): Idle <-> Drafting

PlacesController owns both machines plus the LocationStore and is the only
entry point the UI calls. All mutations go through it, which gives one place
to enforce the invariants:

- A draft exists only while the draft machine is Drafting
- Drafts can only be placed in Adding mode
- Leaving Adding mode discards any live draft
- Every stored location has a non-empty name and a unique id

States:
    Mode:  ADDING (initial), BROWSING
    Draft: IDLE (initial), DRAFTING

Transitions:
    ADDING -> BROWSING: finish (Done Adding; exit hook discards the draft)
    BROWSING -> ADDING: resume (Continue Adding), force_adding (Reset)
    IDLE -> DRAFTING: place_draft (map click, only in Adding mode)
    DRAFTING -> IDLE: save_draft (validated), cancel_draft

Second Click Policy
-------------------
A map click while a draft is pending is IGNORED: the first placed point is
kept until it is saved or cancelled. place_draft is only defined from IDLE.

Streamlit reruns are triggered by the caller (see ui/actions.py), not by the
listener, so a transition that fires another transition from its hooks (finish
discarding the draft) always runs to completion.
"""

from __future__ import annotations

import logging

from statemachine import State, StateMachine

from places_map.model.errors import ValidationError
from places_map.model.location import Location, normalize_details
from places_map.model.location_store import LocationStore
from places_map.ui.context import DraftState, Mode, PlacesContext
from places_map.ui.validators import validate_location_name

logger = logging.getLogger(__name__)


class UIListener:
    """Listener for UI side effects after state transitions.

    Logs every transition and forgets the last clicked marker, so the user
    can click the same marker again in the new state. Map-click dedup is kept
    to prevent ghost clicks after st.rerun().

    Usage:
        sm = DraftStateMachine(context=context, store=store)
        sm.add_listener(UIListener(context=context))
    """

    def __init__(self, context: PlacesContext) -> None:
        self.context = context

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")
        self.context.click_dedup.clear_marker()


class DraftStateMachine(StateMachine):
    """Lifecycle of the single pending location.

    States:
        idle: No draft; a map click in Adding mode places one
        drafting: Coordinate placed, waiting for name/details
    """

    idle = State("Idle", value=DraftState.IDLE, initial=True)
    drafting = State("Drafting", value=DraftState.DRAFTING)

    place_draft = idle.to(drafting, cond="accepts_clicks")
    save_draft = drafting.to(idle, validators="validate_form")
    cancel_draft = drafting.to(idle)

    def __init__(self, context: PlacesContext, store: LocationStore) -> None:
        """Initialize draft machine.

        Args:
            context: Shared model (state kept in context.draft_state)
            store: Store that receives committed drafts
        """
        self.store = store
        self.last_saved: Location | None = None
        super().__init__(model=context, state_field="draft_state")

    @property
    def context(self) -> PlacesContext:
        """Alias for model."""
        return self.model

    @property
    def is_idle(self) -> bool:
        return self.idle.is_active

    @property
    def is_drafting(self) -> bool:
        return self.drafting.is_active

    # ==========================================================================
    # Guards and Validators
    # ==========================================================================

    def accepts_clicks(self) -> bool:
        """Guard: drafts can only be placed in Adding mode."""
        return self.context.is_adding()

    def validate_form(self) -> None:
        """Validator: block saving while the name is empty."""
        error = validate_location_name(name=self.context.draft.name)
        if error is not None:
            self.context.messages.form_error = error
            raise ValidationError(error)

    # ==========================================================================
    # Hooks
    # ==========================================================================

    def before_place_draft(self, lat: float, lng: float) -> None:
        # Each draft starts with an empty form
        self.context.draft.clear_form()
        self.context.draft.place(lat=lat, lng=lng)

    def on_save_draft(self) -> None:
        draft = self.context.draft
        if draft.coordinate is None:
            raise RuntimeError("Drafting state without a draft coordinate")
        location = Location(
            id=self.store.next_id(),
            coordinate=draft.coordinate,
            name=draft.name.strip(),
            details=normalize_details(draft.details),
        )
        self.store.add(location=location)
        self.last_saved = location

    def on_enter_idle(self) -> None:
        self.context.clear_draft()

    # ==========================================================================
    # Operations
    # ==========================================================================

    def begin(self, lat: float, lng: float) -> bool:
        """Place a draft at the clicked coordinate.

        Returns:
            True if a draft was placed. False if ignored because a draft is
            already pending or the mode is not Adding.
        """
        if self.is_drafting:
            logger.info(f"Click at ({lat:.5f}, {lng:.5f}) ignored: draft already pending")
            return False
        if not self.accepts_clicks():
            logger.info(f"Click at ({lat:.5f}, {lng:.5f}) ignored: not in Adding mode")
            return False
        self.place_draft(lat=lat, lng=lng)
        return True

    def update_form(self, name: str, details: str) -> bool:
        """Store the raw form input for the pending draft.

        Returns:
            False (input dropped) when no draft is pending.
        """
        if not self.is_drafting:
            logger.info("Form input ignored: no draft pending")
            return False
        self.context.draft.update_form(name=name, details=details)
        return True

    def commit(self) -> Location:
        """Save the draft into the store.

        Returns:
            The newly stored Location.

        Raises:
            TransitionNotAllowed: If no draft is pending.
            ValidationError: If the name is empty; draft and form are kept.
        """
        self.last_saved = None
        self.save_draft()
        if self.last_saved is None:
            raise RuntimeError("save_draft completed without storing a location")
        return self.last_saved

    def cancel(self) -> bool:
        """Discard the draft. No-op (returns False) when idle."""
        if not self.is_drafting:
            return False
        self.cancel_draft()
        return True

    def discard(self, reason: str) -> None:
        """Drop a pending draft because of a mode change or reset."""
        if self.is_drafting:
            logger.info(f"Discarding draft at {self.context.draft.coordinate}: {reason}")
            self.cancel_draft()

    def __repr__(self) -> str:
        return f"DraftStateMachine(state={self.current_state.name}, draft={self.context.draft.coordinate})"


class ModeStateMachine(StateMachine):
    """Binary interaction mode gating whether map clicks create drafts.

    States:
        adding: Map clicks place drafts (initial)
        browsing: Map locked, markers only show details
    """

    adding = State("Adding", value=Mode.ADDING, initial=True)
    browsing = State("Browsing", value=Mode.BROWSING)

    finish = adding.to(browsing)
    resume = browsing.to(adding)
    force_adding = browsing.to(adding)

    def __init__(self, context: PlacesContext, drafts: DraftStateMachine) -> None:
        """Initialize mode machine.

        Args:
            context: Shared model (state kept in context.mode)
            drafts: Draft machine to notify when leaving Adding mode
        """
        self.drafts = drafts
        super().__init__(model=context, state_field="mode")

    @property
    def context(self) -> PlacesContext:
        """Alias for model."""
        return self.model

    @property
    def is_adding(self) -> bool:
        return self.adding.is_active

    @property
    def is_browsing(self) -> bool:
        return self.browsing.is_active

    def on_exit_adding(self) -> None:
        # A draft must never linger while clicks can't be accepted
        self.drafts.discard(reason="left Adding mode")

    def finish_adding(self) -> bool:
        """Adding -> Browsing. Returns False (no-op) if already browsing."""
        if self.is_browsing:
            return False
        self.finish()
        return True

    def resume_adding(self) -> bool:
        """Browsing -> Adding. Returns False (no-op) if already adding."""
        if self.is_adding:
            return False
        self.resume()
        return True

    def reset(self) -> None:
        """Force Adding mode unconditionally and drop any draft."""
        self.drafts.discard(reason="reset")
        self.context.clear_draft()
        if self.is_browsing:
            self.force_adding()

    def __repr__(self) -> str:
        return f"ModeStateMachine(state={self.current_state.name})"


class PlacesController:
    """Explicit state container: store + mode machine + draft machine.

    Example:
        controller = PlacesController.create(add_ui_listener=False)
        controller.handle_map_click(lat=34.05, lng=-118.24)
        controller.update_form(name="Home", details="")
        location = controller.commit()
    """

    def __init__(self, context: PlacesContext | None = None, store: LocationStore | None = None) -> None:
        self.context = context or PlacesContext()
        self.store = store or LocationStore()
        self.drafts = DraftStateMachine(context=self.context, store=self.store)
        self.modes = ModeStateMachine(context=self.context, drafts=self.drafts)

    @staticmethod
    def create(add_ui_listener: bool = True, store: LocationStore | None = None) -> PlacesController:
        """Factory method to create the controller with an optional UI listener.

        Args:
            add_ui_listener: If True, adds UIListener to both machines.
                             Set to False for testing.
            store: Existing store to reuse (e.g., on UI error recovery)
        """
        controller = PlacesController(store=store)
        if add_ui_listener:
            listener = UIListener(context=controller.context)
            controller.drafts.add_listener(listener)
            controller.modes.add_listener(listener)
            logger.info("Created PlacesController with UIListener")
        else:
            logger.info("Created PlacesController without UI listener")
        return controller

    # ==========================================================================
    # State Checks
    # ==========================================================================

    @property
    def is_adding(self) -> bool:
        return self.modes.is_adding

    @property
    def is_drafting(self) -> bool:
        return self.drafts.is_drafting

    def snapshot(self) -> tuple[Location, ...]:
        return self.store.snapshot()

    # ==========================================================================
    # Draft Operations
    # ==========================================================================

    def handle_map_click(self, lat: float, lng: float) -> bool:
        """Map click -> draft, gated by mode. Returns True if a draft was placed."""
        if not self.is_adding:
            logger.info(f"Click at ({lat:.5f}, {lng:.5f}) ignored: browsing")
            return False
        placed = self.drafts.begin(lat=lat, lng=lng)
        if placed:
            self.context.viewing.clear()
        return placed

    def update_form(self, name: str, details: str) -> bool:
        return self.drafts.update_form(name=name, details=details)

    def commit(self) -> Location:
        """Save the pending draft. See DraftStateMachine.commit."""
        return self.drafts.commit()

    def cancel(self) -> bool:
        return self.drafts.cancel()

    # ==========================================================================
    # Mode Operations
    # ==========================================================================

    def finish_adding(self) -> bool:
        return self.modes.finish_adding()

    def resume_adding(self) -> bool:
        return self.modes.resume_adding()

    def reset(self) -> int:
        """Clear all locations and the draft, force Adding mode.

        Returns:
            Number of locations removed.
        """
        self.modes.reset()
        self.context.viewing.clear()
        return self.store.clear()

    # ==========================================================================
    # Entry Operations (legal in either mode, bypass both machines)
    # ==========================================================================

    def edit_location(self, location_id: str, name: str, details: str) -> Location:
        """Replace name/details. Raises NotFoundError or ValidationError."""
        return self.store.edit(location_id=location_id, name=name, details=details)

    def delete_location(self, location_id: str) -> Location:
        """Remove one entry. Raises NotFoundError."""
        removed = self.store.delete(location_id=location_id)
        if self.context.viewing.location_id == location_id:
            self.context.viewing.clear()
        return removed

    def show_location(self, location_id: str) -> Location:
        """Open the details popup for a saved location. Raises NotFoundError."""
        location = self.store.get(location_id=location_id)
        self.context.viewing.show(location_id=location_id)
        return location

    def __repr__(self) -> str:
        return f"PlacesController(mode={self.context.mode}, draft={self.context.draft_state}, store={self.store!r})"
