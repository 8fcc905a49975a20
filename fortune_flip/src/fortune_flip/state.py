import logging
from dataclasses import replace
from typing import Callable, Optional

from .models import (
    CollectionState,
    Wheel,
    create_segment,
    create_wheel as _new_wheel,
    default_collection,
    ensure_segments,
    segment_label,
    wheel_name,
)

logger = logging.getLogger(__name__)

ChangeListener = Callable[[CollectionState], None]


# --- Helpers ---

def _replace_wheel(state: CollectionState, wheel_id: str, updater: Callable[[Wheel], Wheel]) -> CollectionState:
    if state.find_wheel(wheel_id) is None:
        return state
    wheels = tuple(updater(w) if w.id == wheel_id else w for w in state.wheels)
    return replace(state, wheels=wheels)


def repair_state(state: CollectionState) -> CollectionState:
    """Bring an arbitrary state back within the collection invariants.

    Used for states that did not come from the mutators (e.g. a loaded
    snapshot): no wheels becomes the default collection, empty wheels get a
    default segment, a dangling active id falls back to the first wheel and a
    dangling selection is dropped.
    """
    if not state.wheels:
        return default_collection()
    wheels = tuple(
        w if w.segments else replace(w, segments=ensure_segments(w.segments))
        for w in state.wheels
    )
    state = replace(state, wheels=wheels)
    if state.active_wheel is None:
        state = replace(state, active_wheel_id=wheels[0].id, selected_segment_id=None)
    if state.selected_segment_id is not None and state.selected_segment is None:
        state = replace(state, selected_segment_id=None)
    return state


# --- Mutators ---
# Each takes the current state and returns the next one. Ids that do not
# resolve leave the state untouched.

def create_wheel(state: CollectionState) -> CollectionState:
    wheel = _new_wheel(wheel_name(len(state.wheels) + 1))
    return replace(
        state,
        wheels=state.wheels + (wheel,),
        active_wheel_id=wheel.id,
        selected_segment_id=None,
    )


def delete_wheel(state: CollectionState, wheel_id: str) -> CollectionState:
    if len(state.wheels) <= 1 or state.find_wheel(wheel_id) is None:
        return state
    wheels = tuple(w for w in state.wheels if w.id != wheel_id)
    if not wheels:
        return state
    active_wheel_id = state.active_wheel_id
    if active_wheel_id == wheel_id:
        # First remaining wheel in display order takes over
        active_wheel_id = wheels[0].id
    return replace(state, wheels=wheels, active_wheel_id=active_wheel_id, selected_segment_id=None)


def rename_wheel(state: CollectionState, wheel_id: str, new_name: str) -> CollectionState:
    return _replace_wheel(state, wheel_id, lambda w: replace(w, name=new_name))


def add_segment(state: CollectionState, wheel_id: str) -> CollectionState:
    def _append(wheel: Wheel) -> Wheel:
        segment = create_segment(segment_label(len(wheel.segments) + 1))
        return replace(wheel, segments=wheel.segments + (segment,))

    return _replace_wheel(state, wheel_id, _append)


def update_segment_label(state: CollectionState, wheel_id: str, segment_id: str, new_label: str) -> CollectionState:
    wheel = state.find_wheel(wheel_id)
    if wheel is None or wheel.find_segment(segment_id) is None:
        return state
    segments = tuple(replace(s, label=new_label) if s.id == segment_id else s for s in wheel.segments)
    return _replace_wheel(state, wheel_id, lambda w: replace(w, segments=segments))


def delete_segment(state: CollectionState, wheel_id: str, segment_id: str) -> CollectionState:
    wheel = state.find_wheel(wheel_id)
    if wheel is None or wheel.find_segment(segment_id) is None:
        return state
    remaining = ensure_segments(tuple(s for s in wheel.segments if s.id != segment_id))
    state = _replace_wheel(state, wheel_id, lambda w: replace(w, segments=remaining))
    if state.selected_segment_id == segment_id:
        state = replace(state, selected_segment_id=None)
    return state


def set_active_wheel(state: CollectionState, wheel_id: str) -> CollectionState:
    if state.find_wheel(wheel_id) is None:
        return state
    return replace(state, active_wheel_id=wheel_id, selected_segment_id=None)


def record_spin_result(state: CollectionState, segment_id: str) -> CollectionState:
    wheel = state.active_wheel
    if wheel is None or wheel.find_segment(segment_id) is None:
        return state
    return replace(state, selected_segment_id=segment_id)


def clear_selection(state: CollectionState) -> CollectionState:
    if state.selected_segment_id is None:
        return state
    return replace(state, selected_segment_id=None)


# --- Store ---

class WheelStore:
    """Owns the current collection state and applies mutators to it.

    ``on_change`` is called with the new state after every change to the
    wheels or the active wheel id. Selection changes are not reported since
    the selection is never persisted.

    ``activations`` counts changes of the active wheel id, so a caller can
    tell that the user left a wheel even if they came back to it.
    """

    def __init__(self, state: Optional[CollectionState] = None, on_change: Optional[ChangeListener] = None):
        self._state = repair_state(state) if state is not None else default_collection()
        self._on_change = on_change
        self.activations = 0

    @property
    def state(self) -> CollectionState:
        return self._state

    @property
    def active_wheel(self) -> Optional[Wheel]:
        return self._state.active_wheel

    def _apply(self, new_state: CollectionState) -> CollectionState:
        old = self._state
        self._state = new_state
        if new_state.active_wheel_id != old.active_wheel_id:
            self.activations += 1
        if self._on_change is not None and (
            new_state.wheels != old.wheels or new_state.active_wheel_id != old.active_wheel_id
        ):
            self._on_change(new_state)
        return new_state

    def create_wheel(self) -> CollectionState:
        new_state = self._apply(create_wheel(self._state))
        logger.debug("Created wheel %s", new_state.active_wheel_id)
        return new_state

    def delete_wheel(self, wheel_id: str) -> CollectionState:
        return self._apply(delete_wheel(self._state, wheel_id))

    def rename_wheel(self, wheel_id: str, new_name: str) -> CollectionState:
        return self._apply(rename_wheel(self._state, wheel_id, new_name))

    def add_segment(self, wheel_id: str) -> CollectionState:
        return self._apply(add_segment(self._state, wheel_id))

    def update_segment_label(self, wheel_id: str, segment_id: str, new_label: str) -> CollectionState:
        return self._apply(update_segment_label(self._state, wheel_id, segment_id, new_label))

    def delete_segment(self, wheel_id: str, segment_id: str) -> CollectionState:
        return self._apply(delete_segment(self._state, wheel_id, segment_id))

    def set_active_wheel(self, wheel_id: str) -> CollectionState:
        return self._apply(set_active_wheel(self._state, wheel_id))

    def record_spin_result(self, segment_id: str) -> CollectionState:
        return self._apply(record_spin_result(self._state, segment_id))

    def clear_selection(self) -> CollectionState:
        return self._apply(clear_selection(self._state))
