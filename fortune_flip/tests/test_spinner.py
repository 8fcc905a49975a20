import random

from fortune_flip.constants import SPIN_DURATION_MS, STATUS_IDLE, STATUS_SPINNING
from fortune_flip.spinner import SpinController
from fortune_flip.state import WheelStore


def store_with_segments(count):
    store = WheelStore()
    wheel_id = store.state.wheels[0].id
    for _ in range(count - 1):
        store.add_segment(wheel_id)
    return store


def test_spin_records_winner_on_finish():
    store = store_with_segments(3)
    spinner = SpinController(store, random.Random(1))
    ticket = spinner.start()
    assert ticket is not None
    assert spinner.status == STATUS_SPINNING
    assert ticket.duration_ms == SPIN_DURATION_MS
    assert store.state.selected_segment_id is None

    assert spinner.finish() == ticket.winner_id
    assert spinner.status == STATUS_IDLE
    assert store.state.selected_segment_id == ticket.winner_id
    assert store.state.active_wheel.segments[ticket.index].id == ticket.winner_id


def test_second_spin_rejected_while_spinning():
    store = store_with_segments(2)
    spinner = SpinController(store, random.Random(2))
    first = spinner.start()
    assert spinner.start() is None
    assert spinner.pending == first
    spinner.finish()
    assert spinner.start() is not None


def test_new_spin_clears_previous_winner():
    store = store_with_segments(4)
    spinner = SpinController(store, random.Random(3))
    spinner.start()
    spinner.finish()
    assert store.state.selected_segment_id is not None
    spinner.start()
    assert store.state.selected_segment_id is None


def test_finish_while_idle_is_noop():
    store = store_with_segments(2)
    spinner = SpinController(store)
    assert spinner.finish() is None
    assert store.state.selected_segment_id is None


def test_winner_deleted_mid_spin_is_dropped():
    store = store_with_segments(3)
    spinner = SpinController(store, random.Random(4))
    ticket = spinner.start()
    store.delete_segment(ticket.wheel_id, ticket.winner_id)
    assert spinner.finish() is None
    assert spinner.status == STATUS_IDLE
    assert store.state.selected_segment_id is None


def test_other_edits_mid_spin_keep_winner():
    store = store_with_segments(3)
    spinner = SpinController(store, random.Random(5))
    ticket = spinner.start()
    store.add_segment(ticket.wheel_id)
    store.update_segment_label(ticket.wheel_id, ticket.winner_id, "Renamed")
    assert spinner.finish() == ticket.winner_id
    assert store.state.selected_segment.label == "Renamed"


def test_wheel_switch_mid_spin_drops_result():
    store = store_with_segments(2)
    spinner = SpinController(store, random.Random(6))
    ticket = spinner.start()
    store.create_wheel()
    assert spinner.finish() is None
    assert store.state.active_wheel_id != ticket.wheel_id
    assert store.state.selected_segment_id is None


def test_only_segment_deleted_mid_spin_leaves_healed_wheel():
    store = WheelStore()
    spinner = SpinController(store)
    ticket = spinner.start()
    store.delete_segment(ticket.wheel_id, ticket.winner_id)
    assert spinner.finish() is None
    assert len(store.state.active_wheel.segments) == 1


def test_switching_away_and_back_mid_spin_drops_result():
    store = store_with_segments(3)
    first_id = store.state.active_wheel_id
    store.create_wheel()
    store.set_active_wheel(first_id)
    spinner = SpinController(store, random.Random(7))
    ticket = spinner.start()
    other_id = store.state.wheels[1].id
    store.set_active_wheel(other_id)
    store.set_active_wheel(first_id)
    assert store.state.active_wheel_id == ticket.wheel_id
    assert spinner.finish() is None
    assert store.state.selected_segment_id is None
