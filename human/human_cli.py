#!/usr/bin/env python3
import os
import sys
import time
from typing import Callable, Optional

from fortune_flip.geometry import pointer_index
from fortune_flip.log_setup import setup_colored_logging
from fortune_flip.persistence import open_store
from fortune_flip.spinner import SpinController, SpinTicket
from fortune_flip.state import WheelStore

FRAMES = 20


def show_state(store: WheelStore):
    state = store.state
    wheel = state.active_wheel
    if wheel is None:
        print("\nCreate a wheel to get started.")
        return

    print("\n=== Fortune Flip ===")
    names = [f"[{w.name}]" if w.id == wheel.id else w.name for w in state.wheels]
    print(f"Wheels: {'  '.join(names)}")
    print(f"Active: {wheel.name}")
    for number, segment in enumerate(wheel.segments, start=1):
        marker = "*" if segment.id == state.selected_segment_id else " "
        print(f" {marker} {number}. {segment.label}")
    winner = state.selected_segment
    print(f"Winner: {winner.label if winner else 'Choose [1] to spin'}")


def _ease_out_cubic(progress: float) -> float:
    return 1 - (1 - progress) ** 3


def play_spin(ticket: SpinTicket, segment_count: int, on_complete: Callable[[], None]):
    """Print an eased progress readout of the spin, then fire the completion callback."""
    speed = float(os.environ.get("FORTUNE_FLIP_SPIN_SPEED", "1.0"))
    delay = ticket.duration_ms / 1000 / FRAMES / speed if speed > 0 else 0
    for frame in range(1, FRAMES + 1):
        angle = ticket.target_rotation * _ease_out_cubic(frame / FRAMES)
        print(f"\r  spinning... {angle:7.1f} deg  (segment {pointer_index(angle, segment_count) + 1})", end="", flush=True)
        time.sleep(delay)
    print()
    on_complete()


def _pick_segment(store: WheelStore, prompt: str) -> Optional[str]:
    wheel = store.active_wheel
    raw = input(prompt).strip()
    if not raw.isdigit() or not (1 <= int(raw) <= len(wheel.segments)):
        print("Please enter a segment number from the list.")
        return None
    return wheel.segments[int(raw) - 1].id


def _pick_wheel(store: WheelStore, prompt: str) -> Optional[str]:
    wheels = store.state.wheels
    for number, wheel in enumerate(wheels, start=1):
        print(f"  {number}. {wheel.name}")
    raw = input(prompt).strip()
    if not raw.isdigit() or not (1 <= int(raw) <= len(wheels)):
        print("Please enter a wheel number from the list.")
        return None
    return wheels[int(raw) - 1].id


def handle_spin(store: WheelStore, spinner: SpinController):
    ticket = spinner.start()
    if ticket is None:
        if spinner.is_spinning:
            print("The wheel is already spinning.")
        else:
            print("Create a wheel to get started.")
        return
    play_spin(ticket, len(store.active_wheel.segments), spinner.finish)
    winner = store.state.selected_segment
    if winner:
        print(f"The wheel landed on: {winner.label}")


def handle_add_segment(store: WheelStore):
    store.add_segment(store.active_wheel.id)


def handle_edit_segment(store: WheelStore):
    segment_id = _pick_segment(store, "Segment number to rename: ")
    if segment_id is None:
        return
    label = input("New label: ")
    store.update_segment_label(store.active_wheel.id, segment_id, label)


def handle_delete_segment(store: WheelStore):
    segment_id = _pick_segment(store, "Segment number to delete: ")
    if segment_id is None:
        return
    store.delete_segment(store.active_wheel.id, segment_id)


def handle_add_wheel(store: WheelStore):
    store.create_wheel()


def handle_switch_wheel(store: WheelStore):
    wheel_id = _pick_wheel(store, "Switch to wheel number: ")
    if wheel_id is not None:
        store.set_active_wheel(wheel_id)


def handle_rename_wheel(store: WheelStore):
    name = input("New wheel name: ")
    store.rename_wheel(store.active_wheel.id, name)


def handle_delete_wheel(store: WheelStore):
    if len(store.state.wheels) == 1:
        print("The last wheel cannot be deleted.")
        return
    wheel_id = _pick_wheel(store, "Delete wheel number: ")
    if wheel_id is not None:
        store.delete_wheel(wheel_id)


def main() -> int:
    setup_colored_logging()
    store = open_store()
    spinner = SpinController(store)

    show_state(store)

    actions = {
        "2": handle_add_segment,
        "3": handle_edit_segment,
        "4": handle_delete_segment,
        "5": handle_add_wheel,
        "6": handle_switch_wheel,
        "7": handle_rename_wheel,
        "8": handle_delete_wheel,
    }
    while True:
        print("\nChoose action: [1] Spin  [2] Add segment  [3] Rename segment  [4] Delete segment")
        print("               [5] Add wheel  [6] Switch wheel  [7] Rename wheel  [8] Delete wheel  [q] Quit")
        choice = input("> ").strip().lower()
        if choice == "q":
            return 0
        if choice == "1":
            handle_spin(store, spinner)
        elif choice in actions:
            actions[choice](store)
        else:
            print("Invalid choice. Try again.")
            continue
        show_state(store)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nStopped by user.")
        sys.exit(0)
