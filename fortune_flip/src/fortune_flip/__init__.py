from .models import CollectionState, Segment, Wheel, default_collection
from .persistence import SnapshotStore, open_store
from .spinner import SpinController, SpinTicket
from .state import WheelStore
from .wheel import SpinResult, spin_wheel

__all__ = [
    "CollectionState",
    "Segment",
    "Wheel",
    "default_collection",
    "SnapshotStore",
    "open_store",
    "SpinController",
    "SpinTicket",
    "WheelStore",
    "SpinResult",
    "spin_wheel",
]
