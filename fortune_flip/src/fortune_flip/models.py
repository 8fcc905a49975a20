import uuid
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .constants import DEFAULT_SEGMENT_LABEL, SEGMENT_LABEL_PREFIX, WHEEL_NAME_PREFIX


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Segment:
    id: str
    label: str


@dataclass(frozen=True)
class Wheel:
    """A named wheel. ``segments`` is never empty once built by the helpers below."""

    id: str
    name: str
    segments: Tuple[Segment, ...]

    def segment_ids(self) -> Tuple[str, ...]:
        return tuple(s.id for s in self.segments)

    def find_segment(self, segment_id: Optional[str]) -> Optional[Segment]:
        for segment in self.segments:
            if segment.id == segment_id:
                return segment
        return None


@dataclass(frozen=True)
class CollectionState:
    wheels: Tuple[Wheel, ...] = field(default_factory=tuple)
    active_wheel_id: Optional[str] = None
    selected_segment_id: Optional[str] = None

    def find_wheel(self, wheel_id: Optional[str]) -> Optional[Wheel]:
        for wheel in self.wheels:
            if wheel.id == wheel_id:
                return wheel
        return None

    @property
    def active_wheel(self) -> Optional[Wheel]:
        return self.find_wheel(self.active_wheel_id)

    @property
    def selected_segment(self) -> Optional[Segment]:
        wheel = self.active_wheel
        if wheel is None or self.selected_segment_id is None:
            return None
        return wheel.find_segment(self.selected_segment_id)


# --- Factories ---

def create_segment(label: str = DEFAULT_SEGMENT_LABEL) -> Segment:
    return Segment(id=new_id(), label=label)


def create_wheel(name: str) -> Wheel:
    return Wheel(id=new_id(), name=name, segments=(create_segment(),))


def ensure_segments(segments: Tuple[Segment, ...]) -> Tuple[Segment, ...]:
    """Return ``segments`` unchanged, or a single fresh default segment if empty."""
    return segments if segments else (create_segment(),)


def wheel_name(number: int) -> str:
    return f"{WHEEL_NAME_PREFIX} {number}"


def segment_label(number: int) -> str:
    return f"{SEGMENT_LABEL_PREFIX} {number}"


def default_collection() -> CollectionState:
    """Fresh collection: one wheel named "Wheel 1" holding one "Default" segment."""
    starter = create_wheel(wheel_name(1))
    return CollectionState(wheels=(starter,), active_wheel_id=starter.id)
