import math
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from .constants import EXTRA_SPINS
from .models import Segment


@dataclass(frozen=True)
class SpinResult:
    winner: Segment
    index: int
    target_rotation: float


def angle_per_segment(count: int) -> float:
    return 360 / count


def spin_wheel(segments: Sequence[Segment], rng: Optional[random.Random] = None) -> SpinResult:
    """Pick a winning segment uniformly at random and compute where the spin stops.

    The winner is decided by a uniform draw over the index before any angle
    is computed; the rotation only places the pointer somewhere inside the
    winning wedge, ``EXTRA_SPINS`` full turns later. ``rng`` is any object
    with a ``random()`` method returning floats in [0, 1); defaults to the
    module-level generator.
    """
    if not segments:
        raise ValueError("cannot spin a wheel with no segments")
    rng = rng or random
    count = len(segments)
    # the product can round up to count for random() values just below 1
    index = min(int(rng.random() * count), count - 1)
    step = angle_per_segment(count)
    offset = rng.random() * step
    full_turns = EXTRA_SPINS * 360
    target_rotation = min(full_turns + index * step + offset, math.nextafter(full_turns + 360, 0))
    # Rounding can carry the angle across a wedge boundary; nudge it back inside
    while (target_rotation % 360) // step > index:
        target_rotation = math.nextafter(target_rotation, 0)
    while (target_rotation % 360) // step < index:
        target_rotation = math.nextafter(target_rotation, math.inf)
    return SpinResult(winner=segments[index], index=index, target_rotation=target_rotation)
