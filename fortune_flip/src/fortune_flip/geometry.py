"""Wedge layout for wheel renderers.

Segment ``i`` of ``n`` spans ``[i * 360/n, (i+1) * 360/n)`` clockwise from the
pointer. Rotating the wheel by ``r`` degrees brings the wedge containing
``r mod 360`` under the pointer, which is what ``spin_wheel`` targets.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .constants import COLORS, HIGHLIGHT_COLOR, LABEL_RADIUS_RATIO, WHEEL_SIZE
from .models import Segment
from .wheel import angle_per_segment


@dataclass(frozen=True)
class Wedge:
    segment_id: str
    label: str
    start_angle: float
    end_angle: float
    path: str
    label_x: float
    label_y: float
    color: str
    highlighted: bool


def wedge_span(index: int, count: int) -> Tuple[float, float]:
    step = angle_per_segment(count)
    return index * step, (index + 1) * step


def pointer_index(rotation: float, count: int) -> int:
    """Index of the wedge under the pointer after rotating by ``rotation`` degrees."""
    step = angle_per_segment(count)
    return min(int((rotation % 360) // step), count - 1)


def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float) -> Tuple[float, float]:
    # 0 degrees points up at the pointer, angles grow clockwise (screen y goes down)
    rad = math.radians(angle - 90)
    return cx + radius * math.cos(rad), cy + radius * math.sin(rad)


def arc_path(cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> str:
    if end_angle - start_angle >= 360:
        # A single arc cannot close on itself; draw the circle as two halves
        top = polar_to_cartesian(cx, cy, radius, start_angle)
        bottom = polar_to_cartesian(cx, cy, radius, start_angle + 180)
        return (
            f"M {top[0]} {top[1]} "
            f"A {radius} {radius} 0 1 1 {bottom[0]} {bottom[1]} "
            f"A {radius} {radius} 0 1 1 {top[0]} {top[1]} Z"
        )
    start = polar_to_cartesian(cx, cy, radius, end_angle)
    end = polar_to_cartesian(cx, cy, radius, start_angle)
    large_arc = "0" if end_angle - start_angle <= 180 else "1"
    return f"M {cx} {cy} L {start[0]} {start[1]} A {radius} {radius} 0 {large_arc} 0 {end[0]} {end[1]} Z"


def layout_wheel(
    segments: Sequence[Segment],
    selected_segment_id: Optional[str] = None,
    rotation: float = 0.0,
    size: int = WHEEL_SIZE,
) -> List[Wedge]:
    """Lay out one wedge per segment with the wheel turned by ``rotation`` degrees."""
    if not segments:
        return []
    radius = size / 2
    wedges: List[Wedge] = []
    for index, segment in enumerate(segments):
        start, end = wedge_span(index, len(segments))
        start -= rotation
        end -= rotation
        label_x, label_y = polar_to_cartesian(radius, radius, radius * LABEL_RADIUS_RATIO, (start + end) / 2)
        highlighted = segment.id == selected_segment_id
        wedges.append(Wedge(
            segment_id=segment.id,
            label=segment.label,
            start_angle=start,
            end_angle=end,
            path=arc_path(radius, radius, radius, start, end),
            label_x=label_x,
            label_y=label_y,
            color=HIGHLIGHT_COLOR if highlighted else COLORS[index % len(COLORS)],
            highlighted=highlighted,
        ))
    return wedges
