import logging
import random
from dataclasses import dataclass
from typing import Optional

from .constants import SPIN_DURATION_MS, STATUS_IDLE, STATUS_SPINNING
from .state import WheelStore
from .wheel import spin_wheel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpinTicket:
    wheel_id: str
    winner_id: str
    index: int
    target_rotation: float
    activation: int
    duration_ms: int = SPIN_DURATION_MS


class SpinController:
    """Two-state spin machine (idle/spinning) around a ``WheelStore``.

    ``start`` computes the result up front and hands back a ticket for the
    animation to play; ``finish`` is the animation's completion callback.
    There is at most one pending ticket and no way to cancel it.
    """

    def __init__(self, store: WheelStore, rng: Optional[random.Random] = None):
        self.store = store
        self.rng = rng
        self.status = STATUS_IDLE
        self.pending: Optional[SpinTicket] = None

    @property
    def is_spinning(self) -> bool:
        return self.status == STATUS_SPINNING

    def start(self) -> Optional[SpinTicket]:
        if self.is_spinning:
            logger.debug("Spin rejected: already spinning")
            return None
        wheel = self.store.active_wheel
        if wheel is None:
            return None
        self.store.clear_selection()
        result = spin_wheel(wheel.segments, self.rng)
        self.pending = SpinTicket(
            wheel_id=wheel.id,
            winner_id=result.winner.id,
            index=result.index,
            target_rotation=result.target_rotation,
            activation=self.store.activations,
        )
        self.status = STATUS_SPINNING
        logger.info("Spinning %s: winner index %d, target %.1f deg", wheel.name, result.index, result.target_rotation)
        return self.pending

    def finish(self) -> Optional[str]:
        """Settle the pending spin; returns the recorded winner id, if any.

        The winner is dropped when the segment was deleted while the wheel
        was turning, or when the active wheel changed at any point during
        the spin, including switching away and back.
        """
        ticket = self.pending
        self.pending = None
        self.status = STATUS_IDLE
        if ticket is None:
            return None
        state = self.store.state
        wheel = state.active_wheel
        if (
            wheel is None
            or wheel.id != ticket.wheel_id
            or self.store.activations != ticket.activation
            or wheel.find_segment(ticket.winner_id) is None
        ):
            logger.info("Discarding stale spin result %s", ticket.winner_id)
            return None
        self.store.record_spin_result(ticket.winner_id)
        return ticket.winner_id
