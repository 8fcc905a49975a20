"""Snapshot persistence for the wheel collection.

The snapshot is a single JSON record stored under one Redis key::

    {"wheels": [{"id", "name", "segments": [{"id", "label"}]}], "activeWheelId"}

The selected segment is never written; it always starts absent on load.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

import redis
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from . import redis_client
from .constants import STORAGE_KEY
from .models import CollectionState, Segment, Wheel, default_collection
from .state import WheelStore, repair_state

logger = logging.getLogger(__name__)


class SegmentRecord(BaseModel):
    id: str
    label: str


class WheelRecord(BaseModel):
    id: str
    name: str
    segments: List[SegmentRecord] = Field(default_factory=list)


class Snapshot(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    wheels: List[WheelRecord] = Field(min_length=1)
    active_wheel_id: Optional[str] = Field(default=None, alias="activeWheelId")

    @model_validator(mode="after")
    def check_unique_ids(self) -> "Snapshot":
        wheel_ids = [w.id for w in self.wheels]
        if len(set(wheel_ids)) != len(wheel_ids):
            raise ValueError("duplicate wheel id")
        segment_ids = [s.id for w in self.wheels for s in w.segments]
        if len(set(segment_ids)) != len(segment_ids):
            raise ValueError("duplicate segment id")
        return self


def storage_key() -> str:
    return os.environ.get("FORTUNE_FLIP_STORAGE_KEY", STORAGE_KEY)


# --- Conversion ---

def to_snapshot(state: CollectionState) -> Dict[str, Any]:
    return {
        "wheels": [
            {
                "id": w.id,
                "name": w.name,
                "segments": [{"id": s.id, "label": s.label} for s in w.segments],
            }
            for w in state.wheels
        ],
        "activeWheelId": state.active_wheel_id,
    }


def dumps(state: CollectionState) -> str:
    return json.dumps(to_snapshot(state))


def loads(raw: Optional[str]) -> CollectionState:
    """Parse a stored snapshot; absent or corrupt input yields the default collection."""
    if raw in (None, ""):
        return default_collection()
    try:
        snapshot = Snapshot.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Discarding malformed wheel snapshot: %s", e)
        return default_collection()
    wheels = tuple(
        Wheel(
            id=w.id,
            name=w.name,
            segments=tuple(Segment(id=s.id, label=s.label) for s in w.segments),
        )
        for w in snapshot.wheels
    )
    return repair_state(CollectionState(wheels=wheels, active_wheel_id=snapshot.active_wheel_id))


# --- Redis adapter ---

class SnapshotStore:
    """Loads and saves the collection snapshot in Redis.

    Redis errors never escape: a failed load falls back to the default
    collection and a failed save is logged and forgotten. The next save
    rewrites the whole snapshot, so durability comes back on its own.
    """

    def __init__(self, client: Optional[redis.Redis] = None, key: Optional[str] = None):
        self._client = client
        self.key = key or storage_key()

    @property
    def client(self) -> redis.Redis:
        return self._client if self._client is not None else redis_client.get_redis()

    def load(self) -> CollectionState:
        try:
            raw = self.client.get(self.key)
        except redis.RedisError as e:
            logger.warning("Failed to load wheels: %s", e)
            return default_collection()
        return loads(raw)

    def save(self, state: CollectionState) -> bool:
        try:
            self.client.set(self.key, dumps(state))
        except redis.RedisError as e:
            logger.warning("Failed to save wheels: %s", e)
            return False
        return True

    def clear(self) -> None:
        try:
            self.client.delete(self.key)
        except redis.RedisError as e:
            logger.warning("Failed to clear wheels: %s", e)


def open_store(snapshots: Optional[SnapshotStore] = None) -> WheelStore:
    """Load the saved collection and return a store that saves on every change."""
    snapshots = snapshots or SnapshotStore()
    state = snapshots.load()
    # Write back right away so a healed or freshly created collection is stored
    snapshots.save(state)
    return WheelStore(state, on_change=snapshots.save)
