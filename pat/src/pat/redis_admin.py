import json
import sys
from typing import Optional

import redis

from fortune_flip.models import default_collection
from fortune_flip.persistence import SnapshotStore, dumps


def hello_redis(snapshots: Optional[SnapshotStore] = None) -> bool:
    snapshots = snapshots or SnapshotStore()
    try:
        ok = bool(snapshots.client.ping())
    except redis.RedisError as e:
        print(f"Redis not reachable: {e}")
        return False
    print("Redis is up" if ok else "Redis did not answer PING")
    return ok


def dump_snapshot(snapshots: Optional[SnapshotStore] = None) -> Optional[str]:
    """Print the stored snapshot as indented JSON; returns the raw value."""
    snapshots = snapshots or SnapshotStore()
    raw = snapshots.client.get(snapshots.key)
    if raw is None:
        print(f"No snapshot stored under {snapshots.key}")
        return None
    try:
        print(json.dumps(json.loads(raw), indent=2))
    except json.JSONDecodeError:
        print(f"Snapshot under {snapshots.key} is not valid JSON:")
        print(raw)
    return raw


def reset_snapshot(snapshots: Optional[SnapshotStore] = None) -> str:
    """Overwrite the stored snapshot with a fresh default collection."""
    snapshots = snapshots or SnapshotStore()
    raw = dumps(default_collection())
    snapshots.client.set(snapshots.key, raw)
    print(f"Reset {snapshots.key} to a single default wheel")
    return raw


def clear_snapshot(snapshots: Optional[SnapshotStore] = None) -> None:
    snapshots = snapshots or SnapshotStore()
    snapshots.client.delete(snapshots.key)
    print(f"Deleted {snapshots.key}")


def main(argv) -> int:
    if len(argv) < 2:
        print("Usage: redis_admin.py [hello|dump|reset|clear]")
        return 1
    command = argv[1]
    if command == "hello":
        return 0 if hello_redis() else 1
    elif command == "dump":
        dump_snapshot()
    elif command == "reset":
        reset_snapshot()
    elif command == "clear":
        clear_snapshot()
    else:
        print("Invalid command")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
