import json

import redis

from fortune_flip.constants import STORAGE_KEY
from fortune_flip.persistence import SnapshotStore, open_store
from pat.redis_admin import clear_snapshot, dump_snapshot, hello_redis, main, reset_snapshot


class DeadRedis:
    def ping(self):
        raise redis.ConnectionError("connection refused")


def test_hello_reports_reachable_server(capsys):
    assert hello_redis() is True
    assert "Redis is up" in capsys.readouterr().out


def test_hello_reports_unreachable_server(capsys):
    assert hello_redis(SnapshotStore(client=DeadRedis())) is False
    assert "not reachable" in capsys.readouterr().out


def test_dump_prints_stored_snapshot(capsys):
    store = open_store()
    store.rename_wheel(store.state.wheels[0].id, "Lunch")
    raw = dump_snapshot()
    out = capsys.readouterr().out
    assert json.loads(raw)["wheels"][0]["name"] == "Lunch"
    assert '"name": "Lunch"' in out


def test_dump_without_snapshot(capsys):
    assert dump_snapshot() is None
    assert "No snapshot stored" in capsys.readouterr().out


def test_dump_shows_corrupt_snapshot_verbatim(capsys, redis_client):
    redis_client.set(STORAGE_KEY, "{oops")
    assert dump_snapshot() == "{oops"
    assert "not valid JSON" in capsys.readouterr().out


def test_reset_replaces_collection_with_default(redis_client):
    store = open_store()
    store.create_wheel()
    store.create_wheel()
    reset_snapshot()
    stored = json.loads(redis_client.get(STORAGE_KEY))
    assert [w["name"] for w in stored["wheels"]] == ["Wheel 1"]
    assert [s["label"] for s in stored["wheels"][0]["segments"]] == ["Default"]
    assert stored["activeWheelId"] == stored["wheels"][0]["id"]


def test_clear_removes_snapshot(redis_client):
    open_store()
    clear_snapshot()
    assert redis_client.get(STORAGE_KEY) is None


def test_main_dispatch(capsys, redis_client):
    assert main(["redis_admin.py"]) == 1
    assert main(["redis_admin.py", "bogus"]) == 1
    assert main(["redis_admin.py", "reset"]) == 0
    assert redis_client.get(STORAGE_KEY) is not None
    assert main(["redis_admin.py", "clear"]) == 0
    assert redis_client.get(STORAGE_KEY) is None
    assert "Invalid command" in capsys.readouterr().out
