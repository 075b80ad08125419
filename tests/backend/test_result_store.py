from __future__ import annotations

from backend.app.status import ResultStore


def test_later_action_wins() -> None:
    store = ResultStore()
    first = store.begin()
    second = store.begin()

    assert store.publish(second, "analyze", {"value": 2}) is True
    assert store.publish(first, "parse", {"value": 1}) is False

    snapshot = store.snapshot()
    assert snapshot["sequence"] == second
    assert snapshot["kind"] == "analyze"
    assert snapshot["payload"] == {"value": 2}


def test_in_order_publishes_replace_result() -> None:
    store = ResultStore()

    store.publish(store.begin(), "parse", {"value": 1})
    store.publish(store.begin(), "parse", {"value": 2})

    assert store.snapshot()["payload"] == {"value": 2}


def test_snapshot_is_a_copy() -> None:
    store = ResultStore()
    store.publish(store.begin(), "parse", {"value": 1})

    store.snapshot()["payload"]["value"] = 99

    assert store.snapshot()["payload"] == {"value": 1}


def test_empty_store() -> None:
    snapshot = ResultStore().snapshot()

    assert snapshot["sequence"] == 0
    assert snapshot["kind"] is None
    assert snapshot["payload"] is None
