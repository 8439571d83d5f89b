import pytest

from services.notification import NotificationQueue


def test_drain_returns_oldest_first_and_clears():
    queue = NotificationQueue()
    queue.push("first", "success")
    queue.push("second", "error")

    drained = queue.drain()

    assert [(n.message, n.level) for n in drained] == [("first", "success"), ("second", "error")]
    assert queue.pending == 0
    assert queue.drain() == []


def test_unknown_level_is_rejected():
    queue = NotificationQueue()

    with pytest.raises(ValueError):
        queue.push("hello", "critical")

    assert queue.pending == 0


def test_oldest_entries_are_dropped_past_max_pending():
    queue = NotificationQueue(max_pending=2)
    for message in ("one", "two", "three"):
        queue.push(message)

    assert queue.pending == 2
    assert [n.message for n in queue.drain()] == ["two", "three"]
