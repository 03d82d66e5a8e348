"""Unit tests for the in-process SnapshotPublisher."""

from site_builder.application.services import SnapshotPublisher


def test_subscribe_and_unsubscribe():
    publisher = SnapshotPublisher()
    received = []

    unsubscribe = publisher.subscribe(lambda topic, snapshot: received.append((topic, snapshot)))
    assert publisher.listener_count == 1

    publisher.publish("catalog", ["entry"])
    unsubscribe()
    unsubscribe()
    publisher.publish("catalog", ["other"])

    assert publisher.listener_count == 0
    assert received == [("catalog", ["entry"])]


def test_failing_listener_does_not_stop_delivery(caplog):
    publisher = SnapshotPublisher()
    received = []

    def broken(topic, snapshot):
        raise RuntimeError("boom")

    publisher.subscribe(broken)
    publisher.subscribe(lambda topic, snapshot: received.append(topic))

    with caplog.at_level("ERROR", logger="site_builder.application.services.snapshot_publisher"):
        publisher.publish("inventory", [])

    assert received == ["inventory"]
    assert "inventory" in caplog.text
