import logging
from unittest.mock import MagicMock

from scara_panel.utilities.connection_manager import ConnectionManager, MqttConfig


def _manager(connected=True, **kwargs):
    client = MagicMock()
    client.is_connected.return_value = connected
    factory = MagicMock(return_value=client)
    cfg = MqttConfig(host="broker.test", port=1883, transport="tcp", use_tls=False)
    return ConnectionManager(cfg, client_factory=factory, **kwargs), client, factory


def test_connect_starts_background_loop():
    manager, client, factory = _manager()
    assert manager.connect() is True
    factory.assert_called_once_with(manager.config)
    client.connect_async.assert_called_once_with("broker.test", 1883, manager.config.keepalive)
    client.loop_start.assert_called_once()


def test_connect_twice_reuses_client():
    manager, client, factory = _manager()
    manager.connect()
    manager.connect()
    assert factory.call_count == 1


def test_connect_rejected_settings_returns_false():
    manager, client, _ = _manager()
    client.connect_async.side_effect = ValueError("bad port")
    assert manager.connect() is False
    assert manager.is_connected() is False


def test_connect_failure_on_loop_thread_is_reported(caplog):
    failures = []
    manager, client, _ = _manager(connected=False, on_connect_failed=lambda: failures.append(True))
    assert manager.connect() is True
    assert client.on_connect_fail == manager._handle_connect_fail

    # paho's loop thread calls this when DNS or the socket fails
    with caplog.at_level(logging.WARNING, logger="scara_panel"):
        client.on_connect_fail(client, None)

    assert failures == [True]
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert any("broker.test:1883" in r.getMessage() for r in warnings)
    assert manager.publish("a/b", "1") is False


def test_connect_failure_without_listener_only_logs(caplog):
    manager, client, _ = _manager(connected=False)
    manager.connect()
    with caplog.at_level(logging.WARNING, logger="scara_panel"):
        client.on_connect_fail(client, None)
    assert "Could not connect" in caplog.text


def test_publish_dropped_before_connect():
    manager, client, _ = _manager()
    assert manager.publish("a/b", "1") is False
    client.publish.assert_not_called()


def test_publish_dropped_while_not_connected():
    manager, client, _ = _manager(connected=False)
    manager.connect()
    assert manager.publish("a/b", "1") is False
    assert manager.subscribe("a/#") is False
    client.publish.assert_not_called()
    client.subscribe.assert_not_called()


def test_publish_and_subscribe_when_connected():
    manager, client, _ = _manager()
    manager.connect()
    assert manager.publish("a/b", "7") is True
    assert manager.subscribe("a/#") is True
    client.publish.assert_called_once_with("a/b", "7")
    client.subscribe.assert_called_once_with("a/#")


def test_disconnect_is_idempotent():
    manager, client, _ = _manager()
    manager.connect()
    manager.disconnect()
    manager.disconnect()
    client.disconnect.assert_called_once()
    client.loop_stop.assert_called_once()
    assert manager.is_connected() is False


def test_context_manager_releases_connection():
    manager, client, _ = _manager()
    with manager as m:
        assert m is manager
        client.loop_start.assert_called_once()
    client.loop_stop.assert_called_once()


def test_callbacks_forwarded():
    connected, disconnected, messages = [], [], []
    manager, client, _ = _manager(
        on_connected=lambda: connected.append(True),
        on_disconnected=lambda: disconnected.append(True),
        on_message=lambda topic, payload: messages.append((topic, payload)),
    )
    manager.connect()

    client.on_connect(client, None, {}, MagicMock(is_failure=False), None)
    client.on_message(client, None, MagicMock(topic="s/x", payload=b"ok"))
    client.on_disconnect(client, None, {}, MagicMock(), None)

    assert connected == [True]
    assert messages == [("s/x", b"ok")]
    assert disconnected == [True]


def test_refused_connection_does_not_trigger_session_start():
    connected = []
    manager, client, _ = _manager(on_connected=lambda: connected.append(True))
    manager.connect()
    client.on_connect(client, None, {}, MagicMock(is_failure=True), None)
    assert connected == []
