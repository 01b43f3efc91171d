"""Manage the MQTT connection to the SCARA controller.

This module wraps a ``paho-mqtt`` client behind a small interface the
rest of the panel uses: connect once at start, publish best-effort,
subscribe, and disconnect unconditionally at shutdown.  Network
callbacks arrive on paho's background thread.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import paho.mqtt.client as mqtt

from .. import config

logger = logging.getLogger(__name__)


@dataclass
class MqttConfig:
    host: str = config.BROKER_HOST
    port: int = config.BROKER_PORT
    transport: str = config.BROKER_TRANSPORT
    path: str = config.BROKER_PATH
    use_tls: bool = config.BROKER_USE_TLS
    keepalive: int = config.BROKER_KEEPALIVE
    client_id: str = ""


def _default_client_factory(cfg: MqttConfig) -> mqtt.Client:
    client = mqtt.Client(
        callback_api_version=mqtt.CallbackAPIVersion.VERSION2,
        client_id=cfg.client_id,
        transport=cfg.transport,
    )
    if cfg.transport == "websockets":
        client.ws_set_options(path=cfg.path)
    if cfg.use_tls:
        client.tls_set()
    return client


class ConnectionManager:
    """Encapsulate an MQTT session with the controller broker.

    Parameters
    ----------
    cfg : MqttConfig
        Broker host, port, transport and TLS settings.
    on_connected : callable, optional
        Called with no arguments each time the broker accepts the
        connection.
    on_message : callable, optional
        Called with ``(topic, payload_bytes)`` for inbound messages.
    on_disconnected : callable, optional
        Called with no arguments when the session drops.
    on_connect_failed : callable, optional
        Called with no arguments each time a connection attempt fails
        (DNS, socket or TLS error). paho keeps retrying in the background.
    client_factory : callable, optional
        Builds the paho client from ``cfg``; tests pass a fake here.
    """

    def __init__(
        self,
        cfg: Optional[MqttConfig] = None,
        on_connected: Optional[Callable[[], None]] = None,
        on_message: Optional[Callable[[str, bytes], None]] = None,
        on_disconnected: Optional[Callable[[], None]] = None,
        on_connect_failed: Optional[Callable[[], None]] = None,
        client_factory: Callable[[MqttConfig], mqtt.Client] = _default_client_factory,
    ) -> None:
        self.config = cfg or MqttConfig()
        self.on_connected = on_connected
        self.on_message = on_message
        self.on_disconnected = on_disconnected
        self.on_connect_failed = on_connect_failed
        self._client_factory = client_factory
        self._client: Optional[mqtt.Client] = None

    def __enter__(self) -> "ConnectionManager":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()

    def connect(self) -> bool:
        """Start connecting in the background.

        Returns
        -------
        bool
            ``True`` if the connection attempt was started, ``False`` if the
            client rejected the settings. Network failures happen later on
            the loop thread and are reported through ``on_connect_failed``.
        """
        if self._client is not None:
            return True
        client = self._client_factory(self.config)
        client.on_connect = self._handle_connect
        client.on_disconnect = self._handle_disconnect
        client.on_message = self._handle_message
        client.on_connect_fail = self._handle_connect_fail
        # Set before loop_start: on_connect may fire on the network thread
        self._client = client
        try:
            client.connect_async(self.config.host, self.config.port, self.config.keepalive)
            client.loop_start()
        except (OSError, ValueError) as exc:
            self._client = None
            logger.warning("Could not start MQTT connection to %s:%s: %s",
                           self.config.host, self.config.port, exc)
            return False
        logger.info("Connecting to %s:%s", self.config.host, self.config.port)
        return True

    def disconnect(self) -> None:
        """Close the connection. Safe to call more than once."""
        client, self._client = self._client, None
        if client is None:
            return
        try:
            client.disconnect()
        finally:
            client.loop_stop()
        logger.info("Disconnected from %s", self.config.host)

    def is_connected(self) -> bool:
        return self._client is not None and self._client.is_connected()

    def publish(self, topic: str, payload: str) -> bool:
        """Publish without waiting for delivery.

        Dropped (returns ``False``) when the session is not connected.
        """
        if not self.is_connected():
            logger.debug("Not connected, dropping %s=%s", topic, payload)
            return False
        self._client.publish(topic, payload)
        return True

    def subscribe(self, topic: str) -> bool:
        if not self.is_connected():
            return False
        self._client.subscribe(topic)
        logger.info("Subscribed to %s", topic)
        return True

    # --- paho callbacks (network thread) ---

    def _handle_connect(self, client, userdata, flags, reason_code, properties=None) -> None:
        if reason_code.is_failure:
            logger.warning("Broker refused connection: %s", reason_code)
            return
        logger.info("Connected to %s", self.config.host)
        if self.on_connected is not None:
            self.on_connected()

    def _handle_connect_fail(self, client, userdata) -> None:
        logger.warning("Could not connect to %s:%s, retrying",
                       self.config.host, self.config.port)
        if self.on_connect_failed is not None:
            self.on_connect_failed()

    def _handle_disconnect(self, client, userdata, flags, reason_code, properties=None) -> None:
        logger.info("Connection closed: %s", reason_code)
        if self.on_disconnected is not None:
            self.on_disconnected()

    def _handle_message(self, client, userdata, msg) -> None:
        if self.on_message is not None:
            self.on_message(msg.topic, msg.payload)
