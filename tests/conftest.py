import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


class FakeTransport:
    """Stand-in for ConnectionManager that records traffic."""

    def __init__(self, connected=True):
        self.connected = connected
        self.published = []
        self.subscribed = []

    def is_connected(self):
        return self.connected

    def publish(self, topic, payload):
        if not self.connected:
            return False
        self.published.append((topic, payload))
        return True

    def disconnect(self):
        self.connected = False

    def subscribe(self, topic):
        if not self.connected:
            return False
        self.subscribed.append(topic)
        return True


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
