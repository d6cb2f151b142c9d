"""Shared fixtures: an offscreen QApplication and a recording listener."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication


class RecordingListener:
    """Listener that records every notification in order."""

    def __init__(self):
        self.events = []

    def on_pull(self, position):
        self.events.append(("pull", position))

    def on_release(self, position):
        self.events.append(("release", position))

    def on_end_release(self):
        self.events.append(("end_release",))

    def names(self):
        return [event[0] for event in self.events]

    def count(self, name):
        return self.names().count(name)


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
