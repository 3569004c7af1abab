import os

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from paramdraw.model.shape_types import CIRCLE, SQUARE
from paramdraw.model.state import CanvasState


@pytest.fixture
def canvas():
    return CanvasState()


@pytest.fixture
def circle_type():
    return CIRCLE


@pytest.fixture
def square_type():
    return SQUARE


class FakeReleaseSource:
    """Stands in for the application-wide input scope."""

    def __init__(self):
        self.listeners = []

    def add_release_listener(self, callback):
        self.listeners.append(callback)

    def remove_release_listener(self, callback):
        self.listeners.remove(callback)

    def release(self):
        for callback in list(self.listeners):
            callback()


@pytest.fixture
def release_source():
    return FakeReleaseSource()
