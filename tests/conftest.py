"""Shared fixtures for compositor tests"""

import pytest
from PyQt6.QtCore import QCoreApplication

from canvas_compositor.core import BoundsRegistry, CanvasBounds
from canvas_compositor.events import EventBus

CANVAS_WIDTH = 400
CANVAS_HEIGHT = 800
GUTTER = 40


def row_bounds(canvas_id: str, index: int) -> CanvasBounds:
    """Bounds of the index-th canvas in a left-to-right row."""
    return CanvasBounds.from_rect(
        canvas_id, index * (CANVAS_WIDTH + GUTTER), 0, CANVAS_WIDTH, CANVAS_HEIGHT
    )


@pytest.fixture(scope="session")
def qt_core_app():
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture
def event_bus(qt_core_app):
    return EventBus()


@pytest.fixture
def pair_registry():
    """Two canvases side by side: a | b"""
    registry = BoundsRegistry()
    for i, canvas_id in enumerate(["a", "b"]):
        registry.register(canvas_id, row_bounds(canvas_id, i))
    return registry


@pytest.fixture
def row_registry():
    """Three canvases side by side: a | b | c"""
    registry = BoundsRegistry()
    for i, canvas_id in enumerate(["a", "b", "c"]):
        registry.register(canvas_id, row_bounds(canvas_id, i))
    return registry


class SignalRecorder:
    """Collects emitted signal arguments."""

    def __init__(self, signal):
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args)

    @property
    def count(self):
        return len(self.calls)


@pytest.fixture
def record_signal():
    return SignalRecorder
