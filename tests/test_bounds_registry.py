"""Tests for BoundsRegistry and CanvasBounds"""

import pytest

from canvas_compositor.core import BoundsRegistry, CanvasBounds


def test_from_rect_derives_edges():
    bounds = CanvasBounds.from_rect("a", 10, 20, 300, 600)
    assert (bounds.left, bounds.top, bounds.right, bounds.bottom) == (10, 20, 310, 620)
    assert (bounds.width, bounds.height) == (300, 600)


def test_negative_size_is_rejected():
    with pytest.raises(ValueError):
        CanvasBounds.from_rect("a", 0, 0, -1, 100)


def test_zero_size_is_allowed():
    bounds = CanvasBounds.from_rect("a", 0, 0, 0, 0)
    assert bounds.width == 0


def test_register_replaces_existing_rectangle():
    registry = BoundsRegistry()
    registry.register("a", CanvasBounds.from_rect("a", 0, 0, 100, 200))
    registry.register("a", CanvasBounds.from_rect("a", 50, 0, 100, 200))

    assert len(registry) == 1
    assert registry.get("a").left == 50


def test_register_rekeys_bounds_to_canvas_id():
    registry = BoundsRegistry()
    registry.register("b", CanvasBounds.from_rect("other", 0, 0, 100, 200))
    assert registry.get("b").canvas_id == "b"


def test_unknown_canvas_returns_none():
    registry = BoundsRegistry()
    assert registry.get("missing") is None


def test_unregister_removes_and_ignores_unknown():
    registry = BoundsRegistry()
    registry.register("a", CanvasBounds.from_rect("a", 0, 0, 100, 200))

    registry.unregister("a")
    registry.unregister("a")

    assert "a" not in registry
    assert registry.get("a") is None


def test_iteration_helpers(row_registry):
    assert row_registry.canvas_ids() == ["a", "b", "c"]
    assert [cid for cid, _ in row_registry.items()] == ["a", "b", "c"]
    assert list(row_registry) == ["a", "b", "c"]

    row_registry.clear()
    assert len(row_registry) == 0


def test_registry_emits_layout_events(event_bus, record_signal):
    changed = record_signal(event_bus.canvas_bounds_changed)
    removed = record_signal(event_bus.canvas_unregistered)
    registry = BoundsRegistry(event_bus=event_bus)

    registry.register("a", CanvasBounds.from_rect("a", 0, 0, 100, 200))
    registry.unregister("a")
    registry.unregister("a")

    assert changed.calls == [("a",)]
    assert removed.calls == [("a",)]
