"""
EventBus - Central event system for compositor state changes

Pattern: Observer/Publisher-Subscriber
The registry, drag tracker and panorama group service emit here so canvases
can repaint their overflow and background layers without polling.
"""

from PyQt6.QtCore import QObject, pyqtSignal
from typing import Optional


class EventBus(QObject):
    """
    Central event bus for decoupled communication between components

    Components take the bus as an optional constructor argument, so tests
    and embedded documents can each own an isolated instance.

    Usage:
        event_bus = EventBus()
        event_bus.overflow_changed.connect(canvas.update_overflow_layer)
        tracker = DragOverflowTracker(registry, event_bus=event_bus)
    """

    # Layout events
    canvas_bounds_changed = pyqtSignal(str)  # canvas_id
    canvas_unregistered = pyqtSignal(str)  # canvas_id

    # Drag events
    drag_started = pyqtSignal(str, str)  # owner_canvas_id, element_id
    drag_moved = pyqtSignal(float, float)  # cumulative offset_x, offset_y
    drag_ended = pyqtSignal(str, str)  # owner_canvas_id, element_id
    drag_cancelled = pyqtSignal(str, str)  # owner_canvas_id, element_id

    # Overflow record events
    overflow_changed = pyqtSignal()  # live preview or persisted records changed
    overflow_records_purged = pyqtSignal(int)  # number of records removed

    # Panorama events
    panorama_group_changed = pyqtSignal(str)  # canvas_size preset


# Application-wide instance (lazy initialization)
_event_bus_instance: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """
    Get the application-wide EventBus instance

    Returns:
        Global EventBus instance
    """
    global _event_bus_instance
    if _event_bus_instance is None:
        _event_bus_instance = EventBus()
    return _event_bus_instance


# Export
__all__ = ['EventBus', 'get_event_bus']
