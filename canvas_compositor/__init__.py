"""
Canvas Compositor

Geometry engine for multi-canvas mockups: device frames overflowing into
neighbouring canvases, and backgrounds spanning a group of canvases.
"""

__version__ = "0.3.0"
__author__ = "CGstuff"

from .config import Config
from .events.event_bus import EventBus, get_event_bus
from .core import (
    CanvasBounds,
    BoundsRegistry,
    DragOverflowTracker,
    resolve_overflow,
    slice_gradient,
    slice_image,
)
from .services.panorama_group_service import PanoramaGroupService

__all__ = [
    'Config',
    'EventBus',
    'get_event_bus',
    'CanvasBounds',
    'BoundsRegistry',
    'DragOverflowTracker',
    'resolve_overflow',
    'slice_gradient',
    'slice_image',
    'PanoramaGroupService',
]
