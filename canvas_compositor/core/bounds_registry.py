"""
BoundsRegistry - Current screen-space rectangle of every live canvas

The layout provider pushes a fresh rectangle whenever a canvas moves or
resizes (pan, zoom, reorder). Lookups of unknown ids return None.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .geometry import CanvasBounds

logger = logging.getLogger(__name__)


class BoundsRegistry:
    """
    Map of canvas id to CanvasBounds.

    Usage:
        registry = BoundsRegistry()
        registry.register("screen-1", CanvasBounds.from_rect("screen-1", 0, 0, 390, 844))
        bounds = registry.get("screen-1")
    """

    def __init__(self, event_bus=None):
        """
        Args:
            event_bus: Optional EventBus notified of layout changes
        """
        self._bounds: Dict[str, CanvasBounds] = {}
        self._event_bus = event_bus

    def register(self, canvas_id: str, bounds: CanvasBounds):
        """Store (or replace) the rectangle for a canvas."""
        if bounds.canvas_id != canvas_id:
            bounds = CanvasBounds(
                canvas_id=canvas_id,
                left=bounds.left,
                top=bounds.top,
                right=bounds.right,
                bottom=bounds.bottom,
                width=bounds.width,
                height=bounds.height,
            )
        self._bounds[canvas_id] = bounds

        if self._event_bus is not None:
            self._event_bus.canvas_bounds_changed.emit(canvas_id)

    def unregister(self, canvas_id: str):
        """Forget a canvas. Unknown ids are ignored."""
        if self._bounds.pop(canvas_id, None) is None:
            return

        logger.debug(f"Unregistered canvas {canvas_id}")
        if self._event_bus is not None:
            self._event_bus.canvas_unregistered.emit(canvas_id)

    def get(self, canvas_id: str) -> Optional[CanvasBounds]:
        """Get bounds for a canvas, or None if it is not registered."""
        return self._bounds.get(canvas_id)

    def canvas_ids(self) -> List[str]:
        return list(self._bounds)

    def items(self) -> List[Tuple[str, CanvasBounds]]:
        return list(self._bounds.items())

    def clear(self):
        for canvas_id in list(self._bounds):
            self.unregister(canvas_id)

    def __contains__(self, canvas_id: str) -> bool:
        return canvas_id in self._bounds

    def __len__(self) -> int:
        return len(self._bounds)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._bounds))


__all__ = ['BoundsRegistry']
