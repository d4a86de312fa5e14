"""
DragOverflowTracker - Interactive drag session with persisted overflow

Two states, IDLE and DRAGGING. While dragging, overflow queries are answered
live by the overflow resolver; when the drag ends the final overflow is frozen
into SharedOverflowRecords that keep answering queries while idle. Rendering
code only ever asks get_overflow_for_canvas() and never needs the state.

Late or duplicated gesture events (update/end while idle) are ignored.
"""

import logging
from dataclasses import replace
from enum import Enum
from typing import List, Optional, Tuple

from ..config import Config
from .bounds_registry import BoundsRegistry
from .geometry import DraggedElement, OverflowPreview, SharedOverflowRecord
from .overflow_resolver import resolve_overflow, resolve_overflow_for_target

logger = logging.getLogger(__name__)


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class DragOverflowTracker:
    """
    Tracks the single active drag and the overflow records it leaves behind

    Usage:
        tracker = DragOverflowTracker(registry)
        tracker.start_drag("screen-1", "frame-0", 300, 600, 200, 100)
        tracker.update_drag(150, 0)
        preview = tracker.get_overflow_for_canvas("screen-2")
        tracker.end_drag()
    """

    def __init__(self, registry: BoundsRegistry, event_bus=None,
                 tolerance: Optional[float] = None):
        """
        Args:
            registry: Canvas bounds shared with the layout provider
            event_bus: Optional EventBus notified of drag/overflow changes
            tolerance: Adjacency slack in screen units (Config default if None)
        """
        self._registry = registry
        self._event_bus = event_bus
        self._tolerance = Config.ADJACENCY_TOLERANCE if tolerance is None else tolerance

        self._dragged: Optional[DraggedElement] = None
        self._records: List[SharedOverflowRecord] = []

    # ==================== STATE ====================

    @property
    def state(self) -> DragState:
        return DragState.DRAGGING if self._dragged is not None else DragState.IDLE

    @property
    def is_dragging(self) -> bool:
        return self._dragged is not None

    @property
    def dragged_element(self) -> Optional[DraggedElement]:
        """Copy of the active drag, or None when idle"""
        return replace(self._dragged) if self._dragged is not None else None

    @property
    def records(self) -> Tuple[SharedOverflowRecord, ...]:
        return tuple(self._records)

    def records_for_target(self, target_canvas_id: str) -> List[SharedOverflowRecord]:
        return [r for r in self._records if r.target_canvas_id == target_canvas_id]

    # ==================== DRAG LIFECYCLE ====================

    def start_drag(self, owner_canvas_id: str, element_id: str,
                   element_width: float, element_height: float,
                   original_x: float, original_y: float):
        """
        Begin dragging an element

        Any overflow previously persisted for this element is dropped so the
        old sliver does not linger on the neighbour while the element moves.
        An unfinished drag is replaced.
        """
        if self._dragged is not None:
            logger.debug(
                f"Replacing unfinished drag of {self._dragged.element_id} "
                f"on {self._dragged.owner_canvas_id}"
            )

        self._remove_records(
            lambda r: r.source_canvas_id == owner_canvas_id and r.element_id == element_id
        )
        self._dragged = DraggedElement(
            owner_canvas_id=owner_canvas_id,
            element_id=element_id,
            original_x=original_x,
            original_y=original_y,
            element_width=element_width,
            element_height=element_height,
        )

        if self._event_bus is not None:
            self._event_bus.drag_started.emit(owner_canvas_id, element_id)
            self._event_bus.overflow_changed.emit()

    def update_drag(self, delta_x: float, delta_y: float):
        """Add a pointer delta to the drag offset. Ignored while idle."""
        if self._dragged is None:
            logger.debug("update_drag ignored: no active drag")
            return

        self._dragged.offset_x += delta_x
        self._dragged.offset_y += delta_y

        if self._event_bus is not None:
            self._event_bus.drag_moved.emit(self._dragged.offset_x, self._dragged.offset_y)
            self._event_bus.overflow_changed.emit()

    def end_drag(self) -> List[SharedOverflowRecord]:
        """
        Finish the drag, persisting overflow into each neighbour

        Returns:
            Records written by this drag (empty if idle or no overflow)
        """
        if self._dragged is None:
            logger.debug("end_drag ignored: no active drag")
            return []

        dragged = self._dragged
        written = []
        for target_id, preview in resolve_overflow(dragged, self._registry, self._tolerance).items():
            if preview is None or preview.overflow_amount <= 0:
                continue

            record = SharedOverflowRecord.from_preview(preview)
            self._records = [r for r in self._records if r.key != record.key]
            self._records.append(record)
            written.append(record)

        self._dragged = None
        logger.debug(
            f"Drag of {dragged.element_id} on {dragged.owner_canvas_id} ended, "
            f"{len(written)} overflow record(s) written"
        )

        if self._event_bus is not None:
            self._event_bus.drag_ended.emit(dragged.owner_canvas_id, dragged.element_id)
            self._event_bus.overflow_changed.emit()
        return written

    def cancel_drag(self):
        """Abandon the drag without persisting overflow (e.g. window lost focus)."""
        if self._dragged is None:
            return

        dragged = self._dragged
        self._dragged = None
        logger.debug(f"Drag of {dragged.element_id} on {dragged.owner_canvas_id} cancelled")

        if self._event_bus is not None:
            self._event_bus.drag_cancelled.emit(dragged.owner_canvas_id, dragged.element_id)
            self._event_bus.overflow_changed.emit()

    # ==================== QUERIES ====================

    def get_overflow_for_canvas(self, target_canvas_id: str) -> Optional[OverflowPreview]:
        """
        What overflow, if any, a canvas should draw right now

        Dragging: the live preview from the resolver.
        Idle: the most recent persisted record targeting the canvas.
        """
        if self._dragged is not None:
            return resolve_overflow_for_target(
                self._dragged, self._registry, target_canvas_id, self._tolerance
            )

        for record in reversed(self._records):
            if record.target_canvas_id == target_canvas_id:
                return record.to_preview()
        return None

    # ==================== DOCUMENT PURGES ====================

    def purge_element(self, canvas_id: str, element_id: str) -> int:
        """Remove records of an element that was deleted from its canvas."""
        return self._remove_records(
            lambda r: r.source_canvas_id == canvas_id and r.element_id == element_id
        )

    def purge_canvas(self, canvas_id: str) -> int:
        """Remove records where a deleted canvas is the source or the target."""
        return self._remove_records(
            lambda r: canvas_id in (r.source_canvas_id, r.target_canvas_id)
        )

    def load_records(self, records):
        """Replace persisted records, e.g. after an undo restored the document."""
        self._records = list(records)
        if self._event_bus is not None:
            self._event_bus.overflow_changed.emit()

    def _remove_records(self, predicate) -> int:
        kept = [r for r in self._records if not predicate(r)]
        removed = len(self._records) - len(kept)
        if removed:
            self._records = kept
            if self._event_bus is not None:
                self._event_bus.overflow_records_purged.emit(removed)
                self._event_bus.overflow_changed.emit()
        return removed


__all__ = ['DragState', 'DragOverflowTracker']
