"""
Geometry value types for cross-canvas overflow

CanvasBounds live in the shared screen-space coordinate system. A dragged
element's position and offsets are in the owner canvas's local coordinates.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

OverflowKey = Tuple[str, str, str]  # (source_canvas_id, element_id, target_canvas_id)


@dataclass(frozen=True)
class CanvasBounds:
    """Screen-space rectangle of one live canvas."""
    canvas_id: str
    left: float
    top: float
    right: float
    bottom: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Canvas '{self.canvas_id}' has negative size {self.width}x{self.height}"
            )

    @classmethod
    def from_rect(cls, canvas_id: str, left: float, top: float,
                  width: float, height: float) -> 'CanvasBounds':
        """Build bounds from a top-left corner and size"""
        return cls(
            canvas_id=canvas_id,
            left=left,
            top=top,
            right=left + width,
            bottom=top + height,
            width=width,
            height=height,
        )


@dataclass
class DraggedElement:
    """
    The single active drag session.

    Attributes:
        owner_canvas_id: Canvas the element belongs to
        element_id: Element being dragged (e.g. a device frame slot)
        original_x: Local left edge at drag start
        original_y: Local top edge at drag start
        element_width: Element width in local units
        element_height: Element height in local units
        offset_x: Cumulative pointer delta since drag start
        offset_y: Cumulative pointer delta since drag start
    """
    owner_canvas_id: str
    element_id: str
    original_x: float
    original_y: float
    element_width: float
    element_height: float
    offset_x: float = 0.0
    offset_y: float = 0.0

    @property
    def left(self) -> float:
        return self.original_x + self.offset_x

    @property
    def right(self) -> float:
        return self.left + self.element_width

    @property
    def top(self) -> float:
        return self.original_y + self.offset_y


@dataclass(frozen=True)
class OverflowPreview:
    """How a target canvas should draw the overflowing sliver of an element."""
    visible: bool
    source_canvas_id: str
    element_id: str
    target_canvas_id: str
    clip_left_pct: float
    clip_right_pct: float
    offset_x: float
    offset_y: float
    overflow_amount: float = 0.0


@dataclass(frozen=True)
class SharedOverflowRecord:
    """Overflow persisted at drag end, shown while no drag is active."""
    source_canvas_id: str
    element_id: str
    target_canvas_id: str
    clip_left_pct: float
    clip_right_pct: float
    offset_x: float
    offset_y: float
    overflow_amount: float = 0.0

    @property
    def key(self) -> OverflowKey:
        return (self.source_canvas_id, self.element_id, self.target_canvas_id)

    @classmethod
    def from_preview(cls, preview: OverflowPreview) -> 'SharedOverflowRecord':
        return cls(
            source_canvas_id=preview.source_canvas_id,
            element_id=preview.element_id,
            target_canvas_id=preview.target_canvas_id,
            clip_left_pct=preview.clip_left_pct,
            clip_right_pct=preview.clip_right_pct,
            offset_x=preview.offset_x,
            offset_y=preview.offset_y,
            overflow_amount=preview.overflow_amount,
        )

    def to_preview(self) -> OverflowPreview:
        return OverflowPreview(visible=True, **asdict(self))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SharedOverflowRecord':
        """
        Rebuild a record stored by the document layer

        Unknown keys are ignored; overflow_amount is optional.
        """
        return cls(
            source_canvas_id=str(data['source_canvas_id']),
            element_id=str(data['element_id']),
            target_canvas_id=str(data['target_canvas_id']),
            clip_left_pct=float(data.get('clip_left_pct', 0.0)),
            clip_right_pct=float(data.get('clip_right_pct', 0.0)),
            offset_x=float(data.get('offset_x', 0.0)),
            offset_y=float(data.get('offset_y', 0.0)),
            overflow_amount=float(data.get('overflow_amount', 0.0)),
        )


__all__ = [
    'OverflowKey',
    'CanvasBounds',
    'DraggedElement',
    'OverflowPreview',
    'SharedOverflowRecord',
]
