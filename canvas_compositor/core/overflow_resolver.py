"""
Overflow Resolver - Where a dragged element spills into neighbouring canvases

Pure functions over a BoundsRegistry and a DraggedElement. Each target canvas
is resolved independently:

- An element leaving the owner's right edge shows its right sliver flush
  against the left edge of the canvas to the right.
- An element leaving the owner's left edge shows its left sliver flush
  against the right edge of the canvas to the left.

Only horizontal overflow is modelled; canvases sit in a single row.
"""

from typing import Dict, Optional

from ..config import Config
from .bounds_registry import BoundsRegistry
from .geometry import CanvasBounds, DraggedElement, OverflowPreview


def _clamp_pct(value: float) -> float:
    return max(Config.CLIP_MIN_PCT, min(Config.CLIP_MAX_PCT, value))


def _resolve_against(
    dragged: DraggedElement,
    owner: CanvasBounds,
    target: CanvasBounds,
    tolerance: float
) -> Optional[OverflowPreview]:
    """Resolve overflow into one target given both canvases' bounds."""
    width = dragged.element_width
    if width <= 0:
        return None

    left = dragged.left
    right = dragged.right

    exits_left = left < 0
    exits_right = right > owner.width

    target_is_right = target.left > owner.right - tolerance
    target_is_left = target.right < owner.left + tolerance

    # Ambiguous or non-adjacent targets never receive overflow
    if target_is_right == target_is_left:
        return None

    clip_left = 0.0
    clip_right = 0.0
    if target_is_right:
        if not exits_right:
            return None
        overflow_amount = right - owner.width
        clip_left = _clamp_pct((width - overflow_amount) / width * 100)
        offset_x = -(width - overflow_amount)
    else:
        if not exits_left:
            return None
        overflow_amount = -left
        clip_right = _clamp_pct((width - overflow_amount) / width * 100)
        offset_x = target.width - overflow_amount

    if overflow_amount <= 0:
        return None

    return OverflowPreview(
        visible=True,
        source_canvas_id=dragged.owner_canvas_id,
        element_id=dragged.element_id,
        target_canvas_id=target.canvas_id,
        clip_left_pct=clip_left,
        clip_right_pct=clip_right,
        offset_x=offset_x,
        offset_y=dragged.top,
        overflow_amount=overflow_amount,
    )


def resolve_overflow_for_target(
    dragged: DraggedElement,
    registry: BoundsRegistry,
    target_canvas_id: str,
    tolerance: Optional[float] = None
) -> Optional[OverflowPreview]:
    """
    Resolve overflow of the dragged element into a single canvas

    Args:
        dragged: Active drag state
        registry: Current canvas bounds
        target_canvas_id: Canvas that may display the overflow
        tolerance: Adjacency slack in screen units (Config default if None)

    Returns:
        OverflowPreview, or None if the target shows nothing (owner itself,
        unknown bounds, not adjacent, or no overflow toward it)
    """
    if target_canvas_id == dragged.owner_canvas_id:
        return None

    owner = registry.get(dragged.owner_canvas_id)
    target = registry.get(target_canvas_id)
    if owner is None or target is None:
        return None

    if tolerance is None:
        tolerance = Config.ADJACENCY_TOLERANCE
    return _resolve_against(dragged, owner, target, tolerance)


def resolve_overflow(
    dragged: DraggedElement,
    registry: BoundsRegistry,
    tolerance: Optional[float] = None
) -> Dict[str, Optional[OverflowPreview]]:
    """
    Resolve overflow into every registered canvas other than the owner

    Returns:
        Map of target canvas id to OverflowPreview or None
    """
    return {
        canvas_id: resolve_overflow_for_target(dragged, registry, canvas_id, tolerance)
        for canvas_id in registry.canvas_ids()
        if canvas_id != dragged.owner_canvas_id
    }


__all__ = ['resolve_overflow', 'resolve_overflow_for_target']
