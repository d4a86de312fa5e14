"""
PanoramaGroupService - Membership of shared-background groups

Keeps each group's canvas ids in on-screen order as canvases are added,
removed and reordered, and provides canvas-size presets for sizing a
panorama image.

Groups are immutable; every operation returns a new PanoramaGroup. The
service stores one group per canvas-size preset, mirroring how the document
keeps one row of canvases per device size.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import Config
from ..core.backgrounds import (
    BackgroundSpec,
    GradientDirection,
    GradientSpec,
    GradientStop,
    PanoramaGroup,
)

logger = logging.getLogger(__name__)

PORTRAIT = 'portrait'
LANDSCAPE = 'landscape'


def create_default_group(canvas_ids: Sequence[str]) -> PanoramaGroup:
    """Create a group sharing the default horizontal gradient."""
    gradient = GradientSpec(
        stops=tuple(GradientStop(color=c, position_pct=p) for c, p in Config.DEFAULT_GRADIENT_STOPS),
        direction=GradientDirection(Config.DEFAULT_GRADIENT_DIRECTION),
    )
    return PanoramaGroup(canvas_ids=tuple(canvas_ids), background=gradient)


def reorder_canvas_ids(group: PanoramaGroup, ordered_ids: Sequence[str]) -> Tuple[str, ...]:
    """
    Sort group members by current on-screen order

    Args:
        group: Group whose membership to sort
        ordered_ids: All canvas ids in on-screen order

    Returns:
        Members still on screen, in on-screen order
    """
    order = {cid: i for i, cid in enumerate(ordered_ids)}
    return tuple(sorted((cid for cid in group.canvas_ids if cid in order), key=order.__getitem__))


def insert_canvas_id_in_order(canvas_ids: Sequence[str], new_id: str,
                              ordered_ids: Sequence[str]) -> Tuple[str, ...]:
    """
    Insert a canvas into a member list at its on-screen position

    Members not on screen sort last. An id that is not on screen is not
    inserted.
    """
    order = {cid: i for i, cid in enumerate(ordered_ids)}
    new_pos = order.get(new_id)
    if new_pos is None:
        return tuple(canvas_ids)

    insert_at = len(canvas_ids)
    for i, cid in enumerate(canvas_ids):
        if new_pos < order.get(cid, float('inf')):
            insert_at = i
            break

    result = list(canvas_ids)
    result.insert(insert_at, new_id)
    return tuple(result)


def toggle_canvas(group: Optional[PanoramaGroup], canvas_id: str,
                  ordered_ids: Sequence[str]) -> PanoramaGroup:
    """
    Add a canvas to a group, or remove it if already a member

    With no group yet, a default gradient group holding just this canvas
    is created.
    """
    if group is None:
        return create_default_group([canvas_id])

    if canvas_id in group.canvas_ids:
        return group.with_canvas_ids(cid for cid in group.canvas_ids if cid != canvas_id)

    return group.with_canvas_ids(insert_canvas_id_in_order(group.canvas_ids, canvas_id, ordered_ids))


def remove_canvas(group: PanoramaGroup, canvas_id: str) -> PanoramaGroup:
    """Drop a deleted canvas from a group."""
    return group.with_canvas_ids(cid for cid in group.canvas_ids if cid != canvas_id)


def get_canvas_dimensions(canvas_size: str, orientation: str = PORTRAIT) -> Tuple[int, int]:
    """
    Get (width, height) for a canvas size preset

    Unknown presets fall back to the default size. Landscape swaps the sides.
    """
    width, height = Config.CANVAS_DIMENSIONS.get(
        canvas_size, Config.CANVAS_DIMENSIONS[Config.DEFAULT_CANVAS_SIZE]
    )
    if orientation == LANDSCAPE:
        return height, width
    return width, height


def get_recommended_image_dimensions(canvas_count: int, canvas_size: str,
                                     orientation: str = PORTRAIT) -> Dict[str, object]:
    """
    Image size that exactly covers a group without cropping

    Returns:
        dict with width, height and aspect_ratio (e.g. "1.38:1")
    """
    width, height = get_canvas_dimensions(canvas_size, orientation)
    combined_width = width * canvas_count
    return {
        'width': combined_width,
        'height': height,
        'aspect_ratio': f"{combined_width / height:.2f}:1",
    }


class PanoramaGroupService:
    """
    Owns the shared-background group of each canvas-size preset

    Features:
    - Toggle canvases in/out of a group in on-screen order
    - Keep membership in sync with reorders and deletions
    - Replace the shared background spec
    """

    def __init__(self, event_bus=None):
        """
        Args:
            event_bus: Optional EventBus notified when a group changes
        """
        self._groups: Dict[str, PanoramaGroup] = {}
        self._event_bus = event_bus

    def get_group(self, canvas_size: str) -> Optional[PanoramaGroup]:
        return self._groups.get(canvas_size)

    def set_group(self, canvas_size: str, group: Optional[PanoramaGroup]):
        """Store a group, or remove it when group is None."""
        if group is None:
            if self._groups.pop(canvas_size, None) is None:
                return
            logger.debug(f"Removed shared background for {canvas_size}")
        else:
            self._groups[canvas_size] = group
        self._notify(canvas_size)

    def set_background(self, canvas_size: str, background: BackgroundSpec) -> Optional[PanoramaGroup]:
        """Replace the background of an existing group."""
        group = self._groups.get(canvas_size)
        if group is None:
            return None
        group = group.with_background(background)
        self.set_group(canvas_size, group)
        return group

    def toggle_canvas(self, canvas_size: str, canvas_id: str,
                      ordered_ids: Sequence[str]) -> PanoramaGroup:
        group = toggle_canvas(self._groups.get(canvas_size), canvas_id, ordered_ids)
        self.set_group(canvas_size, group)
        return group

    def sync_order(self, canvas_size: str, ordered_ids: Sequence[str]) -> Optional[PanoramaGroup]:
        """Re-sort membership after canvases were reordered."""
        group = self._groups.get(canvas_size)
        if group is None:
            return None
        group = group.with_canvas_ids(reorder_canvas_ids(group, ordered_ids))
        self.set_group(canvas_size, group)
        return group

    def remove_canvas(self, canvas_size: str, canvas_id: str) -> Optional[PanoramaGroup]:
        """Drop a deleted canvas from the preset's group."""
        group = self._groups.get(canvas_size)
        if group is None or canvas_id not in group.canvas_ids:
            return group
        group = remove_canvas(group, canvas_id)
        self.set_group(canvas_size, group)
        return group

    def clear(self, canvas_size: str):
        """Remove the preset's group, e.g. when all its canvases were deleted."""
        self.set_group(canvas_size, None)

    def canvas_sizes(self) -> List[str]:
        return list(self._groups)

    def _notify(self, canvas_size: str):
        if self._event_bus is not None:
            self._event_bus.panorama_group_changed.emit(canvas_size)


__all__ = [
    'PORTRAIT',
    'LANDSCAPE',
    'create_default_group',
    'reorder_canvas_ids',
    'insert_canvas_id_in_order',
    'toggle_canvas',
    'remove_canvas',
    'get_canvas_dimensions',
    'get_recommended_image_dimensions',
    'PanoramaGroupService',
]
