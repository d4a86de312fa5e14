"""
Coordinate conversion utilities between Qt geometry and compositor types.

The layout provider measures canvases as QRectF in scene/screen coordinates;
the renderer needs the overflow clip as a rectangle in element coordinates.
"""

from typing import Iterable, List

from PyQt6.QtCore import QRectF

from ..core.geometry import CanvasBounds, OverflowPreview


def bounds_from_qrectf(canvas_id: str, rect: QRectF) -> CanvasBounds:
    """
    Convert a canvas rectangle to CanvasBounds.

    Args:
        canvas_id: Canvas the rectangle belongs to
        rect: Canvas geometry in screen/scene coordinates

    Returns:
        CanvasBounds with right/bottom derived from the size
    """
    rect = rect.normalized()
    return CanvasBounds.from_rect(canvas_id, rect.x(), rect.y(), rect.width(), rect.height())


def bounds_to_qrectf(bounds: CanvasBounds) -> QRectF:
    """Convert CanvasBounds back to a QRectF."""
    return QRectF(bounds.left, bounds.top, bounds.width, bounds.height)


def transform_bounds(bounds: CanvasBounds, dx: float = 0.0, dy: float = 0.0,
                     zoom: float = 1.0) -> CanvasBounds:
    """
    Apply a viewport zoom (about the origin) then a pan to canvas bounds.

    Args:
        bounds: Canvas bounds before the viewport change
        dx: Horizontal pan in screen units
        dy: Vertical pan in screen units
        zoom: Scale factor, must be positive

    Returns:
        New CanvasBounds
    """
    if zoom <= 0:
        raise ValueError(f"Zoom must be positive, got {zoom}")
    return CanvasBounds.from_rect(
        bounds.canvas_id,
        bounds.left * zoom + dx,
        bounds.top * zoom + dy,
        bounds.width * zoom,
        bounds.height * zoom,
    )


def transform_all(bounds: Iterable[CanvasBounds], dx: float = 0.0, dy: float = 0.0,
                  zoom: float = 1.0) -> List[CanvasBounds]:
    """Shift every canvas together, as a shared viewport pan/zoom does."""
    return [transform_bounds(b, dx, dy, zoom) for b in bounds]


def overflow_clip_rect(preview: OverflowPreview, element_width: float,
                       element_height: float) -> QRectF:
    """
    Visible part of an overflowing element, in the element's own coordinates.

    Equivalent of a CSS clip-path inset(0 right% 0 left%).
    """
    clip_left = element_width * preview.clip_left_pct / 100
    clip_right = element_width * preview.clip_right_pct / 100
    visible_width = max(0.0, element_width - clip_left - clip_right)
    return QRectF(clip_left, 0.0, visible_width, element_height)


__all__ = [
    'bounds_from_qrectf',
    'bounds_to_qrectf',
    'transform_bounds',
    'transform_all',
    'overflow_clip_rect',
]
