"""Geometry engine for Canvas Compositor"""

from .geometry import (
    CanvasBounds,
    DraggedElement,
    OverflowPreview,
    SharedOverflowRecord,
)
from .backgrounds import (
    BackgroundType,
    GradientDirection,
    ImageFit,
    VerticalAlign,
    HorizontalAlign,
    GradientStop,
    GradientSpec,
    ImageSpec,
    background_from_dict,
    PanoramaGroup,
    SliceInfo,
    ImageSlice,
)
from .bounds_registry import BoundsRegistry
from .overflow_resolver import resolve_overflow, resolve_overflow_for_target
from .drag_overflow_tracker import DragState, DragOverflowTracker
from .panorama_slicer import (
    get_slice_info,
    get_group_slice_info,
    slice_gradient,
    slice_image,
    slice_background,
    gradient_to_css,
)

__all__ = [
    # Overflow
    'CanvasBounds',
    'DraggedElement',
    'OverflowPreview',
    'SharedOverflowRecord',
    'BoundsRegistry',
    'resolve_overflow',
    'resolve_overflow_for_target',
    'DragState',
    'DragOverflowTracker',
    # Panorama
    'BackgroundType',
    'GradientDirection',
    'ImageFit',
    'VerticalAlign',
    'HorizontalAlign',
    'GradientStop',
    'GradientSpec',
    'ImageSpec',
    'background_from_dict',
    'PanoramaGroup',
    'SliceInfo',
    'ImageSlice',
    'get_slice_info',
    'get_group_slice_info',
    'slice_gradient',
    'slice_image',
    'slice_background',
    'gradient_to_css',
]
