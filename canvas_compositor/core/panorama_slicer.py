"""
Panorama Slicer - One background presented continuously across a canvas group

Think of the background as covering a virtual canvas N canvases wide; each
member canvas is a window onto its 1/N of it.

- Gradients: each stop is remapped into the member canvas's local 0-100%
  range. Stops falling outside it are kept, and the renderer's edge padding
  carries the colour to the canvas border, so neighbouring slices join.
- Images: size the image against the combined canvas (cover or contain), then
  solve the background-position formula so slice i shows the i-th
  canvas-wide window of the rendered image.
"""

from functools import lru_cache
from typing import Iterable, Optional, Sequence, Union

from ..config import Config
from .backgrounds import (
    BackgroundType,
    GradientDirection,
    GradientSpec,
    GradientStop,
    HorizontalAlign,
    ImageFit,
    ImageSlice,
    ImageSpec,
    PanoramaGroup,
    SliceInfo,
    VerticalAlign,
)

_CSS_DIRECTIONS = {
    GradientDirection.HORIZONTAL: 'to right',
    GradientDirection.VERTICAL: 'to bottom',
    GradientDirection.DIAGONAL_DOWN: '135deg',
    GradientDirection.DIAGONAL_UP: '45deg',
}

_HORIZONTAL_PCT = {
    HorizontalAlign.LEFT: 0.0,
    HorizontalAlign.CENTER: 50.0,
    HorizontalAlign.RIGHT: 100.0,
}

_VERTICAL_PCT = {
    VerticalAlign.TOP: 0.0,
    VerticalAlign.CENTER: 50.0,
    VerticalAlign.BOTTOM: 100.0,
}


def get_slice_info(
    canvas_id: str,
    canvas_ids: Sequence[str],
    existing_ids: Optional[Iterable[str]] = None
) -> Optional[SliceInfo]:
    """
    Find a canvas's slice within a group

    Args:
        canvas_id: Canvas to look up
        canvas_ids: Group members in on-screen order
        existing_ids: Ids of canvases that still exist; members missing from it
            are skipped. None keeps every member.

    Returns:
        SliceInfo, or None if the canvas is not participating
    """
    if existing_ids is not None:
        existing = set(existing_ids)
        participating = [cid for cid in canvas_ids if cid in existing]
    else:
        participating = list(canvas_ids)

    if canvas_id not in participating:
        return None
    return SliceInfo(slice_index=participating.index(canvas_id),
                     total_slices=len(participating))


def get_group_slice_info(
    canvas_id: str,
    group: PanoramaGroup,
    existing_ids: Optional[Iterable[str]] = None
) -> Optional[SliceInfo]:
    return get_slice_info(canvas_id, group.canvas_ids, existing_ids)


@lru_cache(maxsize=Config.GRADIENT_SLICE_CACHE_SIZE)
def slice_gradient(spec: GradientSpec, slice_index: int, total_slices: int) -> GradientSpec:
    """
    Remap a shared gradient's stops into one slice's local coordinates

    Stops outside 0-100% are passed through so the renderer extends the
    nearest colour. The direction is unchanged; with a single slice the
    spec is returned as-is.

    Args:
        spec: Gradient shared by the group
        slice_index: Position of the canvas in the group
        total_slices: Number of participating canvases

    Returns:
        GradientSpec with local stop positions
    """
    if total_slices <= 1:
        return spec

    slice_start = slice_index / total_slices
    slice_span = 1 / total_slices

    stops = tuple(
        GradientStop(
            color=stop.color,
            position_pct=((stop.position_pct / 100) - slice_start) / slice_span * 100,
        )
        for stop in spec.stops
    )
    return GradientSpec(stops=stops, direction=spec.direction)


def _render_size(spec: ImageSpec, combined_width: float, combined_height: float):
    """Rendered image size over the combined canvas for the spec's fit mode."""
    image_aspect = spec.source_width / spec.source_height
    combined_aspect = combined_width / combined_height

    if spec.fit is ImageFit.FILL:
        # Cover: match the shorter side, crop the other
        if image_aspect > combined_aspect:
            render_height = combined_height
            render_width = render_height * image_aspect
        else:
            render_width = combined_width
            render_height = render_width / image_aspect
    else:
        # Contain: match the longer side, leave gaps on the other
        if image_aspect > combined_aspect:
            render_width = combined_width
            render_height = render_width / image_aspect
        else:
            render_height = combined_height
            render_width = render_height * image_aspect

    return render_width, render_height


def slice_image(
    spec: ImageSpec,
    slice_index: int,
    total_slices: int,
    canvas_width: float,
    canvas_height: float
) -> Optional[ImageSlice]:
    """
    Background size/position for one canvas's slice of a shared image

    Args:
        spec: Image placement, including its natural dimensions
        slice_index: Position of the canvas in the group
        total_slices: Number of participating canvases
        canvas_width: Width of one canvas
        canvas_height: Height of one canvas

    Returns:
        ImageSlice with percentages of one canvas, or None while the
        image dimensions are unknown or a dimension is not positive
    """
    if not spec.has_dimensions or canvas_width <= 0 or canvas_height <= 0:
        return None

    slices = max(total_slices, 1)
    combined_width = canvas_width * slices
    combined_height = canvas_height

    render_width, render_height = _render_size(spec, combined_width, combined_height)

    if total_slices <= 1 or render_width <= canvas_width:
        pos_x = _HORIZONTAL_PCT[spec.horizontal_align]
    else:
        # background-position: visible_start = (render - canvas) * pct / 100,
        # solved for visible_start = i * canvas_width + global_offset
        excess = render_width - combined_width
        if spec.horizontal_align is HorizontalAlign.LEFT:
            global_offset = 0.0
        elif spec.horizontal_align is HorizontalAlign.RIGHT:
            global_offset = excess
        else:
            global_offset = excess / 2
        pos_x = (slice_index * canvas_width + global_offset) / (render_width - canvas_width) * 100

    return ImageSlice(
        size_width_pct=render_width / canvas_width * 100,
        size_height_pct=render_height / canvas_height * 100,
        pos_x_pct=pos_x,
        pos_y_pct=_VERTICAL_PCT[spec.vertical_align],
    )


def slice_background(
    group: PanoramaGroup,
    canvas_id: str,
    existing_ids: Optional[Iterable[str]],
    canvas_width: float,
    canvas_height: float
) -> Optional[Union[GradientSpec, ImageSlice]]:
    """
    Slice a group's background for one canvas

    Returns:
        Local GradientSpec for gradient backgrounds, ImageSlice for image
        backgrounds, or None if the canvas is not participating or the
        image cannot be placed yet
    """
    info = get_group_slice_info(canvas_id, group, existing_ids)
    if info is None:
        return None

    background = group.background
    if background.type is BackgroundType.GRADIENT:
        return slice_gradient(background, info.slice_index, info.total_slices)
    return slice_image(background, info.slice_index, info.total_slices,
                       canvas_width, canvas_height)


def gradient_to_css(spec: GradientSpec, precision: int = Config.CSS_PRECISION) -> str:
    """
    Format a gradient as a CSS linear-gradient()

    Example:
        >>> gradient_to_css(slice_gradient(spec, 1, 3))
        'linear-gradient(to right, #111 -100.00%, #EEE 200.00%)'
    """
    direction = _CSS_DIRECTIONS.get(spec.direction, 'to right')
    stops = ', '.join(f"{stop.color} {stop.position_pct:.{precision}f}%" for stop in spec.stops)
    return f"linear-gradient({direction}, {stops})"


__all__ = [
    'get_slice_info',
    'get_group_slice_info',
    'slice_gradient',
    'slice_image',
    'slice_background',
    'gradient_to_css',
]
