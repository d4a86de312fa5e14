"""
Shared background specifications

A panorama group shares one background across several canvases. The
background is a tagged union: GradientSpec or ImageSpec, told apart by
their `type` field.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from ..config import Config


class BackgroundType(Enum):
    """Tag for the background union."""
    GRADIENT = "gradient"
    IMAGE = "image"


class GradientDirection(Enum):
    """Gradient axis. Slicing is only meaningful off the vertical axis."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DOWN = "diagonal-down"
    DIAGONAL_UP = "diagonal-up"


class ImageFit(Enum):
    FILL = "fill"  # cover, may crop
    FIT = "fit"    # contain, may letterbox


class VerticalAlign(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class HorizontalAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class GradientStop:
    color: str
    position_pct: float


@dataclass(frozen=True)
class GradientSpec:
    """Linear gradient; stops keep their given order."""
    stops: Tuple[GradientStop, ...]
    direction: GradientDirection = GradientDirection.HORIZONTAL
    type: BackgroundType = field(default=BackgroundType.GRADIENT, init=False)

    def __post_init__(self):
        # Stored as a tuple so specs stay hashable for slice caching
        object.__setattr__(self, 'stops', tuple(self.stops))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GradientSpec':
        stops = tuple(
            GradientStop(color=str(stop['color']), position_pct=float(stop['position']))
            for stop in data.get('stops', [])
        )
        direction = GradientDirection(data.get('direction', Config.DEFAULT_GRADIENT_DIRECTION))
        return cls(stops=stops, direction=direction)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type.value,
            'stops': [{'color': s.color, 'position': s.position_pct} for s in self.stops],
            'direction': self.direction.value,
        }


@dataclass(frozen=True)
class ImageSpec:
    """
    Image background placement.

    source_width/source_height stay None until the image's natural size
    is known; slicing is skipped until then.
    """
    source_width: Optional[float] = None
    source_height: Optional[float] = None
    fit: ImageFit = ImageFit.FILL
    vertical_align: VerticalAlign = VerticalAlign.CENTER
    horizontal_align: HorizontalAlign = HorizontalAlign.CENTER
    type: BackgroundType = field(default=BackgroundType.IMAGE, init=False)

    @property
    def has_dimensions(self) -> bool:
        return bool(self.source_width and self.source_height
                    and self.source_width > 0 and self.source_height > 0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ImageSpec':
        dims = data.get('source_dimensions') or {}
        return cls(
            source_width=dims.get('width'),
            source_height=dims.get('height'),
            fit=ImageFit(data.get('fit', Config.DEFAULT_IMAGE_FIT)),
            vertical_align=VerticalAlign(data.get('vertical_align', Config.DEFAULT_VERTICAL_ALIGN)),
            horizontal_align=HorizontalAlign(
                data.get('horizontal_align', Config.DEFAULT_HORIZONTAL_ALIGN)
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'type': self.type.value,
            'fit': self.fit.value,
            'vertical_align': self.vertical_align.value,
            'horizontal_align': self.horizontal_align.value,
        }
        if self.has_dimensions:
            data['source_dimensions'] = {'width': self.source_width, 'height': self.source_height}
        return data


BackgroundSpec = Union[GradientSpec, ImageSpec]


def background_from_dict(data: Dict[str, Any]) -> BackgroundSpec:
    """
    Build a background spec from its tagged dict form

    Raises:
        ValueError: If the type tag or an enum value is unknown
    """
    background_type = BackgroundType(data.get('type'))
    if background_type is BackgroundType.GRADIENT:
        return GradientSpec.from_dict(data)
    return ImageSpec.from_dict(data)


@dataclass(frozen=True)
class PanoramaGroup:
    """Canvases sharing one background, in on-screen order."""
    canvas_ids: Tuple[str, ...]
    background: BackgroundSpec

    def __post_init__(self):
        object.__setattr__(self, 'canvas_ids', tuple(self.canvas_ids))

    def with_canvas_ids(self, canvas_ids) -> 'PanoramaGroup':
        return PanoramaGroup(canvas_ids=tuple(canvas_ids), background=self.background)

    def with_background(self, background: BackgroundSpec) -> 'PanoramaGroup':
        return PanoramaGroup(canvas_ids=self.canvas_ids, background=background)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PanoramaGroup':
        return cls(
            canvas_ids=tuple(str(cid) for cid in data.get('canvas_ids', [])),
            background=background_from_dict(data['background']),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'canvas_ids': list(self.canvas_ids), 'background': self.background.to_dict()}


@dataclass(frozen=True)
class SliceInfo:
    slice_index: int
    total_slices: int


@dataclass(frozen=True)
class ImageSlice:
    """Background size and position for one canvas, as CSS-style percentages."""
    size_width_pct: float
    size_height_pct: float
    pos_x_pct: float
    pos_y_pct: float

    def to_css(self, precision: int = Config.CSS_PRECISION) -> Dict[str, str]:
        return {
            'background-size': f"{self.size_width_pct:.{precision}f}% {self.size_height_pct:.{precision}f}%",
            'background-position': f"{self.pos_x_pct:.{precision}f}% {self.pos_y_pct:.{precision}f}%",
            'background-repeat': 'no-repeat',
        }


__all__ = [
    'BackgroundType',
    'GradientDirection',
    'ImageFit',
    'VerticalAlign',
    'HorizontalAlign',
    'GradientStop',
    'GradientSpec',
    'ImageSpec',
    'BackgroundSpec',
    'background_from_dict',
    'PanoramaGroup',
    'SliceInfo',
    'ImageSlice',
]
