"""
Gradient utilities for painting panorama slices

Reference rasteriser for linear gradients. Stops outside 0-100% are kept and
positions past the first/last stop extend the edge colour, matching how
browsers and QLinearGradient pad a gradient. Panorama slicing relies on that
padding for seamless joins between canvases.
"""

import numpy as np
from typing import Iterable, Tuple
from PyQt6.QtGui import QImage

from .color_utils import hex_to_rgb


def _stop_arrays(stops: Iterable) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split stops into sorted position and RGB arrays

    Args:
        stops: Objects with `color` (hex) and `position_pct` attributes

    Returns:
        (positions, colors) where colors has shape (n, 3)
    """
    ordered = sorted(stops, key=lambda stop: stop.position_pct)
    if not ordered:
        raise ValueError("Gradient has no stops")

    positions = np.array([stop.position_pct for stop in ordered], dtype=np.float64)
    colors = np.array([hex_to_rgb(stop.color) for stop in ordered], dtype=np.float64)
    return positions, colors


def sample_gradient(stops: Iterable, position_pct: float) -> Tuple[float, float, float]:
    """
    Evaluate a gradient at a position

    Args:
        stops: Gradient stops (color, position_pct)
        position_pct: Position along the gradient axis, in percent

    Returns:
        (r, g, b) as floats in 0-255 range, unrounded
    """
    positions, colors = _stop_arrays(stops)
    return tuple(float(np.interp(position_pct, positions, colors[:, c])) for c in range(3))


def render_gradient_row(stops: Iterable, width: int) -> np.ndarray:
    """
    Rasterise one row of a horizontal gradient

    Pixels are sampled at their centres.

    Args:
        stops: Gradient stops (color, position_pct)
        width: Row width in pixels

    Returns:
        uint8 array of shape (width, 3)
    """
    positions, colors = _stop_arrays(stops)
    sample_at = (np.arange(width, dtype=np.float64) + 0.5) / max(width, 1) * 100.0

    row = np.empty((width, 3), dtype=np.float64)
    for c in range(3):
        row[:, c] = np.interp(sample_at, positions, colors[:, c])

    return np.clip(np.rint(row), 0, 255).astype(np.uint8)


def create_horizontal_gradient(width: int, height: int, stops: Iterable) -> QImage:
    """
    Create a horizontal gradient QImage

    Args:
        width: Width in pixels
        height: Height in pixels
        stops: Gradient stops (color, position_pct)

    Returns:
        QImage with gradient
    """
    row = render_gradient_row(stops, width)
    gradient = np.ascontiguousarray(np.broadcast_to(row, (height, width, 3)))

    qimage = QImage(gradient.data, width, height, width * 3, QImage.Format.Format_RGB888)

    # Make a copy so numpy array can be garbage collected
    return qimage.copy()


__all__ = [
    'sample_gradient',
    'render_gradient_row',
    'create_horizontal_gradient',
]
