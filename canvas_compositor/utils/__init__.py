"""Utility functions for Canvas Compositor"""

from .color_utils import hex_to_rgb, rgb_to_hex
from .gradient_utils import sample_gradient, render_gradient_row, create_horizontal_gradient
from .logging_config import LoggingConfig

# JSON utilities
from .json_utils import (
    safe_json_load,
    safe_json_save,
)

__all__ = [
    'hex_to_rgb',
    'rgb_to_hex',
    'sample_gradient',
    'render_gradient_row',
    'create_horizontal_gradient',
    'LoggingConfig',
    # JSON utilities
    'safe_json_load',
    'safe_json_save',
]
