"""Color conversion utilities

Hex <-> RGB (0-255 range) conversion used when sampling gradient stops.
"""

from typing import Tuple

RGB = Tuple[int, int, int]


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Convert hex color to RGB tuple (0-255 range)

    Args:
        hex_color: Hex color string (e.g., '#AABBCC', 'AABBCC' or '#ABC')

    Returns:
        Tuple of (r, g, b) values in 0-255 range

    Raises:
        ValueError: If the string is not a 3 or 6 digit hex color
    """
    hex_color = hex_color.strip().lstrip('#')
    # Handle 3-digit hex codes
    if len(hex_color) == 3:
        hex_color = ''.join([c*2 for c in hex_color])
    if len(hex_color) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb: RGB) -> str:
    """Convert RGB tuple (0-255 range) to hex color string

    Example:
        >>> rgb_to_hex((255, 87, 51))
        '#ff5733'
    """
    return '#{:02x}{:02x}{:02x}'.format(*(max(0, min(255, int(round(c)))) for c in rgb))


__all__ = ['hex_to_rgb', 'rgb_to_hex']
