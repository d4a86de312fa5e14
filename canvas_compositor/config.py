"""
Global configuration for Canvas Compositor

Holds the geometry constants shared by the overflow resolver and the
panorama slicer, canvas size presets, and the user settings file.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Final, Optional, Tuple

from .utils.json_utils import safe_json_load, safe_json_save


class Config:
    """Central configuration class for all compositor settings"""

    # Application metadata
    APP_NAME: Final[str] = "Canvas Compositor"
    APP_VERSION: Final[str] = "0.3.0"
    APP_AUTHOR: Final[str] = "CGstuff"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent
    SETTINGS_FILE_NAME: Final[str] = "settings.json"

    # Overflow settings
    # Screen-space slack when deciding two canvases are neighbours (absorbs the gutter)
    ADJACENCY_TOLERANCE: Final[float] = 100.0
    CLIP_MIN_PCT: Final[float] = 0.0
    CLIP_MAX_PCT: Final[float] = 100.0

    # Panorama settings
    GRADIENT_SLICE_CACHE_SIZE: Final[int] = 256
    CSS_PRECISION: Final[int] = 2  # Decimal places in generated CSS percentages

    # Default shared background gradient (hex color, position %)
    DEFAULT_GRADIENT_STOPS: Final[Tuple[Tuple[str, float], ...]] = (
        ("#667eea", 0.0),
        ("#764ba2", 100.0),
    )
    DEFAULT_GRADIENT_DIRECTION: Final[str] = "horizontal"

    # Default image placement
    DEFAULT_IMAGE_FIT: Final[str] = "fill"
    DEFAULT_VERTICAL_ALIGN: Final[str] = "center"
    DEFAULT_HORIZONTAL_ALIGN: Final[str] = "center"

    # Canvas size presets (portrait; swapped for landscape)
    CANVAS_DIMENSIONS: Final[Dict[str, Tuple[int, int]]] = {
        'iphone-6.9': (1320, 2868),
        'iphone-6.5': (1290, 2796),
        'ipad-13': (2064, 2752),
        'google-phone': (1080, 1920),
        'google-tablet-7': (1536, 2048),
        'google-tablet-10': (1920, 1200),
        'watch-s9': (410, 502),
        'watch-ultra': (410, 502),
    }
    DEFAULT_CANVAS_SIZE: Final[str] = 'iphone-6.5'

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows), Application Support (macOS)
        or .local/share (Linux).
        """
        portable_flag = cls.APP_ROOT.parent / 'portable.txt'
        if portable_flag.exists():
            user_dir = cls.APP_ROOT.parent / 'data'
        elif sys.platform == 'win32':
            base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
            user_dir = base_path / 'CanvasCompositor'
        elif sys.platform == 'darwin':
            user_dir = Path.home() / 'Library' / 'Application Support' / 'CanvasCompositor'
        else:
            user_dir = Path.home() / '.local' / 'share' / 'CanvasCompositor'

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_settings_file(cls) -> Path:
        """Get settings JSON file path"""
        return cls.get_user_data_dir() / cls.SETTINGS_FILE_NAME

    @classmethod
    def load_settings(cls, path: Optional[Path] = None) -> Dict[str, Any]:
        """
        Load user settings

        Args:
            path: Settings file, defaults to get_settings_file()

        Returns:
            dict of settings, empty if the file is missing or invalid
        """
        settings = safe_json_load(path or cls.get_settings_file(), default={})
        return settings if isinstance(settings, dict) else {}

    @classmethod
    def save_setting(cls, key: str, value: Any, path: Optional[Path] = None) -> bool:
        """
        Save a single setting, keeping the others

        Returns:
            bool: True if saved successfully
        """
        settings_path = path or cls.get_settings_file()
        settings = cls.load_settings(settings_path)
        settings[key] = value
        return safe_json_save(settings_path, settings)

    @classmethod
    def get_adjacency_tolerance(cls, path: Optional[Path] = None) -> float:
        """
        Get the adjacency tolerance, honouring a user override

        Falls back to ADJACENCY_TOLERANCE when the setting is missing,
        not a number, or negative.
        """
        value = cls.load_settings(path).get('adjacency_tolerance')
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            return cls.ADJACENCY_TOLERANCE
        return float(value)


# Export for convenient imports
__all__ = ['Config']
