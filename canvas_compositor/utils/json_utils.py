"""
JSON Utilities - Settings file I/O

Loading never raises: a missing or corrupt settings file falls back to the
caller's default so the compositor keeps its built-in geometry constants.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)


def safe_json_load(path: Union[str, Path], default: Any = None) -> Any:
    """
    Load JSON from a file, returning default on any error.

    Args:
        path: Path to JSON file
        default: Value to return if file doesn't exist or is invalid

    Returns:
        Parsed JSON data, or default

    Examples:
        >>> settings = safe_json_load("settings.json", default={})
    """
    file_path = Path(path)
    if not file_path.exists():
        return default

    try:
        return json.loads(file_path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid JSON in {path}: {e}")
        return default
    except OSError as e:
        logger.warning(f"Could not read {path}: {e}")
        return default


def safe_json_save(path: Union[str, Path], data: Any, indent: int = 2) -> bool:
    """
    Save data as JSON, creating parent folders.

    Args:
        path: Path to JSON file
        data: Data to serialize
        indent: Indentation level for pretty printing

    Returns:
        True if save succeeded, False otherwise
    """
    file_path = Path(path)
    try:
        payload = json.dumps(data, indent=indent, ensure_ascii=False)
    except TypeError as e:
        logger.error(f"Data not JSON serializable for {path}: {e}")
        return False

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(payload, encoding='utf-8')
    except OSError as e:
        logger.error(f"Could not write to {path}: {e}")
        return False
    return True


__all__ = [
    'safe_json_load',
    'safe_json_save',
]
