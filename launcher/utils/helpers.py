"""
Helper utilities for the launcher search core.

Provides common functions used by the search handlers:
- Settings loading
- Clipboard copy
"""

from pathlib import Path
import subprocess
from typing import Dict, Any, Optional

import toml
from loguru import logger

DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent / "data" / "settings.toml"


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load launcher settings from TOML file.

    Args:
        settings_path: File to read, defaults to data/settings.toml

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "calculator": {
                "notation": "auto",
                "max_fraction_digits": 10,
                "group_digits": True,
                "clipboard_command": "wl-copy"
            }
        }
    """
    # Default settings
    defaults = {
        "calculator": {
            "notation": "auto",
            "max_fraction_digits": 10,
            "group_digits": True,
            "clipboard_command": "wl-copy",
        },
    }

    if settings_path is None:
        settings_path = DEFAULT_SETTINGS_PATH

    if not settings_path.exists():
        logger.debug(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except ValueError as e:
        # TomlDecodeError, or UnicodeDecodeError for a file that is not UTF-8
        logger.warning(f"Invalid settings in {settings_path}: {e}. Using defaults")
        return defaults
    except OSError:
        logger.exception(f"Could not read settings from {settings_path}")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def copy_to_clipboard(text: str, command: str = "wl-copy") -> bool:
    """
    Copy text to the clipboard with an external tool.

    Args:
        text: Text to copy
        command: Clipboard program that takes the text as its argument

    Returns:
        True if the clipboard tool was started, False if it is not installed
    """
    try:
        subprocess.Popen(
            [command, text],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except FileNotFoundError:
        logger.warning(f"{command} not found, cannot copy to clipboard")
        return False
    return True
