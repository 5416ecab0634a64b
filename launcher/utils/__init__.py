# Launcher Utilities Package
"""
Shared utility functions and helpers for the launcher search core.
"""

from .helpers import load_settings, copy_to_clipboard

__all__ = ["load_settings", "copy_to_clipboard"]
