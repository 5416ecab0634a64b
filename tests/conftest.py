"""
Shared test fixtures for the launcher search core test suite.

Provides real settings files on disk (no mocking of the filesystem).
"""

import pytest
import toml


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with a calculator section."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "calculator": {
            "notation": "infix",
            "max_fraction_digits": 4,
            "group_digits": False,
        },
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path


@pytest.fixture
def default_settings():
    """Settings dict equivalent to a missing settings file."""
    return {
        "calculator": {
            "notation": "auto",
            "max_fraction_digits": 10,
            "group_digits": True,
            "clipboard_command": "wl-copy",
        },
    }
