# src/libdialog/utils/paths.py
"""
Path utilities for LibDialog.
"""

from pathlib import Path
import os

def get_config_path():
    """Get the LibDialog configuration directory."""
    return Path(os.path.expanduser("~/.config/libdialog"))

def get_config_file():
    """Get the LibDialog configuration file."""
    return get_config_path() / 'config.json'

def get_sounds_path():
    """Get the default directory holding sound cue files."""
    return get_config_path() / 'sounds'

__all__ = [
    'get_config_path',
    'get_config_file',
    'get_sounds_path'
]
