"""
LibDialog utility modules.
"""

from .widget_pool import WidgetPool
from .config import DEFAULT_CONFIG, load_config, merge_config
from .paths import (
    get_config_path,
    get_config_file,
    get_sounds_path
)

__all__ = [
    'WidgetPool',
    'DEFAULT_CONFIG',
    'load_config',
    'merge_config',
    'get_config_path',
    'get_config_file',
    'get_sounds_path'
]
