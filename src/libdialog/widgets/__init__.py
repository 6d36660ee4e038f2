"""
LibDialog widget components.

The dialog container and the pooled widgets that are attached to it.
"""

from .base import PooledWidget, WidgetBinding
from .button import Button
from .checkbox import CheckBox
from .editbox import EditBox
from .dialog import Dialog

__all__ = [
    'PooledWidget',
    'WidgetBinding',
    'Button',
    'CheckBox',
    'EditBox',
    'Dialog'
]
