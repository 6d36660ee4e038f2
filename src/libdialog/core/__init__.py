"""
LibDialog core components.
"""

from .errors import LibDialogError, DialogUsageError, UnknownDelegateError
from .delegate import Delegate, ButtonSpec, CheckBoxSpec, EditBoxSpec
from .context import DialogContext

__all__ = [
    'LibDialogError',
    'DialogUsageError',
    'UnknownDelegateError',
    'Delegate',
    'ButtonSpec',
    'CheckBoxSpec',
    'EditBoxSpec',
    'DialogContext'
]
