"""
LibDialog - pooled, queued dialogs for addon UIs

Callers register delegates describing a dialog and spawn dialogs from them
by name or by reference. LibDialog provides:
- A small fixed limit on simultaneously visible dialogs
- A spawn queue replaying requests as dialog slots free up
- Recycled dialogs, buttons, checkboxes and edit boxes
- Automatic sizing from the attached widgets
- Stacking beneath the host's own default dialogs
"""

from .core import (
    DialogContext,
    Delegate,
    ButtonSpec,
    CheckBoxSpec,
    EditBoxSpec,
    LibDialogError,
    DialogUsageError,
    UnknownDelegateError
)
from .host import HostToolkit, HeadlessHost

__version__ = '1.0.0'

__all__ = [
    'DialogContext',
    'Delegate',
    'ButtonSpec',
    'CheckBoxSpec',
    'EditBoxSpec',
    'LibDialogError',
    'DialogUsageError',
    'UnknownDelegateError',
    'HostToolkit',
    'HeadlessHost'
]
