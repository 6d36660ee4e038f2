"""
LibDialog host toolkits.

GtkHost lives in libdialog.host.gtk and is imported on demand, since it
needs PyGObject and the audio libraries.
"""

from .base import Anchor, Rect, Frame, HostToolkit, ANCHOR_POINTS, HOOK_EVENTS
from .headless import HeadlessFrame, HeadlessHost

__all__ = [
    'Anchor',
    'Rect',
    'Frame',
    'HostToolkit',
    'ANCHOR_POINTS',
    'HOOK_EVENTS',
    'HeadlessFrame',
    'HeadlessHost'
]
