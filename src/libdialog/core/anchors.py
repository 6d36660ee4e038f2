# src/libdialog/core/anchors.py
"""
Vertical stacking of active dialogs.

Dialogs hang below the host's own default dialogs, or from a fixed offset
below the top of the screen, each one directly under its predecessor.
"""


class AnchorManager:
    """
    Positions the active dialogs in their stacking order.

    Attributes:
        _host: Host toolkit
        _dialogs (WidgetPool): Dialog pool; its active order is the stack
        _screen_top_offset (int): Fallback distance from the screen top
    """

    def __init__(self, host, dialog_pool, screen_top_offset=135):
        self._host = host
        self._dialogs = dialog_pool
        self._screen_top_offset = screen_top_offset

    def _anchor_top(self, frame):
        default_dialogs = self._host.default_dialogs()
        if default_dialogs:
            frame.set_point('TOP', default_dialogs[-1], 'BOTTOM', 0, 0)
        else:
            frame.set_point('TOP', self._host.screen, 'TOP', 0, self._screen_top_offset)

    def anchor(self, dialog):
        """Anchor one active dialog below the dialog that precedes it."""
        active = self._dialogs.active
        index = active.index(dialog)
        dialog.frame.clear_all_points()
        if index == 0:
            self._anchor_top(dialog.frame)
        else:
            dialog.frame.set_point('TOP', active[index - 1].frame, 'BOTTOM', 0, 0)

    def refresh_anchors(self):
        """Re-anchor every active dialog."""
        previous = None
        for dialog in self._dialogs.active:
            dialog.frame.clear_all_points()
            if previous is None:
                self._anchor_top(dialog.frame)
            else:
                dialog.frame.set_point('TOP', previous.frame, 'BOTTOM', 0, 0)
            previous = dialog
